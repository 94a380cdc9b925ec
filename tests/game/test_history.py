"""Tests for GameHistory."""

from gambit.core.notation import STARTING_FEN, position_from_fen
from gambit.core.turn import perform_turn
from gambit.game.history import GameHistory


def _history_with_two_moves() -> GameHistory:
    start = position_from_fen(STARTING_FEN)
    history = GameHistory(start)
    after_e4 = perform_turn("2545", start)
    history.push(after_e4)
    history.push(perform_turn("7555", after_e4))
    return history


class TestGameHistory:
    def test_starts_with_initial(self) -> None:
        start = position_from_fen(STARTING_FEN)
        history = GameHistory(start)
        assert history.current is start
        assert history.initial is start
        assert len(history) == 1
        assert not history.can_undo
        assert not history.can_redo

    def test_undo_at_start_is_noop(self) -> None:
        history = GameHistory(position_from_fen(STARTING_FEN))
        assert history.undo() is False
        assert len(history) == 1

    def test_redo_without_undo_is_noop(self) -> None:
        history = _history_with_two_moves()
        current = history.current
        assert history.redo() is False
        assert history.current is current

    def test_undo_then_redo_restores_same_snapshot(self) -> None:
        history = _history_with_two_moves()
        last = history.current
        assert history.undo()
        assert history.current.placement == "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR"
        assert history.can_redo
        assert history.redo()
        assert history.current is last

    def test_push_discards_future(self) -> None:
        history = _history_with_two_moves()
        history.undo()
        history.push(perform_turn("7454", history.current))
        assert not history.can_redo
        assert len(history) == 3

    def test_undo_to_start(self) -> None:
        history = _history_with_two_moves()
        assert history.undo()
        assert history.undo()
        assert not history.undo()
        assert history.current.fen == STARTING_FEN

    def test_positions_in_order(self) -> None:
        history = _history_with_two_moves()
        fens = [p.fen for p in history.positions()]
        assert fens[0] == STARTING_FEN
        assert len(fens) == 3
        assert fens[-1] == history.current.fen
