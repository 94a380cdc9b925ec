"""Tests for command-line configuration and the entry point."""

import pytest

from gambit import app
from gambit.config import Config, UiType
from gambit.core.errors import FenError

FEN = "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"


class TestConfig:
    def test_defaults(self) -> None:
        config = Config.from_args([])
        assert config.ui_type is UiType.CLI
        assert config.fen is None
        assert config.log_level == "WARNING"

    def test_gui_with_fen(self) -> None:
        config = Config.from_args(["gui", FEN])
        assert config.ui_type is UiType.GUI
        assert config.fen == FEN

    def test_log_level(self) -> None:
        assert Config.from_args(["cli", "--log-level", "DEBUG"]).log_level == "DEBUG"

    def test_bad_fen_fails_early(self) -> None:
        with pytest.raises(FenError):
            Config.from_args(["cli", "8/8/8 w - - 0 1"])

    def test_unknown_ui_is_a_usage_error(self) -> None:
        with pytest.raises(SystemExit) as info:
            Config.from_args(["web"])
        assert info.value.code == 2

    def test_ui_labels(self) -> None:
        assert UiType.CLI.label == "command line"
        assert UiType.GUI.label == "graphical"


class TestMain:
    def test_bad_fen_exits_with_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as info:
            app.main(["cli", "not a fen"])
        assert info.value.code == 1
        assert "Failed to prepare config: Invalid FEN" in capsys.readouterr().err

    def test_dispatches_to_console(self, monkeypatch: pytest.MonkeyPatch) -> None:
        seen = []

        def fake_run(controller) -> int:
            seen.append(controller.position.fen)
            return 0

        monkeypatch.setattr("gambit.cli.run", fake_run)
        assert app.run(Config(fen=FEN)) == 0
        assert seen == [FEN]

    def test_main_exits_with_front_end_status(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("gambit.cli.run", lambda controller: 3)
        with pytest.raises(SystemExit) as info:
            app.main([])
        assert info.value.code == 3
