"""Command-line configuration.

Usage:
    gambit [cli|gui] [FEN] [--log-level LEVEL]
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from gambit.core.notation import position_from_fen


class UiType(StrEnum):
    CLI = "cli"
    GUI = "gui"

    @property
    def label(self) -> str:
        return "command line" if self is UiType.CLI else "graphical"


@dataclass(frozen=True, slots=True)
class Config:
    ui_type: UiType = UiType.CLI
    fen: str | None = None
    log_level: str = "WARNING"

    @classmethod
    def from_args(cls, argv: Sequence[str] | None = None) -> Config:
        """Build a config from command-line arguments.

        The starting FEN is parsed eagerly so a corrupt position fails here,
        with a :class:`~gambit.core.errors.FenError`, before any UI starts.
        """
        args = build_parser().parse_args(argv)
        if args.fen is not None:
            position_from_fen(args.fen)
        return cls(ui_type=UiType(args.ui), fen=args.fen, log_level=args.log_level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gambit",
        description="Two-player chess. Moves are four digits: "
        "start rank, start file, target rank, target file (1-8).",
    )
    parser.add_argument(
        "ui",
        nargs="?",
        choices=[t.value for t in UiType],
        default=UiType.CLI.value,
        help="front-end to run (default: cli)",
    )
    parser.add_argument(
        "fen",
        nargs="?",
        default=None,
        help="starting position in FEN (quote it: it contains spaces)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: WARNING)",
    )
    return parser
