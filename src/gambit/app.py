"""Application entry point."""

from __future__ import annotations

import logging
import sys

from gambit.config import Config, UiType
from gambit.core.errors import FenError
from gambit.game.controller import GameController

_LOGGER = logging.getLogger(__name__)


def run(config: Config) -> int:
    """Start the configured front-end and return its exit status."""
    controller = GameController(config.fen)
    _LOGGER.info("Running the %s version", config.ui_type.label)

    if config.ui_type is UiType.GUI:
        from gambit.ui.bootstrap import run_application

        return run_application(controller)

    from gambit import cli

    return cli.run(controller)


def main(argv: list[str] | None = None) -> None:
    """Launch gambit."""
    try:
        config = Config.from_args(argv)
    except FenError as exc:
        print(f"Failed to prepare config: {exc}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run(config))


if __name__ == "__main__":
    main()
