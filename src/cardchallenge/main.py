"""CLI entrypoint for the card deck round-trip demonstration."""

from __future__ import annotations

import argparse
import logging
import random

from .config import Settings
from .errors import CardChallengeError
from .logging_config import configure_logging
from .service import PrintFn, run_demonstration

logger = logging.getLogger(__name__)


def run(argv: list[str] | None = None, print_fn: PrintFn = print) -> int:
    """Run the CLI application and return the process exit status."""
    parser = argparse.ArgumentParser(
        prog="cardchallenge",
        description="Draw cards from a deck, persist the state, and verify it round-trips",
    )
    parser.add_argument("command", nargs="?", default="run", choices=["run"])
    _ = parser.parse_args(argv)

    try:
        settings = Settings.from_env()
    except CardChallengeError as exc:
        configure_logging()
        logger.error("Invalid configuration: %s", exc)
        return 1
    configure_logging(settings.log_level)

    try:
        report = run_demonstration(settings, random.Random(settings.seed), print_fn)
    except CardChallengeError as exc:
        logger.error("Run aborted: %s", exc)
        return 1
    logger.info(
        "Selected %d cards, %d remaining; verified %s",
        len(report.state.selected),
        len(report.state.remaining),
        ", ".join(report.verified) or "nothing",
    )
    return 0


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
