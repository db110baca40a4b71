import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

import uvicorn

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.app.config import AppConfig  # noqa: E402
from foodweb.config.settings import FoodWebConfig, ModeConfig  # noqa: E402
from foodweb.session import FoodWebSession  # noqa: E402

INVALID_ARGUMENTS = "Invalid command-line argument. Terminating program...\n"


def parse_modes(argv: List[str], defaults: ModeConfig) -> Optional[ModeConfig]:
    """
    Parse -b / -d / -q, each allowed at most once.

    Returns None for an unknown or repeated flag. Flags switch modes on;
    anything not given keeps the configured default.

    Flags are matched whole, not by their first two characters: `-dx`
    is rejected rather than read as `-d`, and the combined `-bd` turns
    on both basic and debug mode.
    """
    parser = argparse.ArgumentParser(
        prog="foodweb",
        add_help=False,
        exit_on_error=False,
    )
    parser.add_argument("-b", dest="basic", action="count", default=0)
    parser.add_argument("-d", dest="debug", action="count", default=0)
    parser.add_argument("-q", dest="quiet", action="count", default=0)

    try:
        args, extras = parser.parse_known_args(argv)
    except argparse.ArgumentError:
        return None

    if extras or max(args.basic, args.debug, args.quiet) > 1:
        return None

    return ModeConfig(
        basic=defaults.basic or bool(args.basic),
        debug=defaults.debug or bool(args.debug),
        quiet=defaults.quiet or bool(args.quiet),
    )


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    config = AppConfig()

    logging.basicConfig(
        level=str(config.foodweb.log_level).upper(),
        format="%(asctime)s %(levelname)s %(message)s",
    )
    logger = logging.getLogger("foodweb.startup")

    modes = parse_modes(
        sys.argv[1:] if argv is None else argv,
        config.foodweb.modes,
    )
    if modes is None:
        stdout.write(INVALID_ARGUMENTS)
        return 1

    foodweb_config: FoodWebConfig = dataclasses.replace(config.foodweb, modes=modes)
    logger.info(
        "[startup] basic=%s debug=%s quiet=%s",
        modes.basic,
        modes.debug,
        modes.quiet,
    )

    session = FoodWebSession(config=foodweb_config, stdin=stdin, stdout=stdout)
    return session.run()


def serve() -> None:
    """
    Serve the HTTP API with uvicorn on the configured host and port.
    """
    config = AppConfig()
    logging.basicConfig(
        level=str(config.foodweb.log_level).upper(),
        format="%(asctime)s %(levelname)s %(message)s",
    )
    logging.getLogger("foodweb.startup").info(
        "[startup] serving on %s:%s", config.host, config.port
    )
    uvicorn.run("backend.app.main:app", host=config.host, port=config.port)


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
