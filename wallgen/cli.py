"""Wall prefab generator command line.

Renders the wall descriptor table as RON prefab entities for the map loader.
With no arguments it converts the built-in arena table and prints the records
to stdout. Accepts configuration via flags and environment variables, with
optional .env loading.

Run `wallgen --help` (or `python run.py --help` from a checkout) for details.
"""

import argparse
import os
import sys
from textwrap import dedent

from colorama import Fore, Style, just_fix_windows_console
from dotenv import load_dotenv

from .config import GeneratorConfig
from .emitter import LAYOUTS
from .errors import ConfigError, WallgenError
from .generator import run


def _load_version() -> str:
    path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "VERSION")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Wall Prefab Generator

    Convert a table of wall tiles (x, y, w, h in grid cells) into RON prefab
    entities with a transform, a "Wall" collider and a sprite reference.
    Configuration can be provided via CLI flags or environment variables. If
    both are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          WALLGEN_TABLE       Descriptor table file (default: built-in arena table)
          WALLGEN_OUT         Output file (default: stdout)
          WALLGEN_LAYOUT      compact | pretty (default: compact)
          WALLGEN_DOCUMENT    1 to wrap records in a Prefab(entities: [...]) document
          WALLGEN_CELL_SIZE   World units per grid cell (default: 32)
          WALLGEN_LOG_LEVEL   debug | info | warn | error (default: info)
          WALLGEN_LOG_JSON    1 for JSON log lines on stderr

        Examples:
          # Print the built-in table
          python run.py

          # Convert a table file into a loadable map prefab
          python run.py --table walls.txt --document --out resources/map.ron

          # Readable output for review
          python run.py --layout pretty
        """
    )

    parser = argparse.ArgumentParser(
        prog="wallgen",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"Wall Prefab Generator {__version__}",
    )
    parser.add_argument(
        "--table",
        dest="table_path",
        default=None,
        help="Descriptor table (.json list or text rows; default: env WALLGEN_TABLE or built-in)",
    )
    parser.add_argument(
        "--out",
        dest="out_path",
        default=None,
        help="Write output to this file instead of stdout",
    )
    parser.add_argument(
        "--layout",
        choices=LAYOUTS,
        default=None,
        help="Record layout (default: env WALLGEN_LAYOUT or compact)",
    )
    parser.add_argument(
        "--document",
        action="store_true",
        default=None,
        help="Wrap records in a complete Prefab(entities: [...]) document",
    )
    parser.add_argument(
        "--cell-size",
        dest="cell_size",
        type=int,
        default=None,
        help="World units per grid cell (default: env WALLGEN_CELL_SIZE or 32)",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    cfg = GeneratorConfig.from_env()
    for name in ("table_path", "out_path", "layout", "document", "cell_size"):
        value = getattr(args, name, None)
        if value is not None:
            setattr(cfg, name, value)
    return cfg.validate()


def _summary(records: int, cfg: GeneratorConfig) -> None:
    dest = cfg.out_path or "stdout"
    if not sys.stderr.isatty():
        return
    just_fix_windows_console()
    print(
        f"{Fore.CYAN}[wallgen]{Style.RESET_ALL} "
        f"{Fore.GREEN}{records}{Style.RESET_ALL} wall records -> "
        f"{Fore.YELLOW}{dest}{Style.RESET_ALL}",
        file=sys.stderr,
    )


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    # Logger settings are read from the environment, so import after dotenv
    from .logging_utils import log

    try:
        cfg = build_config(args)
    except ConfigError as exc:
        log.error(event="config_invalid", field=exc.field, error=exc.message)
        return 1

    try:
        records = run(cfg)
    except WallgenError as exc:
        log.error(event="table_invalid", error=str(exc))
        return 1
    except OSError as exc:
        # Table read failure or output write failure (e.g. broken pipe).
        log.error(event="io_failed", error=str(exc))
        return 1

    _summary(records, cfg)
    return 0


def cli() -> int:
    return main(sys.argv[1:])
