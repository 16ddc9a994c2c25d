"""Command-line options of the game server."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

_UINT32_MAX = 2**32 - 1


@dataclass
class Args:
    tick_period: int = 0
    config_file: str = ""
    www_root: str = ""
    randomize_spawn_points: bool = False
    base_path: Path = field(default_factory=Path)
    state_file: str = ""
    save_state_period: int = 0


def _uint32(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None
    if not 0 <= value <= _UINT32_MAX:
        raise argparse.ArgumentTypeError(f"number out of range: {text!r}")
    return value


def _build_parser(prog: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="All options",
        add_help=False,
        allow_abbrev=False,
        exit_on_error=False,
    )
    parser.add_argument("-h", "--help", action="store_true", help="produce help message")
    parser.add_argument("-t", "--tick-period", type=_uint32, metavar="milliseconds", help="set tick period")
    parser.add_argument("-c", "--config-file", metavar="file", help="set config file path")
    parser.add_argument("-w", "--www-root", metavar="dir", help="set static files root")
    parser.add_argument(
        "--randomize-spawn-points",
        action="store_true",
        help="spawn dogs at random positions",
    )
    parser.add_argument("--state-file", metavar="file", help="set file to save the game state")
    parser.add_argument(
        "--save-state-period",
        type=_uint32,
        metavar="milliseconds",
        help="sets the period for automatic saving of the server status",
    )
    return parser


def parse_command_line(argv: Optional[Sequence[str]] = None) -> Optional[Args]:
    """Parse ``argv`` (program name first); return None after printing help."""
    if argv is None:
        argv = sys.argv
    argv = list(argv)
    program = argv[0] if argv else "game_server"
    parser = _build_parser(Path(program).name)

    try:
        namespace, extra = parser.parse_known_args(argv[1:])
    except argparse.ArgumentError as exc:
        raise ValueError(str(exc)) from exc
    if extra:
        raise ValueError(f"unrecognised arguments: {' '.join(extra)}")

    if namespace.help:
        parser.print_help(sys.stdout)
        return None
    if namespace.config_file is None:
        raise ValueError("Config files have not been specified")
    if namespace.www_root is None:
        raise ValueError("static files root is not specified")

    return Args(
        tick_period=namespace.tick_period or 0,
        config_file=namespace.config_file,
        www_root=namespace.www_root,
        randomize_spawn_points=namespace.randomize_spawn_points,
        base_path=Path(program).parent.absolute(),
        state_file=namespace.state_file or "",
        save_state_period=namespace.save_state_period or 0,
    )