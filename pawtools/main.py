"""Entry point of the paw-cli command."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pawtools.cli import Command, UsageRequested, VersionCommand, usage

VERSION = ""


def _commands() -> list[Command]:
    return [VersionCommand(version=VERSION)]


def _fail(err: Exception) -> int:
    print(f"[✗] {err}", file=sys.stderr)
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run paw-cli with *argv* (default: the process arguments) and return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    commands = _commands()

    if not args:
        usage(commands)
        return 1

    command = next((c for c in commands if c.name == args[0]), None)
    if command is None:
        usage(commands)
        return 1

    try:
        command.parse(args[1:])
    except UsageRequested:
        command.usage()
        return 0
    except ValueError as err:
        return _fail(err)

    try:
        command.run(None)
    except Exception as err:  # any failure is reported and turned into an exit code
        return _fail(err)
    return 0


if __name__ == "__main__":
    sys.exit(main())