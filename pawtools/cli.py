"""Command-line plumbing: commands, shared flags, prompts and item paths."""

from __future__ import annotations

import getpass
import json
import re
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence, TextIO

_TRUE_VALUES = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_VALUES = {"0", "f", "F", "FALSE", "false", "False"}
_INT_PATTERN = re.compile(r"[+-]?\d+")

_OPTIONS_HELP = """Options:
  -h, --help  Displays this help and exit
"""

_MAIN_USAGE_HEADER = """paw-cli is the CLI application for Paw

Usage: paw-cli <command> [arguments]

The commands are:

"""

_MAIN_USAGE_FOOTER = """
Use "paw-cli <command> -help" for more information about a command.
"""


class UsageRequested(Exception):
    """Raised by a command's parse step when its usage should be shown."""


@dataclass
class CommonFlags:
    """Flags shared by every command, plus the positional arguments left over."""

    help: bool = False
    args: list[str] = field(default_factory=list)


def _quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def _parse_bool(name: str, value: str) -> bool:
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean value {_quote(value)} for -{name}: parse error")


def parse_common_flags(args: Sequence[str]) -> CommonFlags:
    """Parse the shared ``-h``/``-help`` flags, stopping at the first non-flag."""
    flags = CommonFlags()
    remaining = list(args)
    while remaining:
        arg = remaining[0]
        if len(arg) < 2 or not arg.startswith("-"):
            break
        remaining.pop(0)
        if arg == "--":
            break
        name = arg[2:] if arg.startswith("--") else arg[1:]
        if not name or name.startswith("-") or name.startswith("="):
            raise ValueError(f"bad flag syntax: {arg}")
        name, has_value, value = name.partition("=")
        if name not in ("h", "help"):
            raise ValueError(f"flag provided but not defined: -{name}")
        flags.help = _parse_bool(name, value) if has_value else True
    flags.args = remaining
    return flags


class Command(ABC):
    """A paw-cli sub-command."""

    name: str = ""
    description: str = ""
    synopsis: str = ""

    def parse(self, args: Sequence[str]) -> None:
        """Parse *args*; raise UsageRequested when help was asked for."""
        flags = parse_common_flags(args)
        if flags.help:
            raise UsageRequested(self.name)
        self.args = flags.args

    def usage(self, out: Optional[TextIO] = None) -> None:
        """Write the command usage to *out* (default: standard output)."""
        out = out or sys.stdout
        out.write(f"Usage: {self.synopsis}\n\n{self.description}\n\n{_OPTIONS_HELP}")

    @abstractmethod
    def run(self, storage: Any, out: Optional[TextIO] = None) -> None:
        """Run the command against *storage*, writing results to *out*."""


@dataclass
class VersionCommand(Command):
    """Prints the version information."""

    version: str = ""
    name: str = "version"
    description: str = "Print the version information"
    synopsis: str = "paw-cli version"

    def parse(self, args: Sequence[str]) -> None:
        flags = parse_common_flags(args)
        if flags.help:
            raise UsageRequested(self.name)

    def usage(self, out: Optional[TextIO] = None) -> None:
        super().usage(out)

    def run(self, storage: Any, out: Optional[TextIO] = None) -> None:
        out = out or sys.stdout
        out.write(f"paw-cli version {self.version or '(unknown)'}\n")


def usage(commands: Sequence[Command], out: Optional[TextIO] = None) -> None:
    """Write the top-level usage listing *commands* to *out*."""
    out = out or sys.stdout
    listing = "".join(f"\t{cmd.name:<13} {cmd.description}\n" for cmd in commands)
    out.write(_MAIN_USAGE_HEADER + listing + _MAIN_USAGE_FOOTER)


def _read_line(stdin: Optional[TextIO]) -> str:
    line = (stdin or sys.stdin).readline()
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def _parse_int(text: str) -> Optional[int]:
    if _INT_PATTERN.fullmatch(text):
        return int(text)
    return None


def ask(prompt: str, stdin: Optional[TextIO] = None, out: Optional[TextIO] = None) -> str:
    """Prompt for a line of input and return it."""
    out = out or sys.stdout
    out.write(f"{prompt}: ")
    out.flush()
    return _read_line(stdin)


def ask_with_default(
    prompt: str,
    old: str,
    stdin: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
) -> str:
    """Prompt showing *old*; an empty answer keeps it."""
    out = out or sys.stdout
    out.write(f"{prompt} [{old}]: ")
    out.flush()
    return _read_line(stdin) or old


def ask_yes_no(
    prompt: str,
    default_yes: bool,
    stdin: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
) -> bool:
    """Ask a yes/no question until answered with y, n or nothing."""
    out = out or sys.stdout
    hint = "Y/n" if default_yes else "y/N"
    while True:
        out.write(f"{prompt} [{hint}]: ")
        out.flush()
        answer = _read_line(stdin)
        if answer == "":
            return default_yes
        lowered = answer.lower()
        if lowered == "y":
            return True
        if lowered == "n":
            return False


def ask_int(
    prompt: str,
    default: int,
    minimum: int,
    maximum: int,
    stdin: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
) -> int:
    """Ask for an integer in [minimum, maximum]; an empty answer gives *default*."""
    out = out or sys.stdout
    while True:
        out.write(f"{prompt} [{default}]: ")
        out.flush()
        answer = _read_line(stdin)
        if answer == "":
            return default
        value = _parse_int(answer)
        if value is not None and minimum <= value <= maximum:
            return value


def ask_choice(
    prompt: str,
    options: Sequence[Any],
    default: Any,
    stdin: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
) -> Any:
    """Let the user pick one of *options* by index; empty picks *default*."""
    out = out or sys.stdout
    default_index = next((i for i, opt in enumerate(options) if opt == default), 0)
    out.write(f"{prompt} [{options[default_index]}]:\n")
    for index, option in enumerate(options):
        out.write(f"  [{index}] {option}\n")
    while True:
        out.write("> ")
        out.flush()
        answer = _read_line(stdin)
        if answer == "":
            return options[default_index]
        index = _parse_int(answer)
        if index is not None and 0 <= index < len(options):
            return options[index]


def ask_password(prompt: str) -> str:
    """Read a password from the terminal without echo."""
    if not sys.stdin.isatty():
        raise RuntimeError("standard input is not a terminal")
    try:
        return getpass.getpass(f"{prompt}: ")
    except (OSError, EOFError) as exc:
        raise RuntimeError(
            f"could not read password from standard input: {exc}"
        ) from exc


def ask_password_with_confirm() -> str:
    """Ask for a password twice until both entries match."""
    while True:
        first = ask_password("Password")
        confirm = ask_password("Confirm password")
        if first == confirm:
            return first
        print("[✗] Passwords do not match")


@dataclass
class ItemPath:
    """A VAULT_NAME/ITEM_TYPE/ITEM_NAME reference."""

    vault_name: str = ""
    item_type: Any = None
    item_name: str = ""

    def __str__(self) -> str:
        type_part = "" if self.item_type is None else str(self.item_type)
        return "/".join(p for p in (self.vault_name, type_part, self.item_name) if p)


def parse_item_path(
    path: str,
    full_path: bool = False,
    wildcard: bool = False,
    parse_type: Optional[Callable[[str], Any]] = None,
) -> ItemPath:
    """Parse *path* into an ItemPath.

    *parse_type* converts the type element and may raise; without it the
    element is kept as a string. With *wildcard*, a ``*`` type is left unset.
    """
    parts = path.split("/")
    if len(parts) > 3 or (full_path and len(parts) != 3):
        raise ValueError(
            f"invalid vault item path. Got {_quote(path)}, "
            "expected VAULT_NAME/ITEM_TYPE/ITEM_NAME"
        )
    if full_path and "" in parts:
        raise ValueError(
            f"a path element is empty. Got {path}, "
            "expected VAULT_NAME/ITEM_TYPE/ITEM_NAME"
        )
    result = ItemPath(vault_name=parts[0])
    if len(parts) > 1 and not (wildcard and parts[1] == "*"):
        result.item_type = parse_type(parts[1]) if parse_type else parts[1]
    if len(parts) > 2:
        result.item_name = parts[2]
    return result