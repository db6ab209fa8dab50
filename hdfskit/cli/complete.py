"""Shell completion support for the command line."""

from __future__ import annotations

from typing import Optional

KNOWN_COMMANDS = (
    "ls",
    "rm",
    "mv",
    "mkdir",
    "touch",
    "chmod",
    "chown",
    "cat",
    "head",
    "tail",
    "du",
    "checksum",
    "get",
    "getmerge",
    "put",
    "df",
)

# The completion script replaces this marker with local file completion.
LOCAL_FILE = "_FILE_"
REMOTE_PATH = "path"


def is_known_command(command: str) -> bool:
    """Tell whether ``command`` is one the completion knows about."""
    return command in KNOWN_COMMANDS


def count_position(words: list[str]) -> int:
    """Return the position of the last argument, not counting flags or the command."""
    return sum(1 for word in words if not word.startswith("-")) - 1


def completion_words(line: str) -> list[str]:
    """Split a command line into words, dropping the program name."""
    return line.split(" ")[1:]


def complete_arg_kind(command: str, fragment: str, position: int) -> Optional[str]:
    """Decide how an argument should be completed.

    Returns LOCAL_FILE for local file arguments, REMOTE_PATH for HDFS paths,
    and None when nothing should be offered.
    """
    if (command == "put" and position == 1) or (
        command in ("get", "getmerge") and position == 2
    ):
        return LOCAL_FILE
    if command in ("chmod", "chown") and position == 1:
        return None
    if fragment.startswith("-"):
        return None
    return REMOTE_PATH


def completion_split(fragment: str, full_path: str) -> tuple[str, str]:
    """Return the directory to list and the name prefix to match against."""
    if fragment.endswith("/"):
        return full_path, ""
    cut = full_path.rfind("/") + 1
    return full_path[:cut], full_path[cut:]