"""Path handling for the command line: URL parsing, cleaning and glob detection."""

from __future__ import annotations

import re
from typing import Iterable
from urllib.parse import unquote, urlparse

_GLOB_RE = re.compile(r"([^\\]|^)[[*?]")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class MultipleNamenodeUrlsError(ValueError):
    """Paths given together name more than one namenode."""

    def __init__(self, message: str = "Multiple namenode URLs specified"):
        super().__init__(message)


def _clean(path: str) -> str:
    """Return the shortest equivalent slash-separated path, purely lexically."""
    if not path:
        return "."

    rooted = path.startswith("/")
    parts: list[str] = []
    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if parts and parts[-1] != "..":
                parts.pop()
            elif not rooted:
                parts.append("..")
            continue
        parts.append(segment)

    joined = "/".join(parts)
    if rooted:
        return "/" + joined
    return joined or "."


def _join(*elements: str) -> str:
    """Join the non-empty elements with slashes and clean the result."""
    present = [element for element in elements if element]
    if not present:
        return ""
    return _clean("/".join(present))


def normalize_paths(paths: Iterable[str]) -> tuple[list[str], str]:
    """Split namenode hosts out of HDFS URLs and clean the paths.

    Returns the cleaned paths and the namenode host ("" when none was given).
    Raises MultipleNamenodeUrlsError when URLs name differing hosts and
    ValueError when a path holds an invalid percent escape.
    """
    namenode = ""
    clean_paths: list[str] = []

    for raw in paths:
        bad = _BAD_ESCAPE_RE.search(raw)
        if bad:
            raise ValueError(f"invalid URL escape {raw[bad.start():bad.start() + 3]!r} in {raw!r}")

        parsed = urlparse(raw)
        host = parsed.netloc.rpartition("@")[2]
        if host:
            if namenode and namenode != host:
                raise MultipleNamenodeUrlsError()
            namenode = host

        clean_paths.append(_clean(unquote(parsed.path)))

    return clean_paths, namenode


def has_glob(fragment: str) -> bool:
    """Tell whether a path fragment holds an unescaped glob character."""
    return _GLOB_RE.search(fragment) is not None


def user_dir(user: str) -> str:
    """Return the home directory of an HDFS user."""
    return _join("/user", user)


def absolute_path(path: str, home: str) -> str:
    """Resolve a relative path against ``home``; absolute paths are kept as is."""
    if path.startswith("/"):
        return path
    return _join(home, path)