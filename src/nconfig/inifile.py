"""Reading and writing the INI-like text format.

Format::

    # comment line, ignored
    top_level = value

    [section_name]
    key = value
    another_key = 1, 2, 3

Keys inside a ``[section]`` are stored as ``section.key``.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping

from nconfig.utils.text import trim

__all__ = ["COMMENT_PREFIX", "split_key", "join_key", "parse_lines", "dump_entries", "survives_reload"]

COMMENT_PREFIX = "#"
SECTION_SEPARATOR = "."


def split_key(key: str) -> tuple[str, str]:
    """Split a flat key into ``(section, subkey)`` at its first dot.

    A key without a dot has no section and is its own subkey.
    """
    section, sep, subkey = key.partition(SECTION_SEPARATOR)
    if not sep:
        return "", key
    return section, subkey


def join_key(section: str, subkey: str) -> str:
    """Build a flat key, leaving it unqualified when ``section`` is empty."""
    if not section:
        return subkey
    return f"{section}{SECTION_SEPARATOR}{subkey}"


def survives_reload(key: str, value: str) -> bool:
    """Whether an entry written by ``dump_entries`` parses back unchanged.

    Keys lose text after an ``=``, keys starting with ``#`` or ``[`` read as
    comments or headers, line breaks split the entry, and surrounding
    whitespace is trimmed on load.
    """
    if "=" in key or any(c in key or c in value for c in "\r\n"):
        return False
    if trim(key) != key or trim(value) != value:
        return False
    section, subkey = split_key(key)
    if section and trim(section) != section:
        return False
    name = subkey if section else key
    return not name.startswith((COMMENT_PREFIX, "[")) and trim(name) == name


def parse_lines(lines: Iterable[str]) -> Iterator[tuple[str, str]]:
    """Yield ``(key, value)`` entries from lines of config text.

    Comment lines, blank lines and lines without ``=`` produce nothing. The
    current section carries over until the next header.
    """
    current_section = ""
    for raw in lines:
        line = trim(raw)
        if not line or line.startswith(COMMENT_PREFIX):
            continue

        if line.startswith("[") and line.endswith("]"):
            current_section = trim(line[1:-1])
            continue

        key, sep, value = line.partition("=")
        if not sep:
            continue

        yield join_key(current_section, trim(key)), trim(value)


def _group(entries: Mapping[str, str]) -> list[tuple[str, list[tuple[str, str]]]]:
    ungrouped: list[tuple[str, str]] = []
    sections: dict[str, list[tuple[str, str]]] = {}
    for key in sorted(entries):
        section, subkey = split_key(key)
        if section:
            sections.setdefault(section, []).append((subkey, entries[key]))
        else:
            # Keys with a leading dot keep their full form so they reload unchanged.
            ungrouped.append((key, entries[key]))

    groups: list[tuple[str, list[tuple[str, str]]]] = []
    if ungrouped:
        groups.append(("", ungrouped))
    groups.extend((name, sections[name]) for name in sorted(sections))
    return groups


def dump_entries(entries: Mapping[str, str]) -> str:
    """Render entries as config text.

    Ungrouped keys come first with no header, then one ``[section]`` block
    per section. Keys are sorted so the same entries always give the same
    text.
    """
    lines: list[str] = []
    for name, items in _group(entries):
        if lines:
            lines.append("")
        if name:
            lines.append(f"[{name}]")
        lines.extend(f"{subkey} = {value}" for subkey, value in items)
    return "".join(f"{line}\n" for line in lines)
