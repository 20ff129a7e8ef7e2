"""Value codecs: the closed set of kinds a stored string can be read as.

Every value lives in the store as text. A ``ValueKind`` pairs one parser
with one formatter; lists reuse the scalar pair for each element.
"""

from __future__ import annotations

import enum
import math
from typing import Any, Iterable, get_args, get_origin

from nconfig.errors import ConfigError, UnsupportedTypeError, ValueParseError
from nconfig.utils.text import trim

__all__ = [
    "ValueKind",
    "TRUE_WORDS",
    "FALSE_WORDS",
    "resolve_type",
    "kind_of",
    "parse_value",
    "format_value",
    "split_list",
    "join_list",
]

TRUE_WORDS = frozenset({"true", "1", "yes", "on"})
FALSE_WORDS = frozenset({"false", "0", "no", "off"})

_INFINITY_WORDS = frozenset({"inf", "infinity"})


class ValueKind(enum.Enum):
    """Scalar kinds supported by the store."""

    STR = "str"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"


_KIND_BY_TYPE: dict[type, ValueKind] = {
    str: ValueKind.STR,
    bool: ValueKind.BOOL,
    int: ValueKind.INT,
    float: ValueKind.FLOAT,
}


def resolve_type(tp: Any) -> tuple[ValueKind, bool]:
    """Map a requested Python type to ``(kind, is_list)``.

    Accepts ``str``, ``bool``, ``int``, ``float``, ``list`` (a list of
    strings) and ``list[T]`` for any of the scalar types.

    Raises:
        UnsupportedTypeError: For any other type.
    """
    if tp in _KIND_BY_TYPE:
        return _KIND_BY_TYPE[tp], False
    if tp is list:
        return ValueKind.STR, True
    if get_origin(tp) is list:
        args = get_args(tp)
        if len(args) == 1 and args[0] in _KIND_BY_TYPE:
            return _KIND_BY_TYPE[args[0]], True
    raise UnsupportedTypeError(type_name=getattr(tp, "__name__", repr(tp)))


def kind_of(value: Any) -> ValueKind:
    """Return the kind matching a Python value.

    ``bool`` is checked before ``int`` since it is a subclass of it.
    """
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, int):
        return ValueKind.INT
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STR
    raise UnsupportedTypeError(type_name=type(value).__name__)


def _parse_bool(text: str) -> bool:
    word = trim(text).lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    raise ValueParseError(text=text, kind=ValueKind.BOOL.value)


def _numeric_text(text: str, kind: ValueKind) -> str:
    # int()/float() would also accept Unicode whitespace and digit separators.
    stripped = trim(text)
    if not stripped or stripped != stripped.strip() or "_" in stripped:
        raise ValueParseError(text=text, kind=kind.value)
    return stripped


def _parse_int(text: str) -> int:
    stripped = _numeric_text(text, ValueKind.INT)
    try:
        return int(stripped)
    except ValueError as exc:
        raise ValueParseError(text=text, kind=ValueKind.INT.value, cause=exc) from exc


def _parse_float(text: str) -> float:
    stripped = _numeric_text(text, ValueKind.FLOAT)
    try:
        result = float(stripped)
    except ValueError as exc:
        raise ValueParseError(text=text, kind=ValueKind.FLOAT.value, cause=exc) from exc
    if math.isinf(result) and stripped.lstrip("+-").lower() not in _INFINITY_WORDS:
        # Out of range, e.g. "1e999".
        raise ValueParseError(text=text, kind=ValueKind.FLOAT.value)
    return result


def parse_value(kind: ValueKind, text: str) -> Any:
    """Parse stored text as ``kind``.

    Raises:
        ValueParseError: If the text is not a valid value of that kind.
    """
    if kind is ValueKind.STR:
        return text
    if kind is ValueKind.BOOL:
        return _parse_bool(text)
    if kind is ValueKind.INT:
        return _parse_int(text)
    return _parse_float(text)


def format_value(value: Any) -> str:
    """Render a scalar in its canonical stored form.

    Raises:
        UnsupportedTypeError: If the value is not a str, bool, int or float.
        ConfigError: If an int has more digits than the interpreter will
            convert to text.
    """
    kind = kind_of(value)
    if kind is ValueKind.BOOL:
        return "true" if value else "false"
    if kind is ValueKind.FLOAT:
        return repr(float(value))
    if kind is ValueKind.INT:
        try:
            return str(int(value))
        except ValueError as exc:
            raise ConfigError(f"Integer too large to store as text: {exc}", cause=exc) from exc
    return value


def split_list(text: str, delimiter: str) -> list[str]:
    """Split list text on ``delimiter``, trim each fragment and drop empty ones."""
    fragments = (trim(fragment) for fragment in text.split(delimiter))
    return [fragment for fragment in fragments if fragment]


def join_list(values: Iterable[Any], delimiter: str) -> str:
    """Join the canonical form of each value with ``delimiter``."""
    return delimiter.join(format_value(v) for v in values)
