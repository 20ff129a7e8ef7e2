"""ConfigStore: a flat key-value configuration store backed by INI-like text."""

from __future__ import annotations

import io
import logging
import os
from typing import IO, Any, Iterable, Iterator, Mapping, Sequence

from nconfig.codecs import (
    ValueKind,
    format_value,
    join_list,
    kind_of,
    parse_value,
    resolve_type,
    split_list,
)
from nconfig.errors import ConfigError, ValueParseError
from nconfig.inifile import dump_entries, parse_lines, split_key, survives_reload
from nconfig.mapping import dump_yaml, flatten_mapping, load_yaml, nest_mapping
from nconfig.options import StoreOptions, check_delimiter

__all__ = ["ConfigStore"]

logger = logging.getLogger(__name__)

_TYPE_BY_KIND: dict[ValueKind, type] = {
    ValueKind.STR: str,
    ValueKind.BOOL: bool,
    ValueKind.INT: int,
    ValueKind.FLOAT: float,
}


class ConfigStore:
    """In-memory mapping from flat dotted keys to text values.

    Values are always held as text and re-parsed on every typed read, so the
    same key may be read as different types. Reads never raise for missing
    or malformed data: the caller's fallback is returned instead.

    Sections are derived from keys: ``graphics.width`` belongs to section
    ``graphics``. Only the first dot separates section from subkey.

    Thread safety:
        Not synchronized. Callers sharing a store across threads must guard
        it with their own lock.
    """

    def __init__(
        self,
        entries: Mapping[str, str] | None = None,
        options: StoreOptions | None = None,
    ) -> None:
        self._data: dict[str, str] = dict(entries) if entries else {}
        self._options: StoreOptions = options or StoreOptions()

    @property
    def options(self) -> StoreOptions:
        """Options in effect for this store."""
        return self._options

    # === Loading and saving ===

    def load(self, path: str | os.PathLike[str]) -> bool:
        """Merge entries from a config file into the store.

        Args:
            path: Path of the file to read.

        Returns:
            False if the file could not be opened or read, True otherwise
            (including files with no entries). On failure the store is left
            unchanged.
        """
        try:
            with open(path, encoding=self._options.encoding) as f:
                count = self.read(f)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Failed to load config from %s: %s", path, exc)
            return False
        logger.debug("Loaded %d entries from %s", count, path)
        return True

    def save(self, path: str | os.PathLike[str]) -> bool:
        """Write all entries to a config file, replacing its contents.

        Returns:
            False if the file could not be opened or written, True otherwise.
        """
        try:
            with open(path, "w", encoding=self._options.encoding, newline="\n") as f:
                f.write(self.dumps())
        except (OSError, UnicodeEncodeError) as exc:
            logger.warning("Failed to save config to %s: %s", path, exc)
            return False
        logger.debug("Saved %d entries to %s", len(self._data), path)
        return True

    def read(self, stream: Iterable[str]) -> int:
        """Merge entries from an open text stream. Returns the number of entries read.

        The whole stream is parsed before anything is merged, so an error while
        reading leaves the store unchanged.
        """
        entries = list(parse_lines(stream))
        self._data.update(entries)
        return len(entries)

    def write(self, stream: IO[str]) -> bool:
        """Write all entries to an open text stream.

        Returns:
            False if the stream rejected the write, True otherwise.
        """
        try:
            stream.write(self.dumps())
        except (OSError, ValueError) as exc:
            logger.warning("Failed to write config to stream: %s", exc)
            return False
        return True

    def loads(self, text: str) -> int:
        """Merge entries from config text. Returns the number of entries read."""
        return self.read(io.StringIO(text))

    def dumps(self) -> str:
        """Render all entries as config text."""
        return dump_entries(self._data)

    # === Typed access ===

    def get(self, key: str, fallback: Any = None, as_type: Any = None) -> Any:
        """Read ``key`` as a typed value.

        The type comes from ``as_type`` when given (``str``, ``bool``,
        ``int``, ``float`` or ``list[T]``), otherwise from the fallback.
        A list fallback takes its item type from its first element and
        reads strings when empty; a ``None`` fallback reads strings.

        Returns:
            The parsed value, or ``fallback`` if the key is absent or its
            text does not parse.

        Raises:
            UnsupportedTypeError: If the requested type is not supported.
        """
        kind, is_list = self._resolve(fallback, as_type)
        text = self._data.get(key)
        if text is None:
            return fallback
        if is_list:
            return self.get_list(key, fallback, item_type=_TYPE_BY_KIND[kind])

        try:
            return parse_value(kind, text)
        except ValueParseError as exc:
            logger.debug("Using fallback for '%s': %s", key, exc.message)
            return fallback

    def get_str(self, key: str, fallback: str = "") -> str:
        """Read ``key`` verbatim."""
        return self.get(key, fallback, as_type=str)

    def get_bool(self, key: str, fallback: bool = False) -> bool:
        """Read ``key`` as true/1/yes/on or false/0/no/off, case-insensitively."""
        return self.get(key, fallback, as_type=bool)

    def get_int(self, key: str, fallback: int = 0) -> int:
        return self.get(key, fallback, as_type=int)

    def get_float(self, key: str, fallback: float = 0.0) -> float:
        return self.get(key, fallback, as_type=float)

    def set(self, key: str, value: Any) -> None:
        """Store the canonical text of ``value`` under ``key``.

        Booleans become ``true``/``false``, numbers their decimal form, and
        lists or tuples are joined with the default delimiter.

        Raises:
            UnsupportedTypeError: If ``value`` is not a str, bool, int,
                float, or a list or tuple of those.
            ConfigError: If an int has too many digits to convert to text.
        """
        if isinstance(value, (list, tuple)):
            self.set_list(key, value)
            return
        self._store(key, format_value(value))

    def get_list(
        self,
        key: str,
        fallback: list[Any] | None = None,
        delimiter: str | None = None,
        item_type: type = str,
    ) -> list[Any]:
        """Read ``key`` as a delimited list of ``item_type`` values.

        Each fragment is trimmed of ASCII whitespace before parsing. Empty
        fragments and fragments that do not parse are dropped; the rest keep
        their order, so empty text reads as an empty list.

        Returns:
            The parsed list, or ``fallback`` (an empty list when None) if
            the key is absent.

        Raises:
            ConfigError: If ``delimiter`` is not a single non-line-break character.
        """
        kind, _ = resolve_type(item_type)
        delimiter = self._delimiter(delimiter)
        text = self._data.get(key)
        if text is None:
            return [] if fallback is None else fallback

        results: list[Any] = []
        for fragment in split_list(text, delimiter):
            try:
                results.append(parse_value(kind, fragment))
            except ValueParseError as exc:
                logger.debug("Dropping list item of '%s': %s", key, exc.message)
        return results

    def set_list(self, key: str, values: Sequence[Any], delimiter: str | None = None) -> None:
        """Store ``values`` joined with ``delimiter`` under ``key``.

        Raises:
            UnsupportedTypeError: If an element is not a str, bool, int or float.
            ConfigError: If ``delimiter`` is not a single non-line-break character.
        """
        self._store(key, join_list(values, self._delimiter(delimiter)))

    # === Introspection ===

    def keys(self) -> list[str]:
        """All stored keys, in insertion order."""
        return list(self._data)

    def items(self) -> list[tuple[str, str]]:
        """All ``(key, text)`` pairs, in insertion order."""
        return list(self._data.items())

    def sections(self) -> list[str]:
        """Distinct section names, in order of first appearance."""
        seen: dict[str, None] = {}
        for key in self._data:
            section, _ = split_key(key)
            if section:
                seen.setdefault(section, None)
        return list(seen)

    def keys_in(self, section: str) -> list[str]:
        """Subkeys of every key starting with ``section + "."``."""
        prefix = f"{section}."
        return [key[len(prefix):] for key in self._data if key.startswith(prefix)]

    def section(self, name: str) -> dict[str, str]:
        """Subkey to text mapping for one section."""
        prefix = f"{name}."
        return {key[len(prefix):]: value for key, value in self._data.items() if key.startswith(prefix)}

    def has_key(self, key: str) -> bool:
        """Exact membership test on the full key."""
        return key in self._data

    def remove(self, key: str) -> bool:
        """Delete ``key``. Returns True if it was present."""
        return self._data.pop(key, None) is not None

    def clear(self) -> None:
        self._data.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._data))

    def __repr__(self) -> str:
        return f"ConfigStore({len(self._data)} entries, sections={self.sections()!r})"

    # === Mapping and YAML interop ===

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], options: StoreOptions | None = None) -> ConfigStore:
        """Build a store from ``{section: {key: value}}`` and top-level scalars.

        Raises:
            ConfigError: If the mapping nests deeper than one section level
                or holds unsupported values.
        """
        options = options or StoreOptions()
        return cls(flatten_mapping(data, delimiter=options.delimiter), options=options)

    def to_mapping(self) -> dict[str, Any]:
        """Group entries into one dict per section; values stay as text."""
        return nest_mapping(self._data)

    @classmethod
    def from_yaml(cls, yaml_path: str, options: StoreOptions | None = None) -> ConfigStore:
        """Build a store from a YAML file holding sections and scalars.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigParseError: If the YAML is invalid or not a mapping.
            ConfigError: If the mapping cannot be flattened.
        """
        store = cls.from_mapping(load_yaml(yaml_path), options=options)
        logger.debug("Imported %d entries from %s", len(store), yaml_path)
        return store

    def to_yaml(self) -> str:
        """Render entries as YAML, one mapping per section."""
        return dump_yaml(self.to_mapping())

    def _store(self, key: str, text: str) -> None:
        if not survives_reload(key, text):
            logger.debug("Entry '%s' will not reload unchanged from saved text", key)
        self._data[key] = text

    def _delimiter(self, delimiter: str | None) -> str:
        if delimiter is None:
            return self._options.delimiter
        try:
            return check_delimiter(delimiter)
        except ValueError as exc:
            raise ConfigError(str(exc), details={"delimiter": delimiter}, cause=exc) from exc

    def _resolve(self, fallback: Any, as_type: Any) -> tuple[ValueKind, bool]:
        if as_type is not None:
            return resolve_type(as_type)
        if fallback is None:
            return ValueKind.STR, False
        if isinstance(fallback, (list, tuple)):
            if not fallback:
                return ValueKind.STR, True
            return kind_of(fallback[0]), True
        return kind_of(fallback), False

