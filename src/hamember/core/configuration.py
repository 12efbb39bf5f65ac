"""Read-only key/value configuration and its file loaders.

Supported file formats:

- properties: Java-style lines, ``key=value``, ``key: value`` or ``key value``,
  ``#``/``!`` comments and trailing-backslash line continuation
- JSON: a single object, scalar values are stringified, lists are joined by ','
- XML: ``<configuration><property><name/><value/></property></configuration>``
"""

from __future__ import annotations

import json
import re
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, List, Optional, Tuple, Union

from hamember.core.errors import ConfigFileError
from hamember.utils.logger import logger

# key runs up to the first unescaped '=', ':' or whitespace
PROPERTY_RE = re.compile(r"^((?:[^\s=:\\]|\\.)+)\s*[=:]?\s*(.*)$", re.DOTALL)
ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


class Configuration(Mapping):
    """Immutable mapping of configuration keys to string values.

    Non-string values are stringified on construction.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Optional[Mapping[str, Any]] = None):
        self._data = MappingProxyType(
            {str(k): _stringify(v) for k, v in (data or {}).items()}
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Configuration":
        """Build a configuration from arbitrary values, stringifying them."""
        return cls(data)

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Configuration({dict(self._data)!r})"

    def get_trimmed(self, key: str) -> Optional[str]:
        """Return the stripped value of ``key``, or None if missing or blank."""
        value = self._data.get(key)
        if value is None:
            return None
        value = value.strip()
        return value or None

    def get_trimmed_strings(self, key: str) -> List[str]:
        """Split a comma separated value into trimmed, non-empty items.

        Order is preserved and duplicates are dropped.
        """
        value = self._data.get(key)
        if not value:
            return []
        out: List[str] = []
        for item in value.split(","):
            item = item.strip()
            if item and item not in out:
                out.append(item)
        return out


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_stringify(v) for v in value)
    if value is None:
        return ""
    return str(value)


def _ends_with_continuation(line: str) -> bool:
    return (len(line) - len(line.rstrip("\\"))) % 2 == 1


def _logical_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Join continued lines, yielding (first line number, logical line)."""
    buf: Optional[str] = None
    start = 0
    for lineno, raw in enumerate(text.splitlines(), start=1):
        if buf is None:
            line = raw.strip()
            if not line or line.startswith(("#", "!")):
                continue
            start = lineno
        else:
            line = raw.lstrip()
        if _ends_with_continuation(line):
            buf = (buf or "") + line[:-1]
            continue
        yield start, (buf or "") + line
        buf = None
    if buf is not None:
        yield start, buf


def _parse_properties(text: str, path: Path) -> dict:
    data: dict = {}
    for lineno, line in _logical_lines(text):
        m = PROPERTY_RE.match(line)
        if m is None:
            raise ConfigFileError(f"Invalid property line {lineno} in {path}: empty key")
        key = ESCAPE_RE.sub(r"\1", m.group(1))
        data[key] = m.group(2).strip()
    return data


def _parse_json(text: str, path: Path) -> dict:
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigFileError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(obj, dict):
        raise ConfigFileError(f"Invalid JSON in {path}: top level must be an object")
    return {str(k): _stringify(v) for k, v in obj.items()}


def _parse_xml(text: str, path: Path) -> dict:
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise ConfigFileError(f"Invalid XML in {path}: {e}") from e
    if root.tag != "configuration":
        raise ConfigFileError(
            f"Invalid XML in {path}: root element must be <configuration>"
        )
    data: dict = {}
    for prop in root.iter("property"):
        name = (prop.findtext("name") or "").strip()
        if not name:
            raise ConfigFileError(f"Invalid XML in {path}: <property> without <name>")
        data[name] = (prop.findtext("value") or "").strip()
    return data


def load_config(path: Union[str, Path]) -> Configuration:
    """Load a configuration file.

    The format is picked by suffix (``.json``, ``.xml``); anything else is
    read as properties. Content starting with ``{`` or ``<`` is also sniffed.

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigFileError: If the content cannot be parsed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    head = text.lstrip()[:1]
    suffix = path.suffix.lower()

    if suffix == ".json" or head == "{":
        data = _parse_json(text, path)
    elif suffix == ".xml" or head == "<":
        data = _parse_xml(text, path)
    else:
        data = _parse_properties(text, path)

    logger.debug("Loaded %d configuration keys from %s", len(data), path)
    return Configuration(data)
