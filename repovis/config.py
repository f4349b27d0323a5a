"""Sectioned configuration files and the value parsers used by the settings."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

_LEADING_FLOAT = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_LEADING_INT = re.compile(r"\s*[+-]?\d+")
_VEC3 = re.compile(
    r"\s*vec3\(\s*([^,()]+?)\s*,\s*([^,()]+?)\s*,\s*([^,()]+?)\s*\)\s*$"
)
_HEX_COLOUR = re.compile(r"[0-9A-Fa-f]{6}")
_RECTANGLE = re.compile(r"(-?\d+)x(-?\d+)")
_SECTION_HEADER = re.compile(r"\[\s*([^\]]+?)\s*\]")

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})


class SettingsError(ValueError):
    """A configuration value is missing, malformed or out of range."""

    def __init__(self, message: str, path: str = "", line: int = 0) -> None:
        self.message = message
        self.path = path
        self.line = line
        if path and line:
            text = f"{path}, line {line}: {message}"
        elif path:
            text = f"{path}: {message}"
        else:
            text = message
        super().__init__(text)


@dataclass
class ConfigEntry:
    """A single name=value line of a section."""

    name: str
    value: str = ""
    line: int = 0

    def has_value(self) -> bool:
        return bool(self.value)

    def as_float(self) -> float:
        """The value read as a number the lenient way; 0.0 if it has none."""
        match = _LEADING_FLOAT.match(self.value)
        return float(match.group()) if match else 0.0

    def as_int(self) -> int:
        """The leading integer of the value; 0 if it has none."""
        match = _LEADING_INT.match(self.value)
        return int(match.group()) if match else 0

    def as_bool(self) -> bool:
        return self.value.strip().lower() in _TRUE_WORDS

    def is_vec3(self) -> bool:
        """Whether the value is written as vec3(x, y, z) with numeric parts."""
        return self.as_vec3() is not None

    def as_vec3(self) -> tuple[float, float, float] | None:
        match = _VEC3.match(self.value)
        if match is None:
            return None
        try:
            x, y, z = (float(part) for part in match.groups())
        except ValueError:
            return None
        return (x, y, z)


class ConfigSection:
    """A named section holding entries in the order they were given."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.entries: list[ConfigEntry] = []

    def add(self, name: str, value: str = "", line: int = 0) -> ConfigEntry:
        """Append an entry, keeping any others with the same name."""
        entry = ConfigEntry(name, value, line)
        self.entries.append(entry)
        return entry

    def set(self, name: str, value: str) -> ConfigEntry:
        """Replace every entry of this name with a single one."""
        line = next((e.line for e in self.entries if e.name == name), 0)
        self.entries = [e for e in self.entries if e.name != name]
        return self.add(name, value, line)

    def get(self, name: str) -> ConfigEntry | None:
        return next((e for e in self.entries if e.name == name), None)

    def get_all(self, name: str) -> list[ConfigEntry]:
        return [e for e in self.entries if e.name == name]

    def get_bool(self, name: str) -> bool:
        entry = self.get(name)
        return entry is not None and entry.as_bool()

    def has_value(self, name: str) -> bool:
        entry = self.get(name)
        return entry is not None and entry.has_value()

    def __contains__(self, name: object) -> bool:
        return any(e.name == name for e in self.entries)


class ConfigFile:
    """An ordered collection of sections; a name may appear more than once."""

    def __init__(self) -> None:
        self.path = ""
        self._sections: list[ConfigSection] = []

    def section(self, name: str) -> ConfigSection | None:
        return next((s for s in self._sections if s.name == name), None)

    def sections(self, name: str) -> list[ConfigSection]:
        return [s for s in self._sections if s.name == name]

    def add_section(self, name: str) -> ConfigSection:
        section = ConfigSection(name)
        self._sections.append(section)
        return section

    def clear(self) -> None:
        self._sections.clear()

    def set_entry(self, section_name: str, name: str, value: str) -> ConfigEntry:
        """Set an entry in the first section of that name, creating it if needed."""
        section = self.section(section_name) or self.add_section(section_name)
        return section.set(name, value)

    def loads(self, text: str) -> None:
        """Read sections and entries from text, adding to what is held."""
        current: ConfigSection | None = None
        for number, raw in enumerate(text.splitlines(), start=1):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            if line.startswith("["):
                header = _SECTION_HEADER.fullmatch(line)
                if header is None:
                    raise SettingsError("malformed section name", self.path, number)
                current = self.add_section(header.group(1))
                continue
            if current is None:
                raise SettingsError("entry outside of a section", self.path, number)
            name, sep, value = line.partition("=")
            name = name.strip()
            if not name:
                raise SettingsError("entry without a name", self.path, number)
            current.add(name, value.strip() if sep else "", number)

    def load(self, path: str | Path) -> None:
        self.path = str(path)
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise SettingsError("unable to read config file", self.path) from exc
        except UnicodeDecodeError as exc:
            raise SettingsError("config file is not text", self.path) from exc
        self.loads(text)

    def dumps(self) -> str:
        blocks = []
        for section in self._sections:
            lines = [f"[{section.name}]"]
            lines.extend(f"{e.name}={e.value}" for e in section.entries)
            blocks.append("\n".join(lines) + "\n")
        return "\n".join(blocks)

    def save(self, path: str | Path) -> None:
        try:
            Path(path).write_text(self.dumps(), encoding="utf-8")
        except OSError as exc:
            raise SettingsError("unable to write config file", str(path)) from exc

    def entry_error(self, entry: ConfigEntry, message: str) -> SettingsError:
        return SettingsError(message, self.path, entry.line)

    def missing_value_error(self, entry: ConfigEntry) -> SettingsError:
        return self.entry_error(entry, f"missing value for {entry.name}")

    def invalid_value_error(self, entry: ConfigEntry) -> SettingsError:
        return self.entry_error(entry, f"invalid {entry.name} value")


def parse_hex_colour(text: str) -> tuple[float, float, float] | None:
    """Read an RRGGBB colour into components from 0.0 to 1.0, or None."""
    if not _HEX_COLOUR.fullmatch(text):
        return None
    r, g, b = (int(text[i : i + 2], 16) / 255.0 for i in (0, 2, 4))
    return (r, g, b)


def parse_rectangle(text: str) -> tuple[int, int] | None:
    """Read a WIDTHxHEIGHT (or XxY) pair of integers, or None."""
    match = _RECTANGLE.fullmatch(text.strip())
    if match is None:
        return None
    return (int(match.group(1)), int(match.group(2)))