"""Runs through the configured repositories one scene at a time."""

from __future__ import annotations

from collections.abc import Iterable

from repovis.config import ConfigFile, SettingsError
from repovis.options import DEFAULT_SECTION
from repovis.settings import GourceSettings

CONFIG_EXTENSIONS = (".conf", ".cfg", ".ini")

MULTI_REPO_STOP_SECONDS = 60.0


class SceneSequence:
    """Hands out the settings of each repository section in turn.

    With more than one section and no video export, the sequence starts
    again from the first section after the last one.
    """

    def __init__(self, config: ConfigFile, exporting: bool = False) -> None:
        self.config = config
        self.exporting = exporting
        self._sections = config.sections(DEFAULT_SECTION)
        self.repo_count = len(self._sections)
        self._index = 0

    def next_settings(self) -> GourceSettings | None:
        """Settings for the next scene, or None when there are no more.

        Raises SettingsError if the section holds an invalid value.
        """
        if self._index >= len(self._sections):
            return None

        settings = GourceSettings()
        settings.repo_count = self.repo_count
        settings.import_section(self.config, self._sections[self._index])

        # Recording implies stopping at the end unless told otherwise.
        if self.exporting and not (
            settings.dont_stop or settings.loop or settings.path == "-"
        ):
            settings.stop_at_end = True

        if self.repo_count > 1:
            if settings.stop_at_time <= 0.0 and settings.stop_position <= 0.0:
                settings.stop_at_time = MULTI_REPO_STOP_SECONDS

        self._index += 1
        if (
            self._index >= len(self._sections)
            and self.repo_count > 1
            and not self.exporting
        ):
            self._index = 0

        return settings


def find_config_file(files: Iterable[str]) -> str | None:
    """The first file named like a config file that loads as one, or None."""
    for name in files:
        if not name.endswith(CONFIG_EXTENSIONS):
            continue
        try:
            ConfigFile().load(name)
        except SettingsError:
            continue
        return name
    return None


def apply_path(config: ConfigFile, path: str) -> None:
    """Set the path of every repository section, adding one if there is none."""
    sections = config.sections(DEFAULT_SECTION)
    if sections:
        for section in sections:
            section.set("path", path)
    else:
        config.set_entry(DEFAULT_SECTION, "path", path)