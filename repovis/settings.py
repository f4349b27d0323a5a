"""Visualisation settings read from a configuration section."""

from __future__ import annotations

import os
import random
import re
from pathlib import Path

from repovis.config import (
    ConfigEntry,
    ConfigFile,
    ConfigSection,
    SettingsError,
    parse_hex_colour,
    parse_rectangle,
)
from repovis.options import ARG_TYPES, DEFAULT_SECTION, ArgType

HIDE_FIELDS = frozenset(
    {
        "date",
        "users",
        "tree",
        "files",
        "usernames",
        "filenames",
        "dirnames",
        "bloom",
        "progress",
        "mouse",
        "root",
    }
)

LOG_FORMATS = frozenset(
    {"git", "cvs-exp", "cvs2cl", "svn", "custom", "hg", "bzr", "apache"}
)

CAMERA_MODES = frozenset({"overview", "track"})

_IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png")

_SECONDS_PER_DAY = 86400.0


def load_user_images(directory: str) -> dict[str, str]:
    """Map user names to the jpg and png images found in a directory.

    The name is the file name up to its image extension. A directory that
    cannot be read gives an empty map.
    """
    prefix = directory if directory.endswith("/") else directory + "/"
    try:
        names = sorted(os.listdir(prefix))
    except OSError:
        return {}
    images: dict[str, str] = {}
    for filename in names:
        for ext in _IMAGE_EXTENSIONS:
            position = filename.rfind(ext)
            if position != -1:
                images[filename[:position]] = prefix + filename
                break
    return images


class GourceSettings:
    """All options that shape one visualisation, with their defaults."""

    def __init__(self) -> None:
        self.repo_count = 0
        self.default_section_name = DEFAULT_SECTION
        self.load_config = ""
        self.save_config = ""
        self.output_custom_filename = ""
        self.reset()

    def reset(self) -> None:
        """Restore every imported setting to its default."""
        self.path = "."
        self.ffp = False

        self.hide_date = False
        self.hide_users = False
        self.hide_tree = False
        self.hide_files = False
        self.hide_usernames = False
        self.hide_filenames = False
        self.hide_dirnames = False
        self.hide_progress = False
        self.hide_bloom = False
        self.hide_mouse = False
        self.hide_root = False

        self.start_position = 0.0
        self.stop_position = 0.0
        self.stop_at_time = -1.0
        self.stop_on_idle = False
        self.stop_at_end = False
        self.dont_stop = False

        self.show_key = False
        self.disable_auto_rotate = False

        self.auto_skip_seconds = 3.0
        self.days_per_second = 0.1
        self.file_idle_time = 60.0
        self.time_scale = 1.0

        self.loop = False

        self.logo = ""
        self.logo_offset = (20.0, 20.0)

        self.colour_user_images = False
        self.default_user_image = ""
        self.user_image_dir = ""
        self.user_image_map: dict[str, str] = {}

        self.camera_mode = "overview"
        self.padding = 1.1

        self.crop_vertical = False
        self.crop_horizontal = False

        self.bloom_multiplier = 1.0
        self.bloom_intensity = 0.75

        self.background_colour = (0.1, 0.1, 0.1)
        self.background_image = ""

        self.title = ""

        self.font_size = 16
        self.font_colour = (1.0, 1.0, 1.0)
        self.highlight_colour = (1.0, 1.0, 0.3)

        self.elasticity = 0.0

        self.git_branch = ""

        self.log_format = ""
        self.date_format = "%A, %d %B, %Y %X"

        self.max_files = 0
        self.max_user_speed = 500.0
        self.max_file_lag = 5.0

        self.user_idle_time = 3.0
        self.user_friction = 1.0
        self.user_scale = 1.0

        self.follow_users: list[str] = []
        self.highlight_users: list[str] = []
        self.highlight_all_users = False
        self.highlight_dirs = False

        self.hash_seed = 31

        self.file_filters: list[re.Pattern[str]] = []
        self.file_extensions = False
        self.user_filters: list[re.Pattern[str]] = []

    # -- helpers ---------------------------------------------------------

    @staticmethod
    def _valued(
        config: ConfigFile, entry: ConfigEntry, message: str | None = None
    ) -> ConfigEntry:
        if not entry.has_value():
            if message is None:
                raise config.missing_value_error(entry)
            raise config.entry_error(entry, message)
        return entry

    @staticmethod
    def _colour(
        config: ConfigFile, entry: ConfigEntry
    ) -> tuple[float, float, float]:
        vec = entry.as_vec3()
        if vec is not None:
            return vec
        colour = parse_hex_colour(entry.value)
        if colour is None:
            raise config.invalid_value_error(entry)
        return colour

    @staticmethod
    def _regexes(
        config: ConfigFile, section: ConfigSection, name: str
    ) -> list[re.Pattern[str]]:
        patterns = []
        for entry in section.get_all(name):
            if not entry.has_value():
                raise config.entry_error(entry, f"specify {name} (regex)")
            try:
                patterns.append(re.compile(entry.value))
            except re.error as exc:
                raise config.entry_error(
                    entry, f"invalid {name} regular expression"
                ) from exc
        return patterns

    def _hide_fields(self, config: ConfigFile, section: ConfigSection) -> list[str]:
        fields: list[str] = []
        entry = section.get("hide")
        if entry is not None:
            self._valued(config, entry)
            fields = [part for part in entry.value.split(",") if part]
            for name in fields:
                if name not in HIDE_FIELDS:
                    raise config.entry_error(entry, f"unknown option hide {name}")
        for name in sorted(ARG_TYPES):
            if name.startswith("hide-") and ARG_TYPES[name] is ArgType.BOOL:
                if section.get_bool(name):
                    fields.append(name[len("hide-"):])
        return fields

    def _apply_hide(self, fields: list[str]) -> None:
        for name in fields:
            if name == "mouse":
                self.hide_mouse = True
                self.hide_progress = True
            elif name in HIDE_FIELDS:
                setattr(self, f"hide_{name}", True)

    # -- import ----------------------------------------------------------

    def import_section(
        self, config: ConfigFile, section: ConfigSection | None = None
    ) -> None:
        """Reset to defaults, then apply and validate the given section.

        Without a section the first one named after the default section is
        used, and created if the file has none. Raises SettingsError for a
        missing, malformed or out of range value.
        """
        self.reset()

        if section is None:
            section = config.section(self.default_section_name)
        if section is None:
            section = config.add_section(DEFAULT_SECTION)

        self._apply_hide(self._hide_fields(config, section))

        if (entry := section.get("date-format")) is not None:
            self.date_format = self._valued(config, entry).value

        if section.get_bool("disable-auto-rotate"):
            self.disable_auto_rotate = True
        if section.get_bool("disable-auto-skip"):
            self.auto_skip_seconds = -1.0
        if section.get_bool("loop"):
            self.loop = True

        if (entry := section.get("git-branch")) is not None:
            self.git_branch = self._valued(config, entry).value

        if section.get_bool("colour-images"):
            self.colour_user_images = True

        if (entry := section.get("crop")) is not None:
            crop = self._valued(config, entry, "specify crop (vertical,horizontal)").value
            if crop == "vertical":
                self.crop_vertical = True
            elif crop == "horizontal":
                self.crop_horizontal = True
            else:
                raise config.invalid_value_error(entry)

        if (entry := section.get("log-format")) is not None:
            self.log_format = self._valued(
                config, entry, "specify log-format (format)"
            ).value
            if self.log_format == "cvs":
                raise config.entry_error(
                    entry, "please use either 'cvs2cl' or 'cvs-exp'"
                )
            if self.log_format not in LOG_FORMATS:
                raise config.invalid_value_error(entry)

        if (entry := section.get("default-user-image")) is not None:
            self.default_user_image = self._valued(
                config, entry, "specify default-user-image (image path)"
            ).value

        if (entry := section.get("user-image-dir")) is not None:
            directory = self._valued(
                config, entry, "specify user-image-dir (directory)"
            ).value
            if not directory.endswith("/"):
                directory += "/"
            self.user_image_dir = directory
            self.user_image_map = load_user_images(directory)

        for name, attr in (
            ("bloom-intensity", "bloom_intensity"),
            ("bloom-multiplier", "bloom_multiplier"),
            ("elasticity", "elasticity"),
        ):
            if (entry := section.get(name)) is not None:
                value = self._valued(config, entry, f"specify {name} (float)").as_float()
                if value <= 0.0:
                    raise config.invalid_value_error(entry)
                setattr(self, attr, value)

        if (entry := section.get("font-size")) is not None:
            self.font_size = self._valued(config, entry, "specify font size").as_int()
            if not 1 <= self.font_size <= 100:
                raise config.invalid_value_error(entry)

        if (entry := section.get("hash-seed")) is not None:
            self.hash_seed = self._valued(
                config, entry, "specify hash seed (integer)"
            ).as_int()

        for name, attr, label in (
            ("font-colour", "font_colour", "font"),
            ("background-colour", "background_colour", "background"),
            ("highlight-colour", "highlight_colour", "highlight"),
        ):
            if (entry := section.get(name)) is not None:
                self._valued(config, entry, f"specify {label} colour (FFFFFF)")
                setattr(self, attr, self._colour(config, entry))

        if (entry := section.get("background-image")) is not None:
            self.background_image = self._valued(
                config, entry, "specify background image (image path)"
            ).value

        if (entry := section.get("title")) is not None:
            self.title = self._valued(config, entry, "specify title").value

        if (entry := section.get("logo")) is not None:
            self.logo = self._valued(config, entry, "specify logo (image path)").value

        if (entry := section.get("logo-offset")) is not None:
            text = self._valued(config, entry, "specify logo-offset (XxY)").value
            offset = parse_rectangle(text)
            if offset is None:
                raise config.invalid_value_error(entry)
            self.logo_offset = (float(offset[0]), float(offset[1]))

        if (entry := section.get("seconds-per-day")) is not None:
            seconds = self._valued(
                config, entry, "specify seconds-per-day (seconds)"
            ).as_float()
            if seconds <= 0.0:
                raise config.invalid_value_error(entry)
            self.days_per_second = 1.0 / seconds

        if (entry := section.get("auto-skip-seconds")) is not None:
            self.auto_skip_seconds = self._valued(
                config, entry, "specify auto-skip-seconds (seconds)"
            ).as_float()
            if self.auto_skip_seconds <= 0.0:
                raise config.invalid_value_error(entry)

        if (entry := section.get("file-idle-time")) is not None:
            text = self._valued(config, entry, "specify file-idle-time (seconds)").value
            idle = float(entry.as_int())
            if idle < 0.0 or (idle == 0.0 and not text.startswith("0")):
                raise config.invalid_value_error(entry)
            self.file_idle_time = _SECONDS_PER_DAY if idle == 0.0 else idle

        if (entry := section.get("user-idle-time")) is not None:
            self.user_idle_time = self._valued(
                config, entry, "specify user-idle-time (seconds)"
            ).as_float()
            if self.user_idle_time < 0.0:
                raise config.invalid_value_error(entry)

        if (entry := section.get("time-scale")) is not None:
            self.time_scale = self._valued(
                config, entry, "specify time-scale (scale)"
            ).as_float()
            if self.time_scale <= 0.0 or self.time_scale > 4.0:
                raise config.entry_error(entry, "time-scale outside of range 0.0 - 4.0")

        if (entry := section.get("start-position")) is not None:
            self._valued(config, entry, "specify start-position (float,random)")
            if entry.value == "random":
                self.start_position = random.randrange(1000) / 1000.0
            else:
                self.start_position = entry.as_float()
                if not 0.0 < self.start_position < 1.0:
                    raise config.entry_error(
                        entry,
                        "start-position outside of range 0.0 - 1.0 (non-inclusive)",
                    )

        if (entry := section.get("stop-position")) is not None:
            self.stop_position = self._valued(
                config, entry, "specify stop-position (float)"
            ).as_float()
            if not 0.0 < self.stop_position <= 1.0:
                raise config.entry_error(
                    entry, "stop-position outside of range 0.0 - 1.0 (inclusive)"
                )

        if (entry := section.get("stop-at-time")) is not None:
            self.stop_at_time = self._valued(
                config, entry, "specify stop-at-time (seconds)"
            ).as_float()
            if self.stop_at_time <= 0.0:
                raise config.invalid_value_error(entry)

        if section.get_bool("key"):
            self.show_key = True
        if section.get_bool("ffp"):
            self.ffp = True
        if section.get_bool("realtime"):
            self.days_per_second = 1.0 / _SECONDS_PER_DAY
        if section.get_bool("dont-stop"):
            self.dont_stop = True
        if section.get_bool("stop-at-end"):
            self.stop_at_end = True
        # Accepted for compatibility; it has no effect.
        if section.get_bool("stop-on-idle"):
            self.stop_on_idle = True

        if (entry := section.get("max-files")) is not None:
            self.max_files = self._valued(
                config, entry, "specify max-files (number)"
            ).as_int()
            if self.max_files < 0 or (self.max_files == 0 and entry.value != "0"):
                raise config.invalid_value_error(entry)

        if (entry := section.get("max-file-lag")) is not None:
            self.max_file_lag = self._valued(
                config, entry, "specify max-file-lag (seconds)"
            ).as_float()
            if self.max_file_lag == 0.0:
                raise config.invalid_value_error(entry)

        if (entry := section.get("user-friction")) is not None:
            friction = self._valued(
                config, entry, "specify user-friction (seconds)"
            ).as_float()
            if friction <= 0.0:
                raise config.invalid_value_error(entry)
            self.user_friction = 1.0 / friction

        if (entry := section.get("user-scale")) is not None:
            self.user_scale = self._valued(
                config, entry, "specify user-scale (scale)"
            ).as_float()
            if not 0.0 < self.user_scale <= 100.0:
                raise config.invalid_value_error(entry)

        if (entry := section.get("max-user-speed")) is not None:
            self.max_user_speed = self._valued(
                config, entry, "specify max-user-speed (units)"
            ).as_float()
            if self.max_user_speed <= 0.0:
                raise config.invalid_value_error(entry)

        if section.get_bool("highlight-users") or section.get_bool(
            "highlight-all-users"
        ):
            self.highlight_all_users = True
        if section.get_bool("highlight-dirs"):
            self.highlight_dirs = True

        if (entry := section.get("camera-mode")) is not None:
            self.camera_mode = self._valued(
                config, entry, "specify camera-mode (overview,track)"
            ).value
            if self.camera_mode not in CAMERA_MODES:
                raise config.invalid_value_error(entry)

        if (entry := section.get("padding")) is not None:
            self.padding = self._valued(config, entry, "specify padding (float)").as_float()
            if not 0.0 < self.padding < 2.0:
                raise config.invalid_value_error(entry)

        for entry in section.get_all("highlight-user"):
            self._valued(config, entry, "specify highlight-user (user)")
            self.highlight_users.append(entry.value)

        for entry in section.get_all("follow-user"):
            self._valued(config, entry, "specify follow-user (user)")
            self.follow_users.append(entry.value)

        if section.get_bool("file-extensions"):
            self.file_extensions = True

        self.file_filters = self._regexes(config, section, "file-filter")
        self.user_filters = self._regexes(config, section, "user-filter")

        if section.has_value("path"):
            entry = section.get("path")
            assert entry is not None
            self.path = entry.value

        if self.path == "-" and not self.log_format:
            raise SettingsError("log-format required when reading from STDIN")

        if self.path.endswith(("/", "\\")):
            self.path = self.path[:-1]

    def is_file_filtered(self, path: str) -> bool:
        """Whether a file path matches any file filter."""
        return any(p.search(path) for p in self.file_filters)

    def is_user_filtered(self, username: str) -> bool:
        """Whether a user name matches any user filter."""
        return any(p.search(username) for p in self.user_filters)


def default_image_dir_exists(settings: GourceSettings) -> bool:
    """Whether the configured user image directory exists."""
    return bool(settings.user_image_dir) and Path(settings.user_image_dir).is_dir()