"""Command-line option tables, help text and command-line-only options."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from repovis.logs import SVN_LOG_COMMAND, mercurial_command

VERSION = "0.36"

DEFAULT_SECTION = "gource"


class ArgType(Enum):
    """How the value of an option is read."""

    BOOL = "bool"
    FLOAT = "float"
    INT = "int"
    MULTI_VALUE = "multi-value"
    STRING = "string"


class OptionError(ValueError):
    """An option was given a value that cannot be used."""


_ALIASES = {
    "p": "start-position",
    "a": "auto-skip-seconds",
    "s": "seconds-per-day",
    "t": "stop-at-time",
    "i": "file-idle-time",
    "e": "elasticity",
    "h": "help",
    "?": "help",
    "H": "extended-help",
    "b": "background-colour",
    "c": "time-scale",
    "background": "background-colour",
    "disable-bloom": "hide-bloom",
    "disable-progress": "hide-progress",
    "highlight-all-users": "highlight-users",
}

_COMMAND_LINE_ONLY = frozenset(
    {
        "help",
        "extended-help",
        "log-command",
        "git-log-command",
        "cvs-exp-command",
        "cvs2cl-command",
        "hg-log-command",
        "bzr-log-command",
        "svn-log-command",
        "load-config",
        "save-config",
        "output-custom-log",
    }
)

_BOOL_ARGS = (
    "help", "extended-help", "stop-on-idle", "stop-at-end", "dont-stop", "loop",
    "realtime", "colour-images", "hide-date", "hide-files", "hide-users",
    "hide-tree", "hide-usernames", "hide-filenames", "hide-dirnames",
    "hide-progress", "hide-bloom", "hide-mouse", "hide-root", "highlight-users",
    "highlight-dirs", "file-extensions", "key", "ffp", "disable-auto-rotate",
    "disable-auto-skip", "git-log-command", "cvs-exp-command", "cvs2cl-command",
    "svn-log-command", "hg-log-command", "bzr-log-command",
)

_FLOAT_ARGS = (
    "bloom-intensity", "bloom-multiplier", "elasticity", "seconds-per-day",
    "auto-skip-seconds", "stop-at-time", "max-user-speed", "user-friction",
    "padding", "time-scale",
)

_INT_ARGS = ("max-files", "font-size", "hash-seed")

_MULTI_ARGS = ("user-filter", "file-filter", "follow-user", "highlight-user")

_STRING_ARGS = (
    "background-image", "logo", "logo-offset", "log-command", "load-config",
    "save-config", "output-custom-log", "path", "background-colour",
    "file-idle-time", "user-image-dir", "default-user-image", "date-format",
    "log-format", "git-branch", "start-position", "stop-position", "crop",
    "hide", "max-file-lag", "user-scale", "camera-mode", "title", "font-colour",
    "highlight-colour",
)

ARG_TYPES: dict[str, ArgType] = {
    **{name: ArgType.BOOL for name in _BOOL_ARGS},
    **{name: ArgType.FLOAT for name in _FLOAT_ARGS},
    **{name: ArgType.INT for name in _INT_ARGS},
    **{name: ArgType.MULTI_VALUE for name in _MULTI_ARGS},
    **{name: ArgType.STRING for name in _STRING_ARGS},
}

_BASIC_HELP = """\
Usage: repovis [OPTIONS] [PATH]

Options:
  -h, --help                       Help

  -WIDTHxHEIGHT, --viewport        Set viewport size
  -f, --fullscreen                 Fullscreen
      --multi-sampling             Enable multi-sampling
      --no-vsync                   Disable vsync

  -p, --start-position POSITION    Begin at some position (0.0-1.0 or 'random')
      --stop-position  POSITION    Stop at some position
  -t, --stop-at-time SECONDS       Stop after a specified number of seconds
      --stop-at-end                Stop at end of the log
      --dont-stop                  Keep running after the end of the log
      --loop                       Loop at the end of the log

  -a, --auto-skip-seconds SECONDS  Auto skip to next entry if nothing happens
                                   for a number of seconds (default: 3)
      --disable-auto-skip          Disable auto skip
  -s, --seconds-per-day SECONDS    Speed in seconds per day (default: 10)
      --realtime                   Realtime playback speed
  -c, --time-scale SCALE           Change simuation time scale (default: 1.0)
  -e, --elasticity FLOAT           Elasticity of nodes

  --key                            Show file extension key

  --user-image-dir DIRECTORY       Dir containing images to use as avatars
  --default-user-image IMAGE       Default user image file
  --colour-images                  Colourize user images

  -i, --file-idle-time SECONDS     Time files remain idle (default: 60)

  --max-files NUMBER       Max number of active files (default: 1000)
  --max-file-lag SECONDS   Max time files of a commit can take to appear

  --log-command VCS        Show the VCS log command (git,svn,hg,bzr,cvs2cl)
  --log-format  VCS        Specify the log format (git,svn,hg,bzr,cvs2cl,custom)

  --load-config CONF_FILE  Load a config file
  --save-config CONF_FILE  Save a config file with the current options

  -o, --output-ppm-stream FILE    Output PPM stream to a file ('-' for STDOUT)
  -r, --output-framerate  FPS     Framerate of output (25,30,60)

"""

_EXTENDED_HELP = """\
Extended Options:

  --output-custom-log FILE  Output a custom format log file ('-' for STDOUT).

  -b, --background-colour  FFFFFF    Background colour in hex
      --background-image   IMAGE     Set a background image

  --bloom-multiplier       Adjust the amount of bloom (default: 1.0)
  --bloom-intensity        Adjust the intensity of the bloom (default: 0.75)

  --camera-mode MODE       Camera mode (overview,track)
  --crop AXIS              Crop view on an axis (vertical,horizontal)
  --padding FLOAT          Camera view padding (default: 1.1)

  --disable-auto-rotate    Disable automatic camera rotation

  --date-format FORMAT     Specify display date string (strftime format)

  --font-size SIZE         Font size
  --font-colour FFFFFF     Font colour in hex

  --file-extensions        Show filename extensions only

  --git-branch             Get the git log of a particular branch

  --hide DISPLAY_ELEMENT   bloom,date,dirnames,files,filenames,mouse,progress,
                           root,tree,users,usernames

  --logo IMAGE             Logo to display in the foreground
  --logo-offset XxY        Offset position of the logo

  --title TITLE            Set a title

  --transparent            Make the background transparent

  --user-filter REGEX      Ignore usernames matching this regex
  --file-filter REGEX      Ignore files matching this regex

  --user-friction SECONDS  Time users come to a complete hault (default: 0.67)
  --user-scale SCALE       Change scale of users (default: 1.0)
  --max-user-speed UNITS   Speed users can travel per second (default: 500)

  --follow-user USER       Camera will automatically follow this user
  --highlight-user USER    Highlight the names of a particular user
  --highlight-users        Highlight the names of all users

  --highlight-dirs         Highlight the names of all directories
  --highlight-colour       Font colour for highlighted text

  --hash-seed SEED         Change the seed of hash function

  --path PATH

"""

_PATH_HELP = """\
PATH may be a supported version control directory, a log file, a config
file, or '-' to read STDIN. If ommited, repovis will attempt to generate a log
from the current directory.

"""

_MORE_HELP = "To see the full command line options use '-H'\n\n"

_CVS_MESSAGE = "please use either 'cvs2cl' or 'cvs-exp'"

_LOG_COMMAND_OPTIONS = {
    "git-log-command": "git",
    "cvs-exp-command": "cvs-exp",
    "cvs2cl-command": "cvs2cl",
    "svn-log-command": "svn",
    "hg-log-command": "hg",
    "bzr-log-command": "bzr",
}


def help_text(extended: bool = False) -> str:
    """The usage message, with the extended options when asked for."""
    parts = [f"repovis v{VERSION}\n", _BASIC_HELP]
    if extended:
        parts.append(_EXTENDED_HELP)
    parts.append(_PATH_HELP)
    if not extended:
        parts.append(_MORE_HELP)
    return "".join(parts)


def resolve_alias(name: str) -> str:
    """The full option name for a short or legacy name."""
    return _ALIASES.get(name, name)


def arg_type(name: str) -> ArgType | None:
    """The value type of an option, or None if the option is not known."""
    return ARG_TYPES.get(resolve_alias(name))


def is_command_line_only(name: str) -> bool:
    """Whether an option may only be given on the command line."""
    return resolve_alias(name) in _COMMAND_LINE_ONLY


def log_command(vcs: str, resource_dir: str = "") -> str:
    """The command that writes a log for the given version control system."""
    if vcs == "cvs":
        raise OptionError(_CVS_MESSAGE)
    if vcs == "svn":
        return " ".join(SVN_LOG_COMMAND)
    if vcs == "hg":
        *command, style = mercurial_command(resource_dir or str(Path(".")))
        return " ".join(command) + f' "{style}"'
    if vcs in ("git", "cvs-exp", "cvs2cl", "bzr"):
        raise OptionError(f"no log command available for {vcs}")
    raise OptionError("invalid log-command value")


def command_line_option(
    name: str, value: str = "", resource_dir: str = ""
) -> tuple[str, str]:
    """Handle an option that only works on the command line.

    Returns a pair naming what was asked for and its result: ("help", text),
    ("load-config", path), ("save-config", path), ("output-custom-log", path)
    or ("log-command", command).
    """
    name = resolve_alias(name)

    if name == "help":
        return "help", help_text(False)
    if name == "extended-help":
        return "help", help_text(True)

    if name in ("load-config", "save-config") and value:
        return name, value

    if name == "log-command":
        return "log-command", log_command(value, resource_dir)
    if name in _LOG_COMMAND_OPTIONS:
        return "log-command", log_command(_LOG_COMMAND_OPTIONS[name], resource_dir)

    if name == "output-custom-log" and value:
        return name, value

    raise OptionError(f"invalid {name} value")