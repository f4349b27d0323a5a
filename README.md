# repovis

`repovis` holds the non-graphical core of an animated repository history
viewer: configuration handling, Mercurial and Subversion log parsing, and
the small pieces of scene logic (file-extension key, position slider, text
boxes, curved edges, pawns) that a renderer drives once per frame.

It uses only the Python standard library and needs Python 3.10 or later.

## What is inside

| Module              | Purpose |
|---------------------|---------|
| `repovis.logs`      | `Commit`, `FileChange`, `MercurialLogParser`, `SvnLogParser`, `mercurial_command`, and `generate_mercurial_log` / `generate_svn_log`, which run `hg` / `svn` on a working copy |
| `repovis.options`   | `ArgType`, `resolve_alias`, `arg_type`, `is_command_line_only`, `help_text`, `log_command`, `command_line_option`, `OptionError` |
| `repovis.config`    | `ConfigFile`, `ConfigSection`, `ConfigEntry`, `SettingsError`, `parse_hex_colour`, `parse_rectangle` |
| `repovis.settings`  | `GourceSettings`: defaults plus validation of a configuration section; `load_user_images` |
| `repovis.shell`     | `SceneSequence` for stepping through several repository sections, `find_config_file`, `apply_path` |
| `repovis.key`       | `FileKey` / `FileKeyEntry`: the sliding, fading file-extension legend |
| `repovis.slider`    | `PositionSlider`: the playback position bar |
| `repovis.textbox`   | `TextBox`: multi-line caption layout kept on screen |
| `repovis.spline`    | `SplineEdge`: quadratic curve between two points, split into quads |
| `repovis.pawn`      | `Pawn`: position, fade-in and name timing of an on-screen item |

Every class exposes positions, sizes, colours and alpha values; none of
them draws anything.

## Parsing a log

```python
from repovis.logs import MercurialLogParser, SvnLogParser

with open("hg.log", encoding="utf-8") as handle:
    for commit in MercurialLogParser(handle):
        print(commit.timestamp, commit.username, len(commit.files))

with open("svn.xml", encoding="utf-8") as handle:
    parser = SvnLogParser(handle)
    first = parser.next_commit()
```

Mercurial logs are read in a one-line-per-file layout
(`timestamp offset|user|action|path`); consecutive lines with the same
timestamp and user form one commit. `mercurial_command(resource_dir)` gives
the `hg log` command that produces it, using a style file named
`gource.style` in `resource_dir`; that style file is not shipped with this
package. Subversion logs are the output of
`svn log -r 1:HEAD --xml --verbose --quiet`. `generate_mercurial_log` and
`generate_svn_log` run those commands for a working copy and return the
log lines, or `None` if the directory is not a working copy or the command
fails.

## Loading settings

```python
from repovis.config import ConfigFile
from repovis.settings import GourceSettings

config = ConfigFile()
section = config.add_section("gource")
section.set("seconds-per-day", "2")
section.set("hide", "date,mouse")

settings = GourceSettings()
settings.import_section(config, section)
```

`ConfigFile.load` / `loads` read `[section]` headers and `name=value`
lines; `save` / `dumps` write them back. Invalid or out-of-range values
raise `repovis.config.SettingsError`. Problems with a command-line-only
option handled by `repovis.options.command_line_option` raise
`repovis.options.OptionError`.

For several repositories, `repovis.shell.SceneSequence` hands out the
settings of each `gource` section in turn, starting over after the last
one unless a video export is in progress.

## What this package does not do

- It has no rendering, window or input handling; a caller supplies text
  measurement and draws from the values the classes expose.
- It has no command-line program and does not parse command-line
  arguments; `options` only describes the options and handles the
  command-line-only ones.
- It reads Mercurial and Subversion logs only. `log_command` gives a
  command for `svn` and `hg`; for `git`, `cvs-exp`, `cvs2cl` and `bzr` it
  raises `OptionError`.

## Tests

The tests use pytest, available through the `test` extra.