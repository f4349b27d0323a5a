"""Readers for Mercurial and Subversion commit logs."""

from __future__ import annotations

import calendar
import re
import subprocess
import xml.etree.ElementTree as ET
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

SVN_LOG_COMMAND = ("svn", "log", "-r", "1:HEAD", "--xml", "--verbose", "--quiet")

_HG_LINE = re.compile(r"^([0-9]+) -?[0-9]+\|([^|]+)\|([ADM]?)\|(.+)$")

_SVN_XML_TAG = re.compile(r"^<\??xml")
_SVN_ENTRY_START = re.compile(r"^<logentry")
_SVN_ENTRY_END = re.compile(r"^</logentry>")
_SVN_TIMESTAMP = re.compile(r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})")


@dataclass
class FileChange:
    """One file touched by a commit, with its action letter (A, M or D)."""

    path: str
    action: str


@dataclass
class Commit:
    """A commit: when, by whom, and which files changed."""

    timestamp: int = 0
    username: str = ""
    files: list[FileChange] = field(default_factory=list)

    def add_file(self, path: str, action: str) -> None:
        self.files.append(FileChange(path, action))


def mercurial_command(resource_dir: str) -> list[str]:
    """The Mercurial log command, using the style file found in resource_dir."""
    style = str(Path(resource_dir) / "gource.style")
    return ["hg", "log", "-r", "0:tip", "--style", style]


def _run(command: list[str], cwd: str | None = None) -> list[str] | None:
    try:
        result = subprocess.run(
            command, cwd=cwd, capture_output=True, text=True, check=False
        )
    except OSError:
        return None
    if result.returncode != 0:
        return None
    return result.stdout.splitlines()


def generate_mercurial_log(directory: str, resource_dir: str) -> list[str] | None:
    """Run Mercurial on a repository directory and return its log lines.

    Returns None if the directory has no .hg or the command fails.
    """
    if not (Path(directory) / ".hg").is_dir():
        return None
    return _run(mercurial_command(resource_dir) + ["-R", str(directory)])


def generate_svn_log(directory: str) -> list[str] | None:
    """Run Subversion in a working copy and return its XML log lines.

    Returns None if the directory has no .svn or the command fails.
    """
    if not (Path(directory) / ".svn").is_dir():
        return None
    return _run(list(SVN_LOG_COMMAND), cwd=str(directory))


class _LineReader:
    """Line source with a one-line pushback slot."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self._pushed: str | None = None
        self.exhausted = False

    def next_line(self) -> str | None:
        if self._pushed is not None:
            line, self._pushed = self._pushed, None
            return line
        try:
            line = next(self._lines)
        except StopIteration:
            self.exhausted = True
            return None
        return line.rstrip("\r\n")

    def push_back(self, line: str) -> None:
        self._pushed = line

    @property
    def done(self) -> bool:
        return self.exhausted and self._pushed is None


class MercurialLogParser:
    """Parses log lines written with the gource Mercurial style.

    Consecutive lines with the same timestamp and user form one commit.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._reader = _LineReader(lines)

    def __iter__(self) -> Iterator[Commit]:
        while not self._reader.done:
            commit = self.next_commit()
            if commit is not None:
                yield commit

    def next_commit(self) -> Commit | None:
        """Read the next commit, or return None if none could be read."""
        commit = Commit()
        while True:
            line = self._reader.next_line()
            if line is None:
                break
            match = _HG_LINE.match(line)
            if match is None:
                break
            timestamp = int(match.group(1))
            username = match.group(2)
            if not commit.files:
                commit.timestamp = timestamp
                commit.username = username
            elif commit.timestamp != timestamp or commit.username != username:
                self._reader.push_back(line)
                break
            commit.add_file(match.group(4), match.group(3) or "A")
        return commit if commit.files else None


class SvnLogParser:
    """Parses the XML output of a verbose Subversion log, one entry at a time."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._reader = _LineReader(lines)

    def __iter__(self) -> Iterator[Commit]:
        while not self._reader.done:
            commit = self.next_commit()
            if commit is not None:
                yield commit

    def _read_entry(self) -> str | None:
        line = self._reader.next_line()
        if line is None:
            return None
        if not _SVN_ENTRY_START.match(line):
            if not _SVN_XML_TAG.match(line):
                return None
            while True:
                line = self._reader.next_line()
                if line is None:
                    return None
                if _SVN_ENTRY_START.match(line):
                    break
        entry = [line]
        while True:
            line = self._reader.next_line()
            if line is None:
                return None
            entry.append(line)
            if _SVN_ENTRY_END.match(line):
                return "\n".join(entry) + "\n"

    def next_commit(self) -> Commit | None:
        """Read the next log entry, or return None if it cannot be parsed."""
        text = self._read_entry()
        if text is None:
            return None
        try:
            entry = ET.fromstring(text)
        except ET.ParseError:
            return None
        if entry.tag != "logentry":
            return None

        date = entry.find("date")
        if date is None:
            return None
        match = _SVN_TIMESTAMP.search(date.text or "")
        if match is None:
            return None
        year, month, day, hour, minute, second = (int(g) for g in match.groups())
        commit = Commit(
            timestamp=calendar.timegm((year, month, day, hour, minute, second, 0, 0, 0))
        )

        author = entry.find("author")
        if author is not None:
            commit.username = author.text or "Unknown"

        paths = entry.find("paths")
        if paths is None:
            return commit

        started = False
        for path in paths:
            if not started:
                if path.tag != "path":
                    continue
                started = True
            action = path.get("action")
            if action is None:
                continue
            kind = path.get("kind")
            is_dir = False
            if kind == "dir":
                if action != "D":
                    continue
                is_dir = True
            name = path.text or ""
            if not name or not action:
                continue
            if is_dir and not name.endswith("/"):
                name += "/"
            commit.add_file(name, action)
        return commit