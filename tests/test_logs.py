import pytest

from repovis.logs import (
    Commit,
    FileChange,
    MercurialLogParser,
    SvnLogParser,
    generate_mercurial_log,
    generate_svn_log,
    mercurial_command,
)


def test_commit_add_file():
    commit = Commit(timestamp=5, username="bob")
    commit.add_file("a.txt", "M")
    assert commit.files == [FileChange("a.txt", "M")]


def test_mercurial_command_uses_style(tmp_path):
    command = mercurial_command(str(tmp_path))
    assert command[:4] == ["hg", "log", "-r", "0:tip"]
    assert command[-2] == "--style"
    assert command[-1] == str(tmp_path / "gource.style")


def test_generate_mercurial_log_without_repo(tmp_path):
    assert generate_mercurial_log(str(tmp_path), str(tmp_path)) is None


def test_generate_svn_log_without_working_copy(tmp_path):
    assert generate_svn_log(str(tmp_path)) is None


def test_hg_groups_by_timestamp_and_user():
    lines = [
        "1000 0|alice|A|src/a.c\n",
        "1000 0|alice|M|src/b.c\n",
        "2000 -3600|bob|D|src/a.c\n",
    ]
    commits = list(MercurialLogParser(lines))
    assert len(commits) == 2
    assert commits[0].timestamp == 1000
    assert commits[0].username == "alice"
    assert commits[0].files == [FileChange("src/a.c", "A"), FileChange("src/b.c", "M")]
    assert commits[1].username == "bob"
    assert commits[1].files == [FileChange("src/a.c", "D")]


def test_hg_missing_action_defaults_to_add():
    parser = MercurialLogParser(["42 0|carol||docs/readme"])
    commit = parser.next_commit()
    assert commit.files == [FileChange("docs/readme", "A")]


def test_hg_skips_garbage_lines():
    lines = ["not a log line", "7 0|dave|M|x.py"]
    commits = list(MercurialLogParser(lines))
    assert [c.username for c in commits] == ["dave"]


def test_hg_empty_input():
    assert list(MercurialLogParser([])) == []
    assert MercurialLogParser([]).next_commit() is None


SVN_LOG = """<?xml version="1.0"?>
<log>
<logentry
   revision="1">
<author>alice</author>
<date>2010-01-01T00:00:00.000000Z</date>
<paths>
<path
   kind="file"
   action="A">/trunk/main.c</path>
<path
   kind="dir"
   action="A">/trunk</path>
<path
   kind="dir"
   action="D">/old</path>
<path>/noaction.c</path>
</paths>
</logentry>
<logentry
   revision="2">
<author></author>
<date>2010-01-02T00:00:00.000000Z</date>
</logentry>
</log>
""".splitlines()


def test_svn_parses_entries():
    commits = list(SvnLogParser(SVN_LOG))
    assert len(commits) == 2
    first = commits[0]
    assert first.username == "alice"
    assert first.timestamp == 1262304000
    assert first.files == [FileChange("/trunk/main.c", "A"), FileChange("/old/", "D")]


def test_svn_empty_author_and_no_paths():
    commits = list(SvnLogParser(SVN_LOG))
    second = commits[1]
    assert second.username == "Unknown"
    assert second.files == []
    assert second.timestamp - commits[0].timestamp == 86400


def test_svn_incomplete_entry():
    lines = ["<logentry revision=\"1\">", "<date>2010-01-01T00:00:00Z</date>"]
    assert SvnLogParser(lines).next_commit() is None


def test_svn_rejects_unrelated_text():
    assert list(SvnLogParser(["hello", "world"])) == []


@pytest.mark.parametrize("date", ["", "yesterday"])
def test_svn_bad_date(date):
    lines = ["<logentry>", f"<date>{date}</date>", "</logentry>"]
    assert SvnLogParser(lines).next_commit() is None