import pytest

from repovis.options import (
    ArgType,
    OptionError,
    arg_type,
    command_line_option,
    help_text,
    is_command_line_only,
    log_command,
    resolve_alias,
)


@pytest.mark.parametrize(
    "short, full",
    [
        ("p", "start-position"),
        ("a", "auto-skip-seconds"),
        ("?", "help"),
        ("H", "extended-help"),
        ("disable-bloom", "hide-bloom"),
        ("highlight-all-users", "highlight-users"),
    ],
)
def test_resolve_alias(short, full):
    assert resolve_alias(short) == full


def test_resolve_alias_passes_unknown_names_through():
    assert resolve_alias("title") == "title"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("loop", ArgType.BOOL),
        ("elasticity", ArgType.FLOAT),
        ("font-size", ArgType.INT),
        ("file-filter", ArgType.MULTI_VALUE),
        ("title", ArgType.STRING),
        ("b", ArgType.STRING),
        ("disable-progress", ArgType.BOOL),
    ],
)
def test_arg_type(name, expected):
    assert arg_type(name) is expected


def test_arg_type_unknown():
    assert arg_type("no-such-option") is None


def test_command_line_only():
    assert is_command_line_only("save-config")
    assert is_command_line_only("h")
    assert not is_command_line_only("title")


def test_help_text_basic_and_extended():
    basic = help_text(False)
    extended = help_text(True)
    assert "Extended Options:" not in basic
    assert "To see the full command line options use '-H'" in basic
    assert "Extended Options:" in extended
    assert "'-H'" not in extended
    assert "--hash-seed SEED" in extended


def test_svn_log_command():
    assert log_command("svn") == "svn log -r 1:HEAD --xml --verbose --quiet"


def test_hg_log_command_uses_style_file(tmp_path):
    command = log_command("hg", str(tmp_path))
    assert command.startswith("hg log -r 0:tip --style \"")
    assert str(tmp_path / "gource.style") in command


def test_cvs_log_command_rejected():
    with pytest.raises(OptionError, match="please use either 'cvs2cl' or 'cvs-exp'"):
        log_command("cvs")


def test_unknown_log_command_rejected():
    with pytest.raises(OptionError):
        log_command("rcs")


@pytest.mark.parametrize("name", ["load-config", "save-config", "output-custom-log"])
def test_path_options_return_value(name):
    assert command_line_option(name, "my.conf") == (name, "my.conf")


@pytest.mark.parametrize("name", ["load-config", "save-config", "output-custom-log"])
def test_path_options_require_value(name):
    with pytest.raises(OptionError, match=f"invalid {name} value"):
        command_line_option(name, "")


def test_help_option_returns_text():
    kind, text = command_line_option("h")
    assert kind == "help"
    assert text == help_text(False)
    assert command_line_option("extended-help")[1] == help_text(True)


def test_log_command_options():
    assert command_line_option("svn-log-command") == ("log-command", log_command("svn"))
    assert command_line_option("log-command", "svn") == ("log-command", log_command("svn"))


def test_log_command_option_cvs():
    with pytest.raises(OptionError, match="cvs2cl"):
        command_line_option("log-command", "cvs")


def test_other_option_is_invalid():
    with pytest.raises(OptionError, match="invalid title value"):
        command_line_option("title", "x")