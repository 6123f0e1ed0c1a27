import pytest

from galaxy42.debuglog import (
    DebugLevel,
    debug_level,
    emit,
    set_debug_level,
    shorten_file,
)


@pytest.fixture(autouse=True)
def restore_level():
    saved = debug_level()
    set_debug_level(100, "test", True)
    yield
    set_debug_level(saved, "restore", True)


def test_warn_is_shown_at_default_level(capsys):
    assert emit(DebugLevel.WARN, "careful") is True
    assert "careful" in capsys.readouterr().err


def test_info_is_hidden_at_default_level(capsys):
    assert emit(DebugLevel.INFO, "quiet info") is False
    assert capsys.readouterr().err == ""


def test_lowering_level_shows_info(capsys):
    set_debug_level(DebugLevel.DBG3, "more output", True)
    assert debug_level() == DebugLevel.DBG3
    assert emit(DebugLevel.INFO, "now visible") is True
    assert "now visible" in capsys.readouterr().err


def test_announcement_when_lowering(capsys):
    set_debug_level(10, "debugging")
    err = capsys.readouterr().err
    assert "Setting debug level to 10 because: debugging" in err


def test_announcement_before_raising(capsys):
    set_debug_level(10, "first", True)
    set_debug_level(100, "back")
    err = capsys.readouterr().err
    assert "because: back" in err
    assert debug_level() == 100


def test_no_announcement_when_hidden(capsys):
    set_debug_level(200, "silence")
    assert capsys.readouterr().err == ""
    assert debug_level() == 200


def test_quiet_prints_nothing(capsys):
    set_debug_level(10, "shh", True)
    assert capsys.readouterr().err == ""


@pytest.mark.parametrize("level", [-1, 256])
def test_level_out_of_range(level):
    with pytest.raises(ValueError):
        set_debug_level(level, "bad", True)


def test_shorten_file_after_project_dir():
    assert shorten_file("/home/user/antinet/src/main.cpp") == "/src/main.cpp"


@pytest.mark.parametrize("name", ["src/main.cpp", "main.cpp", "antinet", "a/b/"])
def test_shorten_file_unmatched(name):
    assert shorten_file(name) == name


def test_shorten_result_is_suffix():
    name = "x/antinet/y/z.hpp"
    result = shorten_file(name)
    assert name.endswith(result)
    assert result.startswith("/")