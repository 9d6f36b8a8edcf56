import io
import re

import pytest

from nodekit import console
from nodekit.console import Color, Console

_ESCAPE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def plain(text):
    return _ESCAPE.sub("", text)


@pytest.fixture
def streams():
    return io.StringIO(), io.StringIO()


def test_log_joins_with_spaces_and_newline(streams):
    out, errs = streams
    c = Console(out, errs)
    written = c.log("a", 1)
    assert out.getvalue() == "a 1 \n"
    assert written == len(out.getvalue())


def test_pout_has_no_newline(streams):
    out, errs = streams
    c = Console(out, errs)
    written = c.pout("x", "y")
    assert out.getvalue().split(" ") == ["x", "y"]
    assert written == len(out.getvalue())


def test_err_goes_to_stderr(streams):
    out, errs = streams
    c = Console(out, errs)
    c.err("bad")
    assert out.getvalue() == ""
    assert errs.getvalue().startswith("bad")
    assert errs.getvalue().endswith("\n")


def test_style_applies_to_next_write_only(streams):
    out, errs = streams
    c = Console(out, errs)
    c.foreground(Color.RED | Color.BOLD)
    c.pout("first")
    styled = out.getvalue()
    assert styled.startswith("\x1b[")
    assert plain(styled) == "first"
    c.pout("second")
    assert out.getvalue()[len(styled):] == "second"


def test_reset_drops_pending_style(streams):
    out, errs = streams
    c = Console(out, errs)
    c.background(Color.BLUE)
    c.underscore()
    c.inverse()
    c.reset()
    c.pout("text")
    assert out.getvalue() == "text"


@pytest.mark.parametrize("bad", [8, 0x20, -1])
def test_unknown_color_raises(streams, bad):
    c = Console(*streams)
    with pytest.raises(ValueError):
        c.foreground(bad)
    with pytest.raises(ValueError):
        c.background(bad)


@pytest.mark.parametrize(
    "method, prefix",
    [
        ("warning", "WARNING: "),
        ("success", "SUCCESS: "),
        ("error", "ERROR: "),
        ("done", "DONE: "),
        ("info", "INFO: "),
    ],
)
def test_tagged_messages(streams, method, prefix):
    out, errs = streams
    c = Console(out, errs)
    written = getattr(c, method)("disk", "full")
    text = plain(out.getvalue())
    assert text.startswith(prefix)
    assert "disk full" in text
    assert written == len(text) - len(prefix)
    assert "\x1b[" in out.getvalue()


def test_scan_reads_one_line(streams):
    out, errs = streams
    c = Console(out, errs, io.StringIO("hello\nworld\n"))
    assert c.scan() == "hello"
    assert c.scan() == "world"


def test_wait_reads_one_character(streams):
    out, errs = streams
    c = Console(out, errs, io.StringIO("xy"))
    assert c.wait() == "x"
    assert c.wait() == "y"


def test_gotoxy_and_clear_write_escapes(streams):
    out, errs = streams
    c = Console(out, errs)
    c.gotoxy(0, 0)
    c.clear()
    assert out.getvalue().startswith("\x1b[")
    assert plain(out.getvalue()) == ""


def test_module_functions_use_sys_streams(capsys):
    console.log("hi")
    console.err("oops")
    console.info("note")
    captured = capsys.readouterr()
    assert captured.out.startswith("hi")
    assert "INFO: " in plain(captured.out)
    assert captured.err.startswith("oops")