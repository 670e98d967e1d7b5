import subprocess

import pytest

from utils.selection import fetch_selection, read_selection_buffer

pytestmark = pytest.mark.unit


def test_primary_selection_wins_and_clipboard_is_not_read(fake_runner):
    runner = fake_runner(primary=(0, b"bird\n"), clipboard=(0, b"clipboard text"))

    assert fetch_selection(runner=runner) == "bird"
    assert runner.calls == [["wl-paste", "--primary"]]


def test_blank_primary_falls_back_to_clipboard(fake_runner):
    runner = fake_runner(primary=(0, b"   \n"), clipboard=(0, b"  copied  "))

    assert fetch_selection(runner=runner) == "copied"
    assert runner.calls == [["wl-paste", "--primary"], ["wl-paste"]]


def test_failed_primary_read_falls_back_to_clipboard(fake_runner):
    runner = fake_runner(primary=(1, b"No selection"), clipboard=(0, b"copied"))

    assert fetch_selection(runner=runner) == "copied"


def test_missing_command_yields_empty_selection(fake_runner):
    runner = fake_runner(
        primary=FileNotFoundError("wl-paste"), clipboard=FileNotFoundError("wl-paste")
    )

    assert fetch_selection(runner=runner) == ""


def test_subprocess_error_is_absorbed(fake_runner):
    runner = fake_runner(
        primary=subprocess.SubprocessError("boom"), clipboard=(1, b"")
    )

    assert fetch_selection(runner=runner) == ""


def test_both_buffers_empty(fake_runner):
    assert fetch_selection(runner=fake_runner()) == ""


def test_read_selection_buffer_decodes_invalid_utf8(fake_runner):
    runner = fake_runner(clipboard=(0, b"caf\xc3\xa9 \xff"))

    text = read_selection_buffer(primary=False, runner=runner)

    assert text.startswith("café")
