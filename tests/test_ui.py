import io
import time

from rustdrill.ui import Spinner, success, warn


class TtyStream(io.StringIO):
    def isatty(self):
        return True


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    warn("boom")
    assert capsys.readouterr().out == "! boom\n"


def test_warn_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    warn("boom")
    out = capsys.readouterr().out
    assert out.startswith("⚠️ ")
    assert out.endswith("boom\n")


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    success("all good")
    assert capsys.readouterr().out == "✓ all good\n"


def test_success_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    success("all good")
    assert capsys.readouterr().out == "✅ all good\n"


def test_spinner_silent_when_not_a_terminal():
    stream = io.StringIO()
    spinner = Spinner("Compiling x...", stream=stream, interval=0.01)
    spinner.set_message("Running x...")
    spinner.finish_and_clear()
    assert stream.getvalue() == ""
    assert spinner.message == "Running x..."
    assert spinner.finished


def test_spinner_draws_and_clears_on_terminal():
    stream = TtyStream()
    spinner = Spinner("Compiling x...", stream=stream, interval=0.01)
    deadline = time.monotonic() + 2
    while "Compiling x..." not in stream.getvalue() and time.monotonic() < deadline:
        time.sleep(0.01)
    spinner.set_message("Running x...")
    assert "Running x..." in stream.getvalue()
    spinner.finish_and_clear()
    value = stream.getvalue()
    assert "Compiling x..." in value
    assert value.endswith("\r\x1b[2K")


def test_spinner_finish_is_idempotent():
    stream = TtyStream()
    spinner = Spinner("Testing x...", stream=stream, interval=0.01)
    spinner.finish_and_clear()
    first = stream.getvalue()
    spinner.finish_and_clear()
    assert stream.getvalue() == first


def test_spinner_context_manager_finishes():
    stream = io.StringIO()
    with Spinner("Testing x...", stream=stream) as spinner:
        assert not spinner.finished
    assert spinner.finished