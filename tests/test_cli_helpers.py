"""Tests for the clipboard, QR, prompt and logging helpers used by the CLI."""

import logging
import sys

import pytest

from passforge import passforge_cli
from passforge.config import logging_config
from passforge.utils import clipboard_utils, user_input
from passforge.utils.qr_code import secret_qr_text


def test_qr_text_renders_blocks():
    text = secret_qr_text("Tr0ub4dor&3")
    lines = text.splitlines()
    assert len(lines) > 10
    assert any(ch in text for ch in "█▀▄")


def test_qr_requires_secret():
    with pytest.raises(ValueError):
        secret_qr_text("")


def test_copy_without_timeout(monkeypatch):
    copied = []
    monkeypatch.setattr(clipboard_utils.pyperclip, "copy", copied.append)

    assert clipboard_utils.copy_to_clipboard("s3cret", timeout=0, prompt=False)
    assert copied == ["s3cret"]


def test_copy_nothing(monkeypatch):
    monkeypatch.setattr(clipboard_utils.pyperclip, "copy", pytest.fail)
    assert not clipboard_utils.copy_to_clipboard("", prompt=False)


def test_copy_declined(monkeypatch):
    monkeypatch.setattr("builtins.input", lambda _: "n")
    monkeypatch.setattr(clipboard_utils.pyperclip, "copy", pytest.fail)
    assert not clipboard_utils.copy_to_clipboard("s3cret", timeout=0, prompt=True)


def _answers(monkeypatch, *answers):
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda _: next(it))


def test_get_int_reprompts_until_in_range(monkeypatch):
    _answers(monkeypatch, "abc", "99", "12")
    assert user_input.get_int("n: ", low=4, high=64) == 12


def test_get_int_default_and_quit(monkeypatch):
    _answers(monkeypatch, "")
    assert user_input.get_int("n: ", default=16) == 16
    _answers(monkeypatch, "q")
    assert user_input.get_int("n: ") is None


def test_get_choice_words_for_separators(monkeypatch):
    options = ("-", "_", ".", " ", "")
    _answers(monkeypatch, "space")
    assert user_input.get_choice("sep", options, "-") == " "
    _answers(monkeypatch, "none")
    assert user_input.get_choice("sep", options, "-") == ""
    _answers(monkeypatch, "")
    assert user_input.get_choice("sep", options, "-") == "-"


def test_get_yes_no(monkeypatch):
    _answers(monkeypatch, "")
    assert user_input.get_yes_no("q", True)
    _answers(monkeypatch, "n")
    assert not user_input.get_yes_no("q", True)


@pytest.fixture
def clean_root_logger(monkeypatch):
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    yield root
    for handler in root.handlers[:]:
        if handler not in saved_handlers and isinstance(handler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(saved_level)


def test_setup_logging_writes_uncaught_exceptions(tmp_path, clean_root_logger):
    log_path = logging_config.setup_logging(tmp_path)
    assert sys.excepthook is logging_config.log_uncaught_exceptions

    try:
        raise RuntimeError("boom")
    except RuntimeError:
        logging_config.log_uncaught_exceptions(*sys.exc_info())

    for handler in clean_root_logger.handlers:
        handler.flush()
    text = open(log_path, encoding="utf-8").read()
    assert "RuntimeError: boom" in text
    assert "test_cli_helpers.py" in text


def test_setup_logging_only_once(tmp_path, clean_root_logger):
    assert logging_config.setup_logging(tmp_path) is not None
    assert logging_config.setup_logging(tmp_path) is None


def test_batch_menu_copies_all_rows(monkeypatch):
    copied = []
    monkeypatch.setattr(passforge_cli, "get_int", lambda *a, **k: 3)
    monkeypatch.setattr(passforge_cli, "ask_charset_policy",
                        lambda: passforge_cli.CharsetPolicy(length=10))
    monkeypatch.setattr("builtins.input", lambda _: "c")
    monkeypatch.setattr(passforge_cli, "copy_to_clipboard",
                        lambda text, **kwargs: copied.append((text, kwargs)))

    passforge_cli.batch_menu()

    assert len(copied) == 1
    text, kwargs = copied[0]
    lines = text.split("\n")
    assert len(lines) == 3
    assert all(len(line) == 10 for line in lines)
    assert kwargs == {"prompt": False}
