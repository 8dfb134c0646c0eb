"""
Tests for configure_logging and the error counter.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from pixarch_installer.logging_utils import FALLBACK_LOG_NAME, configure_logging


def test_error_counter_counts_error_records(tmp_path: Path) -> None:
    setup = configure_logging(str(tmp_path / "install.log"), also_console=False)
    log = logging.getLogger("pixarch_installer.test")

    log.info("fine")
    log.warning("hmm")
    log.error("bad")
    log.critical("worse")

    assert setup.errors.count == 2


def test_log_file_gets_formatted_records(tmp_path: Path) -> None:
    path = tmp_path / "logs" / "install.log"
    setup = configure_logging(str(path), also_console=False)
    logging.getLogger("pixarch_installer.test").info("hello")

    assert setup.log_path == str(path)
    text = path.read_text(encoding="utf-8")
    assert "[INFO] hello" in text


def test_debug_only_when_verbose(tmp_path: Path) -> None:
    configure_logging(str(tmp_path / "quiet.log"), also_console=False)
    logging.getLogger("pixarch_installer.test").debug("hidden")
    configure_logging(str(tmp_path / "verbose.log"), verbose=True, also_console=False)
    logging.getLogger("pixarch_installer.test").debug("shown")

    assert "hidden" not in (tmp_path / "quiet.log").read_text(encoding="utf-8")
    assert "[DEBUG] shown" in (tmp_path / "verbose.log").read_text(encoding="utf-8")


def test_reconfigure_replaces_previous_handlers(tmp_path: Path) -> None:
    first = configure_logging(str(tmp_path / "a.log"), also_console=False)
    second = configure_logging(str(tmp_path / "b.log"), also_console=False)
    logging.getLogger("pixarch_installer.test").error("once")

    assert first.errors.count == 0
    assert second.errors.count == 1
    assert "once" not in (tmp_path / "a.log").read_text(encoding="utf-8")


def test_quiet_console_shows_errors_only(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    configure_logging(str(tmp_path / "install.log"), quiet=True)
    log = logging.getLogger("pixarch_installer.test")
    log.info("chatter")
    log.error("problem")

    err = capsys.readouterr().err
    assert "chatter" not in err
    assert "problem" in err
    assert "chatter" in (tmp_path / "install.log").read_text(encoding="utf-8")


def test_unwritable_log_path_falls_back_to_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    setup = configure_logging(str(blocker / "install.log"), also_console=False)

    assert setup.log_path == str(tmp_path / FALLBACK_LOG_NAME)
    assert setup.requested_path == str(blocker / "install.log")
