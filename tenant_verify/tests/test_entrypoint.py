# tests/test_entrypoint.py
import logging
from pathlib import Path

import pytest

import tenant_verify.__main__ as entry
from tenant_verify.utils.logging import logger


@pytest.fixture
def restore_logger():
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def test_bad_config_exits_with_status_1(monkeypatch, capsys, restore_logger):
    started = []
    monkeypatch.setattr(entry.uvicorn, "run", lambda *a, **kw: started.append((a, kw)))
    monkeypatch.setenv("PORT", "80")
    monkeypatch.chdir(Path(entry.__file__).parent)  # no .env here

    with pytest.raises(SystemExit) as ei:
        entry.main()

    assert ei.value.code == 1
    assert started == []
    out = capsys.readouterr().out
    assert "CRITICAL" in out
    assert "Refusing to start" in out


def test_good_config_runs_uvicorn_on_port(monkeypatch, restore_logger):
    started = []
    monkeypatch.setattr(entry.uvicorn, "run", lambda app, **kw: started.append(kw))
    monkeypatch.setattr(entry, "create_app", lambda settings: object())
    monkeypatch.setenv("PORT", "9091")
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.chdir(Path(entry.__file__).parent)

    entry.main()

    assert started == [{"host": "0.0.0.0", "port": 9091, "log_level": "warning"}]
    assert logger.level == logging.WARNING
