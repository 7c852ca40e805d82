"""Tests for ``setup_logging``."""

import logging

from usuarios_api.app.core.logging_config import SERVER_LOGGERS, setup_logging


def bare_root_logger(monkeypatch) -> logging.Logger:
    """Detach every handler from the root logger until the test ends."""
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    sa_logger = logging.getLogger("sqlalchemy.engine")
    monkeypatch.setattr(sa_logger, "level", sa_logger.level)
    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        monkeypatch.setattr(server_logger, "handlers", server_logger.handlers[:])
        monkeypatch.setattr(server_logger, "propagate", server_logger.propagate)
    return root


def test_configures_console_and_file(monkeypatch, tmp_path):
    root = bare_root_logger(monkeypatch)
    logfile = tmp_path / "api.log"

    setup_logging("debug", str(logfile))
    try:
        logging.getLogger("usuarios_api.test").debug("hola")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
    finally:
        for handler in root.handlers:
            handler.close()

    assert "[DEBUG] usuarios_api.test: hola" in logfile.read_text(encoding="utf-8")


def test_is_idempotent(monkeypatch):
    root = bare_root_logger(monkeypatch)

    setup_logging("INFO")
    setup_logging("INFO")

    assert len(root.handlers) == 1


def test_unknown_level_falls_back_to_info(monkeypatch):
    root = bare_root_logger(monkeypatch)

    setup_logging("verbose")

    assert root.level == logging.INFO
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING


def test_server_loggers_use_root_handlers(monkeypatch, tmp_path):
    root = bare_root_logger(monkeypatch)
    access = logging.getLogger("uvicorn.access")
    access.addHandler(logging.NullHandler())
    access.propagate = False
    logfile = tmp_path / "api.log"

    setup_logging("INFO", str(logfile))
    try:
        access.info("GET /api/usuarios 200")
        assert access.handlers == []
        assert access.propagate is True
    finally:
        for handler in root.handlers:
            handler.close()

    assert "[INFO] uvicorn.access: GET /api/usuarios 200" in logfile.read_text(encoding="utf-8")
