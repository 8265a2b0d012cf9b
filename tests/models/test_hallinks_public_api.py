import logging

import hallinks
from hallinks.logging import LOGGER_NAME, configure_logging


def test_hallinks_namespace_exports_core_types():
    for name in ["Link", "Links", "LinksBuilder", "RelRegistry", "HalFormatError", "InvalidRelationError"]:
        assert hasattr(hallinks, name)
    assert set(hallinks.__all__) <= set(dir(hallinks))


def test_errors_share_base_class():
    assert issubclass(hallinks.HalFormatError, hallinks.HalLinksError)
    assert issubclass(hallinks.InvalidRelationError, hallinks.HalLinksError)


def test_configure_logging_without_level_stays_silent(monkeypatch):
    monkeypatch.delenv("HALLINKS_LOG_LEVEL", raising=False)
    configure_logging()
    pkg_logger = logging.getLogger(LOGGER_NAME)
    assert all(isinstance(h, logging.NullHandler) for h in pkg_logger.handlers)


def test_configure_logging_from_env_emits_debug_logs(monkeypatch, capsys):
    monkeypatch.setenv("HALLINKS_LOG_LEVEL", "DEBUG")
    configure_logging()
    try:
        hallinks.default_rel_registry().register(hallinks.curi("o", "http://spec.example.org/rels/{rel}"))
        err = capsys.readouterr().err
        assert "DEBUG | hallinks" in err
        assert "Registered CURI o" in err
    finally:
        configure_logging("")


def test_configure_logging_keeps_host_handlers():
    pkg_logger = logging.getLogger(LOGGER_NAME)
    host_handler = logging.NullHandler()
    pkg_logger.addHandler(host_handler)
    try:
        configure_logging("INFO")
        configure_logging("WARNING")
        configure_logging("")
        assert host_handler in pkg_logger.handlers
        assert not any(type(h) is logging.StreamHandler for h in pkg_logger.handlers)
        assert pkg_logger.propagate
    finally:
        pkg_logger.removeHandler(host_handler)
