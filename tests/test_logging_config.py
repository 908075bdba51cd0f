import logging
import sys

from dts_lint.logging_config import get_logger, setup_logging


def test_setup_logging_default(monkeypatch):
    """Test default logging setup."""
    monkeypatch.delenv("DTS_LINT_LOG_LEVEL", raising=False)
    setup_logging()
    logger = get_logger(__name__)
    assert logger.getEffectiveLevel() == logging.WARNING


def test_setup_logging_verbose():
    """Test verbose logging setup."""
    setup_logging(verbose=True)
    logger = get_logger(__name__)
    assert logger.getEffectiveLevel() == logging.INFO


def test_setup_logging_quiet():
    """Test quiet logging setup."""
    setup_logging(quiet=True)
    logger = get_logger(__name__)
    assert logger.getEffectiveLevel() == logging.ERROR


def test_setup_logging_replaces_handlers():
    """Test repeated setup leaves a single stderr handler."""
    setup_logging()
    setup_logging(verbose=True)
    root = logging.getLogger("dts_lint")
    assert len(root.handlers) == 1
    assert root.handlers[0].stream is sys.stderr
    assert root.propagate is False


def test_get_logger():
    """Test getting named logger."""
    logger = get_logger("test.module")
    assert logger.name == "dts_lint.test.module"


def test_get_logger_keeps_package_prefix():
    """Test module names already under the package are not prefixed twice."""
    logger = get_logger("dts_lint.orchestrator")
    assert logger.name == "dts_lint.orchestrator"


def test_log_level_from_environment(monkeypatch):
    """Test DTS_LINT_LOG_LEVEL overrides the flags."""
    monkeypatch.setenv("DTS_LINT_LOG_LEVEL", "debug")
    setup_logging(quiet=True)
    assert get_logger("orchestrator").getEffectiveLevel() == logging.DEBUG


def test_invalid_log_level_ignored(monkeypatch):
    """Test an unknown level name falls back to the flags."""
    monkeypatch.setenv("DTS_LINT_LOG_LEVEL", "chatty")
    setup_logging(verbose=True)
    assert get_logger("orchestrator").getEffectiveLevel() == logging.INFO


def test_verbose_format_names_module():
    """Test verbose output includes the logger name."""
    setup_logging(verbose=True)
    record = logging.LogRecord("dts_lint.orchestrator", logging.INFO, __file__, 1, "Testing", None, None)
    formatted = logging.getLogger("dts_lint").handlers[0].format(record)
    assert formatted == "INFO [dts_lint.orchestrator] Testing"
