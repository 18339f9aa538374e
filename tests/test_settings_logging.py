import logging
from dataclasses import FrozenInstanceError

import pytest

from symbolic_calculus import (
    CalculusSettings, get_settings, configure_settings, reset_settings,
    LogLevel, get_logger, set_log_level, configure_logging, parse, simplify, simplify_fully
)


def test_defaults():
    settings = get_settings()
    assert settings.epsilon == 1e-9
    assert settings.max_nesting_depth == 100
    assert settings.max_simplify_passes == 32
    assert settings.number_precision is None


@pytest.mark.parametrize("overrides, error", [
    ({"epsilon": -1.0}, ValueError),
    ({"epsilon": "small"}, TypeError),
    ({"max_nesting_depth": 0}, ValueError),
    ({"max_simplify_passes": 1.5}, ValueError),
    ({"number_precision": -2}, ValueError),
])
def test_validation(overrides, error):
    with pytest.raises(error):
        CalculusSettings(**overrides)


def test_configure_and_reset():
    configure_settings(epsilon=0.5)
    assert get_settings().epsilon == 0.5
    equation = parse("x + 0.25")
    simplify(equation)
    assert equation.to_string() == "x"

    reset_settings()
    assert get_settings() == CalculusSettings()


def test_settings_are_immutable():
    with pytest.raises(FrozenInstanceError):
        get_settings().epsilon = 1.0


def test_silent_by_default(capsys):
    simplify(parse("x * 1"))
    assert capsys.readouterr().err == ""


def test_detailed_logging_reports_steps(caplog):
    logger = configure_logging(log_level=LogLevel.DETAILED)
    logger.logger.propagate = True
    with caplog.at_level(logging.DEBUG, logger="symbolic_calculus"):
        simplify(parse("x * 1"))
    assert any("Simplified" in record.getMessage() for record in caplog.records)
    assert not any("Dumping tree" in record.getMessage() for record in caplog.records)


def test_verbose_logging_dumps_trees(caplog):
    logger = configure_logging(log_level=LogLevel.VERBOSE)
    logger.logger.propagate = True
    with caplog.at_level(logging.DEBUG, logger="symbolic_calculus"):
        parse("sin(x)")
    messages = [record.getMessage() for record in caplog.records]
    assert "Dumping tree parsed equation:" in messages
    assert "      nil" in messages


def test_pass_limit_warning(caplog):
    logger = configure_logging(log_level=LogLevel.MODERATE)
    logger.logger.propagate = True
    with caplog.at_level(logging.DEBUG, logger="symbolic_calculus"):
        simplify_fully(parse("x * 0 + 1"), max_passes=1)
    assert any(record.levelno == logging.WARNING for record in caplog.records)


def test_set_log_level():
    set_log_level(LogLevel.VERBOSE)
    assert get_logger().is_enabled(LogLevel.DETAILED)
    set_log_level(LogLevel.MINIMAL)
    assert not get_logger().is_enabled(LogLevel.DETAILED)


def test_log_to_file(tmp_path):
    path = tmp_path / "calculus.log"
    logger = configure_logging(log_level=LogLevel.DETAILED, log_to_file=True, log_file_path=str(path))
    simplify(parse("x + 0"))
    for handler in logger.logger.handlers:
        handler.flush()
    assert "Simplified" in path.read_text()
