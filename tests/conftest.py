import pytest

from symbolic_calculus.logging_system import LogLevel, configure_logging
from symbolic_calculus.settings import reset_settings


@pytest.fixture(autouse=True)
def default_state():
    """Every test starts from default settings and a silent logger"""
    reset_settings()
    configure_logging(log_level=LogLevel.SILENT)
    yield
    reset_settings()
    configure_logging(log_level=LogLevel.SILENT)
