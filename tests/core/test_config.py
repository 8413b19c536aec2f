"""Unit tests for src/core/config.py"""

from unittest.mock import patch

from src.core import config


def test_defaults() -> None:
    """Without environment overrides, a game is 10 minutes per side, ticking every second."""
    assert config.CLOCK_SECONDS == 600
    assert config.TICK_SECONDS == 1.0


def test_configure_logging() -> None:
    with patch("src.core.config.logging.basicConfig") as mock_basic_config:
        config.configure_logging("DEBUG")
        mock_basic_config.assert_called_once_with(
            level="DEBUG", format=config.LOG_FORMAT
        )
