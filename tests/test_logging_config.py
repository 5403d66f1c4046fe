"""
Tests for logging configuration.
"""
from unittest.mock import patch, MagicMock
from compiler_version.logging_config import setup_logging


class TestLoggingConfig:
    """Test logging configuration."""

    @patch('compiler_version.logging_config.logger')
    def test_setup_logging_default(self, mock_logger):
        """Test setup logging with default level."""
        setup_logging()

        mock_logger.remove.assert_called_once()
        mock_logger.add.assert_called_once()
        assert mock_logger.add.call_args.kwargs['level'] == 'INFO'

    @patch('compiler_version.logging_config.logger')
    def test_setup_logging_debug(self, mock_logger):
        """Test setup logging with DEBUG level."""
        setup_logging('DEBUG')

        assert mock_logger.add.call_args.kwargs['level'] == 'DEBUG'

    @patch('compiler_version.logging_config.logger')
    def test_setup_logging_with_console(self, mock_logger):
        """Messages are routed through the given console."""
        mock_console = MagicMock()

        setup_logging('INFO', console=mock_console)

        sink = mock_logger.add.call_args.args[0]
        sink('hello')
        mock_console.print.assert_called_once_with('hello', end='', markup=False, highlight=False)
