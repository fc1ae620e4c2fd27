"""
Logging Service Provider
Initializes the bridge's structured logging
"""
from twigbridge.service_provider import ServiceProvider
from twigbridge.logging.logger_config import LoggerConfig
from twigbridge.support import Config
from twigbridge.defaults import DEFAULT_LOG_NAME


class LoggingServiceProvider(ServiceProvider):
    """Logging service provider - sets up structured logging"""

    def register(self):
        """Register logging services"""
        self.setup_bridge_logger()

    def setup_bridge_logger(self):
        """
        Setup the package logger from config/twigbridge.py:

            LOGGING = {
                'enabled': True,
                'format': 'json',
                'file_name': 'twigbridge',
            }
        """
        logging_config = Config.get('twigbridge.LOGGING', {})
        if not logging_config.get('enabled', True):
            return

        LoggerConfig.setup_logger(
            name=DEFAULT_LOG_NAME,
            format_type=logging_config.get('format'),
            file_name=logging_config.get('file_name'),
            max_bytes=logging_config.get('max_bytes'),
            backup_count=logging_config.get('backup_count'),
        )
