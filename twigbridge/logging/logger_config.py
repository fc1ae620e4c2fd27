"""
Logging Configuration
Provides structured logging for the bridge
"""
import logging
import logging.handlers
import json
from typing import Optional
from datetime import datetime

# Attributes every LogRecord carries; anything else came in through extra={}
_RESERVED_RECORD_FIELDS = frozenset([
    'name', 'msg', 'args', 'created', 'filename', 'funcName',
    'levelname', 'levelno', 'lineno', 'module', 'msecs',
    'pathname', 'process', 'processName', 'relativeCreated',
    'thread', 'threadName', 'exc_info', 'exc_text', 'stack_info',
    'taskName', 'message',
])


class JSONFormatter(logging.Formatter):
    """One JSON object per record; extra={...} fields are carried through"""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        if record.stack_info:
            log_data['stack'] = record.stack_info

        # Extra fields passed via extra={...}
        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_FIELDS and key not in log_data:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class LoggerConfig:
    """Builds the bridge's file (and optional console) loggers"""

    @staticmethod
    def setup_logger(
        name: str,
        format_type: str = None,
        max_bytes: int = None,
        backup_count: int = None,
        file_name: Optional[str] = None,
        level: Optional[int] = None,
        console: Optional[bool] = None
    ) -> logging.Logger:
        """
        Attach a rotating storage/logs/<file_name>.log handler to the named logger

        Any handlers already on the logger are closed and replaced, so calling
        this twice does not duplicate output. Unset arguments come from
        defaults.py; level follows APP_ENV and console follows APP_DEBUG.

        Example:
            LoggerConfig.setup_logger('twigbridge', format_type='text')
        """
        from twigbridge.defaults import (
            DEFAULT_LOG_FORMAT,
            DEFAULT_LOG_MAX_BYTES,
            DEFAULT_LOG_BACKUP_COUNT,
        )
        from twigbridge.support import Config, EnvHelper, Storage

        if format_type is None:
            format_type = DEFAULT_LOG_FORMAT
        if max_bytes is None:
            max_bytes = DEFAULT_LOG_MAX_BYTES
        if backup_count is None:
            backup_count = DEFAULT_LOG_BACKUP_COUNT

        if level is None:
            app_env = Config.get('app.APP_ENV', EnvHelper.get('APP_ENV', 'production'))
            level = LoggerConfig.get_level_by_environment(app_env)
        if console is None:
            console = Config.get('app.APP_DEBUG', EnvHelper.get_bool('APP_DEBUG', False))

        logger = logging.getLogger(name)
        logger.setLevel(level)

        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        log_file = Storage.logs(f"{file_name or name}.log")
        Storage.ensure_directory(log_file.parent)

        handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )

        if format_type == 'json':
            formatter = JSONFormatter()
        else:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )

        handler.setFormatter(formatter)
        logger.addHandler(handler)

        if console:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        # handlers live on this logger only
        logger.propagate = False

        return logger

    @staticmethod
    def get_level_by_environment(environment: str) -> int:
        """APP_ENV -> level; unknown environments log at INFO"""
        levels = {
            'production': logging.WARNING,
            'staging': logging.INFO,
            'local': logging.DEBUG,
            'development': logging.DEBUG,
            'testing': logging.ERROR,
        }
        return levels.get(str(environment).lower(), logging.INFO)
