"""
Logging Configuration
Handlers and formatters for the records emitted by the view layer
"""
import json
import logging
import logging.handlers
from datetime import datetime
from typing import Optional

from laraview.support.config import Config

TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Level per APP_ENV when LOG_LEVEL is not set, anything else logs at INFO
ENVIRONMENT_LEVELS = {
    'production': logging.WARNING,
    'staging': logging.INFO,
    'development': logging.DEBUG,
    'local': logging.DEBUG,
    'testing': logging.ERROR,
}


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record

    Attributes passed with extra={...} (e.g. extra={'view': 'index'}) are
    added next to the standard keys.
    """

    # Attributes every LogRecord carries; never copied as extra fields
    STANDARD_ATTRIBUTES = frozenset(
        vars(logging.LogRecord('', logging.NOTSET, '', 0, '', (), None))
    ) | {'message', 'asctime'}

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'location': f"{record.module}:{record.funcName}:{record.lineno}",
        }

        payload.update(
            (key, value) for key, value in vars(record).items()
            if key not in self.STANDARD_ATTRIBUTES
        )

        if record.exc_info:
            payload['exception'] = self.formatException(record.exc_info)

        if record.stack_info:
            payload['stack'] = self.formatStack(record.stack_info)

        return json.dumps(payload, default=str)


class LoggerConfig:
    """
    Attaches a single handler to the package logger

    Arguments left out are read from the logging.* settings (LOG_LEVEL,
    LOG_FORMAT, LOG_FILE, LOG_MAX_BYTES, LOG_BACKUP_COUNT).
    """

    @staticmethod
    def setup_logger(
        name: Optional[str] = None,
        format_type: Optional[str] = None,
        level: Optional[int] = None,
        file_name: Optional[str] = None,
        max_bytes: Optional[int] = None,
        backup_count: Optional[int] = None,
    ) -> logging.Logger:
        """
        Configure a logger, replacing handlers from an earlier call

        Example:
            logger = LoggerConfig.setup_logger(format_type='json')
        """
        logger = logging.getLogger(name or Config.get('logging.name'))
        logger.setLevel(level if level is not None else LoggerConfig.resolve_level())

        handler = LoggerConfig.make_handler(
            file_name or Config.get('logging.file'), max_bytes, backup_count
        )
        handler.setFormatter(LoggerConfig.make_formatter(format_type or Config.get('logging.format')))

        logger.handlers.clear()
        logger.addHandler(handler)
        logger.propagate = False

        return logger

    @staticmethod
    def make_handler(
        file_name: Optional[str],
        max_bytes: Optional[int] = None,
        backup_count: Optional[int] = None
    ) -> logging.Handler:
        """Rotating file handler when a file is given, stderr otherwise"""
        if not file_name:
            return logging.StreamHandler()

        return logging.handlers.RotatingFileHandler(
            file_name,
            maxBytes=max_bytes if max_bytes is not None else Config.get('logging.max_bytes'),
            backupCount=backup_count if backup_count is not None else Config.get('logging.backup_count'),
            encoding='utf-8'
        )

    @staticmethod
    def make_formatter(format_type: Optional[str]) -> logging.Formatter:
        if format_type == 'json':
            return JSONFormatter()
        return logging.Formatter(TEXT_FORMAT)

    @staticmethod
    def resolve_level() -> int:
        """LOG_LEVEL if set, else the level for APP_ENV"""
        configured = Config.get('logging.level')

        if configured:
            return logging.getLevelName(str(configured).upper())

        return LoggerConfig.get_level_by_environment(Config.get('app.env', 'production'))

    @staticmethod
    def get_level_by_environment(environment: str) -> int:
        return ENVIRONMENT_LEVELS.get(environment.lower(), logging.INFO)
