"""Logging for the 16PF scoring engine.

Each pipeline area logs through its own component logger under ``pf16``.
Importing the package only attaches a NullHandler; handlers are installed
by setup_logging(), which get_settings() calls. Production logs JSON
records through python-json-logger.
"""

import logging
import logging.handlers
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from pythonjsonlogger import jsonlogger

PACKAGE_LOGGER = 'pf16'

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


class PF16Formatter(jsonlogger.JsonFormatter):
    """JSON formatter stamping engine records with time, level and component."""

    def __init__(self, *args: Any, application: str = PACKAGE_LOGGER, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.application = application

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = datetime.fromtimestamp(record.created, timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['application'] = self.application
        log_record.setdefault('component', getattr(record, 'component', None))


class ComponentFilter(logging.Filter):
    """Tag every record of a component logger with the component name."""

    def __init__(self, component: str):
        super().__init__()
        self.component = component

    def filter(self, record: logging.LogRecord) -> bool:
        record.component = self.component
        return True


class LoggerConfig:
    """Installs handlers on the ``pf16`` logger for one environment."""

    COMPONENTS = {
        'normalizer': 'pf16.normalizer',
        'scoring': 'pf16.scoring',
        'insights': 'pf16.insights',
        'report': 'pf16.report',
    }

    LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
    LOG_FILE_BACKUPS = 5

    def __init__(
        self,
        environment: str = 'development',
        log_level: str = 'INFO',
        log_format: str = 'text',
        log_file: Optional[str] = None,
        application: str = PACKAGE_LOGGER,
    ):
        """Configure engine logging.

        Args:
            environment: development, test, staging or production
            log_level: Level for the package and component loggers
            log_format: "json" or "text"; production always logs JSON
            log_file: Optional path for a rotating log file (production)
            application: Name stamped on JSON records
        """
        self.environment = environment
        self.log_level = getattr(logging, log_level.upper())
        self.log_format = log_format
        self.log_file = Path(log_file) if log_file else None
        self.application = application

        self._configure_package_logger()
        self._configure_component_loggers()

    def _configure_package_logger(self) -> None:
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.setLevel(self.log_level)

        for handler in package_logger.handlers:
            handler.close()
        package_logger.handlers.clear()

        if self.environment == 'production':
            handlers = self._production_handlers()
        elif self.environment == 'test':
            handlers = [self._stream_handler(logging.WARNING, logging.Formatter(
                fmt='TEST | %(levelname)s | %(name)s | %(message)s'
            ))]
        else:
            formatter = self._json_formatter() if self.log_format == 'json' else logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)-16s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S',
            )
            handlers = [self._stream_handler(logging.DEBUG, formatter)]

        for handler in handlers:
            package_logger.addHandler(handler)

    def _json_formatter(self) -> PF16Formatter:
        return PF16Formatter(
            fmt='%(timestamp)s %(level)s %(logger)s %(message)s',
            application=self.application,
        )

    @staticmethod
    def _stream_handler(level: int, formatter: logging.Formatter) -> logging.Handler:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        return handler

    def _production_handlers(self) -> List[logging.Handler]:
        """JSON to stdout, plus a rotating file when log_file is set."""
        formatter = self._json_formatter()
        handlers = [self._stream_handler(logging.INFO, formatter)]

        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                filename=self.log_file,
                maxBytes=self.LOG_FILE_MAX_BYTES,
                backupCount=self.LOG_FILE_BACKUPS,
                encoding='utf-8',
            )
            file_handler.setLevel(logging.INFO)
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)

        return handlers

    def _configure_component_loggers(self) -> None:
        for component in self.COMPONENTS:
            component_logger = get_component_logger(component)
            component_logger.setLevel(self.log_level)
            component_logger.filters.clear()
            component_logger.addFilter(ComponentFilter(component))

    def get_component_logger(self, component: str) -> logging.Logger:
        """Component logger; raises ValueError for unknown components."""
        return get_component_logger(component)


def setup_logging(
    environment: str = 'development',
    log_level: str = 'INFO',
    log_format: str = 'text',
    log_file: Optional[str] = None,
    application: str = PACKAGE_LOGGER,
) -> LoggerConfig:
    """Install engine log handlers, replacing any earlier configuration.

    Args:
        environment: Environment name
        log_level: Log level
        log_format: "json" or "text"
        log_file: Optional rotating log file path
        application: Application name for JSON records

    Returns:
        LoggerConfig: Active configuration
    """
    return LoggerConfig(environment, log_level, log_format, log_file, application)


def get_component_logger(component: str) -> logging.Logger:
    """Logger for one pipeline area.

    Does not configure handlers; records propagate to ``pf16`` and the root
    logger until setup_logging() runs.

    Args:
        component: normalizer, scoring, insights or report

    Returns:
        logging.Logger: Component logger

    Raises:
        ValueError: If component is not recognized
    """
    if component not in LoggerConfig.COMPONENTS:
        raise ValueError(f"Unknown component: {component}. Available: {list(LoggerConfig.COMPONENTS)}")
    return logging.getLogger(LoggerConfig.COMPONENTS[component])


class PerformanceLogger:
    """Times a block and logs one record when it ends.

    Blocks slower than slow_ms log at WARNING, others at DEBUG. The
    measured time stays on ``duration_ms`` after the block.
    """

    def __init__(
        self,
        operation: str,
        logger: logging.Logger,
        extra: Optional[Dict[str, Any]] = None,
        slow_ms: float = 1000.0,
    ):
        self.operation = operation
        self.logger = logger
        self.extra = extra or {}
        self.slow_ms = slow_ms
        self.duration_ms: Optional[float] = None
        self._started: Optional[float] = None

    def __enter__(self) -> 'PerformanceLogger':
        self._started = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.duration_ms = (time.perf_counter() - self._started) * 1000
        level = logging.WARNING if self.duration_ms > self.slow_ms else logging.DEBUG
        outcome = 'Completed' if exc_type is None else 'Failed'
        self.logger.log(level, f"{outcome} {self.operation}", extra={
            'operation': self.operation,
            'duration_ms': round(self.duration_ms, 2),
            **self.extra,
        })
