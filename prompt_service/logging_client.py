"""
Logging client configuration.

Console output is always enabled; records are additionally shipped to a
centralized logging service when LOGGING_HOST is configured.
"""
import logging
import logging.handlers

from prompt_service.config import settings


def setup_logger(service_name: str) -> logging.Logger:
    """
    Setup logger for a service.

    Args:
        service_name: Name stamped on every record (e.g. 'prompt-service')

    Returns:
        Configured logger
    """
    logger = logging.getLogger(service_name)
    logger.setLevel(settings.LOG_LEVEL.upper())

    # Remove existing handlers
    logger.handlers = []
    logger.propagate = False

    # Add service name to all log records
    old_factory = logging.getLogRecordFactory()

    def record_factory(*args, **kwargs):
        record = old_factory(*args, **kwargs)
        record.service = service_name
        return record

    logging.setLogRecordFactory(record_factory)

    if settings.LOGGING_HOST:
        socket_handler = logging.handlers.SocketHandler(
            settings.LOGGING_HOST, settings.LOGGING_PORT
        )
        logger.addHandler(socket_handler)

    console_handler = logging.StreamHandler()
    console_formatter = logging.Formatter(
        '%(asctime)s - [%(service)s] - %(levelname)s - %(message)s'
    )
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    # Module loggers (logging.getLogger(__name__)) propagate to the root logger
    root = logging.getLogger()
    if not root.handlers:
        root.addHandler(console_handler)
    root.setLevel(settings.LOG_LEVEL.upper())

    for name in settings.NOISY_LOGGERS.split(","):
        name = name.strip()
        if name:
            logging.getLogger(name).setLevel(logging.WARNING)

    return logger
