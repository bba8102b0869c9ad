import structlog


def get_log_service(name: str = 'main') -> structlog.stdlib.BoundLogger:
    """Return the configured structlog logger.

    Importing the structlog provider applies the logging configuration once.
    """
    from toolbelt.core.services.log.providers.structlog import setup  # noqa: F401

    return structlog.get_logger(name)
