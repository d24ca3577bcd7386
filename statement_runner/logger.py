import logging

logger = logging.getLogger("statement_runner")
logger.addHandler(logging.NullHandler())


def configure_logging(level="INFO"):
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))

    logger.handlers = [handler]
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
