import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
ROOT_LOGGER = "cbuild"


def configure_logging(level: str | int = logging.INFO) -> None:
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger(ROOT_LOGGER).setLevel(level)


def warn(message: str, logger: logging.Logger | None = None) -> None:
    (logger or logging.getLogger(ROOT_LOGGER)).warning(message)
