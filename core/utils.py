import logging
import pathlib
from django.conf import settings

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def get_file_logger(name, filename):
    """Return the named logger, writing to core/logs/<filename> once per process."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        log_dir = pathlib.Path(settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_dir / filename)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    return logger


def absolute_url(path):
    return settings.SITE_URL.rstrip("/") + "/" + path.lstrip("/")
