import logging
import os
from dotenv import load_dotenv

load_dotenv()


def get_logger(name: str | None = None):
    logger = logging.getLogger(name or __name__)

    # one handler per logger, even when called repeatedly
    if not logger.handlers:
        stream_handler = logging.StreamHandler()
        fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s")
        stream_handler.setFormatter(fmt)
        logger.addHandler(stream_handler)

    logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())

    return logger
