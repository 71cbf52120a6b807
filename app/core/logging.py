# app/core/logging.py
import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# Configure standard Python logging
def setup_logging(level: str = "INFO"):
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout)  # Print logs to console
        ]
    )
    return logging.getLogger("sis_backend")


logger = logging.getLogger("sis_backend")
