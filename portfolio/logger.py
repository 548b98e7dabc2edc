import logging
import os
import sys


def setup_logger(level=None, log_file=None):
    # Package logger shared by every module
    logger = logging.getLogger("Portfolio")
    logger.setLevel(level or os.getenv("PORTFOLIO_LOG_LEVEL", "INFO").upper())

    if logger.handlers:
        return logger

    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')

    # Console output
    ch = logging.StreamHandler(sys.stdout)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    # Optional file output
    log_file = log_file or os.getenv("PORTFOLIO_LOG_FILE")
    if log_file:
        fh = logging.FileHandler(log_file)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger


logger = setup_logger()
