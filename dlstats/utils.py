import sys
import logging

# ============================================================
# Logging setup
# ============================================================
def setup_logging():
    """Initialise the application logger"""
    logger = logging.getLogger("DLStats")
    logger.setLevel(logging.INFO)

    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # stdout carries the table, so log lines go to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # file_handler = logging.FileHandler("dlstats.log", encoding='utf-8')
    # file_handler.setFormatter(formatter)
    # logger.addHandler(file_handler)

    return logger

logger = setup_logging()


def set_verbose(verbose: bool):
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def digit_width(value: int) -> int:
    """Number of characters needed to print value"""
    return len(str(value))
