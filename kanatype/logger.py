import logging
import sys

from kanatype import LOG_LEVEL

logger = logging.getLogger("kanatype")
logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

stdout_handler = logging.StreamHandler(sys.stdout)
stderr_handler = logging.StreamHandler(sys.stderr)

stdout_handler.setLevel(logging.DEBUG)    # everything the logger lets through
stderr_handler.setLevel(logging.WARNING)  # WARNING and above

# Keep warnings off stdout, they already go to stderr
stdout_handler.addFilter(lambda record: record.levelno < logging.WARNING)

formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
stdout_handler.setFormatter(formatter)
stderr_handler.setFormatter(formatter)

logger.addHandler(stdout_handler)
logger.addHandler(stderr_handler)
