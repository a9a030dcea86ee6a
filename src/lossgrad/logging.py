import logging
import sys


def setup_logging(level: int = logging.INFO):
    """
    Configure the root logger for scripts using lossgrad.

    The library itself only creates module loggers; call this from an
    application entry point to see their records on stdout, formatted as
    "timestamp - logger name - level - message".
    """
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
