import logging
import sys

import colorlog

LOG_FORMAT = "%(log_color)s%(asctime)s %(levelname)-7s%(reset)s faq-widget %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"

# Third-party loggers that would drown out per-request match logs.
QUIET_LOGGERS = ("urllib3", "multipart", "python_multipart")


def setup_logging(level: str = "INFO") -> None:
    handler = colorlog.StreamHandler(stream=sys.stdout)
    handler.setFormatter(
        colorlog.ColoredFormatter(
            LOG_FORMAT,
            datefmt=DATE_FORMAT,
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        )
    )

    root = logging.getLogger()
    for existing_handler in list(root.handlers):
        root.removeHandler(existing_handler)
        existing_handler.close()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(logging.WARNING, root.level))
