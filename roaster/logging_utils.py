import logging

from roaster.config import LOG_LEVEL


def setup_logging(log_level: str = LOG_LEVEL) -> logging.Logger:
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(lineno)d - %(levelname)s - %(message)s",
    )

    # Provider SDK traffic is noisy at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    return logging.getLogger("roaster")
