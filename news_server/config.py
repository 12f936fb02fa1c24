import logging
import os

HOST = os.getenv("NEWS_HOST", "localhost")
PORT = int(os.getenv("NEWS_PORT", "8080"))
LOG_LEVEL = os.getenv("NEWS_LOG_LEVEL", "info").lower()


def stdlib_log_level(level: str) -> int:
    """Map a uvicorn log level name to a logging level number."""
    # uvicorn's "trace" sits below DEBUG and has no stdlib name
    if level.lower() == "trace":
        return logging.DEBUG
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value
