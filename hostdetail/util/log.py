import os
import sys

from hostdetail.config import LOG_LEVEL


LEVELS = {
    "DEBUG": 10,
    "INFO": 20,
    "SUCCESS": 25,
    "WARN": 30,
    "ERROR": 40,
}

LEVEL_COLORS = {
    "DEBUG": "\033[35m",
    "INFO": "\033[36m",
    "SUCCESS": "\033[32m",
    "WARN": "\033[33m",
    "ERROR": "\033[31m",
}
RESET = "\033[0m"


def _supports_color(stream) -> bool:
    """
    Skip ANSI codes when NO_COLOR is set or the stream is not a TTY.
    """
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _threshold() -> int:
    name = os.environ.get("LOG_LEVEL", LOG_LEVEL).upper()
    return LEVELS.get(name, LEVELS["DEBUG"])


def colorize(message: str, level: str, stream=None) -> str:
    stream = stream or sys.stdout
    code = LEVEL_COLORS.get(level, "")
    if not code or not _supports_color(stream):
        return message
    return f"{code}{message}{RESET}"


def log(message: str, level: str = "INFO", stream=None):
    if LEVELS.get(level, 0) < _threshold():
        return
    stream = stream or sys.stdout
    print(colorize(message, level, stream), file=stream)


def log_info(message: str):
    log(message, "INFO")


def log_success(message: str):
    log(message, "SUCCESS")


def log_warn(message: str):
    log(message, "WARN")


def log_error(message: str):
    log(message, "ERROR", stream=sys.stderr)


def log_debug(message: str):
    log(message, "DEBUG")
