"""Coloured console logging with timestamps."""

from __future__ import annotations

import time


class TextFormat:
    """ANSI escape sequences for terminal text styling."""

    BOLD = "\x1b[1m"
    OBFUSCATED = ""
    ITALIC = "\x1b[3m"
    UNDERLINE = "\x1b[4m"
    STRIKE_THROUGH = "\x1b[9m"
    RESET = "\x1b[m"
    BLACK = "\x1b[38;5;16m"
    DARK_PURPLE = "\x1b[38;5;19m"
    DARK_GREEN = "\x1b[38;5;34m"
    DARK_AQUA = "\x1b[38;5;37m"
    DARK_RED = "\x1b[38;5;124m"
    GOLD = "\x1b[38;5;214m"
    GRAY = "\x1b[38;5;145m"
    DARK_GREY = "\x1b[38;5;59m"
    BLUE = "\x1b[38;5;63m"
    GREEN = "\x1b[38;5;83m"
    AQUA = "\x1b[38;5;87m"
    RED = "\x1b[38;5;203m"
    LIGHT_PURPLE = "\x1b[38;5;207m"
    YELLOW = "\x1b[38;5;227m"
    WHITE = "\x1b[38;5;231m"
    MINECOIN_GOLD = "\x1b[38;5;185m"


def log_generic(message: str, type_name: str, type_color: str) -> None:
    """Print a message tagged with its type and the local time."""
    stamp = time.strftime("%H:%M:%S", time.localtime())
    reset = TextFormat.RESET
    print(f"{type_color}[{type_name}: {stamp}]{reset} {message}{reset}")


def log_info(message: str) -> None:
    log_generic(message, "INFO", TextFormat.BLUE)


def log_warning(message: str) -> None:
    log_generic(message, "WARNING", TextFormat.YELLOW)


def log_error(message: str) -> None:
    log_generic(message, "ERROR", TextFormat.RED)


def log_success(message: str) -> None:
    log_generic(message, "SUCCESS", TextFormat.GREEN)


def log_emergency(message: str) -> None:
    log_generic(message, "EMERGENCY", TextFormat.GOLD)


def log_notice(message: str) -> None:
    log_generic(message, "NOTICE", TextFormat.AQUA)


def log_critical(message: str) -> None:
    log_generic(message, "CRITICAL", TextFormat.DARK_RED)


def log_debug(message: str) -> None:
    log_generic(message, "DEBUG", TextFormat.GRAY)