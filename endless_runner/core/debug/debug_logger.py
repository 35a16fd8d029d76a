"""
debug_logger.py
---------------
Console logger with per-category filtering and colored, prefixed output.

Every runtime system reports through DebugLogger instead of print() so
start-up reports, state changes and failures share one format:

    [12:04:51] [GameLoop][STATE] Loop -> GAME_OVER (score=7)
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Controls which systems emit log messages and at what verbosity."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE

    CATEGORIES = {
        # Core
        "system": True,
        "display": True,
        "input": True,
        "loading": False,

        # Game loop
        "game_state": True,
        "timing": False,

        # Entities
        "entity_spawn": False,
        "entity_cleanup": False,
        "collision": True,
        "animation": False,

        # Rendering
        "render": True,
        "ui": True,

        "performance": False,
    }

    SHOW_TIMESTAMP = True


# ===========================================================
# ANSI Colors
# ===========================================================

class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static logger with category filtering and colored output."""

    LINE_LENGTH = 59

    LEVEL_VALUES = {
        "NONE": 0,
        "ERROR": 1,
        "WARN": 2,
        "INFO": 3,
        "VERBOSE": 4,
    }

    # tag -> (color, level)
    _TAGS = {
        "SYSTEM": (Colors.MAGENTA, "INFO"),
        "STATE": (Colors.CYAN, "INFO"),
        "ACTION": (Colors.GREEN, "INFO"),
        "TRACE": (Colors.BLUE, "VERBOSE"),
        "WARN": (Colors.YELLOW, "WARN"),
        "FAIL": (Colors.RED, "ERROR"),
    }

    # ===========================================================
    # Configuration
    # ===========================================================

    @staticmethod
    def configure(level: str = None, enable: dict = None):
        """
        Adjust verbosity at runtime (used by the --debug CLI flag).

        Args:
            level: One of LEVEL_VALUES keys
            enable: Mapping of category -> bool to merge into CATEGORIES
        """
        if level is not None:
            if level not in DebugLogger.LEVEL_VALUES:
                raise ValueError(f"Unknown log level: {level}")
            LoggerConfig.LOG_LEVEL = level
        if enable:
            LoggerConfig.CATEGORIES.update(enable)

    # ===========================================================
    # Caller Detection
    # ===========================================================

    @staticmethod
    def _get_caller() -> str:
        """Name the class (or module) that called the public log method."""
        try:
            frame = sys._getframe(3)

            if "self" in frame.f_locals:
                return frame.f_locals["self"].__class__.__name__
            if "cls" in frame.f_locals:
                return frame.f_locals["cls"].__name__

            filename = frame.f_code.co_filename.replace("\\", "/").split("/")[-1]
            return "".join(p.capitalize() for p in filename[:-3].split("_"))

        except (ValueError, AttributeError, KeyError):
            return "Unknown"

    # ===========================================================
    # Core Logging
    # ===========================================================

    @staticmethod
    def _should_log(category: str, level: str) -> bool:
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        if not LoggerConfig.CATEGORIES.get(category, False):
            return False
        wanted = DebugLogger.LEVEL_VALUES.get(level, 3)
        allowed = DebugLogger.LEVEL_VALUES.get(LoggerConfig.LOG_LEVEL, 3)
        return wanted <= allowed

    @staticmethod
    def _log(tag: str, message: str, category: str):
        color, level = DebugLogger._TAGS[tag]
        if not DebugLogger._should_log(category, level):
            return

        source = DebugLogger._get_caller()
        prefix = f"[{source}][{tag}] "
        if LoggerConfig.SHOW_TIMESTAMP:
            prefix = f"[{datetime.now().strftime('%H:%M:%S')}] " + prefix
        print(f"{color}{prefix}{message}{Colors.RESET}")

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._log("SYSTEM", msg, category)

    @staticmethod
    def state(msg: str, category: str = "system"):
        DebugLogger._log("STATE", msg, category)

    @staticmethod
    def action(msg: str, category: str = "system"):
        DebugLogger._log("ACTION", msg, category)

    @staticmethod
    def trace(msg: str, category: str = "collision"):
        """Verbose trace log, only shown at VERBOSE level."""
        DebugLogger._log("TRACE", msg, category)

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._log("WARN", msg, category)

    @staticmethod
    def fail(msg: str, category: str = "system"):
        DebugLogger._log("FAIL", msg, category)

    # ===========================================================
    # Start-up Report Formatting
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Print a section header."""
        line = "─" * DebugLogger.LINE_LENGTH
        title_line = f"[{title}]".center(DebugLogger.LINE_LENGTH)
        print(f"\n{Colors.WHITE}{line}\n{title_line}{Colors.RESET}\n")

    @staticmethod
    def init_entry(module: str, status: str = "OK"):
        """Print a dotted status entry: '> Module ........ [OK]'."""
        status_color = {
            "OK": Colors.GREEN,
            "LOADING": Colors.CYAN,
            "FAIL": Colors.RED,
        }.get(status.upper(), Colors.WHITE)

        prefix = f"> {module}"
        status_str = f"[{status}]"
        pad = max(30 - len(prefix), 1)
        dots = max(DebugLogger.LINE_LENGTH - (len(prefix) + pad + 1 + len(status_str)), 1)

        print(
            f"{Colors.WHITE}{prefix}{' ' * pad}{'.' * dots} "
            f"{status_color}{status_str}{Colors.RESET}"
        )

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        """Print an indented sub-detail under the last init_entry."""
        indent = " " * (level * 4)
        print(f"{indent}• {Colors.WHITE}{detail}{Colors.RESET}")
