"""
debug_logger.py
---------------
Diagnostic console logger with category filtering and formatted output.

Every line carries [time] [Source][TAG]; the source is the calling class,
or the calling module in CamelCase for plain functions.
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Controls which components emit log messages and at what verbosity."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, WARN, INFO, VERBOSE

    CATEGORIES = {
        # Host
        "system": True,
        "loading": False,
        "input": False,
        "scene": True,

        # Session
        "session": True,
        "spawn": False,
        "timing": False,
        "event_manager": False,

        # World
        "entity": False,
        "collision": True,

        # Adapters
        "render": False,
        "audio": False,
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
    ENTRY_COLUMN = 30

    # tag -> (color, level)
    TAGS = {
        "SYSTEM": (Colors.MAGENTA, "INFO"),
        "STATE": (Colors.CYAN, "INFO"),
        "ACTION": (Colors.GREEN, "INFO"),
        "TRACE": (Colors.BLUE, "VERBOSE"),
        "WARN": (Colors.YELLOW, "WARN"),
    }

    LEVEL_VALUES = {"NONE": 0, "WARN": 1, "INFO": 2, "VERBOSE": 3}

    ENTRY_COLORS = {"OK": Colors.GREEN, "LOADING": Colors.CYAN, "FAIL": Colors.RED}

    # ===========================================================
    # Filtering & Output
    # ===========================================================

    @staticmethod
    def _get_caller() -> str:
        """Name of the class (or module) three frames up."""
        try:
            frame = sys._getframe(3)
        except ValueError:
            return "Unknown"

        owner = frame.f_locals.get("self")
        if owner is not None:
            return type(owner).__name__
        if "cls" in frame.f_locals:
            return frame.f_locals["cls"].__name__

        module_name = frame.f_code.co_filename.replace("\\", "/").rsplit("/", 1)[-1][:-3]
        return "".join(part.capitalize() for part in module_name.split("_"))

    @staticmethod
    def _should_log(category: str, level: str) -> bool:
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        # Warnings bypass category filtering
        if level != "WARN" and not LoggerConfig.CATEGORIES.get(category, False):
            return False
        threshold = DebugLogger.LEVEL_VALUES.get(LoggerConfig.LOG_LEVEL, 2)
        return DebugLogger.LEVEL_VALUES.get(level, 2) <= threshold

    @staticmethod
    def _log(tag: str, message: str, category: str):
        color, level = DebugLogger.TAGS[tag]
        if not DebugLogger._should_log(category, level):
            return

        prefix = f"[{DebugLogger._get_caller()}][{tag}] "
        if LoggerConfig.SHOW_TIMESTAMP:
            prefix = f"[{datetime.now().strftime('%H:%M:%S')}] {prefix}"
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
        """Verbose-only; hidden at the default INFO level."""
        DebugLogger._log("TRACE", msg, category)

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._log("WARN", msg, category)

    # ===========================================================
    # Startup Report
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Print a boxed section header."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        line = "─" * DebugLogger.LINE_LENGTH
        title_line = f"[{title}]".center(DebugLogger.LINE_LENGTH)
        print(f"\n{Colors.WHITE}{line}\n{title_line}{Colors.RESET}\n")

    @staticmethod
    def init_entry(module: str, status: str = "OK"):
        """Print a dotted '> Module ...... [OK]' line."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(DebugLogger._render_entry(module, status))

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(f"{' ' * (level * 4)}• {Colors.WHITE}{detail}{Colors.RESET}")

    @staticmethod
    def _render_entry(module: str, status: str) -> str:
        color = DebugLogger.ENTRY_COLORS.get(status.upper(), Colors.WHITE)
        prefix = f"> {module}"
        status_str = f"[{status}]"

        pad = max(DebugLogger.ENTRY_COLUMN - len(prefix), 1)
        dots = max(DebugLogger.LINE_LENGTH - len(prefix) - pad - 1 - len(status_str), 1)
        return f"{Colors.WHITE}{prefix}{' ' * pad}{'.' * dots} {color}{status_str}{Colors.RESET}"
