"""
Hybrid logging - per-class loggers on top of the standard logging module

One HybridLogger owns the underlying logging.Logger (console + optional file
handler); each component asks it for a ClassLogger so log lines carry the
component name and can be filtered per component.
"""
import logging
import sys
import traceback
from contextlib import suppress
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional


class ColoredFormatter(logging.Formatter):
    """Formatter producing '[time] [level] [class] message' lines, colored on request"""

    COLORS = {
        'DEBUG': '\033[94m',    # Blue
        'INFO': '\033[92m',     # Green
        'WARNING': '\033[93m',  # Yellow
        'ERROR': '\033[91m',    # Red
        'CRITICAL': '\033[95m', # Magenta
        'RESET': '\033[0m'
    }

    def __init__(self, use_colors: bool = False):
        self.use_colors = use_colors
        super().__init__('[%(asctime)s] [%(levelname)s] [%(class_name)s] %(message)s')

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, 'class_name'):
            record.class_name = 'Main'

        formatted = super().format(record)

        if self.use_colors:
            color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
            formatted = f"{color}{formatted}{self.COLORS['RESET']}"

        return formatted


class ClassLogger:
    """Per-class logger wrapper with its own minimum level"""

    def __init__(self, main_logger: logging.Logger, class_name: str, level: int):
        self.main_logger = main_logger
        self.class_name = class_name
        self.level = level

    def is_enabled_for(self, level: int) -> bool:
        """True if a message at `level` would be emitted"""
        return level >= self.level

    def _log(self, level: int, message: str, exc_info: bool = False) -> None:
        if not self.is_enabled_for(level):
            return
        exc_info_tuple = sys.exc_info() if exc_info else None
        record = self.main_logger.makeRecord(
            self.main_logger.name, level, "", 0, message, (), exc_info_tuple
        )
        record.class_name = self.class_name
        self.main_logger.handle(record)

    def debug(self, message: str) -> None:
        self._log(logging.DEBUG, message)

    def info(self, message: str) -> None:
        self._log(logging.INFO, message)

    def warning(self, message: str) -> None:
        self._log(logging.WARNING, message)

    def error(self, message: str, exception: Optional[BaseException] = None) -> None:
        """Log an error, appending type and origin of `exception` when given"""
        if exception is None:
            self._log(logging.ERROR, message)
            return

        exc_type = type(exception).__name__
        tb = traceback.extract_tb(exception.__traceback__)
        filename, lineno, _, _ = tb[-1] if tb else ("unknown", 0, "unknown", "")
        code = getattr(exception, 'code', None)
        enhanced = f"{message} | Type: {exc_type}"
        if code:
            enhanced += f" | Code: {code}"
        enhanced += f" | File: {filename} | Line: {lineno}"
        self._log(logging.ERROR, enhanced, exc_info=True)

    def critical(self, message: str) -> None:
        self._log(logging.CRITICAL, message)


class NullLogger:
    """Logger with the ClassLogger interface that drops everything"""

    def is_enabled_for(self, level: int) -> bool:
        return False

    def debug(self, message: str) -> None:
        pass

    def info(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def error(self, message: str, exception: Optional[BaseException] = None) -> None:
        pass

    def critical(self, message: str) -> None:
        pass


class HybridLogger:
    """Logger factory: colored console output plus a timestamped log file"""

    def __init__(self, name: str = "pixel_matrix", log_dir: str = "logs",
                 console_only: bool = False):
        self.name = name
        self.log_dir = log_dir
        self.console_only = console_only
        self.log_file: Optional[Path] = None
        self.main_logger: Optional[logging.Logger] = None
        self.class_loggers: Dict[str, ClassLogger] = {}
        self._setup_main_logger()

    def _setup_main_logger(self) -> None:
        self.main_logger = logging.getLogger(self.name)
        self.main_logger.setLevel(logging.DEBUG)
        self.main_logger.propagate = False
        self.main_logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(ColoredFormatter(use_colors=True))
        self.main_logger.addHandler(console_handler)

        if self.console_only:
            return

        Path(self.log_dir).mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime('%Y-%m-%d_%H-%M-%S')
        self.log_file = Path(self.log_dir) / f"{self.name}_{timestamp}.log"

        file_handler = logging.FileHandler(self.log_file, encoding="utf-8")
        file_handler.setFormatter(ColoredFormatter(use_colors=False))
        self.main_logger.addHandler(file_handler)

    def get_class_logger(self, class_name: str, level: int = logging.INFO) -> ClassLogger:
        """
        Get (or create) the logger for a component

        Args:
            class_name: Name shown in the [class] column of each line
            level: Minimum level for this component

        Returns:
            ClassLogger shared by every caller asking for the same name
        """
        if class_name not in self.class_loggers:
            self.class_loggers[class_name] = ClassLogger(
                self.main_logger, class_name, level
            )
        return self.class_loggers[class_name]

    def get_main_logger(self, level: int = logging.INFO) -> ClassLogger:
        return self.get_class_logger("Main", level)

    def cleanup(self) -> None:
        """Flush and close all handlers"""
        if self.main_logger:
            for handler in self.main_logger.handlers:
                with suppress(OSError, ValueError):
                    handler.flush()
                    handler.close()
            self.main_logger.handlers.clear()
