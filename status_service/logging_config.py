"""
Logging configuration
"""

import logging
import logging.handlers

from pathlib import Path
from typing import Optional


class LoggingConfig:
    """Logging configuration and management"""
    def __init__(self, logs_dir: str = "logs"):
        self.logs_dir = Path(logs_dir)
        self.app_log_file = self.logs_dir / "status_service.log"
        self.error_log_file = self.logs_dir / "status_service_errors.log"
        self.access_log_file = self.logs_dir / "status_service_access.log"

    def setup_logging(self):
        """Setup logging configuration"""
        self.logs_dir.mkdir(parents=True, exist_ok=True)

        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG)

        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
        formatter = logging.Formatter(
            fmt='%(asctime)s | %(name)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

        app_handler = logging.handlers.RotatingFileHandler(
            self.app_log_file,
            maxBytes=10*1024*1024,
            backupCount=5,
            encoding='utf-8'
        )
        app_handler.setLevel(logging.DEBUG)
        app_handler.setFormatter(formatter)
        root_logger.addHandler(app_handler)

        error_handler = logging.handlers.RotatingFileHandler(
            self.error_log_file,
            maxBytes=5*1024*1024,
            backupCount=3,
            encoding='utf-8'
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)
        root_logger.addHandler(error_handler)

        access_logger = logging.getLogger("access")
        access_logger.setLevel(logging.INFO)
        access_logger.propagate = False

        # Requests go to the access logger; only uvicorn warnings and errors reach the root
        logging.getLogger("uvicorn").setLevel(logging.WARNING)

        # Repeated setup must not stack access handlers
        for handler in access_logger.handlers[:]:
            access_logger.removeHandler(handler)

        access_handler = logging.handlers.RotatingFileHandler(
            self.access_log_file,
            maxBytes=10*1024*1024,
            backupCount=5,
            encoding='utf-8'
        )
        access_formatter = logging.Formatter(
            fmt='%(asctime)s | ACCESS | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        access_handler.setFormatter(access_formatter)
        access_logger.addHandler(access_handler)

        return root_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def format_access_line(method: str, path: str, status_code: Optional[int] = None,
                       response_time: Optional[float] = None, error: Optional[str] = None) -> str:
    log_parts = [
        f"method={method}",
        f"path={path}",
        f"status={status_code or 'N/A'}",
    ]

    if response_time is not None:
        log_parts.append(f"response_time={response_time:.3f}s")

    if error:
        log_parts.append(f"error={error}")

    return " | ".join(log_parts)


def log_api_access(method: str, path: str, status_code: Optional[int] = None,
                   response_time: Optional[float] = None, error: Optional[str] = None):
    access_logger = logging.getLogger("access")
    access_logger.info(format_access_line(method, path, status_code, response_time, error))
