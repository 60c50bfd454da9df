# utils/logger.py
import logging
import logging.handlers
from pathlib import Path
from typing import Optional


def setup_logger(
    name: str,
    log_file: Optional[str] = None,
    level: str = "INFO",
    enable_rotation: bool = True,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    log_dir: str = "logs",
) -> logging.Logger:
    """Setup logger with console output and an optional rotating log file"""
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # Prevent duplicate handlers
    if not logger.handlers:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        # Console output goes to stderr; stdout carries prompts and results
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        stream_handler.setLevel(logging.INFO)
        logger.addHandler(stream_handler)

        if log_file:
            logs_dir = Path(log_dir)
            log_path = logs_dir / log_file

            try:
                logs_dir.mkdir(parents=True, exist_ok=True)
                if enable_rotation:
                    file_handler = logging.handlers.RotatingFileHandler(
                        log_path,
                        maxBytes=max_bytes,
                        backupCount=backup_count,
                        encoding="utf-8",
                    )
                else:
                    file_handler = logging.FileHandler(log_path, encoding="utf-8")

                file_handler.setFormatter(formatter)
                file_handler.setLevel(logging.DEBUG)  # All levels to file
                logger.addHandler(file_handler)

            except (OSError, PermissionError) as e:
                logger.warning(
                    f"Failed to create log file {log_path}: {e}. Logging to console only."
                )

        # Prevent propagation to root logger to avoid duplicate messages
        logger.propagate = False

    return logger


def set_level(level: str) -> None:
    """Apply a level to every logger created under the package namespace."""
    numeric = getattr(logging, level.upper())
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name.startswith("rds_snapshot_copy") and isinstance(logger, logging.Logger):
            logger.setLevel(numeric)
            for handler in logger.handlers:
                if isinstance(handler, logging.StreamHandler) and not isinstance(
                    handler, logging.FileHandler
                ):
                    handler.setLevel(numeric)
