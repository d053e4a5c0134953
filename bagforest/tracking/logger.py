"""Structured logging utilities for forest building.

Library code only ever asks for a logger with ``get_logger``. Handlers are
attached by applications through ``setup_logger``.
"""

import logging
from typing import Optional, Sequence
from pathlib import Path


DEFAULT_LOGGER_NAME = 'bagforest'


def setup_logger(
    name: str = DEFAULT_LOGGER_NAME,
    level: int = logging.INFO,
    log_file: Optional[Path] = None
) -> logging.Logger:
    """Setup a logger with consistent formatting.
    
    Parameters
    ----------
    name : str, default='bagforest'
        Logger name.
    level : int or str, default=logging.INFO
        Logging level.
    log_file : Path, optional
        Path to log file. If provided, logs will be written to both console and file.
        File will be overwritten (mode='w') to start fresh each run.
    
    Returns
    -------
    logger : logging.Logger
        Configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    
    # Clear any existing handlers to start fresh
    logger.handlers.clear()
    
    # Format: [2025-12-10 10:30:45] INFO: Message
    formatter = logging.Formatter(
        '[%(asctime)s] %(levelname)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='w')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    
    return logger


def get_logger(logger: Optional[logging.Logger] = None) -> logging.Logger:
    """Return ``logger`` if given, else the package logger."""
    if logger is not None:
        return logger
    return logging.getLogger(DEFAULT_LOGGER_NAME)


def log_phase_start(logger: logging.Logger, phase_name: str, details: str = "") -> None:
    """Log the start of a major phase.
    
    Parameters
    ----------
    logger : logging.Logger
        Logger instance.
    phase_name : str
        Name of the phase.
    details : str, optional
        Additional details.
    """
    separator = "=" * 80
    logger.info(separator)
    logger.info(f"{phase_name.upper()}")
    if details:
        logger.info(details)
    logger.info(separator)


def log_phase_end(logger: logging.Logger, phase_name: str, elapsed_time: float = None) -> None:
    """Log the end of a major phase.
    
    Parameters
    ----------
    logger : logging.Logger
        Logger instance.
    phase_name : str
        Name of the phase.
    elapsed_time : float, optional
        Time elapsed in seconds.
    """
    separator = "=" * 80
    logger.info(separator)
    msg = f"{phase_name.upper()} COMPLETE"
    if elapsed_time is not None:
        msg += f" ({elapsed_time:.1f}s)"
    logger.info(msg)
    logger.info(separator)


def log_member_trained(
    logger: logging.Logger,
    member_index: int,
    samples: Sequence,
    attrs: Sequence
) -> None:
    """Log one trained member at DEBUG level.
    
    Parameters
    ----------
    logger : logging.Logger
        Logger instance.
    member_index : int
        Position of the member in the forest.
    samples : sequence
        Samples the member was trained on.
    attrs : sequence
        Attributes the member was trained on.
    """
    logger.debug(
        f"Member {member_index}: {len(samples)} samples, "
        f"{len(attrs)} attributes {list(attrs)}"
    )


def log_training_progress(
    logger: logging.Logger,
    current: int,
    total: int,
    message: str = "Training progress"
) -> None:
    """Log training progress.
    
    Parameters
    ----------
    logger : logging.Logger
        Logger instance.
    current : int
        Members trained so far.
    total : int
        Total members.
    message : str, default='Training progress'
        Progress message.
    """
    pct = (current / total * 100) if total > 0 else 0
    logger.info(f"{message}: {current}/{total} ({pct:.1f}%)")


def log_error(logger: logging.Logger, error: Exception, context: str = "") -> None:
    """Log an error with context.
    
    Parameters
    ----------
    logger : logging.Logger
        Logger instance.
    error : Exception
        The exception that occurred.
    context : str, optional
        Additional context about where the error occurred.
    """
    if context:
        logger.error(f"Error in {context}: {type(error).__name__}: {str(error)}")
    else:
        logger.error(f"{type(error).__name__}: {str(error)}")
