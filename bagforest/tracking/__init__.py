"""Tracking and monitoring utilities.

This subpackage handles structured logging for forest builds.
"""

from .logger import (
    setup_logger,
    get_logger,
    log_phase_start,
    log_phase_end,
    log_member_trained,
    log_training_progress,
    log_error
)

__all__ = [
    'setup_logger',
    'get_logger',
    'log_phase_start',
    'log_phase_end',
    'log_member_trained',
    'log_training_progress',
    'log_error'
]
