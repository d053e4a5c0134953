"""Parallel execution for forest training and classification.

This package provides order-preserving job preparation and thread-pool
fan-out for trainer calls and member predictions.
"""

from .scheduler import (
    TrainingJob,
    prepare_training_batch,
    get_batch_info
)

from .worker import (
    train_members_parallel,
    classify_members_parallel
)

__all__ = [
    'TrainingJob',
    'prepare_training_batch',
    'get_batch_info',
    'train_members_parallel',
    'classify_members_parallel'
]
