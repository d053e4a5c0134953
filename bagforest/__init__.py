"""Bagged Forest.

A generic bagging layer for classifiers:
- Per-member random subsets of samples and attributes (partial Fisher-Yates)
- Pluggable training function, one trained member per subset
- Forest-level class probabilities averaged across all members
- Optional thread-pool fan-out for training and classification

Tree construction is not part of this package; any trainer returning an
object with a ``classify(query)`` method can be bagged.
"""

__version__ = "1.0.0"
__author__ = "Bagged Forest Team"

from bagforest.config import ForestConfig
from bagforest.core import Forest, ForestBuilder, build_forest, default_attr_count
from bagforest.exceptions import (
    ForestError,
    InvalidSubsetSizeError,
    InvalidSampleSizeError,
    InvalidAttrSizeError,
    EmptyForestError
)

__all__ = [
    'ForestConfig',
    'Forest',
    'ForestBuilder',
    'build_forest',
    'default_attr_count',
    'ForestError',
    'InvalidSubsetSizeError',
    'InvalidSampleSizeError',
    'InvalidAttrSizeError',
    'EmptyForestError'
]
