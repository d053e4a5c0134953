"""Core bagging abstractions.

This subpackage provides:
- Resampling (partial Fisher-Yates over reusable scratch buffers)
- Forest construction
- Forest container and prediction aggregation
"""

from bagforest.core.sampler import partial_shuffle, ResamplingContext
from bagforest.core.forest import Forest, Member, aggregate_predictions
from bagforest.core.builder import ForestBuilder, build_forest, default_attr_count

__all__ = [
    'partial_shuffle',
    'ResamplingContext',
    'Forest',
    'Member',
    'aggregate_predictions',
    'ForestBuilder',
    'build_forest',
    'default_attr_count'
]
