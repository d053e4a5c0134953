"""Forest construction.

Drives the resampler once per member, hands each member's subsets to the
caller's trainer, and collects the trained members into a Forest.
"""

import logging
import time
from typing import Any, Callable, Optional, Sequence, Union
import numpy as np

from bagforest.config import ForestConfig
from bagforest.core.forest import Forest
from bagforest.core.sampler import ResamplingContext
from bagforest.exceptions import InvalidAttrSizeError, InvalidSampleSizeError
from bagforest.parallel import get_batch_info, prepare_training_batch, train_members_parallel
from bagforest.tracking import (
    get_logger,
    log_error,
    log_member_trained,
    log_phase_end,
    log_phase_start,
    log_training_progress,
    setup_logger
)


TrainFn = Callable[[Sequence[Any], Sequence[Any]], Any]


def default_attr_count(n_attrs: int) -> int:
    """Attributes per member when none is requested: round(sqrt(n)), half up."""
    return int(np.sqrt(n_attrs) + 0.5)


def build_forest(
    n: int,
    samples: Sequence[Any],
    attrs: Sequence[Any],
    n_samples: int,
    n_attrs: Optional[int],
    train_fn: TrainFn,
    random_state: Optional[Union[int, np.random.RandomState]] = None,
    carry_forward: bool = True,
    n_workers: int = 1,
    classify_workers: int = 1,
    log_every: int = 10,
    logger: Optional[logging.Logger] = None
) -> Forest:
    """Build a forest of ``n`` members, each trained on random subsets.

    One private copy of each pool is made for the whole call. For every
    member, in order, ``n_samples`` samples and then ``n_attrs`` attributes
    are selected by partial Fisher-Yates on those copies, and
    ``train_fn(samples, attrs)`` is called on the selected prefixes. In
    carry-forward mode the copies are not reset between members.

    Parameters
    ----------
    n : int
        Number of members.
    samples : sequence
        Full sample pool. Never mutated.
    attrs : sequence
        Full attribute pool. Never mutated.
    n_samples : int
        Samples per member, 0 <= n_samples <= len(samples).
    n_attrs : int or None
        Attributes per member, 0 <= n_attrs <= len(attrs). None means
        ``default_attr_count(len(attrs))``.
    train_fn : callable
        Trainer called as ``train_fn(samples, attrs)``; returns a member.
    random_state : int, RandomState or None, default=None
        Random source for all draws of this call.
    carry_forward : bool, default=True
        Reshuffle forward from the previous member's buffer state. If
        False, each member draws from the pristine pool order.
    n_workers : int, default=1
        Threads for trainer calls. Draws always run sequentially first.
    classify_workers : int, default=1
        Default threads the returned forest uses for member predictions.
    log_every : int, default=10
        Emit a progress line every this many members.
    logger : logging.Logger, optional
        Logger to use instead of the package logger.

    Returns
    -------
    forest : Forest
        Exactly ``n`` members in construction order.

    Raises
    ------
    ValueError
        If ``n`` is negative or ``log_every`` is below 1.
    InvalidSampleSizeError
        If ``n_samples`` is out of range for the sample pool.
    InvalidAttrSizeError
        If ``n_attrs`` is out of range for the attribute pool.
    """
    logger = get_logger(logger)

    if n < 0:
        raise ValueError(f"Number of members must be non-negative, got {n}")
    if log_every < 1:
        raise ValueError(f"log_every must be at least 1, got {log_every}")

    context = ResamplingContext(
        samples, attrs,
        random_state=random_state,
        carry_forward=carry_forward
    )

    if n_attrs is None:
        n_attrs = default_attr_count(context.n_attrs_available)

    # Fail fast before any draw or trainer call
    if n_samples < 0 or n_samples > context.n_samples_available:
        raise InvalidSampleSizeError(n_samples, context.n_samples_available)
    if n_attrs < 0 or n_attrs > context.n_attrs_available:
        raise InvalidAttrSizeError(n_attrs, context.n_attrs_available)

    log_phase_start(
        logger, "Building forest",
        f"{n} members, {n_samples}/{context.n_samples_available} samples, "
        f"{n_attrs}/{context.n_attrs_available} attributes per member"
    )
    start_time = time.perf_counter()

    if n_workers > 1:
        members = _build_parallel(context, n, n_samples, n_attrs, train_fn, n_workers, logger)
    else:
        members = _build_sequential(context, n, n_samples, n_attrs, train_fn, log_every, logger)

    log_phase_end(logger, "Building forest", time.perf_counter() - start_time)
    logger.debug(f"Resampling consumed {context.draws} random draws")

    return Forest(members, n_workers=classify_workers)


def _build_sequential(
    context: ResamplingContext,
    n: int,
    n_samples: int,
    n_attrs: int,
    train_fn: TrainFn,
    log_every: int,
    logger: logging.Logger
) -> list:
    members = []
    for i in range(n):
        member_samples, member_attrs = context.next_subsets(n_samples, n_attrs)
        try:
            member = train_fn(list(member_samples), list(member_attrs))
        except Exception as e:
            log_error(logger, e, context=f"trainer for member {i}")
            raise
        members.append(member)

        log_member_trained(logger, i, member_samples, member_attrs)
        if (i + 1) % log_every == 0 or i + 1 == n:
            log_training_progress(logger, i + 1, n)

    return members


def _build_parallel(
    context: ResamplingContext,
    n: int,
    n_samples: int,
    n_attrs: int,
    train_fn: TrainFn,
    n_workers: int,
    logger: logging.Logger
) -> list:
    jobs = prepare_training_batch(context, n, n_samples, n_attrs)
    info = get_batch_info(jobs)
    logger.info(
        f"Prepared {info['n_jobs']} training jobs "
        f"({info['distinct_attrs']} distinct attributes), {n_workers} workers"
    )

    try:
        members = train_members_parallel(jobs, train_fn, max_workers=n_workers)
    except Exception as e:
        log_error(logger, e, context="parallel training")
        raise

    for job in jobs:
        log_member_trained(logger, job.member_index, job.samples, job.attrs)
    log_training_progress(logger, len(members), n)

    return members


class ForestBuilder:
    """Config-driven forest construction.

    Attributes:
        config: ForestConfig describing size, sampling and parallelism
        logger: Logger used for build progress

    Example:
        >>> config = ForestConfig(
        ...     n_members=20,
        ...     sampling=SamplingConfig(n_samples_per_member=200)
        ... )
        >>> builder = ForestBuilder(config)
        >>> forest = builder.build(rows, columns, train_fn)
    """

    def __init__(self, config: ForestConfig, logger: Optional[logging.Logger] = None):
        """Initialize the builder.

        Args:
            config: ForestConfig; validated here
            logger: Logger to use. If None, the package logger is set up
                from ``config.tracking``

        Raises:
            AssertionError: If the configuration is invalid
        """
        config.validate()
        self.config = config
        if logger is None:
            logger = setup_logger(
                level=config.tracking.log_level,
                log_file=config.tracking.log_file
            )
        self.logger = logger

    def build(self, samples: Sequence[Any], attrs: Sequence[Any], train_fn: TrainFn) -> Forest:
        """Build a forest over the given pools.

        Args:
            samples: Full sample pool
            attrs: Full attribute pool
            train_fn: Trainer called as ``train_fn(samples, attrs)``

        Returns:
            Forest with ``config.n_members`` members
        """
        return build_forest(
            self.config.n_members,
            samples,
            attrs,
            self.config.sampling.n_samples_per_member,
            self.config.sampling.n_attrs_per_member,
            train_fn,
            random_state=self.config.random_state,
            carry_forward=self.config.sampling.carry_forward,
            n_workers=self.config.parallel.n_workers,
            classify_workers=self.config.parallel.classify_workers,
            log_every=self.config.tracking.log_every,
            logger=self.logger
        )
