"""Consolidated configuration for building and querying a bagged forest.

This module provides a type-safe, validated configuration structure using
dataclasses. Everything that shapes a Build call lives here:
- Forest size and random seed
- Per-member sample and attribute subset sizes
- Thread-pool sizes for training and classification
- Logging level and destination

The configuration is organized hierarchically:
    ForestConfig (root)
    ├── SamplingConfig
    ├── ParallelConfig
    └── TrackingConfig

Pool-dependent checks (subset size vs. pool length) are not part of config
validation. They run inside ``build_forest`` once the pools are known.

Usage:
    >>> from bagforest.config import ForestConfig
    >>> config = ForestConfig()  # Use defaults
    >>> config.validate()  # Check configuration validity

    >>> # Or customize
    >>> config = ForestConfig(
    ...     n_members=50,
    ...     sampling=SamplingConfig(n_samples_per_member=200, n_attrs_per_member=4)
    ... )
"""

from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path


# ==============================================================================
# SAMPLING CONFIGURATION
# ==============================================================================

@dataclass
class SamplingConfig:
    """Per-member sample and attribute subset configuration.

    Each member is trained on a uniformly random subset of the sample pool
    and a uniformly random subset of the attribute pool, both drawn without
    replacement.

    Attributes:
        n_samples_per_member: Samples given to each member's trainer
        n_attrs_per_member: Attributes given to each member's trainer. None
            means round(sqrt(len(attribute pool))).
        carry_forward: Reuse one scratch buffer across members, reshuffling
            it forward (True) or restore pristine pool order before every
            member (False)
    """
    n_samples_per_member: int = 100
    n_attrs_per_member: Optional[int] = None
    carry_forward: bool = True

    def validate(self):
        """Validate sampling configuration."""
        assert self.n_samples_per_member >= 0, "n_samples_per_member must be non-negative"
        assert self.n_attrs_per_member is None or self.n_attrs_per_member >= 0, \
            "n_attrs_per_member must be None or non-negative"


# ==============================================================================
# PARALLEL EXECUTION CONFIGURATION
# ==============================================================================

@dataclass
class ParallelConfig:
    """Thread-pool configuration.

    Resampling always runs sequentially on the calling thread. Only the
    trainer calls (after all subsets are drawn) and member predictions are
    fanned out.

    Attributes:
        n_workers: Threads used for trainer calls (1 = sequential)
        classify_workers: Threads used for member predictions (1 = sequential)
    """
    n_workers: int = 1
    classify_workers: int = 1

    def validate(self):
        """Validate parallel configuration."""
        assert self.n_workers > 0, "n_workers must be positive"
        assert self.classify_workers > 0, "classify_workers must be positive"


# ==============================================================================
# TRACKING CONFIGURATION
# ==============================================================================

@dataclass
class TrackingConfig:
    """Logging configuration.

    Attributes:
        log_level: Logging level name
        log_file: Optional file that receives a copy of the log
        log_every: Emit a progress line every this many trained members
    """
    log_level: str = 'INFO'
    log_file: Optional[Path] = None
    log_every: int = 10

    def __post_init__(self):
        """Convert strings to Path objects."""
        if self.log_file:
            self.log_file = Path(self.log_file)

    def validate(self):
        """Validate tracking configuration."""
        assert self.log_level in ['DEBUG', 'INFO', 'WARNING', 'ERROR'], \
            "log_level must be DEBUG, INFO, WARNING, or ERROR"
        assert self.log_every > 0, "log_every must be positive"


# ==============================================================================
# ROOT CONFIGURATION
# ==============================================================================

@dataclass
class ForestConfig:
    """Complete forest configuration.

    This is the root configuration object. Create an instance and call
    validate() before use, or hand it to ``ForestBuilder`` which validates
    it for you.

    Attributes:
        n_members: Number of members in the forest
        random_state: Random seed for reproducibility (None = unseeded)
        sampling: Per-member subset configuration
        parallel: Thread-pool configuration
        tracking: Logging configuration

    Example:
        >>> config = ForestConfig(n_members=25)
        >>> config.validate()
        >>> print(config.summary())
    """
    n_members: int = 10
    random_state: Optional[int] = 315
    sampling: SamplingConfig = field(default_factory=SamplingConfig)
    parallel: ParallelConfig = field(default_factory=ParallelConfig)
    tracking: TrackingConfig = field(default_factory=TrackingConfig)

    def validate(self):
        """Validate entire configuration hierarchy.

        Raises:
            AssertionError: If any configuration parameter is invalid
        """
        assert self.n_members >= 0, "n_members must be non-negative"
        self.sampling.validate()
        self.parallel.validate()
        self.tracking.validate()

    def summary(self) -> str:
        """Generate a human-readable configuration summary.

        Returns:
            Multi-line string describing key configuration parameters
        """
        n_attrs = self.sampling.n_attrs_per_member
        lines = [
            "Forest Configuration Summary",
            "=" * 50,
            f"Random State: {self.random_state}",
            f"Members: {self.n_members}",
            "",
            "Sampling:",
            f"  Samples per member: {self.sampling.n_samples_per_member}",
            f"  Attributes per member: {'sqrt(pool)' if n_attrs is None else n_attrs}",
            f"  Carry forward: {self.sampling.carry_forward}",
            "",
            "Parallel Execution:",
            f"  Training workers: {self.parallel.n_workers}",
            f"  Classification workers: {self.parallel.classify_workers}",
            "",
            "Tracking:",
            f"  Log level: {self.tracking.log_level}",
            f"  Log file: {self.tracking.log_file}",
            ""
        ]
        return "\n".join(lines)
