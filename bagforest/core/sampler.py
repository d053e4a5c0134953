"""Per-member resampling of samples and attributes.

Provides the in-place partial Fisher-Yates selection used to draw each
member's training subsets, and the scratch state that one Build call carries
from member to member.
"""

from typing import Any, Optional, Sequence, Tuple, Union
import numpy as np
from sklearn.utils import check_random_state

from bagforest.exceptions import InvalidAttrSizeError, InvalidSampleSizeError, InvalidSubsetSizeError


def partial_shuffle(pool: list, k: int, rng: np.random.RandomState) -> None:
    """Move a uniformly random k-subset of ``pool`` to its first k slots.

    For each position i in [0, k) an index j is drawn uniformly from
    [i, len(pool) - 1] and slots i and j are swapped. Duplicate values are
    treated as distinct slots. The tail [k, len(pool)) keeps the unchosen
    items in some byproduct order.

    Parameters
    ----------
    pool : list
        Working buffer, reordered in place.
    k : int
        Number of items to select, 0 <= k <= len(pool).
    rng : np.random.RandomState
        Random source; consumes exactly k draws.

    Raises
    ------
    InvalidSubsetSizeError
        If k is negative or larger than the pool.
    """
    n = len(pool)
    if k < 0 or k > n:
        raise InvalidSubsetSizeError(k, n)

    for i in range(k):
        j = rng.randint(i, n)
        pool[i], pool[j] = pool[j], pool[i]


class ResamplingContext:
    """Scratch buffers and random source for one Build call.

    Holds private copies of the sample and attribute pools. The caller's
    sequences are never touched. In carry-forward mode (the default) each
    member's draw starts from the buffer order the previous draw left behind;
    otherwise both buffers are restored to the original pool order first.

    Attributes:
        samples: Sample scratch buffer
        attrs: Attribute scratch buffer
        rng: NumPy random number generator
        carry_forward: Whether buffer state carries over between members
        draws: Random index draws consumed so far

    Example:
        >>> context = ResamplingContext(range(100), ['a', 'b', 'c'], random_state=42)
        >>> rows, cols = context.next_subsets(n_samples=10, n_attrs=2)
        >>> len(rows), len(cols)
        (10, 2)
    """

    def __init__(
        self,
        samples: Sequence[Any],
        attrs: Sequence[Any],
        random_state: Optional[Union[int, np.random.RandomState]] = None,
        carry_forward: bool = True
    ):
        """Initialize the resampling context.

        Args:
            samples: Full sample pool
            attrs: Full attribute pool
            random_state: None, an int seed, or an existing RandomState
            carry_forward: Reshuffle forward from the previous member's state
        """
        self._sample_pool = tuple(samples)
        self._attr_pool = tuple(attrs)
        self.samples = list(self._sample_pool)
        self.attrs = list(self._attr_pool)
        self.rng = check_random_state(random_state)
        self.carry_forward = carry_forward
        self.draws = 0

    @property
    def n_samples_available(self) -> int:
        return len(self._sample_pool)

    @property
    def n_attrs_available(self) -> int:
        return len(self._attr_pool)

    def reset(self) -> None:
        """Restore both buffers to the original pool order."""
        self.samples[:] = self._sample_pool
        self.attrs[:] = self._attr_pool

    def next_subsets(self, n_samples: int, n_attrs: int) -> Tuple[tuple, tuple]:
        """Draw the sample and attribute subsets for the next member.

        Samples are resampled first, then attributes.

        Args:
            n_samples: Samples to select
            n_attrs: Attributes to select

        Returns:
            Tuple of (samples, attrs), copies of the two buffer prefixes

        Raises:
            InvalidSampleSizeError: If n_samples is out of range
            InvalidAttrSizeError: If n_attrs is out of range
        """
        # Both sizes are checked before any buffer or rng state changes
        if n_samples < 0 or n_samples > self.n_samples_available:
            raise InvalidSampleSizeError(n_samples, self.n_samples_available)
        if n_attrs < 0 or n_attrs > self.n_attrs_available:
            raise InvalidAttrSizeError(n_attrs, self.n_attrs_available)

        if not self.carry_forward:
            self.reset()

        partial_shuffle(self.samples, n_samples, self.rng)
        partial_shuffle(self.attrs, n_attrs, self.rng)
        self.draws += n_samples + n_attrs

        return tuple(self.samples[:n_samples]), tuple(self.attrs[:n_attrs])
