"""Typed failures raised by the bagging layer.

All of these are precondition checks on caller input. Errors raised by a
trainer or by a member's ``classify`` are never caught or wrapped here.
"""


class ForestError(Exception):
    """Base class for all bagforest errors."""


class InvalidSubsetSizeError(ForestError, ValueError):
    """Requested subset size is negative or larger than its pool.
    
    Attributes:
        requested: Requested number of items
        available: Number of items in the pool
    """
    
    kind = 'subset'
    
    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Invalid {self.kind} size {requested}: must be in [0, {available}]"
        )


class InvalidSampleSizeError(InvalidSubsetSizeError):
    """Samples per member is out of range for the sample pool."""
    
    kind = 'sample'


class InvalidAttrSizeError(InvalidSubsetSizeError):
    """Attributes per member is out of range for the attribute pool."""
    
    kind = 'attribute'


class EmptyForestError(ForestError, ValueError):
    """Classification was requested from a forest with no members."""
    
    def __init__(self, message: str = "Cannot classify with an empty forest (0 members)"):
        super().__init__(message)
