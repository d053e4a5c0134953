"""Ready-made trainers and members.

The forest only needs a trainer callable and members exposing
``classify(query)``. This subpackage provides a scikit-learn backed pair.
"""

from .sklearn_member import SklearnMember, make_sklearn_trainer

__all__ = [
    'SklearnMember',
    'make_sklearn_trainer'
]
