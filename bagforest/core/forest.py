"""Forest container and prediction aggregation.

A Forest is an immutable, ordered collection of trained members. Its
prediction is the per-class mean of every member's output.
"""

from collections import defaultdict
from collections.abc import Sequence
from typing import Any, Dict, Hashable, Iterable, Iterator, List, Mapping, Optional, Protocol

from bagforest.exceptions import EmptyForestError
from bagforest.parallel import classify_members_parallel


class Member(Protocol):
    """A trained classifier as seen by the forest.

    The only capability required is mapping one query record to a
    class -> non-negative weight mapping.
    """

    def classify(self, query: Any) -> Mapping[Hashable, float]:
        ...


def aggregate_predictions(predictions: Iterable[Mapping[Hashable, float]]) -> Dict[Hashable, float]:
    """Average per-class weights over a sequence of member predictions.

    A class missing from a member's output counts as zero for that member.
    Classes no member predicted are absent from the result.

    Parameters
    ----------
    predictions : iterable of mapping
        One class -> weight mapping per member.

    Returns
    -------
    probabilities : dict
        Class -> mean weight across all predictions.

    Raises
    ------
    EmptyForestError
        If ``predictions`` is empty.
    """
    totals = defaultdict(float)
    n_members = 0
    for prediction in predictions:
        n_members += 1
        for label, weight in prediction.items():
            totals[label] += weight

    if n_members == 0:
        raise EmptyForestError()

    scaler = 1.0 / n_members
    return {label: total * scaler for label, total in totals.items()}


class Forest(Sequence):
    """Ordered, read-only sequence of trained members.

    Attributes:
        members: Tuple of members in construction order
        n_workers: Default threads for member predictions

    Example:
        >>> forest = build_forest(25, rows, columns, n_samples=100, train_fn=train)
        >>> probs = forest.classify(query)
        >>> label = forest.predict(query)
    """

    def __init__(self, members: Iterable[Member], n_workers: int = 1):
        self._members = tuple(members)
        self.n_workers = n_workers

    @property
    def members(self) -> tuple:
        return self._members

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Member]:
        return iter(self._members)

    def __getitem__(self, index):
        return self._members[index]

    def __repr__(self) -> str:
        return f"Forest(n_members={len(self._members)})"

    def classify(self, query: Any, n_workers: Optional[int] = None) -> Dict[Hashable, float]:
        """Compute forest-averaged class probabilities for one query.

        Parameters
        ----------
        query : Any
            Query record, passed untouched to every member.
        n_workers : int, optional
            Threads used for member predictions; defaults to the forest's
            ``n_workers``. The sum is always reduced in member order.

        Returns
        -------
        probabilities : dict
            Class -> mean weight across all members.

        Raises
        ------
        EmptyForestError
            If the forest has no members.
        """
        if not self._members:
            raise EmptyForestError()

        if n_workers is None:
            n_workers = self.n_workers
        if n_workers > 1:
            predictions = classify_members_parallel(self._members, query, max_workers=n_workers)
        else:
            predictions = (member.classify(query) for member in self._members)

        return aggregate_predictions(predictions)

    def classify_batch(self, queries: Iterable[Any], n_workers: Optional[int] = None) -> List[Dict[Hashable, float]]:
        """Classify several queries, one result per query in order."""
        return [self.classify(query, n_workers=n_workers) for query in queries]

    def predict(self, query: Any, n_workers: Optional[int] = None) -> Hashable:
        """Return the class with the largest forest-averaged weight.

        Ties go to the class that was accumulated first.

        Raises
        ------
        EmptyForestError
            If the forest has no members.
        ValueError
            If no member predicted any class.
        """
        probabilities = self.classify(query, n_workers=n_workers)
        if not probabilities:
            raise ValueError("No member returned any class for this query")
        return max(probabilities, key=probabilities.get)
