"""Thread-pool workers for member training and classification.

Threads are used rather than processes because trainers and members are
arbitrary caller objects that need not be picklable. Results always come
back in submission order, and the first exception raised by a trainer or
member propagates unchanged to the caller.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Hashable, List, Mapping, Optional, Sequence


def train_members_parallel(
    jobs: Sequence,
    train_fn: Callable[[Sequence[Any], Sequence[Any]], Any],
    max_workers: Optional[int] = None
) -> list:
    """Train one member per prepared job on a thread pool.
    
    Parameters
    ----------
    jobs : sequence of TrainingJob
        Pre-drawn subsets from ``prepare_training_batch``.
    train_fn : callable
        Trainer called as ``train_fn(samples, attrs)``.
    max_workers : int or None, default=None
        Maximum number of threads. If None, the executor default is used.
    
    Returns
    -------
    members : list
        Trained members in job order.
    """
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [
            executor.submit(train_fn, list(job.samples), list(job.attrs))
            for job in jobs
        ]
        return [future.result() for future in futures]


def classify_members_parallel(
    members: Sequence,
    query: Any,
    max_workers: Optional[int] = None
) -> List[Mapping[Hashable, float]]:
    """Collect every member's prediction for one query on a thread pool.
    
    Parameters
    ----------
    members : sequence
        Objects exposing ``classify(query)``.
    query : Any
        Query record shared (read-only) by all members.
    max_workers : int or None, default=None
        Maximum number of threads. If None, the executor default is used.
    
    Returns
    -------
    predictions : list of mapping
        One class -> weight mapping per member, in member order.
    """
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(lambda member: member.classify(query), members))
