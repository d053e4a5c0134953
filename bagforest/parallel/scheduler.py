"""Job preparation for parallel member training.

Resampling mutates one shared scratch buffer pair and consumes one shared
random source, so it cannot run concurrently. This module runs every draw
on the calling thread, in member order, and hands each job its own copy of
the drawn subsets. Only the trainer calls are parallelized afterwards.
"""

from typing import Any, List, NamedTuple, Tuple


class TrainingJob(NamedTuple):
    """One member's pre-drawn training input."""
    member_index: int
    samples: Tuple[Any, ...]
    attrs: Tuple[Any, ...]


def prepare_training_batch(
    context,
    n_members: int,
    n_samples: int,
    n_attrs: int
) -> List[TrainingJob]:
    """Draw the subsets for every member of a forest.
    
    Draws happen in the same order as sequential building, so the pool state
    after member i's draw is computed before member i+1's draw begins.
    
    Parameters
    ----------
    context : ResamplingContext
        Scratch buffers and random source for this Build call.
    n_members : int
        Number of jobs to prepare.
    n_samples : int
        Samples per member.
    n_attrs : int
        Attributes per member.
    
    Returns
    -------
    jobs : list of TrainingJob
        One job per member, in member order.
    """
    jobs = []
    for i in range(n_members):
        samples, attrs = context.next_subsets(n_samples, n_attrs)
        jobs.append(TrainingJob(member_index=i, samples=samples, attrs=attrs))
    return jobs


def get_batch_info(jobs: List[TrainingJob]) -> dict:
    """Get summary information about a prepared batch.
    
    Parameters
    ----------
    jobs : list of TrainingJob
        Prepared training jobs.
    
    Returns
    -------
    info : dict
        Dictionary with batch statistics.
    """
    if not jobs:
        return {
            'n_jobs': 0,
            'samples_per_job': 0,
            'attrs_per_job': 0,
            'distinct_attrs': 0,
            'attr_counts': {}
        }
    
    # Count how many jobs drew each attribute
    attr_counts = {}
    for job in jobs:
        for attr in job.attrs:
            attr_counts[attr] = attr_counts.get(attr, 0) + 1
    
    return {
        'n_jobs': len(jobs),
        'samples_per_job': len(jobs[0].samples),
        'attrs_per_job': len(jobs[0].attrs),
        'distinct_attrs': len(attr_counts),
        'attr_counts': attr_counts
    }
