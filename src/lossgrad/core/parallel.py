import concurrent.futures
import logging
from typing import Callable

import numpy as np

from .utils import split_outer

logger = logging.getLogger(__name__)


def map_outer(fn: Callable, a: np.ndarray, b: np.ndarray, workers: int) -> np.ndarray:
    """
    Evaluate fn(a_chunk, b_chunk) over matching chunks of axis 0 on a thread pool.

    a and b must share a shape with at least one dimension. Each chunk only
    reads its own rows, so no locking is involved; the chunk results are
    concatenated back in their original order.
    """
    a_chunks = split_outer(a, workers)
    b_chunks = split_outer(b, workers)
    if len(a_chunks) <= 1:
        return fn(a, b)

    logger.debug("Splitting %s into %d chunks", a.shape, len(a_chunks))
    with concurrent.futures.ThreadPoolExecutor(
        max_workers=len(a_chunks),
        thread_name_prefix="lossgrad"
    ) as executor:
        futures = [executor.submit(fn, x, y) for x, y in zip(a_chunks, b_chunks)]
        # result() re-raises a worker's exception in the caller
        parts = [f.result() for f in futures]
    return np.concatenate(parts, axis=0)
