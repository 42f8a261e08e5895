"""
Fan-out / fan-in helpers shared by the per-vertex analyzers.

Work is split into chunks of vertices, each chunk is handed to a thread pool
and returns its own local result. Results come back in submission order and
are folded by the caller on its own thread, so no accumulator is ever shared
between workers.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterator, List, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

DEFAULT_CHUNK_SIZE = 64


def chunked(items: Sequence[T], size: int = DEFAULT_CHUNK_SIZE) -> List[Sequence[T]]:
    """Split items into consecutive slices of at most size elements."""
    if size < 1:
        raise ValueError("chunk size must be at least 1.")
    return [items[i:i + size] for i in range(0, len(items), size)]


def fan_out(func: Callable[[Sequence[T]], R], chunks: List[Sequence[T]],
            workers: Optional[int] = None) -> Iterator[R]:
    """
    Run func on every chunk and yield the results in chunk order.

    Args:
        func: Pure function of one chunk; must only read shared state
        chunks: Units of work
        workers: Thread count; None uses the ThreadPoolExecutor default,
                 1 runs everything inline on the calling thread

    Yields:
        func(chunk) for each chunk, in the order the chunks were given

    Raises:
        ValueError: If workers is less than 1
        Exception: The first exception raised by func; remaining work is cancelled
    """
    if workers is not None and workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}.")

    if workers == 1 or len(chunks) <= 1:
        for chunk in chunks:
            yield func(chunk)
        return

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(func, chunk) for chunk in chunks]
        logger.debug("Dispatched %d chunk(s) to thread pool", len(futures))
        try:
            for future in futures:
                yield future.result()
        finally:
            for future in futures:
                future.cancel()
