"""Count the pixels covered by a quarter-symmetric circle, modulo k.

A pixel at column ``x`` and row ``y`` (both counted from the centre) is
covered when its inner corner lies strictly inside the circle, so column
``x`` of one quadrant holds ``ceil(sqrt(r*r - x*x))`` pixels.  The whole
circle holds four quadrants.

Every ``count_*`` function returns the same number.  They differ in how the
columns are split between workers, which mirrors the decompositions used by
the distributed and multi-threaded variants of the computation.
"""

from __future__ import annotations

import argparse
import math
import os
import sys
from collections.abc import Iterator, Sequence


def _ceil_sqrt(n: int) -> int:
    """Return the smallest integer whose square is at least ``n``."""
    if n <= 0:
        return 0
    return math.isqrt(n - 1) + 1


def _check(radius: int, k: int, **counts: int) -> None:
    if radius < 0:
        raise ValueError(f"radius must not be negative, got {radius}")
    if k <= 0:
        raise ValueError(f"modulus k must be positive, got {k}")
    for name, value in counts.items():
        if value < 1:
            raise ValueError(f"{name} must be at least 1, got {value}")


def _heights(rr: int, start: int, stop: int) -> Iterator[int]:
    """Yield the column heights for ``start <= x < stop``, updating r*r - x*x incrementally."""
    remaining = rr - start * start
    for x in range(start, stop):
        yield _ceil_sqrt(remaining)
        remaining -= 2 * x + 1


def _octant_sum(rr: int, span: range) -> int:
    """Sum of ``height(x) - x`` over the columns of ``span``."""
    return sum(_heights(rr, span.start, span.stop)) - sum(span)


def octant_limit(radius: int) -> int:
    """Return ceil(radius / sqrt(2)): the number of columns before the diagonal."""
    if radius < 0:
        raise ValueError(f"radius must not be negative, got {radius}")
    return _ceil_sqrt((radius * radius + 1) // 2)


def partition(limit: int, size: int, rank: int) -> range:
    """Return the block of ``range(limit)`` given to ``rank`` out of ``size`` workers.

    Every worker gets ``limit // size`` items; the last one also takes the rest.
    """
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")
    if size < 1:
        raise ValueError(f"size must be at least 1, got {size}")
    if not 0 <= rank < size:
        raise ValueError(f"rank must lie in [0, {size}), got {rank}")
    step = limit // size
    start = rank * step
    stop = limit if rank == size - 1 else (rank + 1) * step
    return range(start, stop)


def count_naive(radius: int, k: int) -> int:
    """Count the pixels column by column in a single pass."""
    _check(radius, k)
    rr = radius * radius
    pixels = 0
    for height in _heights(rr, 0, radius):
        pixels = (pixels + height) % k
    return 4 * pixels % k


def count_strided(radius: int, k: int, workers: int) -> int:
    """Count the pixels with columns dealt out round-robin to ``workers``."""
    _check(radius, k, workers=workers)
    rr = radius * radius
    partials = [
        sum(_ceil_sqrt(rr - x * x) for x in range(rank, radius, workers)) % k
        for rank in range(workers)
    ]
    return 4 * sum(partials) % k


def count_chunked(radius: int, k: int, workers: int) -> int:
    """Count the pixels with columns handed out in chunks of ``radius // workers + 1``."""
    _check(radius, k, workers=workers)
    rr = radius * radius
    chunk = radius // workers + 1
    partials = []
    for tid in range(workers):
        pixels = sum(
            sum(_heights(rr, start, min(start + chunk, radius)))
            for start in range(tid * chunk, radius, workers * chunk)
        )
        partials.append(pixels % k)
    return 4 * sum(partials) % k


def count_octant(radius: int, k: int, workers: int) -> int:
    """Count one octant, found by binary search, with columns dealt round-robin."""
    _check(radius, k, workers=workers)
    rr = radius * radius
    lo, hi = 0, radius + 1
    while lo < hi:
        mid = (lo + hi) // 2
        if _ceil_sqrt(rr - mid * mid) >= mid + 1:
            lo = mid + 1
        else:
            hi = mid
    partials = [
        sum(_ceil_sqrt(rr - x * x) - x for x in range(rank, lo, workers)) % k
        for rank in range(workers)
    ]
    diagonal = octant_limit(radius)
    return 4 * (2 * sum(partials) - diagonal) % k


def count_partitioned(radius: int, k: int, workers: int) -> int:
    """Count one octant with contiguous blocks of columns per worker."""
    _check(radius, k, workers=workers)
    rr = radius * radius
    limit = octant_limit(radius)
    partials = [
        _octant_sum(rr, partition(limit, workers, rank)) % k
        for rank in range(workers)
    ]
    return 4 * (2 * sum(partials) - limit) % k


def count_hybrid(radius: int, k: int, ranks: int, threads: int) -> int:
    """Count one octant split into blocks per rank, each split again per thread."""
    _check(radius, k, ranks=ranks, threads=threads)
    rr = radius * radius
    limit = octant_limit(radius)
    total = 0
    for rank in range(ranks):
        span = partition(limit, ranks, rank)
        local = 0
        for tid in range(threads):
            block = partition(len(span), threads, tid)
            shifted = range(span.start + block.start, span.start + block.stop)
            local += _octant_sum(rr, shifted) % k
        total += local
    return 4 * (2 * total - limit) % k


def _cpu_count() -> int:
    try:
        return len(os.sched_getaffinity(0))
    except AttributeError:
        return os.cpu_count() or 1


_METHODS = ("naive", "strided", "chunked", "octant", "partitioned", "hybrid")


def main(argv: Sequence[str] | None = None) -> int:
    """Print the pixel count for a radius and modulus given on the command line."""
    parser = argparse.ArgumentParser(
        prog="pixelcircle",
        description="Count the pixels covered by a circle, modulo k.",
    )
    parser.add_argument("values", nargs="*", type=int, metavar="N", help="radius and k")
    parser.add_argument("--method", choices=_METHODS, default="partitioned")
    parser.add_argument("--workers", type=int, default=None, help="workers or ranks")
    parser.add_argument("--threads", type=int, default=None, help="threads per rank")
    args = parser.parse_args(argv)

    if len(args.values) != 2:
        print("must provide exactly 2 arguments!", file=sys.stderr)
        return 1
    radius, k = args.values

    try:
        if args.method == "naive":
            result = count_naive(radius, k)
        elif args.method == "hybrid":
            result = count_hybrid(
                radius, k, args.workers or 1, args.threads or _cpu_count()
            )
        else:
            counter = {
                "strided": count_strided,
                "chunked": count_chunked,
                "octant": count_octant,
                "partitioned": count_partitioned,
            }[args.method]
            result = counter(radius, k, args.workers or _cpu_count())
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())