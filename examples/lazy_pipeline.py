from __future__ import annotations

import logging

from streamkit import Optional, ops

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("lazy_pipeline")


def noisy_source(limit: int):
    for value in range(limit):
        logger.info("producing %d", value)
        yield value


def first_square_over(threshold: int) -> Optional[int]:
    squares = ops.map(noisy_source(1_000_000), lambda v: v * v)
    return ops.find_first(ops.filter(squares, lambda v: v > threshold))


if __name__ == "__main__":
    # Only the values up to the first match are produced.
    first_square_over(50).if_present_or_else(
        lambda v: print("found", v),
        lambda: print("nothing found"),
    )

    evens = ops.filter(iter(range(10)), lambda v: v % 2 == 0)
    print("sum of evens:", ops.reduce(evens, 0, lambda a, b: a + b))
    print("pairs:", ops.to_list(ops.map_multi(iter("ab"), lambda c, emit: (emit(c), emit(c.upper())))))
