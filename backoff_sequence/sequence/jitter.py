from __future__ import annotations

import random
from typing import Any, Iterable, Iterator, Optional


def full_jitter(
    delays: Iterable[Any], rng: Optional[random.Random] = None
) -> Iterator[Any]:
    """
    Apply 'full jitter' to a sequence of base delays.

    For each base delay d, yield a random value in [0, d]. ``delays`` is
    usually a ``Backoff`` or one of its sequences, so the bounds and iteration
    count come from there and jitter is applied last:

        full_jitter(Backoff(Exponential(2)).max_iterations(5).max(30))

    Numbers and ``timedelta`` delays are both accepted; negative delays
    become zero. Pass ``rng`` for reproducible output.
    """
    uniform = (rng or random).random
    for d in delays:
        # d * 0 is the zero of d's own type
        yield max(d * 0, d) * uniform()
