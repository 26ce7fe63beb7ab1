from __future__ import annotations

import random
from typing import List, Optional

from .models import MAIN_COUNT, MAIN_MAX, STAR_COUNT, STAR_MAX, Ticket


def get_random_number_up_to(max_value: int, rng: Optional[random.Random] = None) -> int:
    """Return a uniformly random integer in [1, max_value]."""
    r = rng or random
    return r.randint(1, max_value)


def get_unique_balls(amount: int, max_value: int, rng: Optional[random.Random] = None) -> List[int]:
    """
    Rejection sampling: draw a candidate in [1, max_value] and keep it only if
    it hasn't been drawn yet, until `amount` balls are held.
    Order of the result is draw order (unsorted).
    """
    if amount < 0:
        raise ValueError(f"amount must be >= 0, got {amount}")
    if amount > max_value:
        raise ValueError(f"cannot draw {amount} unique balls from 1..{max_value}")

    balls: List[int] = []
    seen = set()
    while len(balls) < amount:
        ball = get_random_number_up_to(max_value, rng)
        if ball not in seen:
            seen.add(ball)
            balls.append(ball)
    return balls


def draw(rng: Optional[random.Random] = None) -> Ticket:
    main = sorted(get_unique_balls(MAIN_COUNT, MAIN_MAX, rng))
    stars = sorted(get_unique_balls(STAR_COUNT, STAR_MAX, rng))
    return Ticket(main=main, stars=stars)


def draw_ticket() -> List[int]:
    """
    Draw a EuroMillions ticket as 7 numbers:
    5 ascending main balls (1..50) followed by 2 ascending lucky stars (1..12).
    """
    return draw().numbers


def draw_many(count: int, rng: Optional[random.Random] = None) -> List[Ticket]:
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    return [draw(rng) for _ in range(count)]
