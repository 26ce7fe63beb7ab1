from __future__ import annotations

from collections import Counter
from typing import Any, Dict, List, Sequence

from .models import MAIN_MAX, STAR_MAX, Ticket


def _space_list(values: Sequence[int]) -> str:
    return " ".join(str(v) for v in values)


def draws_rows(tickets: Sequence[Ticket]) -> list[dict]:
    rows: List[Dict[str, Any]] = []
    for i, t in enumerate(tickets, start=1):
        rows.append(
            {
                "draw": i,
                "main": _space_list(t.main),
                "stars": _space_list(t.stars),
                "numbers": _space_list(t.numbers),
            }
        )
    return rows


def _frequency(values: Counter, max_value: int) -> Dict[int, int]:
    # every ball listed, including ones never drawn
    return {n: int(values.get(n, 0)) for n in range(1, max_value + 1)}


def summary(tickets: Sequence[Ticket]) -> dict:
    main_counts: Counter = Counter()
    star_counts: Counter = Counter()
    for t in tickets:
        main_counts.update(t.main)
        star_counts.update(t.stars)

    main_freq = _frequency(main_counts, MAIN_MAX)
    star_freq = _frequency(star_counts, STAR_MAX)

    return {
        "num_draws": len(tickets),
        "main_frequency": main_freq,
        "star_frequency": star_freq,
        "main_min_seen": min(main_counts) if main_counts else None,
        "main_max_seen": max(main_counts) if main_counts else None,
        "star_min_seen": min(star_counts) if star_counts else None,
        "star_max_seen": max(star_counts) if star_counts else None,
        "main_never_drawn": [n for n, c in main_freq.items() if c == 0],
        "star_never_drawn": [n for n, c in star_freq.items() if c == 0],
    }


def draws_df(tickets: Sequence[Ticket]):
    import pandas as pd  # type: ignore

    return pd.DataFrame(draws_rows(tickets))
