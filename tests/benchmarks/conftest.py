"""conftest.py for benchmarks.

Provides one deterministic record set shared by every benchmark in the
session, so timings compare like with like.
"""

from __future__ import annotations

import datetime
import random

import pytest

_STATUSES = ("active", "inactive", "pending", "archived")
_CITIES = ("Ankara", "İzmir", "Bursa", "Antalya", "Istanbul", "Konya")


def _make_records(count: int, seed: int = 47) -> list[dict]:
    rng = random.Random(seed)
    start = datetime.date(2020, 1, 1)
    records = []
    for i in range(count):
        records.append(
            {
                "id": i,
                "name": f"user-{rng.randrange(count):06d}",
                "status": rng.choice(_STATUSES),
                "city": rng.choice(_CITIES),
                "score": None if i % 17 == 0 else rng.randint(0, 1000),
                "joined": start + datetime.timedelta(days=rng.randrange(1500)),
                "tags": rng.sample(("a", "b", "c", "d", "e"), k=rng.randint(0, 3)),
                "profile": {"team": f"team-{i % 12}"},
            }
        )
    return records


@pytest.fixture(scope="session")
def records() -> list[dict]:
    """20 000 synthetic records."""
    return _make_records(20_000)
