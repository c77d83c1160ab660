"""In-process people source with simulated latency, failures and overlap."""

import asyncio
import logging
import random
from typing import Awaitable, List, Optional

from pagedlist.domain import NetworkError, Page, Record

logger = logging.getLogger("PagedList.DemoPageFetcher")

FIRST_NAMES = [
    "Ada", "Alan", "Barbara", "Dennis", "Edsger", "Frances", "Grace",
    "Guido", "Ken", "Linus", "Margaret", "Niklaus", "Radia", "Tim",
]
LAST_NAMES = [
    "Allen", "Dijkstra", "Hamilton", "Hopper", "Kay", "Lovelace", "Liskov",
    "Perlman", "Ritchie", "Thompson", "Torvalds", "Turing", "Wirth",
]


class DemoPageFetcher:
    """Serves a fixed population in pages.

    Cursors are the offset of the next page as a string. With probability
    ``duplicate_rate`` a follow-up page starts a few rows early so it
    overlaps the previous one.
    """

    def __init__(
        self,
        total_records: int = 100,
        page_size: int = 20,
        failure_rate: float = 0.2,
        duplicate_rate: float = 0.1,
        latency_seconds: float = 0.5,
        seed: Optional[int] = None,
    ):
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.page_size = page_size
        self.failure_rate = failure_rate
        self.duplicate_rate = duplicate_rate
        self.latency_seconds = latency_seconds
        self._random = random.Random(seed)
        self.people = self._generate_people(total_records)

    def _generate_people(self, count: int) -> List[Record]:
        return [
            Record(
                id=index + 1,
                display_name=(
                    f"{self._random.choice(FIRST_NAMES)} "
                    f"{self._random.choice(LAST_NAMES)}"
                ),
            )
            for index in range(count)
        ]

    def fetch(self, cursor: Optional[str]) -> Awaitable[Page]:
        """Return the page request for ``cursor``.

        Each request gets its own generator, drawn on the calling thread.
        """
        rng = random.Random(self._random.getrandbits(64))
        return self._serve(cursor, rng)

    async def _serve(self, cursor: Optional[str], rng: random.Random) -> Page:
        if self.latency_seconds > 0:
            await asyncio.sleep(rng.uniform(0, self.latency_seconds))

        if rng.random() < self.failure_rate:
            raise NetworkError("Internal Server Error")

        try:
            start = int(cursor) if cursor is not None else 0
        except ValueError:
            raise NetworkError(f"Invalid cursor: {cursor}") from None
        if start < 0 or start > len(self.people):
            raise NetworkError(f"Invalid cursor: {cursor}")

        if start > 0 and rng.random() < self.duplicate_rate:
            start = max(0, start - rng.randint(1, 3))

        end = min(start + self.page_size, len(self.people))
        next_cursor = str(end) if end < len(self.people) else None
        logger.debug(f"Serving records {start}..{end} (next={next_cursor})")
        return Page(records=tuple(self.people[start:end]), next_cursor=next_cursor)
