from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from pathlib import Path

from kungfu import Error, Ok, Result

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Unavailable(Exception):
    source: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return f"{self.source}: unavailable"


@dataclass(slots=True)
class FakeMirror:
    name: str
    delay_seconds: float = 0.0
    healthy: bool = True

    async def fetch_size(self, path: str) -> Result[int, Unavailable]:
        await asyncio.sleep(self.delay_seconds)
        if not self.healthy:
            return Error(Unavailable(self.name))
        return Ok(len(path) * 1024)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
