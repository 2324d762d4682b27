import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import httpx

from roaster.config import ROASTER_SERVER_URL
from roaster.errors import RoastRequestFailed
from roaster.prompts import MISSING_ROAST

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoastCard:
    index: int
    todo: str
    roast: str

    @property
    def number(self) -> int:
        return self.index + 1


def pair_roasts(todos: Sequence[str], roasts: Sequence[str]) -> List[RoastCard]:
    """Pair each todo with the roast at the same position"""
    return [
        RoastCard(
            index=i,
            todo=todo,
            roast=(roasts[i] if i < len(roasts) else "") or MISSING_ROAST,
        )
        for i, todo in enumerate(todos)
    ]


class RoastClient:
    """Calls the roast endpoint once per submitted batch"""

    def __init__(
        self,
        base_url: str = ROASTER_SERVER_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.transport = transport
        self.timeout = timeout

    async def fetch_roasts(self, todos: Sequence[str]) -> List[str]:
        async with httpx.AsyncClient(
            base_url=self.base_url, transport=self.transport, timeout=self.timeout
        ) as client:
            try:
                response = await client.post(
                    "/api/roast",
                    json={"todos": list(todos)},
                    headers={"Content-Type": "application/json"},
                )
                if response.status_code != 200:
                    logger.error(f"⚠ Roast endpoint returned {response.status_code}")
                    raise RoastRequestFailed("Failed to generate roasts")

                body = response.json()
            except (httpx.HTTPError, ValueError) as e:
                logger.error(f"Roast request failed: {e}")
                raise RoastRequestFailed("Failed to generate roasts") from e

        roasts = body.get("roasts") if isinstance(body, dict) else None
        if not isinstance(roasts, list):
            logger.error(f"⚠ Roast endpoint returned an unexpected body: {body!r}")
            raise RoastRequestFailed("Failed to generate roasts")

        return [roast if isinstance(roast, str) else "" for roast in roasts]

    async def roast_cards(self, todos: Sequence[str]) -> List[RoastCard]:
        roasts = await self.fetch_roasts(todos)
        return pair_roasts(todos, roasts)
