import asyncio
import logging
from typing import List, Optional, Sequence, Union

from pydantic_ai.direct import model_request
from pydantic_ai.messages import ModelRequest, ModelResponse, TextPart
from pydantic_ai.models import Model, infer_model
from pydantic_ai.settings import ModelSettings

from roaster.config import ROAST_CONCURRENCY, ROAST_MAX_TOKENS, ROAST_MODEL
from roaster.prompts import FALLBACK_ROAST, roast_prompt

logger = logging.getLogger(__name__)


def first_text(response: ModelResponse) -> str:
    """Return the first text block of a provider response, or "" when there is none"""
    for part in response.parts:
        if isinstance(part, TextPart):
            return part.content
    return ""


class RoastGenerator:
    """Handles LLM-based roast generation, one provider call per todo"""

    def __init__(
        self,
        model: Union[Model, str, None] = None,
        max_tokens: int = ROAST_MAX_TOKENS,
        concurrency: int = ROAST_CONCURRENCY,
    ):
        self.model = infer_model(model or ROAST_MODEL)
        self.model_settings = ModelSettings(max_tokens=max_tokens)
        self.concurrency = max(1, concurrency)
        logger.info(f"🤖 Using model {self.model.model_name} (concurrency={self.concurrency})")

    async def roast(self, todo: str) -> str:
        """Roast a single todo; provider errors propagate to the caller"""
        response = await model_request(
            self.model,
            [ModelRequest.user_text_prompt(roast_prompt(todo))],
            model_settings=self.model_settings,
        )
        return first_text(response).strip()

    async def _roast_or_fallback(self, todo: str, semaphore: Optional[asyncio.Semaphore] = None) -> str:
        try:
            if semaphore is None:
                return await self.roast(todo)
            async with semaphore:
                return await self.roast(todo)
        except Exception as e:
            logger.warning(f"Error roasting {todo!r}: {e}")
            return FALLBACK_ROAST

    async def generate(self, todos: Sequence[str]) -> List[str]:
        """Roast every todo, keeping input order and substituting the fallback per failed item"""

        if self.concurrency == 1:
            roasts = []
            for todo in todos:
                roasts.append(await self._roast_or_fallback(todo))
            return roasts

        semaphore = asyncio.Semaphore(self.concurrency)
        return list(
            await asyncio.gather(*(self._roast_or_fallback(todo, semaphore) for todo in todos))
        )
