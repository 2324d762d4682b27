import logging
from typing import Callable, List

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from roaster.config import ANTHROPIC_API_KEY, ROAST_CONCURRENCY, ROAST_MODEL
from roaster.errors import InvalidBatch
from roaster.llm import RoastGenerator
from roaster.logging_utils import setup_logging
from roaster.utils import check_provider_credentials, extract_todos

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Todo Roaster")


# Response Models
class RoastResponse(BaseModel):
    roasts: List[str]


class ErrorResponse(BaseModel):
    error: str


def get_generator_factory() -> Callable[[], RoastGenerator]:
    """Return the callable that builds a RoastGenerator for a request"""
    return RoastGenerator


@app.on_event("startup")
async def startup_event():
    """Validate environment on startup"""
    logger.info("Starting Todo Roaster...")
    logger.info(f"📊 Model: {ROAST_MODEL} (concurrency={ROAST_CONCURRENCY})")

    try:
        check_provider_credentials(ROAST_MODEL, ANTHROPIC_API_KEY)
        logger.info("✓ Provider credentials OK")
    except RuntimeError as e:
        logger.warning(f"✗ Provider credential check failed:\n{e}")

    logger.info("✅ Server ready!")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(ErrorResponse(error=message).model_dump(), status_code=status_code)


@app.post(
    "/api/roast",
    response_model=RoastResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def roast_todos(
    request: Request,
    generator_factory: Callable[[], RoastGenerator] = Depends(get_generator_factory),
):
    """Roast every submitted todo, one provider call each"""

    try:
        body = await request.json()

        try:
            todos = extract_todos(body)
        except InvalidBatch as e:
            return _error(400, str(e))

        logger.info(f"🔥 Roasting {len(todos)} todos")
        generator = generator_factory()
        roasts = await generator.generate(todos)

        return RoastResponse(roasts=roasts)

    except Exception:
        logger.exception("Error generating roasts")
        return _error(500, "Failed to generate roasts")


@app.get("/")
async def root():
    return {"message": "Todo Roaster", "status": "running"}


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
