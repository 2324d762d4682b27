import json
from typing import Any, List

from roaster.errors import InvalidBatch


def check_provider_credentials(model_name: str, api_key: str) -> None:
    """Check that the provider behind `model_name` has an API key available"""
    provider = model_name.split(":", 1)[0] if ":" in model_name else ""
    if provider == "anthropic" and not api_key:
        raise RuntimeError(
            "ANTHROPIC_API_KEY is not set\n"
            "Roast requests will fail with 500 until it is configured."
        )


def extract_todos(body: Any) -> List[str]:
    """
    Pull the `todos` list out of a decoded request body.

    Anything other than an object with a non-empty `todos` array is an
    InvalidBatch. Non-string entries are rendered as JSON (null, true, 42)
    for the prompt.
    """
    if not isinstance(body, dict):
        raise InvalidBatch()

    todos = body.get("todos")
    if not todos or not isinstance(todos, list):
        raise InvalidBatch()

    return [todo if isinstance(todo, str) else json.dumps(todo) for todo in todos]
