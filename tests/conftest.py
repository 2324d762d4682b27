"""pytest configuration and fixtures"""

import os

import pytest
from pydantic_ai.messages import ModelMessage, ModelResponse, TextPart
from pydantic_ai.models.function import AgentInfo, FunctionModel

# Keep provider clients from picking up real credentials
os.environ.setdefault("ANTHROPIC_API_KEY", "test-key")


def prompt_todo(messages: list[ModelMessage]) -> str:
    """Recover the todo text embedded in the roast prompt"""
    prompt = messages[-1].parts[0].content
    return prompt.split('Todo: "', 1)[1].rsplit('"\n', 1)[0]


def fake_roast_model(failing=(), empty=()):
    """
    FunctionModel that roasts a todo as `  roast of <todo>  `.

    Todos in `failing` raise, todos in `empty` answer with no text part.
    Returns the model and a list recording every todo seen, in order.
    """
    calls = []

    def roast(messages: list[ModelMessage], info: AgentInfo) -> ModelResponse:
        todo = prompt_todo(messages)
        calls.append(todo)
        if todo in failing:
            raise ConnectionError(f"provider down for {todo}")
        if todo in empty:
            return ModelResponse(parts=[])
        return ModelResponse(parts=[TextPart(f"  roast of {todo}  ")])

    return FunctionModel(roast), calls


@pytest.fixture
def make_roast_model():
    return fake_roast_model
