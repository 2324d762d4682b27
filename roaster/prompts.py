FALLBACK_ROAST = (
    "Even your procrastination has procrastination. This needs a roast of a roast."
)

MISSING_ROAST = "Failed to roast this one"

ROAST_PROMPT = """You're a hilariously brutal AI roast bot. Give one short, funny, brutally honest roast about this todo task. Make it witty, motivating, and personal. Don't use emojis. Keep it under 3 sentences. The roast should make them laugh while also being real about their procrastination patterns.

Todo: "{todo}"

Roast:"""


def roast_prompt(todo: str) -> str:
    """Embed the literal todo text into the roast instruction"""
    return ROAST_PROMPT.format(todo=todo)
