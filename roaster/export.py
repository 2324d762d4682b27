import textwrap
from datetime import date
from pathlib import Path
from typing import List, Optional, Sequence, Tuple
from urllib.parse import quote

from PIL import Image, ImageDraw, ImageFont

from roaster.client import RoastCard

TWEET_INTENT_URL = "https://twitter.com/intent/tweet"


def export_filename(ext: str, today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"roasted-todos-{today.isoformat()}.{ext}"


def export_text(cards: Sequence[RoastCard]) -> str:
    """Numbered todo/roast blocks for the plain-text download"""
    return "\n\n".join(f'{card.number}. {card.todo}\n   "{card.roast}"' for card in cards)


def clipboard_text(cards: Sequence[RoastCard]) -> str:
    return "\n\n".join(f'{card.todo}: "{card.roast}"' for card in cards)


def tweet_text(cards: Sequence[RoastCard]) -> str:
    quoted = "\n\n".join(f'"{card.roast}"' for card in cards)
    return (
        f"Just got roasted on {len(cards)} todos! 🔥 Here's the brutal truth about my procrastination:"
        f"\n\n{quoted}\n\nGo get roasted too →"
    )


def tweet_url(cards: Sequence[RoastCard]) -> str:
    # encodeURIComponent equivalent
    return f"{TWEET_INTENT_URL}?text={quote(tweet_text(cards), safe='')}"


def _card_lines(card: RoastCard, width: int) -> List[Tuple[str, bool]]:
    """(text, is_heading) lines for one card"""
    lines = [(line, True) for line in textwrap.wrap(f"{card.number}. {card.todo}", width) or [""]]
    lines += [(line, False) for line in textwrap.wrap(f'"{card.roast}"', width)]
    return lines


def render_png(
    cards: Sequence[RoastCard],
    path: Path,
    scale: int = 2,
    width: int = 640,
    wrap: int = 60,
) -> Path:
    """Rasterize the roast cards onto a white canvas and save it as PNG"""

    path = Path(path)
    font = ImageFont.load_default(size=14 * scale)
    padding = 24 * scale
    line_height = 22 * scale
    card_gap = 16 * scale

    blocks = [_card_lines(card, wrap) for card in cards]
    height = padding * 2 + sum(len(lines) * line_height for lines in blocks)
    height += card_gap * max(len(blocks) - 1, 0)

    image = Image.new("RGB", (width * scale, max(height, padding * 2)), "#ffffff")
    draw = ImageDraw.Draw(image)

    y = padding
    for lines in blocks:
        for text, is_heading in lines:
            draw.text((padding, y), text, fill="#111827" if is_heading else "#374151", font=font)
            y += line_height
        y += card_gap

    image.save(path, format="PNG")
    return path
