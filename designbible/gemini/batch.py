"""Sequential art generation for a whole card list."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from designbible.cards.identity import group_identity
from designbible.cards.parse import CardRecord
from designbible.config import Settings
from designbible.errors import ImageGenerationError
from designbible.gemini.image import generate_image, make_client
from designbible.gemini.prompt import generate_prompt

logger = logging.getLogger(__name__)


@dataclass
class ArtRunSummary:
    total: int = 0
    skipped: list[str] = field(default_factory=list)
    generated: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)


def pending_cards(cards: list[CardRecord], image_dir: Path) -> list[CardRecord]:
    """Cards whose image file does not exist yet."""
    return [card for card in cards if not (image_dir / card.file_name).exists()]


def generate_art(
    cards: list[CardRecord],
    *,
    image_dir,
    settings: Settings,
    client=None,
    sleep: Callable[[float], None] = time.sleep,
    generate: Callable = generate_image,
) -> ArtRunSummary:
    """Generate missing card art one card at a time.

    Cards that already have an image are skipped. A failed card is logged
    and counted; the run continues with the next card.
    """
    image_dir = Path(image_dir)
    image_dir.mkdir(parents=True, exist_ok=True)

    summary = ArtRunSummary(total=len(cards))
    todo = pending_cards(cards, image_dir)
    summary.skipped = [card.file_name for card in cards if (image_dir / card.file_name).exists()]

    logger.info(f"Found {len(cards)} total cards")
    if summary.skipped:
        logger.info(f"Skipping {len(summary.skipped)} cards that are already generated")
    logger.info(f"Processing {len(todo)} remaining cards")

    if not todo:
        return summary

    if client is None and generate is generate_image:
        client = make_client(settings.api_key)

    for i, card in enumerate(todo):
        out_path = image_dir / card.file_name
        if out_path.exists():
            # Duplicate ids can map two cards to one file
            logger.info(f"[SKIP] {card.file_name} already exists")
            summary.skipped.append(card.file_name)
            continue

        logger.info(f"Generating: {card.name} ({group_identity(card)})")
        try:
            generate(
                generate_prompt(card),
                str(out_path),
                api_key=settings.api_key,
                model=settings.image_model,
                client=client,
            )
        except ImageGenerationError as e:
            logger.error(f"Failed: {card.file_name}: {e}")
            summary.failed.append(card.file_name)
        else:
            logger.info(f"Saved to {out_path}")
            summary.generated.append(card.file_name)

        if i < len(todo) - 1:
            sleep(settings.request_delay_s)

    return summary
