"""Gemini art generation for designbible."""

from designbible.gemini.prompt import generate_prompt, visual_context
from designbible.gemini.image import generate_image
from designbible.gemini.batch import ArtRunSummary, generate_art, pending_cards

__all__ = [
    # prompt.py
    "generate_prompt",
    "visual_context",
    # image.py
    "generate_image",
    # batch.py
    "ArtRunSummary",
    "generate_art",
    "pending_cards",
]
