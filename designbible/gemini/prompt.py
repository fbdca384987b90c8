"""Illustration prompts for card art."""

from designbible.cards.identity import casting_colors, group_identity
from designbible.cards.parse import CardRecord

ASPECT_RATIO = "5:4"


def visual_context(card: CardRecord) -> str:
    """Flavor text if the card has any, otherwise its rules text."""
    if card.flavor_lines:
        return " ".join(card.flavor_lines)
    return " ".join(card.rules_lines)


def generate_prompt(card: CardRecord) -> str:
    """Build the image generation prompt for a card."""
    shard = group_identity(card)
    palette = ", ".join(casting_colors(card))

    lines = [
        "Generate an image.",
        f"Subject: A high-fidelity fantasy illustration for a Magic: The Gathering card named \"{card.name}\".",
        f"Type: {card.type_line}",
        f"Context Description: \"{visual_context(card)}\"",
        "",
        f"Setting: Set in {shard}. Use your knowledge of this MTG plane's visual identity. "
        "Not all elements of the shard need to be included; focus on creating a compelling "
        "and unique composition that reflects the shard's essence.",
        "",
        "Style: Official Magic: The Gathering art style. Choose from between a highly detailed "
        "oil painting or a vibrant digital illustration. If you feel it's appropriate, you may "
        "also incorporate elements of fantasy realism or surrealism.",
        "Though cards should be on a specific shard, some elements can be from other shards "
        "to show the new, unified world.",
        "Do not mock up the whole card frame, just the illustration. Feel free to be creative "
        "and stretch your imagination.",
        "Do not include any text boxes, borders, or logos, just the artwork. Do not include any "
        "mechanical elements like mana symbols, power/toughness boxes, or ability icons. "
        "Do not include +1/+1 anywhere in the art.",
        "Do not include any representations of Magic Cards themselves in the artwork, such as "
        "cards, card frames, or symbols.",
        f"Color Palette: {palette}. Not all colors need to be present; focus on composition and mood.",
        f"Aspect Ratio: {ASPECT_RATIO}.",
    ]
    return "\n".join(lines).strip()
