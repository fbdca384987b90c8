#!/usr/bin/env python3
"""
Card List Export

Writes the parsed design bible to a YAML manifest with each card's
derived colour and shard identity.

Usage:
    python -m designbible.gallery.export <design_bible.txt> [cardlist.yml]
"""

import sys
from datetime import datetime
from pathlib import Path

import yaml

from designbible.cards.identity import color_identity, group_identity, ordered_colors
from designbible.cards.parse import CardRecord, DocumentSections, load_design_bible
from designbible.errors import DesignBibleNotFound


def card_entry(card: CardRecord) -> dict:
    """Flatten a card record for the manifest."""
    return {
        'id': card.id,
        'name': card.name,
        'cost': card.cost,
        'type': card.type_line,
        'rules': list(card.rules_lines),
        'flavor': list(card.flavor_lines),
        'file_name': card.file_name,
        'color_identity': ordered_colors(color_identity(card)),
        'group_identity': group_identity(card),
    }


def build_card_manifest(cards: list[CardRecord], sections: DocumentSections, set_title: str) -> dict:
    """Generate the card list manifest."""
    entries = [card_entry(card) for card in cards]

    by_group: dict[str, int] = {}
    for entry in entries:
        group = entry['group_identity']
        by_group[group] = by_group.get(group, 0) + 1

    return {
        'set': set_title,
        'generated': datetime.now().isoformat(),
        'total_cards': len(entries),
        'by_group': by_group,
        'sections': {
            'preamble': list(sections.preamble),
            'flavor': list(sections.flavor),
            'mechanics': list(sections.mechanics),
        },
        'cards': entries,
    }


def save_card_manifest(manifest: dict, output_path) -> Path:
    """Save the manifest as YAML."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        yaml.safe_dump(manifest, f, default_flow_style=False, allow_unicode=True, sort_keys=False)
    return output_path


def main():
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    input_path = Path(sys.argv[1])
    output_path = Path(sys.argv[2]) if len(sys.argv) > 2 else Path('cardlist.yml')

    try:
        cards, sections = load_design_bible(input_path)
    except DesignBibleNotFound as e:
        print(f"Error: {e}")
        sys.exit(1)

    manifest = build_card_manifest(cards, sections, input_path.stem)
    saved = save_card_manifest(manifest, output_path)
    print(f"Card list saved to: {saved}")
    print(f"Total: {manifest['total_cards']} cards")
    print(f"By group: {manifest['by_group']}")


if __name__ == '__main__':
    main()
