#!/usr/bin/env python3
"""
Design Bible Parser

Turns a loosely structured design bible into card records.

The document is scanned line by line. Header lines move the scanner
forward through the sections (preamble, flavor & world, mechanics,
card file). Inside the card file, a line tagged `[ID] Name {cost}`
opens a new card and every following line belongs to that card's body
until the next tag.

Usage:
    python -m designbible.cards.parse <design_bible.txt>
"""

import logging
import re
import sys
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Optional

from designbible.cards.classify import is_rule_line
from designbible.errors import DesignBibleNotFound

logger = logging.getLogger(__name__)

# Citation markers and stray escapes left over from exported documents
LEADING_MARKER_RE = re.compile(r"^(?:\\+|\[cite_start\]\s*)+")
CARD_TAG_RE = re.compile(r"^\[([A-Z0-9]+)\]\s+(.+?)(?:\s+(\{.*\})\s*)?$")
PARTIAL_TAG_RE = re.compile(r"^\[[A-Z]+\d+\]")

FLAVOR_QUOTES = ("“", '"')


class Section(IntEnum):
    DEFAULT = 0
    FLAVOR = 1
    MECHANICS = 2
    CARDS = 3


SECTION_HEADERS = {
    Section.FLAVOR: ("FLAVOR & WORLD", "FLAVOR AND WORLD", "1. FLAVOR"),
    Section.MECHANICS: ("2. MECHANIC", "MECHANICS GLOSSARY", "MECHANIC GLOSSARY", "NEW MECHANICS"),
    Section.CARDS: ("CARD FILE", "CARD LIST", "3. CARD"),
}


@dataclass(frozen=True)
class CardRecord:
    """One card recovered from the design bible."""
    id: str
    name: str
    cost: str = ""
    type_line: str = ""
    rules_lines: tuple[str, ...] = ()
    flavor_lines: tuple[str, ...] = ()

    @property
    def safe_name(self) -> str:
        return re.sub(r"[^a-z0-9]", "_", self.name, flags=re.IGNORECASE).lower()

    @property
    def file_name(self) -> str:
        """Image filename, e.g. M01_varrus_the_steel_sower.png."""
        if self.id:
            return f"{self.id}_{self.safe_name}.png"
        return f"{self.safe_name}.png"


@dataclass(frozen=True)
class DocumentSections:
    """Free text collected outside the card file."""
    preamble: tuple[str, ...] = ()
    flavor: tuple[str, ...] = ()
    mechanics: tuple[str, ...] = ()


@dataclass
class _OpenCard:
    id: str
    name: str
    cost: str
    body: list[str] = field(default_factory=list)


@dataclass
class _ParserState:
    section: Section = Section.DEFAULT
    current: Optional[_OpenCard] = None
    buckets: dict = field(default_factory=lambda: {
        Section.DEFAULT: [],
        Section.FLAVOR: [],
        Section.MECHANICS: [],
    })


def normalize_line(line: str) -> str:
    """Strip leading markers and surrounding whitespace."""
    return LEADING_MARKER_RE.sub("", line.strip()).strip()


def match_section_header(line: str, current: Section) -> Optional[Section]:
    """Return the later section this header line switches to, if any."""
    upper = line.upper()
    for section in (Section.CARDS, Section.MECHANICS, Section.FLAVOR):
        if section <= current:
            break
        if any(marker in upper for marker in SECTION_HEADERS[section]):
            return section
    return None


def is_card_start(line: str) -> bool:
    return bool(CARD_TAG_RE.match(line) or PARTIAL_TAG_RE.match(line))


def open_card(line: str) -> Optional[_OpenCard]:
    """Start a card from a card-start line, or return None if it is not one."""
    match = CARD_TAG_RE.match(line)
    if match:
        return _OpenCard(id=match.group(1), name=match.group(2), cost=match.group(3) or "")
    if PARTIAL_TAG_RE.match(line):
        # Malformed header: keep the whole line as the name
        return _OpenCard(id="", name=line, cost="")
    return None


def split_rules_and_flavor(lines: list[str]) -> tuple[list[str], list[str]]:
    """Separate rules from flavor scanning bottom-up.

    Flavor text trails rules text, so the scan starts at the bottom and
    treats lines as flavor until the first rules line is seen; from then on
    everything above is rules. Quoted lines are flavor wherever they sit.
    """
    rules: list[str] = []
    flavor: list[str] = []
    in_flavor = True

    for line in reversed(lines):
        if line.startswith(FLAVOR_QUOTES):
            flavor.insert(0, line)
            continue

        if is_rule_line(line):
            in_flavor = False

        if in_flavor:
            flavor.insert(0, line)
        else:
            rules.insert(0, line)

    return rules, flavor


def finalize_card(card: _OpenCard) -> CardRecord:
    """Build the immutable record for an open card."""
    body = [line for line in card.body if line.strip()]
    if not body:
        return CardRecord(id=card.id, name=card.name, cost=card.cost)

    rules, flavor = split_rules_and_flavor(body[1:])
    return CardRecord(
        id=card.id,
        name=card.name,
        cost=card.cost,
        type_line=body[0],
        rules_lines=tuple(rules),
        flavor_lines=tuple(flavor),
    )


def parse(text: str) -> tuple[list[CardRecord], DocumentSections]:
    """Parse design bible text into card records and auxiliary sections."""
    state = _ParserState()
    cards: list[CardRecord] = []

    for raw in text.splitlines():
        line = normalize_line(raw)
        if not line:
            continue

        if state.section < Section.CARDS:
            # Tagged lines are never headers, e.g. "[C07] Card List Keeper"
            if not is_card_start(line):
                next_section = match_section_header(line, state.section)
                if next_section is not None:
                    logger.debug(f"Entering section {next_section.name} at '{line}'")
                    state.section = next_section
                    continue
            state.buckets[state.section].append(line)
            continue

        new_card = open_card(line)
        if new_card is not None:
            if state.current is not None:
                cards.append(finalize_card(state.current))
            logger.debug(f"Opened card [{new_card.id}] {new_card.name}")
            state.current = new_card
        elif state.current is not None:
            state.current.body.append(line)

    if state.current is not None:
        cards.append(finalize_card(state.current))

    sections = DocumentSections(
        preamble=tuple(state.buckets[Section.DEFAULT]),
        flavor=tuple(state.buckets[Section.FLAVOR]),
        mechanics=tuple(state.buckets[Section.MECHANICS]),
    )
    logger.info(f"Parsed {len(cards)} card(s)")
    return cards, sections


def load_design_bible(path) -> tuple[list[CardRecord], DocumentSections]:
    """Read and parse a design bible file.

    Raises:
        DesignBibleNotFound: If the file does not exist.
    """
    path = Path(path)
    if not path.exists():
        raise DesignBibleNotFound(f"{path} not found.")

    with open(path, "r", encoding="utf-8") as f:
        return parse(f.read())


def main():
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    try:
        cards, sections = load_design_bible(sys.argv[1])
    except DesignBibleNotFound as e:
        print(f"Error: {e}")
        sys.exit(1)

    for card in cards:
        print(f"[{card.id or '?'}] {card.name} {card.cost}".rstrip())
        print(f"    {card.type_line}")
        print(f"    rules: {len(card.rules_lines)}  flavor: {len(card.flavor_lines)}")

    print(f"\n{len(cards)} card(s), {len(sections.mechanics)} mechanics line(s)")


if __name__ == '__main__':
    main()
