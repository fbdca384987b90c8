"""Colour and shard identity for parsed cards.

`group_identity` walks GROUP_RULES in order and returns the label of the
first rule whose predicate holds. Name keywords beat rules-text markers,
which beat colour combinations, which beat type-line fallbacks.
"""

from dataclasses import dataclass
from typing import Callable, Iterable

from designbible.cards.parse import CardRecord

COLOR_SYMBOLS = {
    "W": "White",
    "U": "Blue",
    "B": "Black",
    "R": "Red",
    "G": "Green",
}
COLOR_ORDER = tuple(COLOR_SYMBOLS.values())
COLOR_LETTERS = {name: letter for letter, name in COLOR_SYMBOLS.items()}

ESPER = "The Shard of Esper (Alara)"
GRIXIS = "The Shard of Grixis (Alara)"
JUND = "The Shard of Jund (Alara)"
NAYA = "The Shard of Naya (Alara)"
BANT = "The Shard of Bant (Alara)"
CONFLUX = "The Conflux of Alara (Five-Color Energy)"
MAELSTROM = "The Maelstrom of Alara (Chaotic Mana Storm)"
PLANE = "The Plane of Alara"

NAME_KEYWORDS = (
    ("esper", ESPER),
    ("grixis", GRIXIS),
    ("jund", JUND),
    ("naya", NAYA),
    ("bant", BANT),
)

TEXT_MARKERS = (
    ("fabricate", ESPER),
    ("covenant", BANT),
    ("exhume", GRIXIS),
    ("carnage", JUND),
    ("titanic", NAYA),
    ("spectrum", CONFLUX),
)

SHARD_COLORS = (
    (frozenset({"White", "Blue", "Black"}), ESPER),
    (frozenset({"Blue", "Black", "Red"}), GRIXIS),
    (frozenset({"Black", "Red", "Green"}), JUND),
    (frozenset({"Red", "Green", "White"}), NAYA),
    (frozenset({"Green", "White", "Blue"}), BANT),
)

# Two colours sit on two shards; the label keeps both candidates.
GUILD_COLORS = (
    (frozenset({"White", "Blue"}), "The Shard of Esper (Alara) or Bant"),
    (frozenset({"Blue", "Black"}), "The Shard of Esper (Alara) or Grixis"),
    (frozenset({"Black", "Red"}), "The Shard of Jund (Alara) or Grixis"),
    (frozenset({"Red", "Green"}), "The Shard of Jund (Alara) or Naya"),
    (frozenset({"Green", "White"}), "The Shard of Bant (Alara) or Naya"),
)

TYPE_KEYWORDS = (
    (("artifact",), ESPER),
    (("zombie", "demon"), GRIXIS),
    (("dragon", "viashino", "goblin"), JUND),
    (("beast", "gargantuan"), NAYA),
    (("angel", "soldier"), BANT),
)


def _symbols_in(text: str) -> list[str]:
    return [name for letter, name in COLOR_SYMBOLS.items() if f"{{{letter}}}" in text]


def color_identity(card: CardRecord) -> frozenset[str]:
    """Colours whose symbol appears in the cost or the rules text."""
    full = (card.cost + " " + " ".join(card.rules_lines)).upper()
    return frozenset(_symbols_in(full))


def casting_colors(card: CardRecord) -> list[str]:
    """Colours paid in the mana cost, in WUBRG order."""
    return _symbols_in(card.cost or "")


def ordered_colors(colors: Iterable[str]) -> list[str]:
    colors = set(colors)
    return [name for name in COLOR_ORDER if name in colors]


@dataclass(frozen=True)
class GroupRule:
    name: str
    predicate: Callable[[CardRecord], bool]
    label: str

    def matches(self, card: CardRecord) -> bool:
        return self.predicate(card)


def _name_has(keyword: str):
    return lambda card: keyword in card.name.lower()


def _text_has(marker: str):
    return lambda card: marker in " ".join(card.rules_lines).lower()


def _colors_are(colors: frozenset):
    return lambda card: color_identity(card) == colors


def _letters(colors) -> str:
    return "".join(COLOR_LETTERS[c] for c in ordered_colors(colors))


def _type_has(keywords: tuple):
    return lambda card: any(k in card.type_line.lower() for k in keywords)


def _build_rules() -> tuple[GroupRule, ...]:
    rules: list[GroupRule] = []
    for keyword, label in NAME_KEYWORDS:
        rules.append(GroupRule(f"name:{keyword}", _name_has(keyword), label))
    for marker, label in TEXT_MARKERS:
        rules.append(GroupRule(f"text:{marker}", _text_has(marker), label))
    for colors, label in SHARD_COLORS:
        rules.append(GroupRule(f"shard:{_letters(colors)}", _colors_are(colors), label))
    for colors, label in GUILD_COLORS:
        rules.append(GroupRule(f"guild:{_letters(colors)}", _colors_are(colors), label))
    for keywords, label in TYPE_KEYWORDS:
        rules.append(GroupRule(f"type:{'|'.join(keywords)}", _type_has(keywords), label))
    rules.append(GroupRule("many-colors", lambda card: len(color_identity(card)) >= 4, MAELSTROM))
    rules.append(GroupRule("default", lambda card: True, PLANE))
    return tuple(rules)


GROUP_RULES = _build_rules()


def matching_rule(card: CardRecord) -> GroupRule:
    """Return the highest-priority rule that applies to the card."""
    for rule in GROUP_RULES:
        if rule.matches(card):
            return rule
    # The default rule always matches
    return GROUP_RULES[-1]


def group_identity(card: CardRecord) -> str:
    """Shard label for the card, used to set the scene of its art."""
    return matching_rule(card).label
