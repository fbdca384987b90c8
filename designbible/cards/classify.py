"""Rules-text detection for card body lines.

`is_rule_line` is a heuristic: a line counts as rules text when it carries
mana/activation symbols, an ability-word lead-in, a leveled keyword, or any
term from the mechanical vocabulary. Anything else is treated as flavor.
"""

import re

ABILITY_WORD_RE = re.compile(r"^[A-Z][a-z]+ —")
LEVELED_KEYWORD_RE = re.compile(r"^[A-Z][a-z]+\s\d+$")

MECHANIC_TERMS = (
    # zones and actions
    "target", "battlefield", "graveyard", "library", "exile",
    "damage", "life", "counter", "token", "create", "sacrifice",
    "destroy", "draw", "discard", "tap", "untap", "equip", "attach",
    "cast", "activate", "enter", "leaves", "die", "regenerate",
    "fight", "scry", "mill", "look", "reveal", "shuffle",
    # evergreen keywords
    "flying", "haste", "trample", "vigilance", "first strike",
    "double strike", "deathtouch", "reach", "lifelink", "hexproof",
    "ward", "protection", "flash", "defender", "+1/+1", "-1/-1",
    # set keywords
    "fabricate", "cascade", "exalted", "affinity", "replicate", "storm",
    "cycling", "fear", "intimidate", "landwalk", "shroud",
)


def is_rule_line(line: str) -> bool:
    """Return True if the line looks like mechanical rules text."""
    if not line:
        return False

    # Mana symbols and activation costs, e.g. {T} or {1}{R}
    if "{" in line or "}" in line:
        return True

    if ABILITY_WORD_RE.match(line):
        return True

    # "Fabricate 2", "Equip 3"
    if LEVELED_KEYWORD_RE.match(line):
        return True

    lower = line.lower()
    return any(term in lower for term in MECHANIC_TERMS)
