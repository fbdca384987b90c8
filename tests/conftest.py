import pytest

from designbible.cards.parse import CardRecord

SAMPLE_BIBLE = """\
ALARA RESURGENT - DESIGN BIBLE

1. FLAVOR & WORLD
The shards have collided again.
Esper's etherium spreads across the Jund wilds.

2. MECHANICS GLOSSARY
Fabricate N — When this enters, put N +1/+1 counters on it or create N 1/1 Servos.
Spectrum — Counts the colors of mana spent to cast this spell.

3. CARD FILE
[M01] Varrus, the Steel Sower {2}{W}{U}{B}
Legendary Artifact Creature — Human Artificer
Fabricate 2
Whenever you cast an artifact spell, scry 1.
“Every seed of etherium is a promise.”
[C02] Jund Raider {1}{R}
Creature — Viashino Warrior
Haste
The raider's howl echoes across the canyon.
[U03] Quiet Hollow
Land
"""


@pytest.fixture
def sample_bible():
    return SAMPLE_BIBLE


@pytest.fixture
def bible_file(tmp_path):
    path = tmp_path / "design_bible.txt"
    path.write_text(SAMPLE_BIBLE, encoding="utf-8")
    return path


@pytest.fixture
def make_card():
    def _make(name="Test Card", cost="", type_line="", rules=(), flavor=(), id="T01"):
        return CardRecord(
            id=id,
            name=name,
            cost=cost,
            type_line=type_line,
            rules_lines=tuple(rules),
            flavor_lines=tuple(flavor),
        )
    return _make
