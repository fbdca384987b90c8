import yaml

from designbible.cards.identity import ESPER, JUND, PLANE
from designbible.cards.parse import parse
from designbible.gallery.export import build_card_manifest, card_entry, save_card_manifest


def test_card_entry(sample_bible):
    cards, _ = parse(sample_bible)
    entry = card_entry(cards[0])

    assert entry["id"] == "M01"
    assert entry["file_name"] == "M01_varrus__the_steel_sower.png"
    assert entry["color_identity"] == ["White", "Blue", "Black"]
    assert entry["group_identity"] == ESPER
    assert entry["rules"] == ["Fabricate 2", "Whenever you cast an artifact spell, scry 1."]


def test_manifest_counts(sample_bible):
    cards, sections = parse(sample_bible)
    manifest = build_card_manifest(cards, sections, "Alara Resurgent")

    assert manifest["set"] == "Alara Resurgent"
    assert manifest["total_cards"] == 3
    assert manifest["by_group"] == {ESPER: 1, JUND: 1, PLANE: 1}
    assert len(manifest["sections"]["mechanics"]) == 2


def test_save_manifest_round_trip(tmp_path, sample_bible):
    cards, sections = parse(sample_bible)
    manifest = build_card_manifest(cards, sections, "Alara Resurgent")

    path = save_card_manifest(manifest, tmp_path / "deck" / "cardlist.yml")

    with open(path, encoding="utf-8") as f:
        loaded = yaml.safe_load(f)
    assert loaded["cards"][0]["name"] == "Varrus, the Steel Sower"
    assert loaded["cards"][0]["flavor"] == ["“Every seed of etherium is a promise.”"]
