from designbible.cards.identity import ESPER
from designbible.gemini.prompt import generate_prompt, visual_context


def test_visual_context_prefers_flavor(make_card):
    card = make_card(rules=("Flying",), flavor=("The sky is glass.", "It shatters."))
    assert visual_context(card) == "The sky is glass. It shatters."


def test_visual_context_falls_back_to_rules(make_card):
    card = make_card(rules=("Flying", "Haste"))
    assert visual_context(card) == "Flying Haste"


def test_prompt_contents(make_card):
    card = make_card(
        name="Esper Stormwatcher",
        cost="{1}{W}{U}",
        type_line="Artifact Creature — Vedalken",
        rules=("Flying",),
        flavor=("It watches the etherium storms.",),
    )
    prompt = generate_prompt(card)

    assert prompt.startswith("Generate an image.")
    assert "card named \"Esper Stormwatcher\"" in prompt
    assert "Type: Artifact Creature — Vedalken" in prompt
    assert "Context Description: \"It watches the etherium storms.\"" in prompt
    assert f"Setting: Set in {ESPER}." in prompt
    assert "Color Palette: White, Blue." in prompt
    assert prompt.endswith("Aspect Ratio: 5:4.")


def test_prompt_palette_ignores_rules_symbols(make_card):
    card = make_card(cost="{R}", rules=("{G}: Pump.",))
    assert "Color Palette: Red." in generate_prompt(card)
