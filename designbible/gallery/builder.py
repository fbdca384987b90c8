"""Static spoiler gallery page for parsed cards.

Each card becomes one `card-container` block; the blocks are injected
into the page template along with the set title and build date.
"""

import html
import re
from datetime import datetime
from pathlib import Path

from designbible.cards.parse import CardRecord

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
DEFAULT_TEMPLATE = TEMPLATES_DIR / "gallery_template.html"

SYMBOL_RE = re.compile(r"\{([A-Z0-9/]+)\}")
KEYWORD_LEAD_RE = re.compile(r"^([a-zA-Z\s]+(?:\s\d+)?)( —|:)")
ABILITY_WORD_RE = re.compile(r"^([a-zA-Z]+) —")

PLACEHOLDER_IMAGE = "https://placehold.co/400x320?text=Generating..."

FRAME_COLORS = (
    ("W", "white"),
    ("U", "blue"),
    ("B", "black"),
    ("R", "red"),
    ("G", "green"),
)


def _read_text(path: Path) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)


def _mana_icon(match: re.Match) -> str:
    symbol = match.group(1).replace("/", "").lower()
    # mana-font names the tap/untap glyphs in full
    if symbol == "t":
        symbol = "tap"
    elif symbol == "q":
        symbol = "untap"
    return f"<i class=\"ms ms-{symbol} ms-cost\"></i>"


def format_symbols(text: str) -> str:
    """Replace {X} symbols with mana-font icons."""
    if not text:
        return ""
    return SYMBOL_RE.sub(_mana_icon, text)


def format_rules(card: CardRecord) -> str:
    paragraphs = []
    for line in card.rules_lines:
        formatted = format_symbols(html.escape(line, quote=False))
        formatted = KEYWORD_LEAD_RE.sub(r"<strong>\1</strong>\2", formatted, count=1)
        formatted = ABILITY_WORD_RE.sub(r"<i>\1</i> —", formatted)
        paragraphs.append(f"<p>{formatted}</p>")
    return "".join(paragraphs)


def format_flavor(card: CardRecord) -> str:
    if not card.flavor_lines:
        return ""
    return "".join(f"<p>{html.escape(line, quote=False)}</p>" for line in card.flavor_lines)


def frame_class(card: CardRecord) -> str:
    """CSS frame class from the letters in the cost and the type line."""
    cost = card.cost or ""
    colors = [name for letter, name in FRAME_COLORS if letter in cost]
    type_lower = card.type_line.lower()

    if "land" in type_lower:
        return "land"
    if "artifact" in type_lower and not colors:
        return "artifact"
    if len(colors) > 1:
        return "gold"
    if colors:
        return colors[0]
    return "colorless"


def build_card_html(card: CardRecord, image_dir: str) -> str:
    image_rel = f"{image_dir}/{card.file_name}"
    name_attr = html.escape(card.name.lower())
    type_attr = html.escape(card.type_line.lower())
    text_attr = html.escape(" ".join(card.rules_lines).lower())

    flavor_html = format_flavor(card)
    if flavor_html:
        flavor_html = f"<div class=\"card-flavor\">{flavor_html}</div>"

    return (
        f"<div class=\"card-container {frame_class(card)}\" data-name=\"{name_attr}\" "
        f"data-type=\"{type_attr}\" data-text=\"{text_attr}\">"
        f"<div class=\"card-image-wrapper\">"
        f"<img src=\"{html.escape(image_rel)}\" alt=\"{html.escape(card.name)}\" loading=\"lazy\" "
        f"onerror=\"this.src='{PLACEHOLDER_IMAGE}'; this.style.opacity=0.5;\">"
        f"</div>"
        f"<div class=\"card-data\">"
        f"<div class=\"card-header\">"
        f"<div class=\"card-name\">{html.escape(card.name, quote=False)}</div>"
        f"<div class=\"card-cost\">{format_symbols(card.cost)}</div>"
        f"</div>"
        f"<div class=\"card-type-line\">{html.escape(card.type_line, quote=False)}</div>"
        f"<div class=\"card-text-box\">{format_rules(card)}{flavor_html}</div>"
        f"<div class=\"card-footer\"><span class=\"card-id\">#{card.id}</span></div>"
        f"</div>"
        f"</div>"
    )


def build_gallery(
    cards: list[CardRecord],
    *,
    image_dir: str,
    set_title: str,
    template_path: Path | None = None,
) -> str:
    """Render the spoiler gallery page for the given cards."""
    template = _read_text(template_path or DEFAULT_TEMPLATE)
    card_html = [build_card_html(card, image_dir) for card in cards]
    generation_date = datetime.now().strftime("%Y-%m-%d %H:%M")

    return (
        template.replace("<!-- CARDS_INJECTION_POINT -->", "\n".join(card_html))
        .replace("{SET_TITLE}", html.escape(set_title))
        .replace("{GENERATION_DATE}", generation_date)
    )


def write_gallery(cards: list[CardRecord], out_path, **kwargs) -> Path:
    out_path = Path(out_path)
    _write_text(out_path, build_gallery(cards, **kwargs))
    return out_path
