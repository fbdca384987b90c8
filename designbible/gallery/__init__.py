"""Gallery rendering and card list export for designbible."""

from designbible.gallery.builder import (
    build_gallery,
    build_card_html,
    write_gallery,
    format_symbols,
    format_rules,
    format_flavor,
    frame_class,
)
from designbible.gallery.export import (
    build_card_manifest,
    card_entry,
    save_card_manifest,
)

__all__ = [
    # builder.py
    "build_gallery",
    "build_card_html",
    "write_gallery",
    "format_symbols",
    "format_rules",
    "format_flavor",
    "frame_class",
    # export.py
    "build_card_manifest",
    "card_entry",
    "save_card_manifest",
]
