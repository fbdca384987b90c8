"""Card parsing and classification for designbible.

Exports are lazily loaded to avoid import conflicts when running
submodules directly with `python -m designbible.cards.<module>`.
"""

__all__ = [
    # classify.py
    "is_rule_line",
    "MECHANIC_TERMS",
    # parse.py
    "CardRecord",
    "DocumentSections",
    "Section",
    "finalize_card",
    "load_design_bible",
    # identity.py
    "color_identity",
    "casting_colors",
    "group_identity",
    "matching_rule",
    "GROUP_RULES",
]


def __getattr__(name: str):
    """Lazy import for module exports."""
    if name in ("is_rule_line", "MECHANIC_TERMS"):
        from designbible.cards import classify
        return getattr(classify, name)
    elif name in (
        "CardRecord",
        "DocumentSections",
        "Section",
        "finalize_card",
        "load_design_bible",
    ):
        from designbible.cards import parse
        return getattr(parse, name)
    elif name in (
        "color_identity",
        "casting_colors",
        "group_identity",
        "matching_rule",
        "GROUP_RULES",
    ):
        from designbible.cards import identity
        return getattr(identity, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
