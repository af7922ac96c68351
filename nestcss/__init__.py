from __future__ import annotations

from nestcss.css import compose_selector, generate_rules, to_css_text
from nestcss.style import (
    Nested,
    Property,
    Rule,
    StyleError,
    StyleNode,
    StyleTree,
    load_tree,
    loads_tree,
    parse_tree,
)

__version__ = "0.1.0"

__all__ = [
    "to_css_text",
    "generate_rules",
    "compose_selector",
    "StyleTree",
    "StyleNode",
    "Property",
    "Nested",
    "Rule",
    "StyleError",
    "parse_tree",
    "load_tree",
    "loads_tree",
]
