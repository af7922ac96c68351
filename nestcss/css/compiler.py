from __future__ import annotations
from collections.abc import Iterable, Mapping

from nestcss.css.selector import compose_selector
from nestcss.style import (
    Entry,
    Nested,
    Property,
    Rule,
    StyleError,
    StyleNode,
    StyleTree,
    Value,
    parse_node,
    parse_tree,
)

__all__ = ["to_css_text", "generate_rules", "format_value"]


def _converted(items: object, kinds: tuple[type, ...], what: str) -> tuple:
    if isinstance(items, (str, bytes)) or not isinstance(items, Iterable):
        raise StyleError(
            f"Expected a mapping or {what} objects, got {type(items).__name__}"
        )
    items = tuple(items)
    for item in items:
        if not isinstance(item, kinds):
            raise StyleError(
                f"Expected a mapping or {what} objects, got {type(item).__name__} {item!r}"
            )
    return items


def format_value(value: Value) -> str:
    """Text of a declaration value. Strings are used verbatim.

    Integral floats drop the trailing `.0` (`1.0` is `1`, `1e22` is written out in
    full). Other numbers use `str`, so `1e-7` is `1e-07`.
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_css_text(tree: StyleTree | Iterable[Rule]) -> str:
    """Compile a nested style tree into css text for a `<style>` element.

    Each top-level selector produces its rule blocks in the order the selectors
    appear in the tree.

    Example:
        >>> to_css_text({"a": {"color": "red", "&:hover": {"color": "blue"}}})
        'a{color:red;}a:hover{color:blue;}'
    """
    if isinstance(tree, Mapping):
        rules = parse_tree(tree)
    else:
        rules = _converted(tree, (Rule,), "Rule")
    return "".join(generate_rules(rule.entries, rule.selector) for rule in rules)


def generate_rules(
    node: StyleNode | Iterable[Entry], parent_selector: str | None = None
) -> str:
    """Generate the rule block for the node's own properties followed by the
    rule blocks of its nested selectors.
    """
    if isinstance(node, Mapping):
        entries = parse_node(node)
    else:
        entries = _converted(node, (Property, Nested), "Property or Nested")

    properties: list[Property] = []
    children: list[Nested] = []
    for entry in entries:
        if isinstance(entry, Property):
            properties.append(entry)
        else:
            children.append(entry)

    css = ""
    if len(properties) > 0:
        selector = parent_selector if parent_selector is not None else ""
        defines = "".join(f"{p.name}:{format_value(p.value)};" for p in properties)
        css += f"{selector}{{{defines}}}"

    for child in children:
        css += generate_rules(
            child.entries, compose_selector(child.selector, parent_selector)
        )

    return css
