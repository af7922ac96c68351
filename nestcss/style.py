from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass
import json
from typing import Union
from typing_extensions import TypeAliasType

__all__ = [
    "Value",
    "StyleNode",
    "StyleTree",
    "Property",
    "Nested",
    "Entry",
    "Rule",
    "StyleError",
    "parse_tree",
    "parse_node",
    "load_tree",
    "loads_tree",
]

Value = int | float | str

StyleNode = TypeAliasType(
    "StyleNode",
    Mapping[str, Union[int, float, str, "StyleNode"]],
)

StyleTree = TypeAliasType("StyleTree", Mapping[str, StyleNode])


class StyleError(TypeError): pass


@dataclass(frozen=True)
class Property:
    """A single `name:value` declaration."""

    name: str
    value: Value


@dataclass(frozen=True)
class Nested:
    """A child selector fragment and the entries defined under it."""

    selector: str
    entries: tuple[Entry, ...]


Entry = Property | Nested


@dataclass(frozen=True)
class Rule:
    """A top-level selector and its entries."""

    selector: str
    entries: tuple[Entry, ...]


def _is_value(value: object) -> bool:
    # bool is an int subclass but not a css value
    return isinstance(value, (int, float, str)) and not isinstance(value, bool)


def _check_key(key: object, path: tuple[str, ...]):
    if not isinstance(key, str):
        raise StyleError(
            f"Expected string key at {_fmt(path)}, got {type(key).__name__} {key!r}"
        )


def _fmt(path: tuple[str, ...]) -> str:
    if len(path) == 0:
        return "<root>"
    return " > ".join(repr(p) for p in path)


def parse_node(node: StyleNode, path: tuple[str, ...] = ()) -> tuple[Entry, ...]:
    """Convert a style node mapping into its tagged entries, keeping insertion order.

    Raises:
        StyleError: When a key is not a string or a value is neither a
            number, a string, or a nested mapping.
    """
    if not isinstance(node, Mapping):
        raise StyleError(
            f"Expected a mapping at {_fmt(path)}, got {type(node).__name__}"
        )

    entries: list[Entry] = []
    for key, value in node.items():
        _check_key(key, path)
        if _is_value(value):
            entries.append(Property(key, value))
        elif isinstance(value, Mapping):
            entries.append(Nested(key, parse_node(value, (*path, key))))
        else:
            raise StyleError(
                f"Unexpected value for {_fmt((*path, key))}. "
                f"Expected number, string, or mapping, got {type(value).__name__}"
            )
    return tuple(entries)


def parse_tree(tree: StyleTree) -> list[Rule]:
    """Convert a style tree into a list of rules in insertion order."""
    if not isinstance(tree, Mapping):
        raise StyleError(f"Expected a mapping for the style tree, got {type(tree).__name__}")

    rules = []
    for selector, node in tree.items():
        _check_key(selector, ())
        rules.append(Rule(selector, parse_node(node, (selector,))))
    return rules


def loads_tree(source: str) -> list[Rule]:
    """Decode a json document into rules. Object key order in the document is kept."""
    return parse_tree(json.loads(source))


def load_tree(path: str) -> list[Rule]:
    with open(path, "r", encoding="utf-8") as f:
        return loads_tree(f.read())
