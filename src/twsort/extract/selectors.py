"""Selector extraction: collect base class names from style-node trees."""

from __future__ import annotations

from typing import Iterable

from twsort.model.node import NodeKind, StyleNode

__all__ = ["extract_selectors", "clean_selector"]


def clean_selector(selector_text: str) -> str:
    """Reduce a rule's selector text to its base class name.

    Keeps the leftmost simple selector, removes backslash escapes and a single
    leading ``.``.
    """
    tokens = selector_text.strip().split()
    if not tokens:
        return ""
    cleaned = tokens[0].replace("\\", "")
    if cleaned.startswith("."):
        cleaned = cleaned[1:]
    return cleaned


def _walk(roots: Iterable[StyleNode]) -> Iterable[str]:
    """Yield selectors depth-first, in tree order."""
    seen: set[int] = set()
    stack = list(reversed(list(roots)))
    while stack:
        node = stack.pop()
        if id(node) in seen:
            continue
        seen.add(id(node))

        kind = getattr(node, "kind", None)
        if kind is NodeKind.DECLARATION:
            continue
        if kind is NodeKind.AT_RULE and (getattr(node, "name", None) or "").startswith("keyframes"):
            continue

        selector_text = getattr(node, "selector_text", None)
        if kind is NodeKind.RULE and selector_text:
            selector = clean_selector(selector_text)
            if selector:
                yield selector
            continue

        children = getattr(node, "children", None) or ()
        stack.extend(reversed(list(children)))


def extract_selectors(nodes: Iterable[StyleNode], *, sort: bool = False) -> list[str]:
    """Return the distinct selectors defined by *nodes*.

    Order is first emission during a depth-first walk, or alphabetical when
    *sort* is true. Nodes without children or selector text contribute
    nothing; a node reached twice is only visited once.
    """
    selectors = list(dict.fromkeys(_walk(nodes)))
    if sort:
        selectors.sort()
    return selectors
