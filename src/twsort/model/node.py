"""Style node model: the tagged tree produced by a style engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NodeKind(Enum):
    """Discriminator for :class:`StyleNode`."""

    RULE = "rule"
    DECLARATION = "declaration"
    AT_RULE = "at-rule"
    OTHER = "other"


@dataclass(frozen=True)
class StyleNode:
    """A single node of a style-definition tree.

    Attributes:
        kind: What sort of node this is.
        name: At-rule name (``keyframes``, ``media``) or declaration property.
        params: At-rule parameters (``spin``, ``(min-width: 640px)``).
        selector_text: Selector of a rule node.
        value: Value of a declaration node.
        children: Child nodes, in source order.
    """

    kind: NodeKind
    name: str | None = None
    params: str | None = None
    selector_text: str | None = None
    value: str | None = None
    children: tuple[StyleNode, ...] | None = None

    @classmethod
    def rule(cls, selector_text: str, children: tuple[StyleNode, ...] = ()) -> StyleNode:
        return cls(kind=NodeKind.RULE, selector_text=selector_text, children=tuple(children))

    @classmethod
    def declaration(cls, name: str, value: str) -> StyleNode:
        return cls(kind=NodeKind.DECLARATION, name=name, value=value)

    @classmethod
    def at_rule(
        cls, name: str, params: str = "", children: tuple[StyleNode, ...] = ()
    ) -> StyleNode:
        return cls(kind=NodeKind.AT_RULE, name=name, params=params, children=tuple(children))

    @classmethod
    def root(cls, children: tuple[StyleNode, ...] = ()) -> StyleNode:
        return cls(kind=NodeKind.OTHER, children=tuple(children))
