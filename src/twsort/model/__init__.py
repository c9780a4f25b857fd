"""twsort model layer -- public type re-exports."""

from twsort.model.index import SelectorIndex
from twsort.model.node import NodeKind, StyleNode

__all__ = [
    # node
    "NodeKind",
    "StyleNode",
    # index
    "SelectorIndex",
]
