"""Leaf functionality: models, registry, and decorator."""

from structeq.core.leaf.core import (
    DEFAULT_LEAF_TYPES,
    LeafRegistry,
    get_registry,
    register_leaf,
    unregister_leaf,
)
from structeq.core.leaf.models import LeafEq, LeafEquatable, LeafTypeMeta

__all__ = [
    # Models
    "LeafEq",
    "LeafEquatable",
    "LeafTypeMeta",
    # Core
    "DEFAULT_LEAF_TYPES",
    "LeafRegistry",
    "get_registry",
    "register_leaf",
    "unregister_leaf",
]
