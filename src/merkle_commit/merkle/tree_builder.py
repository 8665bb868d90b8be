"""
Merkle root construction over an ordered list of items.

Each item is hashed into a leaf, and layers are reduced pairwise until a
single digest, the Merkle Root, remains. The root is the only value meant
to be stored (e.g. on-chain); the tree itself is not kept.

Key Properties:
- Order Sensitive: Leaves are not sorted, so reordering items changes the root
- Commutative Pairs: Parent nodes do not depend on child position
- Odd Layers: Padded with EMPTY_BRANCH before pairing
"""

import logging
from collections.abc import Iterable, Sequence

from .exceptions import InvalidInputError
from .hasher import EMPTY_BRANCH, Item, combine, digest

logger = logging.getLogger("merkle_commit.tree")


def base_layer(items: Iterable[Item]) -> list[bytes]:
    """
    Hash items into the leaf layer, preserving their order.

    Args:
        items: Plaintext items

    Returns:
        One leaf digest per item
    """
    return [digest(item) for item in items]


def handle_empty_branch(layer: Sequence[bytes]) -> list[bytes]:
    """Return a copy of the layer padded to even length with EMPTY_BRANCH."""
    padded = list(layer)
    if len(padded) % 2 != 0:
        padded.append(EMPTY_BRANCH)
    return padded


def parent_layer(layer: Sequence[bytes]) -> list[bytes]:
    """
    Compute the layer above the given one.

    Args:
        layer: Layer of node digests

    Returns:
        Parent digests, half the padded length of the input
    """
    padded = handle_empty_branch(layer)
    return [combine(padded[i], padded[i + 1]) for i in range(0, len(padded), 2)]


def reduce(layer: Sequence[bytes]) -> bytes:
    """
    Reduce a layer to its Merkle Root.

    Args:
        layer: Non-empty layer of node digests

    Returns:
        Merkle Root

    Raises:
        InvalidInputError: If the layer is empty
    """
    if not layer:
        raise InvalidInputError("Cannot reduce an empty layer")

    current_level = list(layer)

    # Build tree bottom-up
    while len(current_level) > 1:
        current_level = parent_layer(current_level)

    return current_level[0]


def root_from_items(items: Iterable[Item]) -> bytes:
    """
    Compute the Merkle Root of an ordered collection of items.

    Args:
        items: Plaintext items, in commitment order

    Returns:
        Merkle Root

    Raises:
        InvalidInputError: If no items are given
        EncodingError: If an item does not fit the 32-byte leaf field
    """
    leaves = base_layer(items)
    if not leaves:
        raise InvalidInputError("Cannot build a Merkle root from zero items")

    root = reduce(leaves)
    logger.debug(
        "Computed Merkle root",
        extra={"action": "root", "leaf_count": len(leaves)},
    )
    return root


def tree_depth(leaf_count: int) -> int:
    """Number of levels above the leaves, i.e. the expected proof length."""
    if leaf_count < 1:
        raise InvalidInputError(f"Leaf count must be positive, got {leaf_count}")
    return (leaf_count - 1).bit_length()
