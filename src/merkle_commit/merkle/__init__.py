"""Merkle module - root construction and membership proofs."""

from .exceptions import EncodingError, InvalidInputError, MerkleError
from .hasher import (
    DIGEST_SIZE,
    EMPTY_BRANCH,
    EMPTY_BRANCH_MARKER,
    combine,
    digest,
    to_digest,
    to_hex,
)
from .proof_verifier import verify
from .tree_builder import (
    base_layer,
    handle_empty_branch,
    parent_layer,
    reduce,
    root_from_items,
    tree_depth,
)

__all__ = [
    "DIGEST_SIZE",
    "EMPTY_BRANCH",
    "EMPTY_BRANCH_MARKER",
    "EncodingError",
    "InvalidInputError",
    "MerkleError",
    "base_layer",
    "combine",
    "digest",
    "handle_empty_branch",
    "parent_layer",
    "reduce",
    "root_from_items",
    "to_digest",
    "to_hex",
    "tree_depth",
    "verify",
]
