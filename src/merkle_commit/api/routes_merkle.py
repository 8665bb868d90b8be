"""
Merkle root and proof verification API routes.
"""

import logging
from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, Field

from ..config import get_settings
from ..merkle import (
    EMPTY_BRANCH,
    EMPTY_BRANCH_MARKER,
    InvalidInputError,
    base_layer,
    parent_layer,
    root_from_items,
    to_hex,
    tree_depth,
    verify,
)

logger = logging.getLogger("merkle_commit.api")

router = APIRouter(prefix="/merkle", tags=["Merkle"])


class ItemsRequest(BaseModel):
    """Ordered items to commit to."""

    items: list[str] = Field(..., description="Items in commitment order")


class RootResponse(BaseModel):
    """Merkle Root of a set of items."""

    root: str
    leaf_count: int
    depth: int


class LayersResponse(BaseModel):
    """Every layer of the tree, leaves first."""

    root: str
    layers: list[list[str]]


class VerifyRequest(BaseModel):
    """Request to verify membership of an item."""

    item: str = Field(..., description="Plaintext item to check")
    proof: list[str] = Field(default_factory=list, description="Sibling digests, leaf level first")
    root: str = Field(..., description="Claimed Merkle Root (0x-prefixed hex)")


class VerifyResponse(BaseModel):
    """Result of a membership check."""

    valid: bool


def _check_item_count(items: list[str]) -> None:
    settings = get_settings()
    if len(items) > settings.max_items:
        raise InvalidInputError(
            f"Too many items: {len(items)} > {settings.max_items}"
        )


@router.post("/root")
async def compute_root(request: ItemsRequest) -> RootResponse:
    """Compute the Merkle Root of the given items."""
    _check_item_count(request.items)

    root = root_from_items(request.items)
    leaf_count = len(request.items)

    logger.info(
        f"Computed root over {leaf_count} items",
        extra={"endpoint": "/merkle/root", "leaf_count": leaf_count},
    )
    return RootResponse(
        root=to_hex(root),
        leaf_count=leaf_count,
        depth=tree_depth(leaf_count),
    )


@router.post("/layers")
async def compute_layers(request: ItemsRequest) -> LayersResponse:
    """
    Materialize every layer of the tree.

    Intended for indexers that need intermediate nodes to assemble proofs.
    """
    _check_item_count(request.items)

    layer = base_layer(request.items)
    if not layer:
        raise InvalidInputError("Cannot build Merkle layers from zero items")

    layers = [layer]
    while len(layer) > 1:
        layer = parent_layer(layer)
        layers.append(layer)

    return LayersResponse(
        root=to_hex(layers[-1][0]),
        layers=[[to_hex(node) for node in level] for level in layers],
    )


@router.post("/verify")
async def verify_membership(request: VerifyRequest) -> VerifyResponse:
    """
    Verify an item against a Merkle Root.

    Always answers with a boolean; invalid proofs are not errors.
    """
    settings = get_settings()
    if len(request.proof) > settings.max_proof_length:
        return VerifyResponse(valid=False)

    is_valid = verify(request.item, request.proof, request.root)

    logger.info(
        "Membership verified" if is_valid else "Membership rejected",
        extra={
            "endpoint": "/merkle/verify",
            "proof_length": len(request.proof),
            "valid": is_valid,
        },
    )
    return VerifyResponse(valid=is_valid)


@router.get("/empty-branch")
async def get_empty_branch() -> dict[str, Any]:
    """Get the digest used to pad odd-length layers."""
    return {
        "marker": EMPTY_BRANCH_MARKER,
        "digest": to_hex(EMPTY_BRANCH),
    }
