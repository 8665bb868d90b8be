"""
Sample items and a minimal proof indexer for testing.
"""

from merkle_commit.merkle import base_layer, handle_empty_branch, parent_layer

SAMPLE_EMAILS = [
    "airdrophunter1@gmail.com",
    "airdrophunter2@gmail.com",
    "airdrophunter3@gmail.com",
]

SAMPLE_ROOT = "0x2c2f3c0b4bd0618ef3b40c5c787e594e2c662fdcde94053f86d8d32c3bf78d6e"

# combine(digest("airdrophunter3@gmail.com"), EMPTY_BRANCH)
SAMPLE_SIBLING = "0xbb6fbadeae6523789e06658ab747efe2b59d01e5b281cd709aa49cd10a4323c4"


def build_proof(items: list[str], leaf_index: int) -> list[bytes]:
    """Collect the sibling of the leaf's path node at every level."""
    proof: list[bytes] = []
    layer = base_layer(items)
    index = leaf_index

    while len(layer) > 1:
        proof.append(handle_empty_branch(layer)[index ^ 1])
        layer = parent_layer(layer)
        index //= 2

    return proof
