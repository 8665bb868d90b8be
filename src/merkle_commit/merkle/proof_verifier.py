"""
Merkle membership proof verification.

A proof is the list of sibling digests from a leaf up to the root. Since
parent hashes are commutative, replaying the proof is a left fold of
``combine`` starting at the leaf. Selecting the siblings is the job of
whoever holds the full item list.
"""

import logging
from collections.abc import Iterable

from .exceptions import MerkleError
from .hasher import DigestLike, Item, combine, digest, to_digest, to_hex
from .tree_builder import root_from_items

logger = logging.getLogger("merkle_commit.verifier")


def verify(item: Item, proof: Iterable[DigestLike], claimed_root: DigestLike) -> bool:
    """
    Check whether an item belongs to the tree committed by a root.

    Any mismatch, including a proof of the wrong length or a value that is
    not a valid digest, returns False. No reason is reported.

    Args:
        item: Plaintext item to check
        proof: Sibling digests, leaf level first
        claimed_root: Merkle Root to check against

    Returns:
        True if replaying the proof from the item reaches the root
    """
    try:
        current_hash = digest(item)
        proof_length = 0
        for sibling_hash in proof:
            current_hash = combine(current_hash, sibling_hash)
            proof_length += 1
        is_valid = current_hash == to_digest(claimed_root)
    except (MerkleError, TypeError) as e:
        logger.debug(
            f"Proof rejected: {e}",
            extra={
                "action": "verify",
                "valid": False,
                "error": getattr(e, "code", type(e).__name__),
            },
        )
        return False

    logger.debug(
        "Proof verified" if is_valid else "Proof rejected",
        extra={"action": "verify", "proof_length": proof_length, "valid": is_valid},
    )
    return is_valid


def main():
    """Demo root construction and proof verification on the sample items."""
    from ..config import get_settings

    settings = get_settings()

    print("Merkle Root Demo\n")
    print("Items:")
    for i, item in enumerate(settings.sample_items):
        print(f"  [{i}] {item}")

    root = root_from_items(settings.sample_items)
    print(f"\nMerkle Root: {to_hex(root)}")

    merkle_node = digest("airdrophunter1@gmail.com")
    proof = [
        merkle_node,
        "0xbb6fbadeae6523789e06658ab747efe2b59d01e5b281cd709aa49cd10a4323c4",
    ]
    reference_root = "0x2c2f3c0b4bd0618ef3b40c5c787e594e2c662fdcde94053f86d8d32c3bf78d6e"

    for candidate in ("airdrophunter2@gmail.com", "airdrophunter4@gmail.com"):
        is_valid = verify(candidate, proof, reference_root)
        print(f"  {candidate}: {'✓ Member' if is_valid else '✗ Not a member'}")


if __name__ == "__main__":
    main()
