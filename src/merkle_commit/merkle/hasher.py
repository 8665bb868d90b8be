"""
Keccak-256 hashing for Merkle leaves and parent nodes.

Leaves are hashed from a fixed 32-byte field: the item's bytes, right-padded
with zeros. Parent nodes hash the ABI encoding of ``(bytes32, bytes32)`` with
the smaller digest first, which makes the pair hash commutative:

    combine(a, b) == combine(b, a)

Proofs therefore carry sibling digests only, without left/right flags. The
same encoding must be applied by every builder and verifier; a mismatch
produces different digests, not an error.
"""

from eth_abi import encode
from web3 import Web3

from .exceptions import EncodingError

DIGEST_SIZE = 32

# Marker hashed to produce the padding node for odd-length layers
EMPTY_BRANCH_MARKER = "0x"

Item = str | bytes | bytearray
DigestLike = str | bytes | bytearray


def _item_bytes(item: Item) -> bytes:
    if isinstance(item, str):
        return item.encode("utf-8")
    if isinstance(item, (bytes, bytearray)):
        return bytes(item)
    raise EncodingError(f"Unsupported item type: {type(item).__name__}")


def _keccak(data: bytes) -> bytes:
    return bytes(Web3.keccak(primitive=data))


def digest(item: Item) -> bytes:
    """
    Hash a plaintext item into a Merkle leaf.

    Args:
        item: Item to hash. Strings are UTF-8 encoded.

    Returns:
        32-byte Keccak-256 digest of the zero-padded item

    Raises:
        EncodingError: If the item is longer than 32 bytes
    """
    data = _item_bytes(item)
    if len(data) > DIGEST_SIZE:
        raise EncodingError(
            f"Item is {len(data)} bytes, exceeds fixed width of {DIGEST_SIZE}"
        )
    return _keccak(data.ljust(DIGEST_SIZE, b"\x00"))


def to_digest(value: DigestLike) -> bytes:
    """
    Coerce a 32-byte value or its hex form into digest bytes.

    Raises:
        EncodingError: If the value is not exactly 32 bytes
    """
    if isinstance(value, str):
        text = value[2:] if value[:2] in ("0x", "0X") else value
        if len(text) != DIGEST_SIZE * 2:
            raise EncodingError(
                f"Hex digest must have {DIGEST_SIZE * 2} characters, got {len(text)}"
            )
        try:
            value = bytes.fromhex(text)
        except ValueError as e:
            raise EncodingError(f"Malformed hex digest: {value!r}") from e

    if isinstance(value, (bytes, bytearray)):
        if len(value) != DIGEST_SIZE:
            raise EncodingError(
                f"Digest must be {DIGEST_SIZE} bytes, got {len(value)}"
            )
        return bytes(value)

    raise EncodingError(f"Unsupported digest type: {type(value).__name__}")


def to_hex(value: DigestLike) -> str:
    """Render a digest as 0x-prefixed lowercase hex."""
    return Web3.to_hex(to_digest(value))


def combine(a: DigestLike, b: DigestLike) -> bytes:
    """
    Hash two child digests into their parent.

    The digests are ordered as unsigned big-endian integers before encoding,
    so the result does not depend on argument order.

    Args:
        a: One child digest
        b: The other child digest

    Returns:
        Parent digest
    """
    a = to_digest(a)
    b = to_digest(b)
    left, right = (a, b) if a <= b else (b, a)
    return _keccak(encode(["bytes32", "bytes32"], [left, right]))


EMPTY_BRANCH = digest(EMPTY_BRANCH_MARKER)
