"""Errors raised while building a Merkle root."""


class MerkleError(ValueError):
    """Base class for Merkle construction errors."""

    code = "MERKLE_ERROR"


class InvalidInputError(MerkleError):
    """Raised for an empty item collection or an empty layer."""

    code = "INVALID_INPUT"


class EncodingError(MerkleError):
    """Raised when a value does not fit the fixed 32-byte encoding."""

    code = "ENCODING_ERROR"
