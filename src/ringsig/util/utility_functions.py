"""Utility functions."""

from Crypto.Hash import keccak

WORD_LENGTH = 32


def keccak256(data: bytes) -> bytes:
    """Return the Keccak-256 digest of `data` (the pre-standard Keccak used by Ethereum, not SHA3-256)."""
    return keccak.new(data=data, digest_bits=256).digest()


def to_word(value: int | bytes) -> bytes:
    """Encode `value` as a 32-byte big-endian word, as Solidity's `abi.encode` does for static types.

    Integers are encoded as `uint256`, byte strings shorter than 32 bytes (e.g., 20-byte identifiers) are
    left-padded with zeros, like an `address`.

    Example:
        >>> to_word(1).hex()
        '0000000000000000000000000000000000000000000000000000000000000001'
        >>> to_word(bytes.fromhex("ff") * 20).hex()
        '000000000000000000000000ffffffffffffffffffffffffffffffffffffffff'

    Raises:
        ValueError: If `value` does not fit in a word.
    """
    if isinstance(value, bytes):
        if len(value) > WORD_LENGTH:
            msg = f"Byte strings longer than {WORD_LENGTH} bytes do not fit in a word: len(value) = {len(value)}"
            raise ValueError(msg)
        return value.rjust(WORD_LENGTH, b"\x00")
    if not 0 <= value < 1 << (8 * WORD_LENGTH):
        msg = f"Integers must be in [0, 2^256) to fit in a word: value = {value}"
        raise ValueError(msg)
    return value.to_bytes(WORD_LENGTH, "big")


def abi_encode(*values: int | bytes) -> bytes:
    """Concatenate the word encodings of `values`."""
    return b"".join(to_word(value) for value in values)


def hash_to_int(*values: int | bytes) -> int:
    """Return `keccak256(abi_encode(*values))` read as a big-endian integer."""
    return int.from_bytes(keccak256(abi_encode(*values)), "big")
