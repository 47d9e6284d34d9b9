"""ringsig: A Python package for verifying ring signatures over secp256k1.

A ring signature proves that a message was signed by one of the public keys in a ring, without revealing which one.
The `ringsig` package verifies such signatures in two flavours: plain ring signatures, and linkable ring
signatures, which carry a key image revealing whether two signatures were produced by the same private key.
Signature generation is not part of the package.

Usage example:
    Verify a ring signature with a ring of two public keys (x0, y0), (x1, y1):

    >>> from ringsig import verify_ring_signature
    >>>
    >>> verify_ring_signature(
    >>>     message=message_digest,
    >>>     ring=[x0, y0, x1, y1],
    >>>     responses=[r0, r1],
    >>>     c=seed,
    >>> )
    True
"""

from ringsig.elliptic_curves.secp256k1.util import points_to_identifier
from ringsig.hash_to_curve.icart import find_icart_witness, hash_to_point
from ringsig.ring_signatures.linkable_ring_signature import (
    are_linked,
    key_image_identifier,
    verify_linkable_ring_signature,
)
from ringsig.ring_signatures.ring_signature import verify_ring_signature

__all__ = [
    "are_linked",
    "find_icart_witness",
    "hash_to_point",
    "key_image_identifier",
    "points_to_identifier",
    "verify_linkable_ring_signature",
    "verify_ring_signature",
]
