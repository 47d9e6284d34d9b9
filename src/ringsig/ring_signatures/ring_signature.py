"""Verification of (non-linkable) ring signatures over secp256k1."""

import logging

from ringsig.elliptic_curves.secp256k1.secp256k1 import Secp256k1
from ringsig.elliptic_curves.secp256k1.util import points_to_identifier
from ringsig.types.errors import ResponsesLengthMismatchError
from ringsig.types.ring_elements import EllipticCurvePoint, check_word, parse_ring
from ringsig.util.utility_functions import hash_to_int

logger = logging.getLogger(__name__)


def check_shape(ring: list[int], responses: list[int]) -> tuple[EllipticCurvePoint, ...]:
    """Parse `ring` and check that there is one response per ring member.

    Raises:
        InvalidRingLengthError: If `ring` has odd length or describes fewer than two members.
        ResponsesLengthMismatchError: If `len(responses) != len(ring) / 2`.
    """
    public_keys = parse_ring(ring)
    if len(responses) != len(public_keys):
        msg = "There must be one response per ring member: "
        msg += f"len(responses) = {len(responses)}, ring size = {len(public_keys)}"
        logger.debug(msg)
        raise ResponsesLengthMismatchError(msg)
    for i, public_key in enumerate(public_keys):
        Secp256k1.validate_point(public_key, f"ring member {i}")
    return public_keys


def compute_c(
    response: int,
    previous_c: int,
    public_key: EllipticCurvePoint,
    message: int | None = None,
) -> int:
    """Compute the challenge following `previous_c` in the challenge chain.

    The challenge is keccak256([message] || id(response * G + previous_c * public_key)) mod GROUP_ORDER, where
    `id` is `points_to_identifier` padded to 32 bytes. The message is only mixed in for the first ring member.

    Args:
        response (int): The response of the ring member.
        previous_c (int): The challenge of the ring member.
        public_key (EllipticCurvePoint): The public key of the ring member.
        message (int | None): The message digest, or `None` after the first ring member.

    Returns:
        The challenge of the next ring member.
    """
    identifier = points_to_identifier(Secp256k1.sbmul_add_smul(response, public_key, previous_c))
    preimage = (identifier,) if message is None else (message, identifier)
    return hash_to_int(*preimage) % Secp256k1.GROUP_ORDER


def verify_ring_signature(message: int, ring: list[int], responses: list[int], c: int) -> bool:
    """Verify a ring signature.

    Starting from the seed `c`, the challenge chain c_1, .., c_k is recomputed from the responses and the public
    keys, and the signature is valid if it closes, i.e., if c_k = c.

    Args:
        message (int): The digest of the signed message.
        ring (list[int]): The coordinates of the public keys in the ring: [x0, y0, x1, y1, ..].
        responses (list[int]): One response per ring member, in ring order.
        c (int): The seed of the signature.

    Returns:
        `True` if the challenge chain closes, `False` otherwise.

    Raises:
        InvalidRingLengthError: If `ring` has odd length or describes fewer than two members.
        ResponsesLengthMismatchError: If `len(responses) != len(ring) / 2`.
        WordOutOfRangeError: If `message` is not in [0, 2^256).
        PointNotOnCurveError: If a public key in the ring is not on secp256k1.
    """
    public_keys = check_shape(ring, responses)
    check_word(message, "message")

    current_c = compute_c(responses[0], c, public_keys[0], message)
    for response, public_key in zip(responses[1:], public_keys[1:], strict=True):
        current_c = compute_c(response, current_c, public_key)

    if current_c != c:
        logger.debug("The challenge chain does not close: expected %d, computed %d", c, current_c)
        return False
    return True
