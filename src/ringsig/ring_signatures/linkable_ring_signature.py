"""Verification of linkable ring signatures over secp256k1.

A linkable ring signature carries the key image I = x * H(K, link) of the signer, where x is the signer's private key,
K = x * G its public key, and H Icart's map applied to the hash of K and of the linkability flag `link`. Two
signatures with the same key image under the same `link` were produced by the same private key.

Each ring member i contributes, besides response_i * G + c_i * K_i, the link point

    L_i = response_i * H(K_i, link) + c_i * I

to the challenge of the next member. The signer supplies response_i * H(K_i, link) and c_i * I as witnesses, which the
verifier recomputes and compares.
"""

import logging

from ringsig.elliptic_curves.secp256k1.secp256k1 import Secp256k1
from ringsig.elliptic_curves.secp256k1.util import point_to_words, points_to_identifier
from ringsig.hash_to_curve.icart import (
    check_canonical_added_number,
    check_canonical_cube_root,
    hash_to_point,
    ring_member_hash,
)
from ringsig.ring_signatures.ring_signature import check_shape
from ringsig.types.errors import LinkabilityWitnessMismatchError
from ringsig.types.ring_elements import (
    EllipticCurvePoint,
    LinkabilityWitness,
    check_word,
    parse_linkability_witnesses,
)
from ringsig.util.utility_functions import hash_to_int

logger = logging.getLogger(__name__)


def compute_link_point(
    response: int,
    previous_c: int,
    public_key: EllipticCurvePoint,
    witness: LinkabilityWitness,
    key_image: EllipticCurvePoint,
    link: int,
) -> EllipticCurvePoint | None:
    """Check the linkability witness of a ring member and return its link point.

    Args:
        response (int): The response of the ring member.
        previous_c (int): The challenge of the ring member.
        public_key (EllipticCurvePoint): The public key of the ring member.
        witness (LinkabilityWitness): The linkability witness of the ring member.
        key_image (EllipticCurvePoint): The key image of the signer.
        link (int): The linkability flag.

    Returns:
        The link point response * H(public_key, link) + previous_c * key_image, `None` if it is the point at infinity.

    Raises:
        InvalidHashToCurveWitnessError: If `witness.added_number` or `witness.cube_root_witness` is invalid or not
            canonical.
        LinkabilityWitnessMismatchError: If `witness.ec_hash` or `witness.key_image_c` differs from the recomputed
            point.
    """
    hash_value = ring_member_hash(public_key, link)
    check_canonical_added_number(hash_value, witness.added_number)
    check_canonical_cube_root(hash_value, witness.added_number, witness.cube_root_witness)
    H = hash_to_point(hash_value, witness.added_number, witness.cube_root_witness)  # noqa: N806

    R = Secp256k1.sbmul_add_smul(0, H, response)  # noqa: N806
    if points_to_identifier(R) != points_to_identifier(witness.ec_hash):
        msg = f"The witness response * H does not match: witness = {witness.ec_hash}, computed = {R}"
        logger.debug(msg)
        raise LinkabilityWitnessMismatchError(msg)

    C = Secp256k1.sbmul_add_smul(0, key_image, previous_c)  # noqa: N806
    if points_to_identifier(C) != points_to_identifier(witness.key_image_c):
        msg = f"The witness challenge * key_image does not match: witness = {witness.key_image_c}, computed = {C}"
        logger.debug(msg)
        raise LinkabilityWitnessMismatchError(msg)

    return Secp256k1.add(R, C)


def compute_linkable_c(
    response: int,
    previous_c: int,
    public_key: EllipticCurvePoint,
    witness: LinkabilityWitness,
    key_image: EllipticCurvePoint,
    link: int,
    message: int | None = None,
) -> int:
    """Compute the challenge following `previous_c` in the linkable challenge chain.

    The challenge is

        keccak256([message] || link || id(response * G + previous_c * public_key) || L_x || L_y) mod GROUP_ORDER,

    where L is the link point returned by `compute_link_point` ((0, 0) for the point at infinity). The message is only
    mixed in for the first ring member.
    """
    link_point = compute_link_point(response, previous_c, public_key, witness, key_image, link)
    identifier = points_to_identifier(Secp256k1.sbmul_add_smul(response, public_key, previous_c))
    preimage = (link, identifier, *point_to_words(link_point))
    if message is not None:
        preimage = (message, *preimage)
    return hash_to_int(*preimage) % Secp256k1.GROUP_ORDER


def verify_linkable_ring_signature(
    message: int,
    ring: list[int],
    responses: list[int],
    c: int,
    link: int,
    signer_key_image: list[int],
    linkability_witnesses: list[int],
) -> bool:
    """Verify a linkable ring signature.

    Args:
        message (int): The digest of the signed message.
        ring (list[int]): The coordinates of the public keys in the ring: [x0, y0, x1, y1, ..].
        responses (list[int]): One response per ring member, in ring order.
        c (int): The seed of the signature.
        link (int): The linkability flag. Key images are only comparable between signatures with the same flag.
        signer_key_image (list[int]): The coordinates [x, y] of the key image of the signer.
        linkability_witnesses (list[int]): The concatenation, in ring order, of the witnesses
            [added_number, cube_root_witness, ec_hash_x, ec_hash_y, key_image_cx, key_image_cy] of the ring members.

    Returns:
        `True` if the challenge chain closes, `False` otherwise.

    Raises:
        InvalidRingLengthError: If `ring` has odd length or describes fewer than two members.
        ResponsesLengthMismatchError: If `len(responses) != len(ring) / 2`.
        InvalidWitnessLengthError: If `linkability_witnesses` does not hold one witness per ring member.
        PointNotOnCurveError: If a public key in the ring or the key image is not on secp256k1.
        InvalidHashToCurveWitnessError: If a hash-to-curve witness is invalid.
        InvalidPointLengthError: If `signer_key_image` is not made of two coordinates.
        WordOutOfRangeError: If `message`, `link` or a precomputed point coordinate is not in [0, 2^256).
        LinkabilityWitnessMismatchError: If a precomputed point in a witness does not match.
    """
    public_keys = check_shape(ring, responses)
    check_word(message, "message")
    check_word(link, "link")
    witnesses = parse_linkability_witnesses(linkability_witnesses, len(public_keys))
    key_image = Secp256k1.validate_point(EllipticCurvePoint.from_list(signer_key_image), "key image")

    current_c = compute_linkable_c(responses[0], c, public_keys[0], witnesses[0], key_image, link, message)
    for response, public_key, witness in zip(responses[1:], public_keys[1:], witnesses[1:], strict=True):
        current_c = compute_linkable_c(response, current_c, public_key, witness, key_image, link)

    if current_c != c:
        logger.debug("The linkable challenge chain does not close: expected %d, computed %d", c, current_c)
        return False
    return True


def key_image_identifier(signer_key_image: list[int]) -> bytes:
    """Return the linkage value of a linkable ring signature: the 20-byte identifier of its key image.

    Raises:
        InvalidPointLengthError: If `signer_key_image` is not made of two coordinates.
        PointNotOnCurveError: If the key image is not on secp256k1.
    """
    key_image = Secp256k1.validate_point(EllipticCurvePoint.from_list(signer_key_image), "key image")
    return points_to_identifier(key_image)


def are_linked(key_image_a: list[int], key_image_b: list[int]) -> bool:
    """Check whether two verified linkable ring signatures with the same linkability flag share their signer."""
    return key_image_identifier(key_image_a) == key_image_identifier(key_image_b)
