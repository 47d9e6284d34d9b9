"""Icart's map from F_q to secp256k1, checked against prover-supplied witnesses.

For u != 0, Icart's map sends u to the point (x, y) with

    x = (v^2 - b - u^6 / 27)^(1/3) + u^2 / 3,    y = u * x + v,    where v = (3a - u^4) / (6u).

On secp256k1 (a = 0, b = 7) this reads v = -u^3 / 6. As MODULUS = 1 mod 3, the cube root does not always exist, so
the hash is offset by the smallest `added_number` for which it does, and the verifier is handed the cube root rather
than computing it.
"""

import logging

from ringsig.elliptic_curves.secp256k1.secp256k1 import Secp256k1
from ringsig.types.errors import InvalidHashToCurveWitnessError, PointNotOnCurveError
from ringsig.types.ring_elements import EllipticCurvePoint
from ringsig.util.utility_functions import hash_to_int

logger = logging.getLogger(__name__)

MAX_ADDED_NUMBER = 256

field = Secp256k1.ec_fq.FIELD
INVERSE_THREE = field.inverse(3)
INVERSE_SIX = field.inverse(6)
INVERSE_TWENTY_SEVEN = field.inverse(27)


def ring_member_hash(P: EllipticCurvePoint, link: int) -> int:  # noqa: N803
    """Return keccak256(P_x || P_y || link) mod MODULUS, the value mapped to the curve for the ring member P."""
    return hash_to_int(P.x, P.y, link) % Secp256k1.MODULUS


def icart_target(u: int) -> int:
    """Return the value whose cube root Icart's map requires: (u^3 / 6)^2 - b - u^6 / 27."""
    u_cube = field.cube(u)
    return field.sub(
        field.sub(field.square(field.mul(u_cube, INVERSE_SIX)), Secp256k1.CURVE_B),
        field.mul(field.square(u_cube), INVERSE_TWENTY_SEVEN),
    )


def hash_to_point(hash_value: int, added_number: int, cube_root_witness: int) -> EllipticCurvePoint:
    """Map `hash_value + added_number` to secp256k1 with Icart's method.

    Args:
        hash_value (int): The hash to map to the curve.
        added_number (int): The offset added to `hash_value`.
        cube_root_witness (int): The purported cube root of `icart_target(hash_value + added_number)`.

    Returns:
        The point (x, y) = (cube_root_witness + u^2 / 3, u * x - u^3 / 6), where u = hash_value + added_number.

    Raises:
        InvalidHashToCurveWitnessError: If u = 0 mod MODULUS, or if `cube_root_witness` is not a cube root of
            `icart_target(u)`.
        PointNotOnCurveError: If the resulting point is not on secp256k1.
    """
    u = field.add(hash_value, added_number)
    if u == 0:
        msg = f"Icart's map is not defined at u = 0: hash_value = {hash_value}, added_number = {added_number}"
        logger.debug(msg)
        raise InvalidHashToCurveWitnessError(msg)

    if field.cube(cube_root_witness) != icart_target(u):
        msg = f"Invalid cube root witness for u = {u}: cube_root_witness = {cube_root_witness}"
        logger.debug(msg)
        raise InvalidHashToCurveWitnessError(msg)

    x = field.add(cube_root_witness, field.mul(field.square(u), INVERSE_THREE))
    y = field.sub(field.mul(x, u), field.mul(field.cube(u), INVERSE_SIX))

    if not Secp256k1.is_on_curve(x, y):
        msg = f"Icart's map produced a point not on secp256k1: x = {x}, y = {y}"
        raise PointNotOnCurveError(msg)
    return EllipticCurvePoint(x, y)


def is_mappable(u: int) -> bool:
    """Check whether Icart's map is defined at u, i.e., u != 0 and `icart_target(u)` is a cube."""
    return field.reduce(u) != 0 and field.is_cubic_residue(icart_target(u))


def check_canonical_added_number(hash_value: int, added_number: int) -> None:
    """Check that `added_number` is the smallest offset for which Icart's map is defined at `hash_value + added_number`.

    Raises:
        InvalidHashToCurveWitnessError: If `added_number` is not in [0, MAX_ADDED_NUMBER), or if a smaller offset
            could have been used.
    """
    if not 0 <= added_number < MAX_ADDED_NUMBER:
        msg = f"The added number must be in [0, {MAX_ADDED_NUMBER}): added_number = {added_number}"
        logger.debug(msg)
        raise InvalidHashToCurveWitnessError(msg)
    for smaller in range(added_number):
        if is_mappable(hash_value + smaller):
            msg = f"The added number is not minimal: added_number = {added_number}, {smaller} can be used"
            logger.debug(msg)
            raise InvalidHashToCurveWitnessError(msg)


def check_canonical_cube_root(hash_value: int, added_number: int, cube_root_witness: int) -> None:
    """Check that `cube_root_witness` is the cube root returned by `find_icart_witness`.

    As MODULUS = 1 mod 3, a cube has three cube roots, and each of them gives a different point. Only the root
    `field.cube_root(icart_target(u))` is accepted.

    Raises:
        InvalidHashToCurveWitnessError: If `cube_root_witness` is not the canonical cube root.
    """
    u = field.add(hash_value, added_number)
    if cube_root_witness != field.cube_root(icart_target(u)):
        msg = f"The cube root witness is not canonical for u = {u}: cube_root_witness = {cube_root_witness}"
        logger.debug(msg)
        raise InvalidHashToCurveWitnessError(msg)

def find_icart_witness(hash_value: int) -> tuple[int, int]:
    """Return the canonical `(added_number, cube_root_witness)` for `hash_value`.

    Raises:
        ValueError: If no offset below MAX_ADDED_NUMBER makes Icart's map defined.
    """
    for added_number in range(MAX_ADDED_NUMBER):
        u = field.add(hash_value, added_number)
        if not is_mappable(u):
            continue
        return added_number, field.cube_root(icart_target(u))

    msg = f"No offset below {MAX_ADDED_NUMBER} maps the hash to the curve: hash_value = {hash_value}"
    raise ValueError(msg)
