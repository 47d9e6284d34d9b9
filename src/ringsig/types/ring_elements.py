"""Classes defining the elements consumed by the ring signature verifiers."""

from dataclasses import dataclass
from typing import Self

from ringsig.types.errors import (
    InvalidPointLengthError,
    InvalidRingLengthError,
    InvalidWitnessLengthError,
    WordOutOfRangeError,
)
from ringsig.util.utility_functions import WORD_LENGTH

MIN_RING_SIZE = 2
LINKABILITY_WITNESS_LENGTH = 6


def check_word(value: int, name: str) -> int:
    """Return `value` if it fits in a 32-byte word.

    Raises:
        WordOutOfRangeError: If `value` is not in [0, 2^256).
    """
    if not 0 <= value < 1 << (8 * WORD_LENGTH):
        msg = f"The {name} must be in [0, 2^256): {name} = {value}"
        raise WordOutOfRangeError(msg)
    return value


@dataclass(frozen=True)
class EllipticCurvePoint:
    """Affine point on a short Weierstrass curve.

    The point at infinity has no affine representation and is modelled as `None` by the curve arithmetic.

    Attributes:
        x (int): the x coordinate of the point.
        y (int): the y coordinate of the point.
    """

    x: int
    y: int

    @classmethod
    def from_list(cls, coordinates: list[int]) -> Self:
        """Build a point from `[x, y]`.

        Raises:
            InvalidPointLengthError: If `coordinates` does not hold two elements.
        """
        if len(coordinates) != 2:
            msg = f"A point is made of 2 coordinates: len(coordinates) = {len(coordinates)}"
            raise InvalidPointLengthError(msg)
        x, y = coordinates
        return cls(x, y)

    def to_list(self) -> list[int]:
        return [self.x, self.y]


@dataclass(frozen=True)
class LinkabilityWitness:
    """Auxiliary values supplied with a linkable ring signature for a single ring member.

    Attributes:
        added_number (int): the offset added to the hash before mapping it to the curve.
        cube_root_witness (int): the cube root required by Icart's map for `hash + added_number`.
        ec_hash (EllipticCurvePoint): the purported point `response * H`, where `H` is the hash of the ring member
            mapped to the curve.
        key_image_c (EllipticCurvePoint): the purported point `challenge * key_image`.
    """

    added_number: int
    cube_root_witness: int
    ec_hash: EllipticCurvePoint
    key_image_c: EllipticCurvePoint

    @classmethod
    def from_list(cls, values: list[int]) -> Self:
        """Build a witness from [added_number, cube_root_witness, ec_hash_x, ec_hash_y, key_image_cx, key_image_cy].

        Raises:
            InvalidWitnessLengthError: If `values` does not hold six elements.
            WordOutOfRangeError: If a coordinate of `ec_hash` or `key_image_c` is not in [0, 2^256).
        """
        if len(values) != LINKABILITY_WITNESS_LENGTH:
            msg = f"A linkability witness is made of {LINKABILITY_WITNESS_LENGTH} values: len(values) = {len(values)}"
            raise InvalidWitnessLengthError(msg)
        added_number, cube_root_witness, ec_hash_x, ec_hash_y, key_image_cx, key_image_cy = values
        for name, value in zip(("ec_hash_x", "ec_hash_y", "key_image_cx", "key_image_cy"), values[2:], strict=True):
            check_word(value, name)
        return cls(
            added_number=added_number,
            cube_root_witness=cube_root_witness,
            ec_hash=EllipticCurvePoint(ec_hash_x, ec_hash_y),
            key_image_c=EllipticCurvePoint(key_image_cx, key_image_cy),
        )

    def to_list(self) -> list[int]:
        return [self.added_number, self.cube_root_witness, *self.ec_hash.to_list(), *self.key_image_c.to_list()]


def parse_ring(ring: list[int]) -> tuple[EllipticCurvePoint, ...]:
    """Split the flat list `[x0, y0, x1, y1, ..]` into ring members.

    The points are not checked against the curve equation here.

    Args:
        ring (list[int]): The coordinates of the public keys in the ring.

    Returns:
        The public keys in the ring, in order.

    Raises:
        InvalidRingLengthError: If `ring` has odd length or describes fewer than `MIN_RING_SIZE` members.
    """
    if len(ring) % 2 != 0 or len(ring) < 2 * MIN_RING_SIZE:
        msg = f"The ring must be made of at least {MIN_RING_SIZE} points (an even number of coordinates): "
        msg += f"len(ring) = {len(ring)}"
        raise InvalidRingLengthError(msg)
    return tuple(EllipticCurvePoint(ring[i], ring[i + 1]) for i in range(0, len(ring), 2))


def parse_linkability_witnesses(witnesses: list[int], ring_size: int) -> tuple[LinkabilityWitness, ...]:
    """Split the flat list of linkability witnesses into one `LinkabilityWitness` per ring member.

    Args:
        witnesses (list[int]): The concatenation of the witnesses of all ring members, each laid out as
            `[added_number, cube_root_witness, ec_hash_x, ec_hash_y, key_image_cx, key_image_cy]`.
        ring_size (int): The number of ring members.

    Raises:
        InvalidWitnessLengthError: If `len(witnesses) != LINKABILITY_WITNESS_LENGTH * ring_size`.
    """
    if len(witnesses) != LINKABILITY_WITNESS_LENGTH * ring_size:
        msg = f"Expected {LINKABILITY_WITNESS_LENGTH} witness values per ring member: "
        msg += f"len(witnesses) = {len(witnesses)}, ring_size = {ring_size}"
        raise InvalidWitnessLengthError(msg)
    return tuple(
        LinkabilityWitness.from_list(witnesses[i : i + LINKABILITY_WITNESS_LENGTH])
        for i in range(0, len(witnesses), LINKABILITY_WITNESS_LENGTH)
    )
