import pytest
from ecdsa import SECP256k1

from ringsig.elliptic_curves.secp256k1.secp256k1 import Secp256k1
from ringsig.hash_to_curve.icart import (
    MAX_ADDED_NUMBER,
    check_canonical_added_number,
    check_canonical_cube_root,
    find_icart_witness,
    hash_to_point,
    icart_target,
    is_mappable,
    ring_member_hash,
)
from ringsig.types.errors import InvalidHashToCurveWitnessError
from ringsig.types.ring_elements import EllipticCurvePoint

MODULUS = Secp256k1.MODULUS

hash_values = [
    1,
    2,
    12345678901234567890,
    2**255 - 19,
    MODULUS - 1,
    ring_member_hash(Secp256k1.G, 0),
    ring_member_hash(Secp256k1.G, 1),
]


@pytest.mark.parametrize("hash_value", hash_values)
def test_hash_to_point_on_curve(hash_value):
    added_number, cube_root_witness = find_icart_witness(hash_value)
    P = hash_to_point(hash_value, added_number, cube_root_witness)
    assert SECP256k1.curve.contains_point(P.x, P.y)
    assert Secp256k1.is_on_curve(P.x, P.y)


@pytest.mark.parametrize("hash_value", hash_values)
def test_hash_to_point_is_deterministic(hash_value):
    added_number, cube_root_witness = find_icart_witness(hash_value)
    assert find_icart_witness(hash_value) == (added_number, cube_root_witness)
    assert hash_to_point(hash_value, added_number, cube_root_witness) == hash_to_point(
        hash_value, added_number, cube_root_witness
    )


@pytest.mark.parametrize("hash_value", hash_values)
def test_hash_to_point_matches_icart_formula(hash_value):
    added_number, cube_root_witness = find_icart_witness(hash_value)
    u = (hash_value + added_number) % MODULUS
    P = hash_to_point(hash_value, added_number, cube_root_witness)

    v = -pow(u, 3, MODULUS) * pow(6, -1, MODULUS) % MODULUS
    cube = pow(P.x - u * u * pow(3, -1, MODULUS), 3, MODULUS)
    assert cube == (v * v - 7 - pow(u, 6, MODULUS) * pow(27, -1, MODULUS)) % MODULUS
    assert P.y == (u * P.x + v) % MODULUS


@pytest.mark.parametrize("hash_value", hash_values)
def test_hash_to_point_rejects_wrong_cube_root(hash_value):
    added_number, cube_root_witness = find_icart_witness(hash_value)
    with pytest.raises(InvalidHashToCurveWitnessError, match="cube root"):
        hash_to_point(hash_value, added_number, (cube_root_witness + 1) % MODULUS)


def test_hash_to_point_other_cube_roots():
    # MODULUS = 1 mod 3: multiplying by a primitive cube root of unity gives another valid witness
    hash_value = hash_values[2]
    added_number, cube_root_witness = find_icart_witness(hash_value)
    omega = (Secp256k1.ec_fq.FIELD.sqrt(MODULUS - 3) - 1) * pow(2, -1, MODULUS) % MODULUS
    assert omega != 1
    assert pow(omega, 3, MODULUS) == 1
    P = hash_to_point(hash_value, added_number, cube_root_witness * omega % MODULUS)
    assert Secp256k1.is_on_curve(P.x, P.y)
    assert P != hash_to_point(hash_value, added_number, cube_root_witness)
    with pytest.raises(InvalidHashToCurveWitnessError, match="not canonical"):
        check_canonical_cube_root(hash_value, added_number, cube_root_witness * omega % MODULUS)


def test_hash_to_point_rejects_zero():
    with pytest.raises(InvalidHashToCurveWitnessError, match="u = 0"):
        hash_to_point(MODULUS - 3, 3, 0)


def test_find_icart_witness_is_minimal():
    for hash_value in hash_values:
        added_number, cube_root_witness = find_icart_witness(hash_value)
        assert is_mappable(hash_value + added_number)
        assert not any(is_mappable(hash_value + smaller) for smaller in range(added_number))
        assert pow(cube_root_witness, 3, MODULUS) == icart_target(hash_value + added_number)
        check_canonical_added_number(hash_value, added_number)


def test_check_canonical_added_number_rejects_non_minimal():
    hash_value = next(h for h in range(1, 1000) if is_mappable(h) and is_mappable(h + 1))
    check_canonical_added_number(hash_value, 0)
    with pytest.raises(InvalidHashToCurveWitnessError, match="not minimal"):
        check_canonical_added_number(hash_value, 1)


@pytest.mark.parametrize("added_number", [-1, MAX_ADDED_NUMBER, MAX_ADDED_NUMBER + 1])
def test_check_canonical_added_number_out_of_range(added_number):
    with pytest.raises(InvalidHashToCurveWitnessError, match="must be in"):
        check_canonical_added_number(1, added_number)


def test_ring_member_hash():
    assert 0 <= ring_member_hash(Secp256k1.G, 0) < MODULUS
    assert ring_member_hash(Secp256k1.G, 0) != ring_member_hash(Secp256k1.G, 1)
    negated = EllipticCurvePoint(Secp256k1.Gx, MODULUS - Secp256k1.Gy)
    assert ring_member_hash(Secp256k1.G, 0) != ring_member_hash(negated, 0)


@pytest.mark.parametrize("hash_value", hash_values)
def test_check_canonical_cube_root(hash_value):
    added_number, cube_root_witness = find_icart_witness(hash_value)
    check_canonical_cube_root(hash_value, added_number, cube_root_witness)
    with pytest.raises(InvalidHashToCurveWitnessError, match="not canonical"):
        check_canonical_cube_root(hash_value, added_number, cube_root_witness + MODULUS)
    with pytest.raises(InvalidHashToCurveWitnessError, match="not canonical"):
        check_canonical_cube_root(hash_value, added_number, MODULUS - cube_root_witness)
