"""Reference signer producing honest (linkable) ring signatures for the tests."""

import json
from dataclasses import dataclass
from pathlib import Path
from random import Random

from ringsig.elliptic_curves.secp256k1.secp256k1 import Secp256k1
from ringsig.elliptic_curves.secp256k1.util import point_to_words, points_to_identifier
from ringsig.hash_to_curve.icart import find_icart_witness, hash_to_point, ring_member_hash
from ringsig.types.ring_elements import EllipticCurvePoint, LinkabilityWitness
from ringsig.util.utility_functions import hash_to_int

GROUP_ORDER = Secp256k1.GROUP_ORDER


@dataclass
class RingSignature:
    message: int
    ring: list[int]
    responses: list[int]
    c: int


@dataclass
class LinkableRingSignature:
    message: int
    ring: list[int]
    responses: list[int]
    c: int
    link: int
    signer_key_image: list[int]
    linkability_witnesses: list[int]


def generate_keys(rng: Random, n_keys: int) -> list[tuple[int, EllipticCurvePoint]]:
    out = []
    for _ in range(n_keys):
        private_key = rng.randrange(1, GROUP_ORDER)
        out.append((private_key, Secp256k1.multiply(private_key, Secp256k1.G)))
    return out


def flatten(points: list[EllipticCurvePoint]) -> list[int]:
    return [coordinate for point in points for coordinate in point.to_list()]


def challenge(point, message: int | None) -> int:
    identifier = points_to_identifier(point)
    preimage = (identifier,) if message is None else (message, identifier)
    return hash_to_int(*preimage) % GROUP_ORDER


def linkable_challenge(point, link_point, link: int, message: int | None) -> int:
    preimage = (link, points_to_identifier(point), *point_to_words(link_point))
    if message is not None:
        preimage = (message, *preimage)
    return hash_to_int(*preimage) % GROUP_ORDER


def sign(
    rng: Random, message: int, public_keys: list[EllipticCurvePoint], signer_index: int, private_key: int
) -> RingSignature:
    """Sign `message` on behalf of the ring `public_keys`, with the private key of `public_keys[signer_index]`."""
    n_members = len(public_keys)
    responses = [0] * n_members
    challenges = [0] * n_members

    alpha = rng.randrange(1, GROUP_ORDER)
    challenges[(signer_index + 1) % n_members] = challenge(
        Secp256k1.multiply(alpha, Secp256k1.G), message if signer_index == 0 else None
    )

    i = (signer_index + 1) % n_members
    while i != signer_index:
        responses[i] = rng.randrange(1, GROUP_ORDER)
        challenges[(i + 1) % n_members] = challenge(
            Secp256k1.sbmul_add_smul(responses[i], public_keys[i], challenges[i]), message if i == 0 else None
        )
        i = (i + 1) % n_members

    responses[signer_index] = (alpha - challenges[signer_index] * private_key) % GROUP_ORDER

    return RingSignature(message=message, ring=flatten(public_keys), responses=responses, c=challenges[0])


def hash_ring_member(
    public_key: EllipticCurvePoint, link: int, cube_root_factor: int = 1
) -> tuple[int, int, EllipticCurvePoint]:
    """Return the Icart witness of `public_key` and the corresponding point on the curve.

    The cube root is the canonical one multiplied by `cube_root_factor`, which must be a cube root of unity.
    """
    hash_value = ring_member_hash(public_key, link)
    added_number, cube_root_witness = find_icart_witness(hash_value)
    cube_root_witness = cube_root_witness * cube_root_factor % Secp256k1.MODULUS
    return added_number, cube_root_witness, hash_to_point(hash_value, added_number, cube_root_witness)


def key_image(private_key: int, link: int) -> EllipticCurvePoint:
    _, _, H = hash_ring_member(Secp256k1.multiply(private_key, Secp256k1.G), link)
    return Secp256k1.multiply(private_key, H)


def sign_linkable(
    rng: Random,
    message: int,
    public_keys: list[EllipticCurvePoint],
    signer_index: int,
    private_key: int,
    link: int,
    cube_root_factor: int = 1,
) -> LinkableRingSignature:
    """Sign `message` with a linkable ring signature on behalf of the ring `public_keys`.

    `cube_root_factor` is forwarded to `hash_ring_member` for every ring member.
    """
    n_members = len(public_keys)
    responses = [0] * n_members
    challenges = [0] * n_members
    hashes = [hash_ring_member(public_key, link, cube_root_factor) for public_key in public_keys]
    signer_key_image = Secp256k1.multiply(private_key, hashes[signer_index][2])

    alpha = rng.randrange(1, GROUP_ORDER)
    challenges[(signer_index + 1) % n_members] = linkable_challenge(
        Secp256k1.multiply(alpha, Secp256k1.G),
        Secp256k1.multiply(alpha, hashes[signer_index][2]),
        link,
        message if signer_index == 0 else None,
    )

    i = (signer_index + 1) % n_members
    while i != signer_index:
        responses[i] = rng.randrange(1, GROUP_ORDER)
        link_point = Secp256k1.add(
            Secp256k1.multiply(responses[i], hashes[i][2]), Secp256k1.multiply(challenges[i], signer_key_image)
        )
        challenges[(i + 1) % n_members] = linkable_challenge(
            Secp256k1.sbmul_add_smul(responses[i], public_keys[i], challenges[i]),
            link_point,
            link,
            message if i == 0 else None,
        )
        i = (i + 1) % n_members

    responses[signer_index] = (alpha - challenges[signer_index] * private_key) % GROUP_ORDER

    witnesses = []
    for i, (added_number, cube_root_witness, H) in enumerate(hashes):  # noqa: N806
        witnesses += LinkabilityWitness(
            added_number=added_number,
            cube_root_witness=cube_root_witness,
            ec_hash=Secp256k1.multiply(responses[i], H),
            key_image_c=Secp256k1.multiply(challenges[i], signer_key_image),
        ).to_list()

    return LinkableRingSignature(
        message=message,
        ring=flatten(public_keys),
        responses=responses,
        c=challenges[0],
        link=link,
        signer_key_image=signer_key_image.to_list(),
        linkability_witnesses=witnesses,
    )


def rebuild_witnesses(signature: LinkableRingSignature) -> list[int]:
    """Walk the challenge chain of `signature` as a verifier does and return witnesses consistent with it."""
    public_keys = [EllipticCurvePoint(x, y) for x, y in zip(signature.ring[::2], signature.ring[1::2], strict=True)]
    signer_key_image = EllipticCurvePoint.from_list(signature.signer_key_image)

    witnesses = []
    current_c = signature.c
    for i, (public_key, response) in enumerate(zip(public_keys, signature.responses, strict=True)):
        added_number, cube_root_witness, H = hash_ring_member(public_key, signature.link)  # noqa: N806
        R = Secp256k1.multiply(response, H)  # noqa: N806
        C = Secp256k1.multiply(current_c, signer_key_image)  # noqa: N806
        witnesses += LinkabilityWitness(added_number, cube_root_witness, R, C).to_list()
        current_c = linkable_challenge(
            Secp256k1.sbmul_add_smul(response, public_key, current_c),
            Secp256k1.add(R, C),
            signature.link,
            signature.message if i == 0 else None,
        )
    return witnesses


def save_signature(signature, save_to_json_folder, filename, test_name):
    if save_to_json_folder:
        output_dir = Path("data") / save_to_json_folder / "ring_signatures"
        output_dir.mkdir(parents=True, exist_ok=True)
        json_file = output_dir / f"{filename}.json"

        data = {}

        if json_file.exists():
            with json_file.open("r") as f:
                data = json.load(f)

        data[test_name] = {key: value for key, value in vars(signature).items()}

        with json_file.open("w") as f:
            json.dump(data, f, indent=4)
