from ringsig.elliptic_curves.ec_operations_fq import AffinePoint
from ringsig.util.utility_functions import keccak256, to_word

IDENTIFIER_LENGTH = 20


def points_to_identifier(P: AffinePoint) -> bytes:  # noqa: N803
    """Collapse the point P = (x,y) into a 20-byte identifier.

    The identifier is the last 20 bytes of keccak256(x || y), with x and y encoded as 32-byte big-endian
    integers. This is how an Ethereum address is derived from an uncompressed public key. The point at infinity
    collapses to 20 zero bytes.

    Args:
        P (AffinePoint): The point to collapse, `None` for the point at infinity.

    Returns:
        The 20-byte identifier of P.
    """
    if P is None:
        return bytes(IDENTIFIER_LENGTH)
    return keccak256(to_word(P.x) + to_word(P.y))[-IDENTIFIER_LENGTH:]


def point_to_words(P: AffinePoint) -> tuple[int, int]:  # noqa: N803
    """Return the coordinates of P, with the point at infinity encoded as (0, 0)."""
    if P is None:
        return 0, 0
    return P.x, P.y
