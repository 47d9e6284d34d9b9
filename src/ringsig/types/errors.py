"""Error kinds raised when verification inputs are malformed.

A signature whose challenge chain does not close is not an error: the verifiers return `False`. The classes below
signal that the input could not be checked at all.
"""


class RingSignatureError(ValueError):
    """Base class for malformed verification inputs."""


class InvalidRingLengthError(RingSignatureError):
    """The flat ring is not of even length, or describes fewer than two members."""


class ResponsesLengthMismatchError(RingSignatureError):
    """The number of responses differs from the number of ring members."""


class InvalidWitnessLengthError(RingSignatureError):
    """The flat linkability witness list does not hold one full witness per ring member."""


class PointNotOnCurveError(RingSignatureError):
    """A ring member, key image or derived point does not satisfy the curve equation."""


class InvalidHashToCurveWitnessError(RingSignatureError):
    """The `(added_number, cube_root_witness)` pair does not map the hash to the curve canonically."""


class LinkabilityWitnessMismatchError(RingSignatureError):
    """A precomputed `response * H` or `challenge * key_image` point differs from the recomputed one."""


class InvalidPointLengthError(RingSignatureError):
    """A point is not given as exactly two coordinates."""


class WordOutOfRangeError(RingSignatureError):
    """A value hashed as a 32-byte word is not in [0, 2^256)."""
