"""types package.

This package provides the types consumed by the verifiers.

Modules:
    - ring_elements: Affine elliptic curve points, per-member linkability witnesses, and the functions turning the
        flat integer lists received by the verifiers into these types.
    - errors: The error kinds raised when a verification input is malformed.

Usage example:
    Parsing the flat ring `[x0, y0, x1, y1]` into two public keys:

    >>> from ringsig.types.ring_elements import parse_ring
    >>>
    >>> public_keys = parse_ring([x0, y0, x1, y1])
"""
