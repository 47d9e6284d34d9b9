"""elliptic_curves package.

This package provides elliptic curve arithmetic in affine coordinates.

Modules:
    - ec_operations_fq: Contains the EllipticCurveFq class for elliptic curve arithmetic over F_q.
    - secp256k1: Contains the Secp256k1 class, with the curve constants and the operation
        response * G + challenge * P used by the verifiers.

Usage example:
    >>> from ringsig.elliptic_curves.ec_operations_fq import EllipticCurveFq
    >>> from ringsig.types.ring_elements import EllipticCurvePoint
    >>>
    >>> secp256k1_MODULUS = 115792089237316195423570985008687907853269984665640564039457584007908834671663
    >>> secp256k1 = EllipticCurveFq(q=secp256k1_MODULUS, curve_a=0, curve_b=7)
    >>>
    >>> P = EllipticCurvePoint(x, y)
    >>> Q = secp256k1.scalar_multiplication(5, P)
"""
