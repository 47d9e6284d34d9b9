"""secp256k1 package.

This package provides the scalar multiplications on secp256k1 required by the ring signature verifiers.

Modules:
    - secp256k1: Implements the class Secp256k1 which has methods:
        - is_on_curve: Checks that (x,y) satisfies y^2 = x^3 + 7
        - sbmul_add_smul: Computes response * G + challenge * P
        - ecrecover: Recovers a public key from an ECDSA signature
        - sbmul_add_smul_via_recovery: Computes response * G + challenge * P by means of ecrecover
    - util: Collapses a point into a 20-byte identifier.
"""
