"""hash_to_curve package.

Modules:
    - icart: Icart's map to secp256k1, verified against the `(added_number, cube_root_witness)` pair supplied by the
        signer, and the helper deriving that pair.
"""
