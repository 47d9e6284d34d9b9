"""util package.

Modules:
    - utility_functions: Keccak-256 hashing and the 32-byte word encoding used to build hash preimages.
"""
