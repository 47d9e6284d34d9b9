"""ring_signatures package.

Modules:
    - ring_signature: Verifies ring signatures by recomputing their challenge chain.
    - linkable_ring_signature: Verifies linkable ring signatures, checking the hash-to-curve and key image witnesses
        of every ring member, and exposes the key image identifier used to link signatures.
"""
