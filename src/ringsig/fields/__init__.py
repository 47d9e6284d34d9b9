"""fields package.

Modules:
    - fq: Modular addition, multiplication, exponentiation and inversion, and the class Fq binding them to a prime
        modulus together with square and cube roots.
"""
