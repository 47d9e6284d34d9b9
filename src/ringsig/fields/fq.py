"""Arithmetic operations in F_q."""


def add_mod(a: int, b: int, q: int) -> int:
    """Return `a + b mod q`, normalised into `[0, q)`."""
    return (a % q + b % q) % q


def mul_mod(a: int, b: int, q: int) -> int:
    """Return `a * b mod q`, normalised into `[0, q)`."""
    return (a % q) * (b % q) % q


def pow_mod(base: int, exponent: int, q: int) -> int:
    """Return `base^exponent mod q`, normalised into `[0, q)`.

    The exponent must be non-negative. Python's built-in three-argument `pow` performs left-to-right
    square-and-multiply on arbitrary precision integers.
    """
    return pow(base % q, exponent, q)


def inv_mod(a: int, q: int) -> int:
    """Return the inverse of `a` modulo the prime `q`, computed as `a^(q-2) mod q`.

    The result is only meaningful for `a` not divisible by `q`: `inv_mod(0, q)` returns `0`.
    """
    return pow_mod(a, q - 2, q)


class Fq:
    """Arithmetic in the prime field F_q.

    Attributes:
        MODULUS: The characteristic of the field F_q.
    """

    def __init__(self, q: int):
        """Initialise F_q.

        Args:
            q: The characteristic of the base field F_q.
        """
        self.MODULUS = q

    def __repr__(self) -> str:
        return f"Fq({self.MODULUS})"

    def reduce(self, x: int) -> int:
        return x % self.MODULUS

    def add(self, x: int, y: int) -> int:
        return add_mod(x, y, self.MODULUS)

    def sub(self, x: int, y: int) -> int:
        return add_mod(x, -y, self.MODULUS)

    def neg(self, x: int) -> int:
        return -x % self.MODULUS

    def mul(self, x: int, y: int) -> int:
        return mul_mod(x, y, self.MODULUS)

    def square(self, x: int) -> int:
        return mul_mod(x, x, self.MODULUS)

    def cube(self, x: int) -> int:
        return mul_mod(self.square(x), x, self.MODULUS)

    def pow(self, x: int, exponent: int) -> int:
        return pow_mod(x, exponent, self.MODULUS)

    def inverse(self, x: int) -> int:
        return inv_mod(x, self.MODULUS)

    def is_square(self, x: int) -> bool:
        """Check whether `x` is a square in F_q via Euler's criterion."""
        x = self.reduce(x)
        return x == 0 or self.pow(x, (self.MODULUS - 1) // 2) == 1

    def sqrt(self, x: int) -> int | None:
        """Return a square root of `x` in F_q, or `None` if `x` is not a square.

        Only primes `q = 3 mod 4` are supported, for which a root is `x^((q+1)/4)`.

        Raises:
            ValueError: If `q != 3 mod 4`.
        """
        if self.MODULUS % 4 != 3:
            msg = f"Square roots are only implemented for q = 3 mod 4: q = {self.MODULUS}"
            raise ValueError(msg)
        root = self.pow(x, (self.MODULUS + 1) // 4)
        return root if self.square(root) == self.reduce(x) else None

    def is_cubic_residue(self, x: int) -> bool:
        """Check whether `x` is a cube in F_q.

        For `q = 1 mod 3`, `x != 0` is a cube if and only if `x^((q-1)/3) = 1`. For `q = 2 mod 3`, cubing is a
        bijection and every element is a cube.
        """
        x = self.reduce(x)
        if x == 0 or self.MODULUS % 3 == 2:
            return True
        return self.pow(x, (self.MODULUS - 1) // 3) == 1

    def cube_root(self, x: int) -> int | None:
        """Return a cube root of `x` in F_q, or `None` if `x` is not a cube.

        Supported primes are `q = 2 mod 3`, where the root is `x^((2q-1)/3)`, and `q = 7 mod 9`, where
        the root of a cubic residue is `x^((q+2)/9)`.

        Raises:
            ValueError: If `q` is neither `2 mod 3` nor `7 mod 9`.
        """
        if self.MODULUS % 3 == 2:
            return self.pow(x, (2 * self.MODULUS - 1) // 3)
        if self.MODULUS % 9 != 7:
            msg = f"Cube roots are only implemented for q = 2 mod 3 or q = 7 mod 9: q = {self.MODULUS}"
            raise ValueError(msg)
        if not self.is_cubic_residue(x):
            return None
        root = self.pow(x, (self.MODULUS + 2) // 9)
        return root if self.cube(root) == self.reduce(x) else None
