"""Elliptic curve arithmetic over F_q."""

from ringsig.fields.fq import Fq
from ringsig.types.ring_elements import EllipticCurvePoint

# The point at infinity is represented by `None`
AffinePoint = EllipticCurvePoint | None


class EllipticCurveFq:
    """Elliptic curve arithmetic over F_q for the curve y^2 = x^3 + a*x + b, in affine coordinates.

    Attributes:
        MODULUS: The characteristic of the field F_q.
        CURVE_A: The `a` coefficient in the Short-Weierstrass equation of the curve (an element in F_q).
        CURVE_B: The `b` coefficient in the Short-Weierstrass equation of the curve (an element in F_q).
        FIELD: The arithmetic of F_q.
    """

    def __init__(self, q: int, curve_a: int, curve_b: int):
        """Initialise the elliptic curve group E(F_q).

        Args:
            q: The characteristic of the base field F_q.
            curve_a: The `a` coefficient in the Short-Weierstrass equation of the curve (an element in F_q).
            curve_b: The `b` coefficient in the Short-Weierstrass equation of the curve (an element in F_q).
        """
        self.MODULUS = q
        self.CURVE_A = curve_a
        self.CURVE_B = curve_b
        self.FIELD = Fq(q)

    def right_hand_side(self, x: int) -> int:
        """Return x^3 + a*x + b."""
        return self.FIELD.add(self.FIELD.cube(x), self.FIELD.add(self.FIELD.mul(self.CURVE_A, x), self.CURVE_B))

    def is_on_curve(self, x: int, y: int) -> bool:
        """Check whether (x, y) is an affine point of E(F_q).

        Coordinates outside `[0, q)` are rejected: every point has a unique encoding.
        """
        if not (0 <= x < self.MODULUS and 0 <= y < self.MODULUS):
            return False
        return self.FIELD.square(y) == self.right_hand_side(x)

    def lift_x(self, x: int, parity: int) -> AffinePoint:
        """Return the point with x coordinate `x` whose y coordinate has parity `parity`.

        Returns:
            The point, or `None` if `x` is not the x coordinate of a point in E(F_q).
        """
        if not 0 <= x < self.MODULUS:
            return None
        y = self.FIELD.sqrt(self.right_hand_side(x))
        if y is None:
            return None
        if y % 2 != parity % 2:
            y = self.FIELD.neg(y)
        return EllipticCurvePoint(x, y)

    def point_negation(self, P: AffinePoint) -> AffinePoint:  # noqa: N803
        if P is None:
            return None
        return EllipticCurvePoint(P.x, self.FIELD.neg(P.y))

    def point_doubling(self, P: AffinePoint) -> AffinePoint:  # noqa: N803
        """Compute 2P.

        The gradient of the tangent line at P is `(3 * x_P^2 + a) / (2 * y_P)`.
        """
        if P is None or P.y == 0:
            return None
        field = self.FIELD
        gradient = field.mul(
            field.add(field.mul(3, field.square(P.x)), self.CURVE_A),
            field.inverse(field.mul(2, P.y)),
        )
        x = field.sub(field.square(gradient), field.mul(2, P.x))
        y = field.sub(field.mul(gradient, field.sub(P.x, x)), P.y)
        return EllipticCurvePoint(x, y)

    def point_addition(self, P: AffinePoint, Q: AffinePoint) -> AffinePoint:  # noqa: N803
        """Compute P + Q.

        The gradient of the line through P and Q is `(y_Q - y_P) / (x_Q - x_P)`. The cases P = Q and P = -Q are
        handled separately.
        """
        if P is None:
            return Q
        if Q is None:
            return P
        if P.x == Q.x:
            return self.point_doubling(P) if P.y == Q.y else None
        field = self.FIELD
        gradient = field.mul(field.sub(Q.y, P.y), field.inverse(field.sub(Q.x, P.x)))
        x = field.sub(field.sub(field.square(gradient), P.x), Q.x)
        y = field.sub(field.mul(gradient, field.sub(P.x, x)), P.y)
        return EllipticCurvePoint(x, y)

    def scalar_multiplication(self, a: int, P: AffinePoint) -> AffinePoint:  # noqa: N803
        """Compute aP with left-to-right double-and-add.

        Args:
            a (int): A non-negative scalar.
            P (AffinePoint): The point to multiply.
        """
        return self.multi_scalar_multiplication([(a, P)])

    def multi_scalar_multiplication(self, terms: list[tuple[int, AffinePoint]]) -> AffinePoint:
        """Compute sum(a_i * P_i) with a single double-and-add pass over the bits of all the scalars.

        This is Shamir's trick: the doublings are shared among all the terms, and at each bit the points whose scalar
        has that bit set are added to the accumulator.

        Args:
            terms (list[tuple[int, AffinePoint]]): The pairs (a_i, P_i), with a_i non-negative.
        """
        for a, _ in terms:
            if a < 0:
                msg = f"Scalars must be non-negative: a = {a}"
                raise ValueError(msg)

        out = None
        for bit in reversed(range(max((a.bit_length() for a, _ in terms), default=0))):
            out = self.point_doubling(out)
            for a, P in terms:  # noqa: N806
                if (a >> bit) & 1:
                    out = self.point_addition(out, P)
        return out
