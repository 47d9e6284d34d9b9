"""secp256k1 package."""

import logging

from ecdsa import SECP256k1

from ringsig.elliptic_curves.ec_operations_fq import AffinePoint, EllipticCurveFq
from ringsig.fields.fq import inv_mod, mul_mod
from ringsig.types.errors import PointNotOnCurveError
from ringsig.types.ring_elements import EllipticCurvePoint

logger = logging.getLogger(__name__)


class Secp256k1:
    """Class containing the scalar multiplications on secp256k1 used by the ring signature verifiers.

    Attributes:
        GROUP_ORDER (int): The order |E|, where E is secp256k1.
        Gx (int): The x coordinate of the generator of E.
        Gy (int): The y coordinate of the generator of E.
        G (EllipticCurvePoint): The generator of E.
        MODULUS (int): The prime over which E is defined.
        CURVE_A (int): The `a` coefficient of E.
        CURVE_B (int): The `b` coefficient of E.
        ec_fq (EllipticCurveFq): The implementation of EC arithmetic over F_MODULUS.
    """

    GROUP_ORDER: int = int(SECP256k1.order)
    Gx: int = int(SECP256k1.generator.x())
    Gy: int = int(SECP256k1.generator.y())
    G: EllipticCurvePoint = EllipticCurvePoint(Gx, Gy)
    MODULUS: int = int(SECP256k1.curve.p())
    CURVE_A: int = int(SECP256k1.curve.a())
    CURVE_B: int = int(SECP256k1.curve.b())
    ec_fq: EllipticCurveFq = EllipticCurveFq(MODULUS, CURVE_A, CURVE_B)

    @classmethod
    def is_on_curve(cls, x: int, y: int) -> bool:
        """Check whether y^2 = x^3 + 7 mod MODULUS, with x and y in [0, MODULUS)."""
        return cls.ec_fq.is_on_curve(x, y)

    @classmethod
    def validate_point(cls, P: EllipticCurvePoint, name: str = "point") -> EllipticCurvePoint:  # noqa: N803
        """Return `P` if it lies on secp256k1.

        Args:
            P (EllipticCurvePoint): The point to validate.
            name (str): How to refer to `P` in the error message.

        Raises:
            PointNotOnCurveError: If `P` is not on secp256k1.
        """
        if not cls.is_on_curve(P.x, P.y):
            msg = f"The {name} is not on secp256k1: x = {P.x}, y = {P.y}"
            logger.debug(msg)
            raise PointNotOnCurveError(msg)
        return P

    @classmethod
    def multiply(cls, a: int, P: AffinePoint) -> AffinePoint:  # noqa: N803
        """Compute aP, with `a` reduced modulo GROUP_ORDER."""
        return cls.ec_fq.scalar_multiplication(a % cls.GROUP_ORDER, P)

    @classmethod
    def add(cls, P: AffinePoint, Q: AffinePoint) -> AffinePoint:  # noqa: N803
        return cls.ec_fq.point_addition(P, Q)

    @classmethod
    def sbmul_add_smul(cls, response: int, P: EllipticCurvePoint, challenge: int) -> AffinePoint:  # noqa: N803
        """Compute response * G + challenge * P.

        Args:
            response (int): The scalar multiplying the generator.
            P (EllipticCurvePoint): The point multiplied by `challenge`.
            challenge (int): The scalar multiplying `P`.

        Returns:
            The point response * G + challenge * P, or `None` if it is the point at infinity.

        Raises:
            PointNotOnCurveError: If `P` is not on secp256k1.
        """
        cls.validate_point(P)
        return cls.ec_fq.multi_scalar_multiplication(
            [(response % cls.GROUP_ORDER, cls.G), (challenge % cls.GROUP_ORDER, P)]
        )

    @classmethod
    def ecrecover(cls, h: int, parity: int, r: int, s: int) -> AffinePoint:
        """Recover the public key Q from the ECDSA signature (r, s) of the message digest `h`.

        The public key is Q = r^-1 * (s * R - h * G), where R is the point with x coordinate `r` and y coordinate of
        parity `parity`.

        Args:
            h (int): The message digest, read as an integer.
            parity (int): The parity of the y coordinate of R.
            r (int): The r-component of the signature, i.e., the x coordinate of R.
            s (int): The s-component of the signature.

        Returns:
            The recovered public key, or `None` if `r` is not the x coordinate of a point, `r = 0 mod GROUP_ORDER`, or
            the result is the point at infinity.
        """
        R = cls.ec_fq.lift_x(r, parity)  # noqa: N806
        if R is None or r % cls.GROUP_ORDER == 0:
            return None
        r_inverse = inv_mod(r, cls.GROUP_ORDER)
        return cls.ec_fq.multi_scalar_multiplication(
            [
                (mul_mod(-h, r_inverse, cls.GROUP_ORDER), cls.G),
                (mul_mod(s, r_inverse, cls.GROUP_ORDER), R),
            ]
        )

    @classmethod
    def sbmul_add_smul_via_recovery(
        cls, response: int, P: EllipticCurvePoint, challenge: int  # noqa: N803
    ) -> AffinePoint:
        """Compute response * G + challenge * P through ECDSA public key recovery.

        With h = -response * P_x, r = P_x and s = challenge * P_x (all modulo GROUP_ORDER), the recovered key is
        P_x^-1 * (challenge * P_x * P + response * P_x * G) = response * G + challenge * P.

        Raises:
            PointNotOnCurveError: If `P` is not on secp256k1.
        """
        cls.validate_point(P)
        h = mul_mod(cls.GROUP_ORDER - response % cls.GROUP_ORDER, P.x, cls.GROUP_ORDER)
        s = mul_mod(challenge, P.x, cls.GROUP_ORDER)
        return cls.ecrecover(h, P.y % 2, P.x, s)
