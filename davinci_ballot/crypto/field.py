"""
Modular arithmetic over the BN254 scalar field.

Every function returns a canonically reduced integer in [0, p).
"""

from typing import Union

from .errors import DomainError

# BN254 scalar field prime
FIELD_MODULUS = 21888242871839275222246405745257275088548364400416034343698204186575808495617

FieldLike = Union[int, str]


def to_canonical(value: int) -> int:
    """Reduce any integer into [0, p)"""
    return value % FIELD_MODULUS


def field_element(value: FieldLike) -> int:
    """
    Parse a strict field element.

    Accepts ints and decimal or 0x-prefixed hex strings. Rejects negatives
    and values >= p instead of silently reducing them.
    """
    if isinstance(value, bool):
        raise DomainError("Boolean is not a field element")
    if isinstance(value, str):
        text = value.strip()
        try:
            value = int(text, 16) if text.lower().startswith("0x") else int(text, 10)
        except ValueError:
            raise DomainError("String is not a decimal or hex integer") from None
    if not isinstance(value, int):
        raise DomainError(f"Unsupported field element type: {type(value).__name__}")
    if value < 0 or value >= FIELD_MODULUS:
        raise DomainError("Value is outside the field range [0, p)")
    return value


def add(a: int, b: int) -> int:
    return (a + b) % FIELD_MODULUS


def sub(a: int, b: int) -> int:
    return (a - b) % FIELD_MODULUS


def mul(a: int, b: int) -> int:
    return (a * b) % FIELD_MODULUS


def neg(a: int) -> int:
    return (-a) % FIELD_MODULUS


def inverse(a: int) -> int:
    """Multiplicative inverse modulo p"""
    a = to_canonical(a)
    if a == 0:
        raise DomainError("Zero has no multiplicative inverse")
    return pow(a, -1, FIELD_MODULUS)


def div(a: int, b: int) -> int:
    return mul(a, inverse(b))


def is_square(a: int) -> bool:
    """Euler's criterion"""
    a = to_canonical(a)
    return a == 0 or pow(a, (FIELD_MODULUS - 1) // 2, FIELD_MODULUS) == 1


def sqrt(a: int) -> int:
    """
    Square root modulo p using Tonelli-Shanks.

    Returns the root in the lower half of the field, matching the sign
    convention of circomlib's point compression.
    """
    a = to_canonical(a)
    if a == 0:
        return 0
    if not is_square(a):
        raise DomainError("Value is not a quadratic residue")

    # p - 1 = q * 2^s with q odd
    q, s = FIELD_MODULUS - 1, 0
    while q % 2 == 0:
        q //= 2
        s += 1

    z = 2
    while is_square(z):
        z += 1

    m = s
    c = pow(z, q, FIELD_MODULUS)
    t = pow(a, q, FIELD_MODULUS)
    r = pow(a, (q + 1) // 2, FIELD_MODULUS)

    while t != 1:
        i, t2 = 0, t
        while t2 != 1:
            t2 = t2 * t2 % FIELD_MODULUS
            i += 1
        b = pow(c, 1 << (m - i - 1), FIELD_MODULUS)
        m = i
        c = b * b % FIELD_MODULUS
        t = t * c % FIELD_MODULUS
        r = r * b % FIELD_MODULUS

    return r if r <= FIELD_MODULUS // 2 else FIELD_MODULUS - r
