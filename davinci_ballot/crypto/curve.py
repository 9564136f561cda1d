"""
BabyJubJub point arithmetic and coordinate conventions.

Two coordinate conventions for the same curve coexist in the protocol:

- Twisted Edwards (TE), used by circomlib and the ballot circuit:
  a*x^2 + y^2 = 1 + d*x^2*y^2 with a = 168700, d = 168696.
- Reduced Twisted Edwards (RTE), used by the gnark-based sequencer.
  Same y, with x scaled by -f.

Each convention has its own point type and only ``rte_to_te`` and
``te_to_rte`` convert between them.
"""

from dataclasses import dataclass
from typing import Tuple

from . import field
from .errors import DomainError
from .field import FIELD_MODULUS, FieldLike

CURVE_A = 168700
CURVE_D = 168696

# Full curve order and prime-order subgroup order
CURVE_ORDER = 21888242871839275222246405745257275088614511777268538073601725287587578984328
SUBGROUP_ORDER = CURVE_ORDER >> 3

# gnark <-> circomlib x-coordinate scaling factor
SCALING_FACTOR = 6360561867910373094066688120553762416144456282423235903351243436111059670888

_NEG_F = field.neg(SCALING_FACTOR)
_NEG_F_INV = field.inverse(_NEG_F)


@dataclass(frozen=True)
class TEPoint:
    """Point in circomlib Twisted Edwards coordinates"""
    x: int
    y: int

    def __post_init__(self):
        _check_coordinates(self.x, self.y)

    @classmethod
    def parse(cls, x: FieldLike, y: FieldLike) -> "TEPoint":
        return cls(field.field_element(x), field.field_element(y))

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def as_strings(self) -> Tuple[str, str]:
        return (str(self.x), str(self.y))


@dataclass(frozen=True)
class RTEPoint:
    """Point in gnark Reduced Twisted Edwards coordinates"""
    x: int
    y: int

    def __post_init__(self):
        _check_coordinates(self.x, self.y)

    @classmethod
    def parse(cls, x: FieldLike, y: FieldLike) -> "RTEPoint":
        return cls(field.field_element(x), field.field_element(y))

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def as_strings(self) -> Tuple[str, str]:
        return (str(self.x), str(self.y))


def _check_coordinates(x, y):
    for coord in (x, y):
        if isinstance(coord, bool) or not isinstance(coord, int):
            raise DomainError("Point coordinates must be integers")
        if coord < 0 or coord >= FIELD_MODULUS:
            raise DomainError("Point coordinate is outside the field range")


IDENTITY = TEPoint(0, 1)

GENERATOR = TEPoint(
    995203441582195749578291179787384436505546430278305826713579947235728471134,
    5472060717959818805561601436314318772137091100104008585924551046643952123905,
)

# Generator of the prime-order subgroup, 8 * GENERATOR
BASE8 = TEPoint(
    5299619240641551281634865583518297030282874472190772894086521144482721001553,
    16950150798460657717958625567821834550301663161624707787222815936182638968203,
)


def rte_to_te(point: RTEPoint) -> TEPoint:
    """x_TE = x_RTE * (-f)^-1, y unchanged"""
    if not isinstance(point, RTEPoint):
        raise DomainError("Expected a point in RTE form")
    return TEPoint(field.mul(point.x, _NEG_F_INV), point.y)


def te_to_rte(point: TEPoint) -> RTEPoint:
    """x_RTE = x_TE * (-f), y unchanged"""
    if not isinstance(point, TEPoint):
        raise DomainError("Expected a point in TE form")
    return RTEPoint(field.mul(point.x, _NEG_F), point.y)


def is_on_curve(point: TEPoint) -> bool:
    x2 = field.mul(point.x, point.x)
    y2 = field.mul(point.y, point.y)
    lhs = field.add(field.mul(CURVE_A, x2), y2)
    rhs = field.add(1, field.mul(CURVE_D, field.mul(x2, y2)))
    return lhs == rhs


def is_on_curve_rte(point: RTEPoint) -> bool:
    return is_on_curve(rte_to_te(point))


def add_points(p1: TEPoint, p2: TEPoint) -> TEPoint:
    """Twisted Edwards addition, complete for BabyJubJub"""
    x1x2 = field.mul(p1.x, p2.x)
    y1y2 = field.mul(p1.y, p2.y)
    dxy = field.mul(CURVE_D, field.mul(x1x2, y1y2))

    x_num = field.add(field.mul(p1.x, p2.y), field.mul(p1.y, p2.x))
    y_num = field.sub(y1y2, field.mul(CURVE_A, x1x2))

    x3 = field.div(x_num, field.add(1, dxy))
    y3 = field.div(y_num, field.sub(1, dxy))
    return TEPoint(x3, y3)


def negate_point(point: TEPoint) -> TEPoint:
    return TEPoint(field.neg(point.x), point.y)


def mul_point_scalar(point: TEPoint, scalar: int) -> TEPoint:
    """
    Double-and-add over the full integer scalar.

    The scalar is not reduced modulo the subgroup order, so the result
    matches circomlib's mulPointEscalar for any point.
    """
    if scalar < 0:
        raise DomainError("Scalar must be non-negative")

    result = IDENTITY
    addend = point
    while scalar:
        if scalar & 1:
            result = add_points(result, addend)
        addend = add_points(addend, addend)
        scalar >>= 1
    return result


def in_subgroup(point: TEPoint) -> bool:
    return is_on_curve(point) and mul_point_scalar(point, SUBGROUP_ORDER) == IDENTITY


def pack_point(point: TEPoint) -> bytes:
    """Compress to 32 bytes: little-endian y, top bit carries the sign of x"""
    buff = bytearray(point.y.to_bytes(32, "little"))
    if point.x > FIELD_MODULUS // 2:
        buff[31] |= 0x80
    return bytes(buff)


def unpack_point(data: bytes) -> TEPoint:
    if len(data) != 32:
        raise DomainError(f"Packed point must be 32 bytes, got {len(data)}")

    buff = bytearray(data)
    sign = bool(buff[31] & 0x80)
    buff[31] &= 0x7F
    y = int.from_bytes(bytes(buff), "little")
    if y >= FIELD_MODULUS:
        raise DomainError("Packed y-coordinate is outside the field range")

    y2 = field.mul(y, y)
    numerator = field.sub(1, y2)
    denominator = field.sub(CURVE_A, field.mul(CURVE_D, y2))
    x = field.sqrt(field.div(numerator, denominator))
    if sign:
        x = field.neg(x)
    return TEPoint(x, y)
