import pytest

from davinci_ballot.crypto import field
from davinci_ballot.crypto.errors import DomainError
from davinci_ballot.crypto.field import FIELD_MODULUS as P


class TestModularArithmetic:
    """Field operations stay canonically reduced"""

    def test_add_wraps(self):
        assert field.add(P - 1, 2) == 1

    def test_mul_wraps(self):
        assert field.mul(P - 1, P - 1) == 1

    def test_neg(self):
        assert field.neg(0) == 0
        assert field.neg(1) == P - 1
        assert field.add(field.neg(12345), 12345) == 0

    def test_to_canonical_negative(self):
        assert field.to_canonical(-1) == P - 1
        assert field.to_canonical(P + 5) == 5

    def test_inverse(self):
        for a in (1, 2, 168700, P - 1, 2**200 + 7):
            assert field.mul(a, field.inverse(a)) == 1

    def test_inverse_of_zero_fails(self):
        with pytest.raises(DomainError):
            field.inverse(0)
        with pytest.raises(DomainError):
            field.inverse(P)

    def test_sqrt(self):
        for a in (4, 168700, 2**128 + 1, P - 3):
            square = field.mul(a, a)
            root = field.sqrt(square)
            assert field.mul(root, root) == square
            assert root <= P // 2

    def test_sqrt_of_non_residue_fails(self):
        z = 2
        while field.is_square(z):
            z += 1
        with pytest.raises(DomainError):
            field.sqrt(z)


class TestFieldElementParsing:

    def test_accepts_int_decimal_and_hex(self):
        assert field.field_element(42) == 42
        assert field.field_element("42") == 42
        assert field.field_element("0x2a") == 42
        assert field.field_element("0X2A") == 42

    @pytest.mark.parametrize("value", [-1, P, P + 1, True, 1.5, "abc", "0xzz"])
    def test_rejects_invalid(self, value):
        with pytest.raises(DomainError):
            field.field_element(value)
