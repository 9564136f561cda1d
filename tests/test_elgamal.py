import pytest

from davinci_ballot.crypto.curve import (
    BASE8,
    IDENTITY,
    add_points,
    is_on_curve,
    mul_point_scalar,
    negate_point,
    te_to_rte,
)
from davinci_ballot.crypto.elgamal import (
    CipherField,
    embed_plaintext,
    encrypt_field,
    generate_key_pair,
)
from davinci_ballot.crypto.errors import DomainError
from davinci_ballot.crypto.field import FIELD_MODULUS

K = 8172635410293847561029384756


def decrypt_point(private_key, cipherfield: CipherField):
    shared = mul_point_scalar(cipherfield.c1, private_key)
    return add_points(cipherfield.c2, negate_point(shared))


class TestEncryptField:

    def test_deterministic(self, pub_key_te):
        assert encrypt_field(3, pub_key_te, K) == encrypt_field(3, pub_key_te, K)

    def test_different_randomness_changes_ciphertext(self, pub_key_te):
        a = encrypt_field(3, pub_key_te, K)
        b = encrypt_field(3, pub_key_te, K + 1)
        assert a.c1 != b.c1
        assert a.c2 != b.c2

    def test_c1_is_randomness_times_base(self, pub_key_te):
        assert encrypt_field(1, pub_key_te, K).c1 == mul_point_scalar(BASE8, K)

    @pytest.mark.parametrize("plaintext", [0, 1, 2, 3, 1000])
    def test_decrypts_to_embedding(self, private_key, pub_key_te, plaintext):
        cipherfield = encrypt_field(plaintext, pub_key_te, K)
        assert is_on_curve(cipherfield.c1)
        assert is_on_curve(cipherfield.c2)
        assert decrypt_point(private_key, cipherfield) == embed_plaintext(plaintext)

    def test_zero_plaintext_embeds_identity(self, private_key, pub_key_te):
        assert embed_plaintext(0) == IDENTITY
        cipherfield = encrypt_field(0, pub_key_te, K)
        assert cipherfield.c2 == mul_point_scalar(pub_key_te, K)

    def test_rejects_rte_key(self, pub_key_te):
        with pytest.raises(DomainError):
            encrypt_field(1, te_to_rte(pub_key_te), K)

    def test_rejects_out_of_field_values(self, pub_key_te):
        with pytest.raises(DomainError):
            encrypt_field(-1, pub_key_te, K)
        with pytest.raises(DomainError):
            encrypt_field(1, pub_key_te, FIELD_MODULUS)

    @pytest.mark.parametrize("bad", ["three", 1.5, None, [1]])
    def test_rejects_non_integer_plaintext(self, pub_key_te, bad):
        with pytest.raises(DomainError):
            encrypt_field(bad, pub_key_te, K)

    @pytest.mark.parametrize("bad", ["0xzz", 2.0, None])
    def test_rejects_non_integer_randomness(self, pub_key_te, bad):
        with pytest.raises(DomainError):
            encrypt_field(1, pub_key_te, bad)

    def test_accepts_string_scalars(self, pub_key_te):
        assert encrypt_field("3", pub_key_te, str(K)) == encrypt_field(3, pub_key_te, K)

    def test_coordinates_flatten_in_order(self, pub_key_te):
        cipherfield = encrypt_field(2, pub_key_te, K)
        assert cipherfield.coordinates() == [
            cipherfield.c1.x, cipherfield.c1.y, cipherfield.c2.x, cipherfield.c2.y,
        ]
        assert cipherfield.to_strings() == [
            [str(cipherfield.c1.x), str(cipherfield.c1.y)],
            [str(cipherfield.c2.x), str(cipherfield.c2.y)],
        ]


class TestKeyGeneration:

    def test_key_pair(self):
        private_key, public_key = generate_key_pair()
        assert public_key == mul_point_scalar(BASE8, private_key)
        assert is_on_curve(public_key)

    def test_round_trip_with_generated_key(self):
        private_key, public_key = generate_key_pair()
        cipherfield = encrypt_field(5, public_key, K)
        assert decrypt_point(private_key, cipherfield) == embed_plaintext(5)
