"""
Tests for password hashing, password policy and business email check.
"""

import pytest

from app.auth.password import hash_password, is_business_email, is_strong_password, verify_password


class TestPasswordHash:
    def test_hash_and_verify(self):
        hashed = hash_password("Senha@123")
        assert hashed != "Senha@123"
        assert verify_password("Senha@123", hashed) is True
        assert verify_password("Outra@123", hashed) is False

    def test_verify_with_corrupted_hash_returns_false(self):
        assert verify_password("Senha@123", "nao-e-um-hash") is False


class TestPasswordPolicy:
    @pytest.mark.parametrize("senha", ["Senha@123", "Abcdef1!", "XyZ$9876abc"])
    def test_strong_passwords(self, senha):
        assert is_strong_password(senha) is True

    @pytest.mark.parametrize(
        "senha",
        [
            "",
            "Sh@1",  # curta
            "senha@123",  # sem maiúscula
            "SENHA@123",  # sem minúscula
            "Senha@abc",  # sem número
            "Senha1234",  # sem símbolo
            "Senha@123#",  # símbolo fora da lista
        ],
    )
    def test_weak_passwords(self, senha):
        assert is_strong_password(senha) is False


class TestBusinessEmail:
    @pytest.mark.parametrize("email", ["x@gmail.com", "fulano@Hotmail.com", "a@yahoo.com", "b@protonmail.com"])
    def test_free_mail_rejected(self, email):
        assert is_business_email(email) is False

    def test_corporate_email_accepted(self):
        assert is_business_email("rh@acme.com.br") is True

    @pytest.mark.parametrize("email", ["", "sem-arroba", "usuario@"])
    def test_malformed_email_rejected(self, email):
        assert is_business_email(email) is False
