"""
Name: User Sanitizers Unit Tests

Responsibilities:
  - Non-dict input degrades to {}
  - Trim / lower-case rules per field
  - Idempotence (sanitize twice == sanitize once)
"""

import pytest

from app.application.sanitizers import (
    AuthDataSanitizer,
    UserAvatarDataSanitizer,
    UserCreateDataSanitizer,
)

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    "sanitizer",
    [UserCreateDataSanitizer(), UserAvatarDataSanitizer(), AuthDataSanitizer()],
)
@pytest.mark.parametrize("raw", [None, "texto", 42, ["a"], ("x", "y")])
def test_non_mapping_input_returns_empty_dict(sanitizer, raw):
    assert sanitizer.sanitize(raw) == {}


class TestUserCreateDataSanitizer:
    def test_trims_and_lowercases_email(self):
        result = UserCreateDataSanitizer().sanitize(
            {
                "name": "  Maria Silva ",
                "email": "  Maria@Example.COM ",
                "phone": " +5511987654321 ",
                "birthdate": " 1990-05-17",
                "password": " S3nh@Forte ",
            }
        )

        assert result == {
            "name": "Maria Silva",
            "email": "maria@example.com",
            "phone": "+5511987654321",
            "birthdate": "1990-05-17",
            "password": " S3nh@Forte ",
        }

    def test_missing_keys_become_empty_strings(self):
        result = UserCreateDataSanitizer().sanitize({})

        assert result == {
            "name": "",
            "email": "",
            "phone": "",
            "birthdate": "",
            "password": "",
        }

    def test_numbers_are_stringified(self):
        result = UserCreateDataSanitizer().sanitize({"phone": 11987654321})

        assert result["phone"] == "11987654321"

    def test_non_string_password_is_dropped(self):
        assert UserCreateDataSanitizer().sanitize({"password": 123})["password"] == ""

    def test_idempotent(self):
        sanitizer = UserCreateDataSanitizer()
        once = sanitizer.sanitize({"name": " A ", "email": " B@C.D "})

        assert sanitizer.sanitize(once) == once


class TestUserAvatarDataSanitizer:
    def test_trims_id_and_lowercases_url(self):
        result = UserAvatarDataSanitizer().sanitize(
            {"id": "  abc ", "avatarUrl": " HTTPS://CDN.Example.com/A.PNG "}
        )

        assert result == {"id": "abc", "avatarUrl": "https://cdn.example.com/a.png"}

    def test_idempotent(self):
        sanitizer = UserAvatarDataSanitizer()
        once = sanitizer.sanitize({"id": " X ", "avatarUrl": " Y "})

        assert sanitizer.sanitize(once) == once


class TestAuthDataSanitizer:
    def test_lowercases_email_and_keeps_password(self):
        result = AuthDataSanitizer().sanitize(
            {"email": " Maria@Example.com ", "password": "S3nh@ Forte"}
        )

        assert result == {"email": "maria@example.com", "password": "S3nh@ Forte"}
