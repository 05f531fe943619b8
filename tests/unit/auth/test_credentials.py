"""Tests for the request authentication schemes."""

from datetime import timedelta
from pathlib import Path

import jwt
import pytest

from vonage_kit.auth.credentials import JWTAuth, KeySecretAuth, SignatureAuth
from vonage_kit.core.errors import CredentialsError, InvalidSignMethodError
from vonage_kit.core.settings import VonageSettings
from vonage_kit.crypto.jwt_generator import JWTGenerator
from vonage_kit.crypto.signature import SignMethod, generate_sign
from vonage_kit.crypto.types import RSAKeyPair

APPLICATION_ID = "aaaaaaaa-bbbb-cccc-dddd-0123456789ab"


class TestKeySecretAuth:
    """Tests for key and secret credentials."""

    def test_creds(self) -> None:
        auth = KeySecretAuth("key", "secret")
        assert auth.get_creds() == ["key", "secret"]
        assert auth.as_params() == {"api_key": "key", "api_secret": "secret"}

    def test_from_settings(self) -> None:
        auth = KeySecretAuth.from_settings(
            VonageSettings(api_key="key", api_secret="secret")
        )
        assert auth.get_creds() == ["key", "secret"]

    def test_from_settings_missing(self) -> None:
        with pytest.raises(CredentialsError):
            KeySecretAuth.from_settings(VonageSettings(api_key="key"))


class TestSignatureAuth:
    """Tests for signed-request credentials."""

    def test_sign_adds_key_and_sig(self) -> None:
        auth = SignatureAuth("key", "secret", SignMethod.SHA256HMAC)
        signed = auth.sign({"to": "447700900000"})
        expected = generate_sign(
            SignMethod.SHA256HMAC, "secret", {"api_key": "key", "to": "447700900000"}
        )
        assert signed["api_key"] == "key"
        assert signed["sig"] == expected.hex()

    def test_round_trip(self) -> None:
        auth = SignatureAuth("key", "secret", "md5hmac")
        assert auth.verify(auth.sign({"text": "a&b=c"})) is True

    def test_verify_rejects_other_secret(self) -> None:
        signed = SignatureAuth("key", "secret").sign({"a": "1"})
        assert SignatureAuth("key", "other").verify(signed) is False

    def test_invalid_method(self) -> None:
        with pytest.raises(InvalidSignMethodError):
            SignatureAuth("key", "secret", "rot13")

    def test_from_settings(self) -> None:
        settings = VonageSettings(
            api_key="key", signature_secret="secret", signature_method="sha1hmac"
        )
        auth = SignatureAuth.from_settings(settings)
        assert auth.method is SignMethod.SHA1HMAC
        assert auth.get_creds() == ["key", "secret"]

    def test_from_settings_missing(self) -> None:
        with pytest.raises(CredentialsError):
            SignatureAuth.from_settings(VonageSettings(api_key="key"))


class TestJWTAuth:
    """Tests for Bearer token credentials."""

    def test_auth_header(self, keypair: RSAKeyPair) -> None:
        auth = JWTAuth(JWTGenerator(APPLICATION_ID, keypair.private_key_pem))
        header = auth.auth_header()["Authorization"]
        assert header.startswith("Bearer ")
        claims = jwt.decode(
            header.removeprefix("Bearer "),
            keypair.public_key_pem,
            algorithms=["RS256"],
        )
        assert claims["application_id"] == APPLICATION_ID

    def test_fresh_token_per_call(self, keypair: RSAKeyPair) -> None:
        auth = JWTAuth(JWTGenerator(APPLICATION_ID, keypair.private_key_pem))
        assert auth.get_creds() != auth.get_creds()

    def test_from_settings(self, keypair: RSAKeyPair, tmp_path: Path) -> None:
        key_file = tmp_path / "private.key"
        key_file.write_text(keypair.private_key_pem)
        settings = VonageSettings(
            application_id=APPLICATION_ID,
            private_key_path=str(key_file),
            jwt_ttl=120,
            jwt_acl_paths="/*/users/**",
        )
        auth = JWTAuth.from_settings(settings)
        assert auth.generator.options.ttl == timedelta(seconds=120)
        claims = auth.generator.generate().claims
        assert claims["exp"] - claims["iat"] == 120
        assert claims["acl"] == {"paths": {"/*/users/**": {}}}

    def test_from_settings_missing(self) -> None:
        with pytest.raises(CredentialsError):
            JWTAuth.from_settings(VonageSettings(application_id=APPLICATION_ID))
