"""Authentication schemes applied to outbound API requests."""

from collections.abc import Mapping
from datetime import timedelta
from typing import Any, Protocol

from vonage_kit.core.errors import CredentialsError
from vonage_kit.core.settings import VonageSettings
from vonage_kit.crypto.jwt_generator import JWTGenerator
from vonage_kit.crypto.signature import (
    SignMethod,
    resolve_method,
    sign_params,
    verify_sign,
)


class Auth(Protocol):
    """Common interface of all auth schemes."""

    def get_creds(self) -> list[str]: ...


class KeySecretAuth:
    """API key and secret, sent as request parameters."""

    def __init__(self, api_key: str, api_secret: str) -> None:
        self._api_key = api_key
        self._api_secret = api_secret

    @classmethod
    def from_settings(cls, settings: VonageSettings) -> "KeySecretAuth":
        if not settings.api_key or not settings.api_secret:
            raise CredentialsError("VONAGE_API_KEY and VONAGE_API_SECRET are required")
        return cls(settings.api_key, settings.api_secret)

    def get_creds(self) -> list[str]:
        return [self._api_key, self._api_secret]

    def as_params(self) -> dict[str, str]:
        return {"api_key": self._api_key, "api_secret": self._api_secret}


class SignatureAuth:
    """API key plus a signature secret used to sign request parameters."""

    def __init__(
        self,
        api_key: str,
        signature_secret: str,
        method: SignMethod | str = SignMethod.MD5HASH,
    ) -> None:
        self._api_key = api_key
        self._signature_secret = signature_secret
        self.method = resolve_method(method)

    @classmethod
    def from_settings(cls, settings: VonageSettings) -> "SignatureAuth":
        if not settings.api_key or not settings.signature_secret:
            raise CredentialsError(
                "VONAGE_API_KEY and VONAGE_SIGNATURE_SECRET are required"
            )
        return cls(
            settings.api_key, settings.signature_secret, settings.signature_method
        )

    def get_creds(self) -> list[str]:
        return [self._api_key, self._signature_secret]

    def sign(self, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Add ``api_key`` and ``sig`` to a copy of *params*."""
        unsigned = dict(params or {})
        unsigned["api_key"] = self._api_key
        return sign_params(self.method, self._signature_secret, unsigned)

    def verify(self, params: Mapping[str, Any]) -> bool:
        """Validate the ``sig`` of an inbound webhook."""
        return verify_sign(self.method, self._signature_secret, params)


class JWTAuth:
    """Bearer token auth backed by an application JWT generator."""

    def __init__(self, generator: JWTGenerator) -> None:
        self.generator = generator

    @classmethod
    def from_settings(cls, settings: VonageSettings) -> "JWTAuth":
        if not settings.application_id or not settings.private_key_path:
            raise CredentialsError(
                "VONAGE_APPLICATION_ID and VONAGE_PRIVATE_KEY_PATH are required"
            )
        generator = JWTGenerator.from_file(
            settings.application_id,
            settings.private_key_path,
            ttl=timedelta(seconds=settings.jwt_ttl),
            paths=settings.get_acl_path_list(),
        )
        return cls(generator)

    def get_creds(self) -> list[str]:
        """A freshly signed token."""
        return [self.generator.generate_token()]

    def auth_header(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.generator.generate_token()}"}
