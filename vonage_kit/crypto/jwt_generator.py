"""Application JWT generation using RS256."""

import logging
import time
import uuid
from collections.abc import Iterable
from datetime import timedelta
from pathlib import Path
from typing import Any, Self

import jwt
import uuid_utils

from vonage_kit.core.errors import TokenNotGeneratedError, TokenSigningError
from vonage_kit.crypto.keys import load_private_key, read_private_key_file
from vonage_kit.crypto.types import GeneratedToken, GeneratorOptions

logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(minutes=15)
ALGORITHM = "RS256"


def build_acl(paths: Iterable[str]) -> dict[str, dict[str, dict[str, Any]]]:
    """Build the ``acl`` claim granting each path with no restrictions."""
    return {"paths": {path: {} for path in paths}}


def _resolve_jti(override: uuid.UUID | str | None) -> str:
    """Return the configured JTI, or a fresh one when unset or unparseable."""
    if override is None or override == "":
        return str(uuid_utils.uuid4())
    try:
        return str(uuid.UUID(str(override)))
    except ValueError:
        logger.warning("Ignoring JTI override %r: not a valid UUID", override)
        return str(uuid_utils.uuid4())


class JWTGenerator:
    """Creates RS256 application tokens for Bearer authentication.

    Configuration methods return a new generator and leave the receiver
    untouched, so a base generator can be shared and specialised per call.
    The most recent result of ``generate`` is kept on ``last_token``; it is
    not guarded against concurrent use.
    """

    def __init__(
        self,
        application_id: str,
        private_key: str | bytes,
        *,
        ttl: timedelta | None = None,
        subject: str = "",
        paths: Iterable[str] = (),
        jti: uuid.UUID | str | None = None,
        nbf: int = 0,
    ) -> None:
        self._private_key = (
            private_key.encode() if isinstance(private_key, str) else private_key
        )
        self._options = GeneratorOptions(
            application_id=application_id,
            ttl=ttl,
            subject=subject,
            paths=tuple(paths),
            jti=jti,
            nbf=nbf,
        )
        self.last_token: GeneratedToken | None = None

    @classmethod
    def from_file(
        cls, application_id: str, private_key_path: str | Path, **options: Any
    ) -> Self:
        """Create a generator from a private key file on disk."""
        return cls(application_id, read_private_key_file(private_key_path), **options)

    @property
    def application_id(self) -> str:
        return self._options.application_id

    @property
    def private_key(self) -> bytes:
        return self._private_key

    @property
    def options(self) -> GeneratorOptions:
        return self._options

    @property
    def paths(self) -> tuple[str, ...]:
        return self._options.paths

    def _evolve(self, **changes: Any) -> Self:
        fields = self._options.model_dump()
        fields.update(changes)
        application_id = fields.pop("application_id")
        return type(self)(application_id, self._private_key, **fields)

    def with_ttl(self, ttl: timedelta | None) -> Self:
        return self._evolve(ttl=ttl)

    def with_subject(self, subject: str) -> Self:
        return self._evolve(subject=subject)

    def with_jti(self, jti: uuid.UUID | str | None) -> Self:
        return self._evolve(jti=jti)

    def with_nbf(self, nbf: int) -> Self:
        return self._evolve(nbf=nbf)

    def add_path(self, *paths: str) -> Self:
        """Append ACL paths to the ones already configured."""
        return self._evolve(paths=self._options.paths + paths)

    def with_paths(self, paths: Iterable[str]) -> Self:
        """Replace the configured ACL paths."""
        return self._evolve(paths=tuple(paths))

    def build_claims(self, now: int | None = None) -> dict[str, Any]:
        """Assemble the claim set for a new token issued at *now*."""
        issued_at = int(time.time()) if now is None else now
        ttl = self._options.ttl or DEFAULT_TTL
        claims: dict[str, Any] = {
            "iat": issued_at,
            "application_id": self._options.application_id,
            "exp": issued_at + int(ttl.total_seconds()),
            "jti": _resolve_jti(self._options.jti),
        }
        if self._options.nbf:
            claims["nbf"] = self._options.nbf
        if self._options.subject:
            claims["sub"] = self._options.subject
        if self._options.paths:
            claims["acl"] = build_acl(self._options.paths)
        return claims

    def generate(self) -> GeneratedToken:
        """Sign a fresh claim set and return the token with its parts."""
        claims = self.build_claims()
        signing_key = load_private_key(self._private_key)
        try:
            token = jwt.encode(claims, signing_key, algorithm=ALGORITHM)
        except (jwt.PyJWTError, ValueError, TypeError) as exc:
            raise TokenSigningError(f"Failed to sign token: {exc}") from exc

        generated = GeneratedToken(
            token=token,
            header=jwt.get_unverified_header(token),
            claims=claims,
        )
        self.last_token = generated
        return generated

    def generate_token(self) -> str:
        """Sign a fresh claim set and return the compact token string."""
        return self.generate().token

    def _require_last_token(self) -> GeneratedToken:
        if self.last_token is None:
            raise TokenNotGeneratedError("No token has been generated yet")
        return self.last_token

    def get_header(self) -> dict[str, Any]:
        """Header of the most recently generated token."""
        return dict(self._require_last_token().header)

    def get_claims(self) -> dict[str, Any]:
        """Claims of the most recently generated token."""
        return dict(self._require_last_token().claims)
