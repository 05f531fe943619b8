"""Type definitions for RSA keys and JWT generation."""

import uuid
from datetime import timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict


class RSAKeyPair(BaseModel):
    """An RSA keypair in PEM form."""

    private_key_pem: str
    public_key_pem: str


class GeneratorOptions(BaseModel):
    """Claim inputs held by a JWT generator."""

    model_config = ConfigDict(frozen=True)

    application_id: str
    ttl: timedelta | None = None
    subject: str = ""
    paths: tuple[str, ...] = ()
    jti: uuid.UUID | str | None = None
    nbf: int = 0


class GeneratedToken(BaseModel):
    """A signed token together with its decoded header and claims."""

    model_config = ConfigDict(frozen=True)

    token: str
    header: dict[str, Any]
    claims: dict[str, Any]
