"""Application keypair creation and PEM loading for JWT signing."""

from pathlib import Path

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from vonage_kit.core.errors import KeyFileError, KeyLoadError
from vonage_kit.crypto.types import RSAKeyPair

RSA_KEY_SIZE = 2048
RSA_PUBLIC_EXPONENT = 65537


def generate_application_keypair(key_size: int = RSA_KEY_SIZE) -> RSAKeyPair:
    """Create the keypair for a Voice or Messages application.

    The public half is registered with the application on the dashboard or
    through the Applications API; the private half is what ``JWTGenerator``
    signs with. The private key is unencrypted PKCS#8 PEM, so it can be
    written straight to the file ``VONAGE_PRIVATE_KEY_PATH`` points at.
    """
    if key_size < RSA_KEY_SIZE:
        raise ValueError(f"RS256 needs at least {RSA_KEY_SIZE}-bit keys")
    signing_key = rsa.generate_private_key(RSA_PUBLIC_EXPONENT, key_size)
    pkcs8 = signing_key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    )
    return RSAKeyPair(
        private_key_pem=pkcs8.decode(),
        public_key_pem=public_key_pem(signing_key),
    )


def public_key_pem(private_key: RSAPrivateKey) -> str:
    """Serialize the public half of *private_key* as SubjectPublicKeyInfo PEM."""
    return (
        private_key.public_key()
        .public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode()
    )


def load_private_key(pem: str | bytes) -> RSAPrivateKey:
    """Parse an unencrypted PKCS#1 or PKCS#8 PEM RSA private key."""
    data = pem.encode() if isinstance(pem, str) else pem
    try:
        loaded = serialization.load_pem_private_key(data, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise KeyLoadError(f"Invalid PEM private key: {exc}") from exc
    if not isinstance(loaded, RSAPrivateKey):
        raise KeyLoadError("Private key is not an RSA key")
    return loaded


def read_private_key_file(path: str | Path) -> bytes:
    """Read PEM bytes from *path*."""
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise KeyFileError(f"Cannot read private key file {path}: {exc}") from exc
