"""Shared test fixtures for vonage-kit."""

import pytest

from vonage_kit.crypto.keys import generate_application_keypair
from vonage_kit.crypto.types import RSAKeyPair


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep VONAGE_* variables from the host out of settings tests."""
    for name in (
        "VONAGE_API_KEY",
        "VONAGE_API_SECRET",
        "VONAGE_SIGNATURE_SECRET",
        "VONAGE_SIGNATURE_METHOD",
        "VONAGE_APPLICATION_ID",
        "VONAGE_PRIVATE_KEY_PATH",
        "VONAGE_JWT_TTL",
        "VONAGE_JWT_ACL_PATHS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session")
def keypair() -> RSAKeyPair:
    """One RSA keypair shared by the whole session."""
    return generate_application_keypair()
