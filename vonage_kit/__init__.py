"""Request signing, application JWTs and NCCO building for the Vonage APIs."""

__version__ = "0.1.0"

from vonage_kit.crypto.jwt_generator import JWTGenerator
from vonage_kit.crypto.keys import generate_application_keypair
from vonage_kit.crypto.signature import SignMethod, generate_sign
from vonage_kit.ncco.builder import Ncco

__all__ = [
    "JWTGenerator",
    "Ncco",
    "SignMethod",
    "generate_application_keypair",
    "generate_sign",
    "__version__",
]
