"""Exception hierarchy shared by the signing, JWT and NCCO modules."""


class VonageKitError(Exception):
    """Base class for all vonage-kit errors."""


class InvalidSignMethodError(VonageKitError, ValueError):
    """Raised when a signature method is not one of the supported ones."""


class KeyLoadError(VonageKitError):
    """Raised when a PEM private key cannot be parsed as an RSA key."""


class KeyFileError(KeyLoadError):
    """Raised when a private key file cannot be read."""


class TokenSigningError(VonageKitError):
    """Raised when RS256 signing of a claim set fails."""


class TokenNotGeneratedError(VonageKitError):
    """Raised when token introspection is requested before any generation."""


class CredentialsError(VonageKitError):
    """Raised when settings lack the values an auth scheme needs."""
