"""Request signing with MD5 digests or HMAC over canonicalised parameters.

The canonical string is built from the parameters sorted by key, each
rendered as ``&key=value`` with ``&`` and ``=`` inside the value replaced by
``_``. The ``sig`` parameter is never part of the signed material, so an
inbound webhook can be checked by passing its parameters through unchanged.
"""

import hashlib
import hmac
import math
from collections.abc import Mapping
from decimal import Decimal
from enum import StrEnum
from typing import Any

from vonage_kit.core.errors import InvalidSignMethodError

SIGNATURE_PARAM = "sig"


class SignMethod(StrEnum):
    """Supported signature algorithms."""

    MD5HASH = "md5hash"
    MD5HMAC = "md5hmac"
    SHA1HMAC = "sha1hmac"
    SHA256HMAC = "sha256hmac"
    SHA512HMAC = "sha512hmac"


_HMAC_DIGESTS = {
    SignMethod.MD5HMAC: hashlib.md5,
    SignMethod.SHA1HMAC: hashlib.sha1,
    SignMethod.SHA256HMAC: hashlib.sha256,
    SignMethod.SHA512HMAC: hashlib.sha512,
}


def resolve_method(method: SignMethod | str) -> SignMethod:
    """Return the SignMethod for *method*, rejecting unknown values."""
    try:
        return SignMethod(method)
    except ValueError:
        raise InvalidSignMethodError(f"invalid method: {method}") from None


def _format_float(value: float) -> str:
    """Shortest round-trip form, exponent notation outside 1e-4 <= |x| < 1e6."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    shortest = Decimal(repr(value)).normalize()
    sign, digits, exponent = shortest.as_tuple()
    decimal_exp = len(digits) + exponent - 1
    if -4 <= decimal_exp < 6:
        return format(shortest, "f")
    mantissa = str(digits[0])
    if len(digits) > 1:
        mantissa += "." + "".join(str(d) for d in digits[1:])
    exp_sign = "-" if decimal_exp < 0 else "+"
    return f"{'-' if sign else ''}{mantissa}e{exp_sign}{abs(decimal_exp):02d}"


def _format_value(value: Any) -> str:
    """Render a parameter value the way the platform's verifier does."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    return str(value)


def canonical_query(params: Mapping[str, Any] | None) -> str:
    """Build the sorted, delimiter-escaped string that gets signed."""
    if not params:
        return ""
    parts = []
    for key in sorted(k for k in params if k != SIGNATURE_PARAM):
        value = _format_value(params[key]).replace("&", "_").replace("=", "_")
        parts.append(f"&{key}={value}")
    return "".join(parts)


def generate_sign(
    method: SignMethod | str,
    secret: str,
    params: Mapping[str, Any] | None = None,
) -> bytes:
    """Compute the raw signature bytes for *params*.

    ``md5hash`` appends the secret to the canonical string and digests the
    result; the HMAC methods key the digest with the secret instead.
    """
    sign_method = resolve_method(method)
    query = canonical_query(params)

    if sign_method is SignMethod.MD5HASH:
        return hashlib.md5((query + secret).encode()).digest()
    return hmac.new(
        secret.encode(), query.encode(), _HMAC_DIGESTS[sign_method]
    ).digest()


def sign_params(
    method: SignMethod | str,
    secret: str,
    params: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Return a copy of *params* carrying a hex ``sig`` for outbound requests."""
    signed = dict(params or {})
    signed[SIGNATURE_PARAM] = generate_sign(method, secret, signed).hex()
    return signed


def verify_sign(
    method: SignMethod | str,
    secret: str,
    params: Mapping[str, Any],
) -> bool:
    """Check the ``sig`` of an inbound request against its other parameters."""
    expected = generate_sign(method, secret, params).hex()
    received = params.get(SIGNATURE_PARAM)
    if not isinstance(received, str):
        return False
    return hmac.compare_digest(expected.encode(), received.lower().encode())
