import logging
import time

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey
import jwt

from . import exceptions

_log = logging.getLogger(__name__)

# GitHub rejects JWTs valid for longer than 10 minutes
JWT_EXPIRATION = 600
JWT_ALGORITHM = "RS256"


def _now():
    now = int(time.time())
    if now < 0:
        raise exceptions.ClockError(
            "System clock reads {:d}, which is before the epoch".format(now)
        )
    return now


def load_private_key(prvkey):
    """Parses PEM key material into an RSA private key object."""
    if isinstance(prvkey, str):
        prvkey = prvkey.encode()
    if not prvkey:
        raise exceptions.KeyFormatError("Private key is empty")
    try:
        key = serialization.load_pem_private_key(prvkey, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise exceptions.KeyFormatError(
            "Could not parse the private key: {}".format(e)
        ) from e
    if not isinstance(key, RSAPrivateKey):
        raise exceptions.KeyFormatError(
            "Expected an RSA private key, got {}".format(type(key).__name__)
        )
    return key


def get_claims(issuer):
    if not issuer:
        raise ValueError("Issuer (the App ID) must not be empty")
    now = _now()
    return {"iat": now, "exp": now + JWT_EXPIRATION, "iss": issuer}


def get_jwt(prvkey, issuer):
    """Generates JWT signed with the App's private key, valid for ``JWT_EXPIRATION`` seconds"""
    key = load_private_key(prvkey)
    claims = get_claims(issuer)
    _log.debug(
        "JWT claims: iat={iat} exp={exp} iss={iss}".format(**claims)
    )
    try:
        return jwt.encode(claims, key, algorithm=JWT_ALGORITHM)
    except (jwt.PyJWTError, ValueError, TypeError) as e:
        raise exceptions.SigningError("Could not sign the JWT: {}".format(e)) from e
