"""
CryptoServe Hash Names - hash algorithm name normalization.

Maps any known spelling of SHA-1, SHA-224, SHA-256, SHA-384, SHA-512 and
RIPEMD-160 to the spelling used by Node-style crypto, WebCrypto, or the JWK
RSA, RSA-PSS, RSA-OAEP and HMAC algorithm identifiers.
"""

from cryptoserve_hashnames.table import (
    HASH_NAMES,
    HashContext,
    HashNames,
)
from cryptoserve_hashnames.errors import (
    HashNameError,
    InvalidHashAlgorithmError,
    UnsupportedHashContextError,
    AliasCollisionError,
)
from cryptoserve_hashnames.registry import (
    HashNameRegistry,
    hash_name_registry,
    normalize_hash_name,
)

__version__ = "0.1.0"

__all__ = [
    # Table
    "HASH_NAMES",
    "HashContext",
    "HashNames",
    # Registry
    "HashNameRegistry",
    "hash_name_registry",
    "normalize_hash_name",
    # Errors
    "HashNameError",
    "InvalidHashAlgorithmError",
    "UnsupportedHashContextError",
    "AliasCollisionError",
]
