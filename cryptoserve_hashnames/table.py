"""Canonical hash name table.

Every subsystem spells the same digest differently:
- Node-style crypto: sha256
- WebCrypto: SHA-256
- JWK RSA signatures: RS256, RSA-PSS: PS256
- JWK RSA-OAEP key wrapping: RSA-OAEP-256
- JWK HMAC: HS256

The table below is the single source of truth for those spellings.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


class HashContext(str, Enum):
    """Naming vocabularies for hash algorithms."""
    NODE = "node"
    WEBCRYPTO = "webcrypto"
    JWK_RSA = "jwk-rsa"
    JWK_RSA_PSS = "jwk-rsa-pss"
    JWK_RSA_OAEP = "jwk-rsa-oaep"
    JWK_HMAC = "jwk-hmac"


@dataclass(frozen=True)
class HashNames:
    """Spellings of one hash algorithm, one per context.

    A field left as None means the algorithm has no name in that context.
    """
    canonical: str
    node: Optional[str] = None
    webcrypto: Optional[str] = None
    jwk_rsa: Optional[str] = None
    jwk_rsa_pss: Optional[str] = None
    jwk_rsa_oaep: Optional[str] = None
    jwk_hmac: Optional[str] = None

    def get(self, context: HashContext) -> Optional[str]:
        """Get the spelling for a context, or None if undefined."""
        return getattr(self, _CONTEXT_FIELDS[HashContext(context)])

    def spellings(self) -> Iterator[tuple[HashContext, str]]:
        """Yield (context, spelling) for defined spellings, in context order."""
        for context in HashContext:
            spelling = self.get(context)
            if spelling is not None:
                yield context, spelling


_CONTEXT_FIELDS = {
    HashContext.NODE: "node",
    HashContext.WEBCRYPTO: "webcrypto",
    HashContext.JWK_RSA: "jwk_rsa",
    HashContext.JWK_RSA_PSS: "jwk_rsa_pss",
    HashContext.JWK_RSA_OAEP: "jwk_rsa_oaep",
    HashContext.JWK_HMAC: "jwk_hmac",
}


# Order matters: the first entry to claim an alias keeps it.
HASH_NAMES: tuple[HashNames, ...] = (
    HashNames(
        canonical="sha1",
        node="sha1",
        webcrypto="SHA-1",
        jwk_rsa="RS1",
        jwk_rsa_pss="PS1",
        jwk_rsa_oaep="RSA-OAEP",
        jwk_hmac="HS1",
    ),
    HashNames(
        canonical="sha224",
        node="sha224",
        webcrypto="SHA-224",
        jwk_rsa="RS224",
        jwk_rsa_pss="PS224",
        jwk_rsa_oaep="RSA-OAEP-224",
        jwk_hmac="HS224",
    ),
    HashNames(
        canonical="sha256",
        node="sha256",
        webcrypto="SHA-256",
        jwk_rsa="RS256",
        jwk_rsa_pss="PS256",
        jwk_rsa_oaep="RSA-OAEP-256",
        jwk_hmac="HS256",
    ),
    HashNames(
        canonical="sha384",
        node="sha384",
        webcrypto="SHA-384",
        jwk_rsa="RS384",
        jwk_rsa_pss="PS384",
        jwk_rsa_oaep="RSA-OAEP-384",
        jwk_hmac="HS384",
    ),
    HashNames(
        canonical="sha512",
        node="sha512",
        webcrypto="SHA-512",
        jwk_rsa="RS512",
        jwk_rsa_pss="PS512",
        jwk_rsa_oaep="RSA-OAEP-512",
        jwk_hmac="HS512",
    ),
    HashNames(
        canonical="ripemd160",
        node="ripemd160",
        webcrypto="RIPEMD-160",
    ),
)
