"""Hash Name Registry.

Resolves any known spelling of a hash algorithm to the spelling used by a
target naming context:

    >>> normalize_hash_name("sha256", HashContext.JWK_RSA)
    'RS256'
    >>> normalize_hash_name("RSA-OAEP-512")
    'sha512'

Accepted inputs are plain strings or algorithm descriptors: mappings with a
"name" item (WebCrypto style) and objects with a ``name`` attribute, such as
``cryptography.hazmat.primitives.hashes.SHA256()``.

The alias index is built once when the registry is constructed and is never
modified afterwards, so a registry can be shared between threads.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from cryptoserve_hashnames.config import get_settings
from cryptoserve_hashnames.errors import (
    AliasCollisionError,
    InvalidHashAlgorithmError,
    UnsupportedHashContextError,
)
from cryptoserve_hashnames.logging import get_logger
from cryptoserve_hashnames.table import HASH_NAMES, HashContext, HashNames

logger = get_logger(__name__)


def _display_name(algorithm: Any) -> str:
    """Extract the name string from a string or algorithm descriptor."""
    if isinstance(algorithm, str):
        return algorithm
    if isinstance(algorithm, Mapping):
        name = algorithm.get("name")
        return name if isinstance(name, str) else ""
    name = getattr(algorithm, "name", None)
    if isinstance(name, str) and name:
        return name
    return str(algorithm)


class HashNameRegistry:
    """Maps hash algorithm aliases to per-context spellings."""

    def __init__(
        self,
        entries: Iterable[HashNames] = HASH_NAMES,
        reject_collisions: bool | None = None,
    ):
        """Build the alias index.

        Args:
            entries: Table rows, in priority order
            reject_collisions: Raise on alias collisions instead of keeping
                the first registration. Defaults to the
                HASHNAMES_REJECT_ALIAS_COLLISIONS setting.

        Raises:
            AliasCollisionError: Duplicate canonical name, or an alias
                collision while rejecting collisions
        """
        if reject_collisions is None:
            reject_collisions = get_settings().reject_alias_collisions

        self._entries = tuple(entries)
        self._canonical: dict[str, HashNames] = {}
        index: dict[str, HashNames] = {}

        for entry in self._entries:
            if entry.canonical in self._canonical:
                raise AliasCollisionError(
                    entry.canonical, entry.canonical, entry.canonical
                )
            self._canonical[entry.canonical] = entry

            aliases = [entry.canonical.lower()]
            aliases.extend(spelling.lower() for _, spelling in entry.spellings())

            for alias in aliases:
                existing = index.get(alias)
                if existing is None:
                    index[alias] = entry
                elif existing is not entry:
                    if reject_collisions:
                        raise AliasCollisionError(
                            alias, existing.canonical, entry.canonical
                        )
                    logger.warning(
                        "Hash alias collision, keeping first registration",
                        alias=alias,
                        kept=existing.canonical,
                        ignored=entry.canonical,
                    )

        self._index = MappingProxyType(index)
        logger.debug(
            "Hash name index built",
            entries=len(self._entries),
            aliases=len(self._index),
        )

    @property
    def entries(self) -> tuple[HashNames, ...]:
        """Table rows in registration order."""
        return self._entries

    @property
    def aliases(self) -> tuple[str, ...]:
        """Every indexed alias, lowercase, in registration order."""
        return tuple(self._index)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, algorithm: object) -> bool:
        if algorithm is None:
            return False
        return self._find(_display_name(algorithm)) is not None

    def _find(self, name: str) -> HashNames | None:
        name = name.lower()
        entry = self._index.get(name)
        if entry is None:
            # "SHA-256" and "sha256" are the same algorithm
            entry = self._index.get(name.replace("-", ""))
        return entry

    def lookup(self, algorithm: Any) -> HashNames:
        """Resolve an algorithm to its table row.

        Raises:
            InvalidHashAlgorithmError: If algorithm is None or unknown
        """
        if algorithm is None:
            raise InvalidHashAlgorithmError(algorithm)

        entry = self._find(_display_name(algorithm))
        if entry is None:
            logger.debug("Hash name lookup failed", algorithm=str(algorithm))
            raise InvalidHashAlgorithmError(algorithm)
        return entry

    def normalize(
        self,
        algorithm: Any,
        context: HashContext = HashContext.NODE,
    ) -> str:
        """Get the spelling of an algorithm in a naming context.

        Args:
            algorithm: Any known spelling, or a descriptor carrying one
            context: Target naming context

        Returns:
            The context's spelling, exactly as defined in the table

        Raises:
            InvalidHashAlgorithmError: If algorithm is None or unknown
            UnsupportedHashContextError: If the algorithm has no name in context
        """
        context = HashContext(context)
        entry = self.lookup(algorithm)

        spelling = entry.get(context)
        if spelling is None:
            raise UnsupportedHashContextError(entry.canonical, context)
        return spelling

    def canonical_name(self, algorithm: Any) -> str:
        """Get the canonical lowercase name of an algorithm."""
        return self.lookup(algorithm).canonical

    def supports(self, algorithm: Any, context: HashContext) -> bool:
        """Check whether an algorithm is known and named in a context."""
        if algorithm is None:
            return False
        entry = self._find(_display_name(algorithm))
        return entry is not None and entry.get(context) is not None

    def contexts_for(self, algorithm: Any) -> tuple[HashContext, ...]:
        """List the contexts in which an algorithm has a spelling."""
        return tuple(context for context, _ in self.lookup(algorithm).spellings())


# Singleton instance
hash_name_registry = HashNameRegistry()


def normalize_hash_name(
    algorithm: Any,
    context: HashContext = HashContext.NODE,
) -> str:
    """Normalize a hash algorithm name using the shared registry."""
    return hash_name_registry.normalize(algorithm, context)
