"""
Exception classes for CryptoServe hash name normalization.
"""


class HashNameError(Exception):
    """Base exception for hash name errors."""
    pass


class InvalidHashAlgorithmError(HashNameError):
    """Algorithm is missing or matches no known hash name."""

    def __init__(self, algorithm):
        super().__init__(f"Invalid hash algorithm: {algorithm}")
        self.algorithm = algorithm


class UnsupportedHashContextError(HashNameError):
    """Algorithm is known but has no spelling in the requested context."""

    def __init__(self, algorithm, context):
        super().__init__(
            f"Hash algorithm {algorithm} has no {context.value} name"
        )
        self.algorithm = algorithm
        self.context = context


class AliasCollisionError(HashNameError):
    """Two hash algorithms claim the same alias."""

    def __init__(self, alias: str, existing: str, incoming: str):
        super().__init__(
            f"Alias {alias!r} of {incoming} is already registered to {existing}"
        )
        self.alias = alias
        self.existing = existing
        self.incoming = incoming
