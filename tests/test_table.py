"""Tests for the canonical hash name table."""

import dataclasses

import pytest

from cryptoserve_hashnames.table import HASH_NAMES, HashContext, HashNames


EXPECTED = {
    "sha1": ("sha1", "SHA-1", "RS1", "PS1", "RSA-OAEP", "HS1"),
    "sha224": ("sha224", "SHA-224", "RS224", "PS224", "RSA-OAEP-224", "HS224"),
    "sha256": ("sha256", "SHA-256", "RS256", "PS256", "RSA-OAEP-256", "HS256"),
    "sha384": ("sha384", "SHA-384", "RS384", "PS384", "RSA-OAEP-384", "HS384"),
    "sha512": ("sha512", "SHA-512", "RS512", "PS512", "RSA-OAEP-512", "HS512"),
    "ripemd160": ("ripemd160", "RIPEMD-160", None, None, None, None),
}


class TestHashContext:
    """Tests for the naming context enum."""

    def test_declaration_order(self):
        assert list(HashContext) == [
            HashContext.NODE,
            HashContext.WEBCRYPTO,
            HashContext.JWK_RSA,
            HashContext.JWK_RSA_PSS,
            HashContext.JWK_RSA_OAEP,
            HashContext.JWK_HMAC,
        ]

    def test_lookup_by_value(self):
        assert HashContext("webcrypto") is HashContext.WEBCRYPTO
        assert HashContext("jwk-rsa-oaep") is HashContext.JWK_RSA_OAEP


class TestHashNamesTable:
    """Tests for the table contents."""

    def test_canonical_order(self):
        assert [entry.canonical for entry in HASH_NAMES] == list(EXPECTED)

    def test_canonical_keys_unique_and_lowercase(self):
        keys = [entry.canonical for entry in HASH_NAMES]
        assert len(keys) == len(set(keys))
        assert all(key == key.lower() for key in keys)

    @pytest.mark.parametrize("entry", HASH_NAMES, ids=lambda e: e.canonical)
    def test_spellings_match(self, entry):
        expected = EXPECTED[entry.canonical]
        assert tuple(entry.get(context) for context in HashContext) == expected

    def test_ripemd160_has_no_jwk_names(self):
        ripemd = HASH_NAMES[-1]
        assert [context for context, _ in ripemd.spellings()] == [
            HashContext.NODE,
            HashContext.WEBCRYPTO,
        ]

    def test_entries_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            HASH_NAMES[0].node = "md5"


class TestHashNames:
    """Tests for a single table row."""

    def test_get_accepts_context_value(self):
        entry = HashNames(canonical="sha256", webcrypto="SHA-256")
        assert entry.get("webcrypto") == "SHA-256"

    def test_get_undefined_context(self):
        entry = HashNames(canonical="sha256", webcrypto="SHA-256")
        assert entry.get(HashContext.JWK_HMAC) is None

    def test_spellings_skip_undefined(self):
        entry = HashNames(canonical="x", node="x", jwk_hmac="HX")
        assert list(entry.spellings()) == [
            (HashContext.NODE, "x"),
            (HashContext.JWK_HMAC, "HX"),
        ]
