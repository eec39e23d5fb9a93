"""Unit tests for CredentialRecord invariants and serialisation."""

from __future__ import annotations

import json

import pytest

from passlab.kernel.errors import (
    SerializationError,
    UnsupportedAlgorithmError,
    ValidationError,
)
from passlab.security.passwords import Algorithm, CredentialRecord

_SALT = "ab" * 32
_BCRYPT_HASH = "$2b$04$abcdefghijklmnopqrstuu5Z5Z5Z5Z5Z5Z5Z5Z5Z5Z5Z5Z5Z5Z5Z5Z"


class TestCredentialRecord:
    def test_algorithm_tag_is_coerced(self) -> None:
        record = CredentialRecord(hash="ff", salt=_SALT, algorithm="SHA-256")  # type: ignore[arg-type]
        assert record.algorithm is Algorithm.SHA256

    def test_unknown_algorithm_rejected(self) -> None:
        with pytest.raises(UnsupportedAlgorithmError):
            CredentialRecord(hash="ff", salt=_SALT, algorithm="ROT13")  # type: ignore[arg-type]

    def test_digest_record_requires_salt(self) -> None:
        with pytest.raises(ValidationError):
            CredentialRecord(hash="ff", salt="", algorithm=Algorithm.SHA1)

    def test_bcrypt_record_must_not_carry_salt(self) -> None:
        with pytest.raises(ValidationError):
            CredentialRecord(hash=_BCRYPT_HASH, salt=_SALT, algorithm=Algorithm.BCRYPT)

    def test_bcrypt_record_with_empty_salt(self) -> None:
        record = CredentialRecord(hash=_BCRYPT_HASH, salt="", algorithm=Algorithm.BCRYPT)
        assert record.salt == ""

    def test_empty_hash_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CredentialRecord(hash="", salt=_SALT, algorithm=Algorithm.SHA256)

    def test_frozen(self) -> None:
        record = CredentialRecord(hash="ff", salt=_SALT, algorithm=Algorithm.SHA256)
        with pytest.raises((AttributeError, TypeError)):
            record.salt = "00"  # type: ignore[misc]

    def test_repr_masks_secrets(self) -> None:
        record = CredentialRecord(hash="deadbeef", salt=_SALT, algorithm=Algorithm.SHA256)
        r = repr(record)
        assert "deadbeef" not in r
        assert _SALT not in r
        assert "SHA-256" in r


class TestCredentialRecordSerialisation:
    def test_to_dict_has_exactly_three_fields(self) -> None:
        record = CredentialRecord(hash="ff", salt=_SALT, algorithm=Algorithm.SHA512)
        assert record.to_dict() == {"hash": "ff", "salt": _SALT, "algorithm": "SHA-512"}

    def test_json_round_trip(self) -> None:
        record = CredentialRecord(hash=_BCRYPT_HASH, salt="", algorithm=Algorithm.BCRYPT)
        assert CredentialRecord.from_json(record.to_json()) == record

    def test_from_dict_ignores_extra_keys(self) -> None:
        data = {"hash": "ff", "salt": _SALT, "algorithm": "MD5", "username": "alice"}
        assert CredentialRecord.from_dict(data).algorithm is Algorithm.MD5

    def test_from_dict_missing_field(self) -> None:
        with pytest.raises(SerializationError) as exc_info:
            CredentialRecord.from_dict({"hash": "ff", "algorithm": "MD5"})
        assert "salt" in exc_info.value.message

    def test_from_json_malformed(self) -> None:
        with pytest.raises(SerializationError):
            CredentialRecord.from_json("{not json")

    def test_from_json_not_an_object(self) -> None:
        with pytest.raises(SerializationError):
            CredentialRecord.from_json(json.dumps(["ff", _SALT, "MD5"]))

    @pytest.mark.parametrize(
        "payload",
        [
            '{"hash": 123, "salt": "ab", "algorithm": "SHA-256"}',
            '{"hash": "ff", "salt": 7, "algorithm": "SHA-256"}',
            '{"hash": "ff", "salt": "ab", "algorithm": 256}',
            '{"hash": "ff", "salt": null, "algorithm": "SHA-256"}',
        ],
    )
    def test_from_json_rejects_non_string_fields(self, payload: str) -> None:
        with pytest.raises(SerializationError):
            CredentialRecord.from_json(payload)


class TestCredentialRecordMalformedInput:
    @pytest.mark.parametrize(
        ("hash_", "salt"),
        [(123, _SALT), ("ff", 7), (b"ff", _SALT), ("ff", None)],
    )
    def test_non_string_fields_rejected(self, hash_: object, salt: object) -> None:
        with pytest.raises(ValidationError):
            CredentialRecord(hash=hash_, salt=salt, algorithm=Algorithm.SHA256)  # type: ignore[arg-type]

    @pytest.mark.parametrize("data", [1, "ff", None, ["ff", _SALT, "MD5"]])
    def test_from_dict_rejects_non_mappings(self, data: object) -> None:
        with pytest.raises(SerializationError):
            CredentialRecord.from_dict(data)  # type: ignore[arg-type]
