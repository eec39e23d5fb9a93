"""Unit tests for the salt generator."""

from __future__ import annotations

import re

import pytest

from passlab.kernel.errors import EntropySourceUnavailableError
from passlab.security.passwords import DEFAULT_SALT_BYTES, generate_salt

_HEX = re.compile(r"^[0-9a-f]+$")


class TestGenerateSalt:
    def test_default_is_64_lowercase_hex_chars(self) -> None:
        salt = generate_salt()
        assert DEFAULT_SALT_BYTES == 32
        assert len(salt) == 64
        assert _HEX.match(salt)

    def test_explicit_32(self) -> None:
        assert len(generate_salt(32)) == 64

    @pytest.mark.parametrize("n", [1, 16, 64])
    def test_length_is_twice_byte_count(self, n: int) -> None:
        assert len(generate_salt(n)) == 2 * n

    def test_successive_calls_differ(self) -> None:
        assert generate_salt() != generate_salt()

    def test_no_repeats_over_many_calls(self) -> None:
        salts = {generate_salt() for _ in range(200)}
        assert len(salts) == 200

    @pytest.mark.parametrize("bad", [0, -1, 1.5, "32", True])
    def test_rejects_non_positive_or_non_int(self, bad: object) -> None:
        with pytest.raises(ValueError):
            generate_salt(bad)  # type: ignore[arg-type]

    def test_entropy_failure_propagates(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def boom(n: int) -> bytes:
            raise OSError("no entropy")

        monkeypatch.setattr("passlab.security.passwords.salt.secrets.token_bytes", boom)
        with pytest.raises(EntropySourceUnavailableError) as exc_info:
            generate_salt()
        assert isinstance(exc_info.value.__cause__, OSError)
