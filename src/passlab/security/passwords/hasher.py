"""Security – DigestPasswordHasher: salted digests and bcrypt behind one port."""
from __future__ import annotations

import asyncio
import functools
import hashlib
import hmac
import time
from typing import Any, Callable

import bcrypt

from passlab.config.settings import EnvSettingsLoader, HasherSettings
from passlab.kernel.errors import UnsupportedAlgorithmError
from passlab.kernel.security import PasswordHasher, SaltSource
from passlab.observability.logging import get_logger
from passlab.security.passwords.algorithms import Algorithm, Md5Mode
from passlab.security.passwords.record import CredentialRecord
from passlab.security.passwords.salt import DEFAULT_SALT_BYTES, generate_salt

__all__ = [
    "DEFAULT_BCRYPT_ROUNDS",
    "DigestPasswordHasher",
    "digest_hex",
    "hash_password",
    "verify_password",
]

DEFAULT_BCRYPT_ROUNDS = 10

# bcrypt only reads the first 72 bytes of the key
_BCRYPT_MAX_BYTES = 72

_log = get_logger(__name__)

# hashlib constructor names for the salted digest algorithms
_DIGESTS: dict[Algorithm, str] = {
    Algorithm.SHA1: "sha1",
    Algorithm.SHA256: "sha256",
    Algorithm.SHA512: "sha512",
}


@functools.cache
def _warn_legacy_md5() -> None:
    # once per process, on the first hasher built in legacy mode
    _log.warning("hasher.md5_label_computes_sha256", md5_mode=Md5Mode.LEGACY_SHA256.value)


def digest_hex(
    password: str,
    salt: str,
    algorithm: Algorithm | str,
    *,
    md5_mode: Md5Mode = Md5Mode.LEGACY_SHA256,
) -> str:
    """Hex digest of ``password + salt`` (UTF-8) for a salted digest algorithm.

    Under :attr:`Md5Mode.LEGACY_SHA256` the ``MD5`` label computes SHA-256.
    """
    algorithm = Algorithm.parse(algorithm)
    if algorithm is Algorithm.MD5:
        name = "md5" if md5_mode is Md5Mode.TRUE_MD5 else "sha256"
    elif algorithm in _DIGESTS:
        name = _DIGESTS[algorithm]
    else:
        raise UnsupportedAlgorithmError(algorithm)
    message = (password + salt).encode("utf-8")
    return hashlib.new(name, message).hexdigest()


class DigestPasswordHasher(PasswordHasher):
    """Salted-digest and bcrypt password hasher.

    Digest algorithms get a fresh hex salt per call, appended to the password
    before hashing. bcrypt manages its own salt and cost inside the hash
    string, so its records carry an empty salt.

    The async :meth:`hash` / :meth:`verify` run on a worker thread so the
    bcrypt work factor never stalls the event loop. The ``*_sync`` variants
    are the same operations for synchronous callers.
    """

    def __init__(
        self,
        bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS,
        salt_bytes: int = DEFAULT_SALT_BYTES,
        md5_mode: Md5Mode | str = Md5Mode.LEGACY_SHA256,
        salt_source: SaltSource = generate_salt,
        default_algorithm: Algorithm | str = Algorithm.SHA256,
    ) -> None:
        self._rounds = bcrypt_rounds
        self._default_algorithm = Algorithm.parse(default_algorithm)
        self._salt_bytes = salt_bytes
        self._md5_mode = Md5Mode(md5_mode)
        self._salt_source = salt_source
        self._hashers: dict[Algorithm, Callable[[str], CredentialRecord]] = {
            Algorithm.MD5: self._salted(Algorithm.MD5),
            Algorithm.SHA1: self._salted(Algorithm.SHA1),
            Algorithm.SHA256: self._salted(Algorithm.SHA256),
            Algorithm.SHA512: self._salted(Algorithm.SHA512),
            Algorithm.BCRYPT: self._hash_bcrypt,
        }
        self._verifiers: dict[Algorithm, Callable[[str, Any], bool]] = {
            Algorithm.MD5: self._verify_salted,
            Algorithm.SHA1: self._verify_salted,
            Algorithm.SHA256: self._verify_salted,
            Algorithm.SHA512: self._verify_salted,
            Algorithm.BCRYPT: self._verify_bcrypt,
        }
        if self._md5_mode is Md5Mode.LEGACY_SHA256:
            _warn_legacy_md5()

    @classmethod
    def from_settings(cls, settings: HasherSettings | None = None) -> DigestPasswordHasher:
        """Build a hasher from ``PASSLAB_*`` settings (loaded from env when omitted)."""
        if settings is None:
            settings = EnvSettingsLoader().load(HasherSettings)
        return cls(
            bcrypt_rounds=settings.bcrypt_rounds,
            salt_bytes=settings.salt_bytes,
            md5_mode=settings.md5_mode,
            default_algorithm=settings.default_algorithm,
        )

    @property
    def bcrypt_rounds(self) -> int:
        return self._rounds

    @property
    def md5_mode(self) -> Md5Mode:
        return self._md5_mode

    @property
    def default_algorithm(self) -> Algorithm:
        return self._default_algorithm

    # ------------------------------------------------------------------
    # PasswordHasher port
    # ------------------------------------------------------------------

    async def hash(
        self, password: str, algorithm: Algorithm | str | None = None
    ) -> CredentialRecord:
        return await asyncio.to_thread(self.hash_sync, password, algorithm)

    async def verify(self, password: str, record: Any) -> bool:
        return await asyncio.to_thread(self.verify_sync, password, record)

    def hash_sync(
        self, password: str, algorithm: Algorithm | str | None = None
    ) -> CredentialRecord:
        """Hash ``password``; no length or composition policy is applied.

        ``algorithm`` falls back to :attr:`default_algorithm` when omitted.
        """
        algorithm = Algorithm.parse(self._default_algorithm if algorithm is None else algorithm)
        handler = self._hashers.get(algorithm)
        if handler is None:
            raise UnsupportedAlgorithmError(algorithm)
        started = time.perf_counter()
        record = handler(password)
        _log.debug(
            "hasher.hashed",
            algorithm=algorithm.value,
            duration_ms=round((time.perf_counter() - started) * 1000, 3),
        )
        return record

    def verify_sync(self, password: str, record: Any) -> bool:
        """Check ``password`` against a stored record.

        ``record`` is a :class:`CredentialRecord` or any object exposing
        ``hash``, ``salt`` and ``algorithm``. Plain objects are rebuilt as a
        record first, so malformed fields raise :class:`ValidationError`.
        Unknown algorithm tags raise :class:`UnsupportedAlgorithmError`.
        """
        if not isinstance(record, CredentialRecord):
            record = CredentialRecord(
                hash=record.hash, salt=record.salt, algorithm=record.algorithm
            )
        algorithm = record.algorithm
        verifier = self._verifiers.get(algorithm)
        if verifier is None:
            raise UnsupportedAlgorithmError(algorithm)
        matched = verifier(password, record)
        _log.debug("hasher.verified", algorithm=algorithm.value, matched=matched)
        return matched

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _salted(self, algorithm: Algorithm) -> Callable[[str], CredentialRecord]:
        def _hash(password: str) -> CredentialRecord:
            salt = self._salt_source(self._salt_bytes)
            hashed = digest_hex(password, salt, algorithm, md5_mode=self._md5_mode)
            return CredentialRecord(hash=hashed, salt=salt, algorithm=algorithm)

        return _hash

    def _hash_bcrypt(self, password: str) -> CredentialRecord:
        secret = password.encode("utf-8")[:_BCRYPT_MAX_BYTES]
        hashed = bcrypt.hashpw(secret, bcrypt.gensalt(rounds=self._rounds))
        return CredentialRecord(hash=hashed.decode("ascii"), salt="", algorithm=Algorithm.BCRYPT)

    def _verify_salted(self, password: str, record: Any) -> bool:
        expected = digest_hex(
            password, record.salt, record.algorithm, md5_mode=self._md5_mode
        )
        try:
            stored = record.hash.encode("ascii")
        except UnicodeEncodeError:
            return False
        return hmac.compare_digest(expected.encode("ascii"), stored)

    def _verify_bcrypt(self, password: str, record: Any) -> bool:
        try:
            return bcrypt.checkpw(
                password.encode("utf-8")[:_BCRYPT_MAX_BYTES], record.hash.encode("ascii")
            )
        except ValueError:
            # malformed stored hash
            return False


_default_hasher: DigestPasswordHasher | None = None


def _get_default_hasher() -> DigestPasswordHasher:
    global _default_hasher
    if _default_hasher is None:
        _default_hasher = DigestPasswordHasher.from_settings()
    return _default_hasher


async def hash_password(
    password: str, algorithm: Algorithm | str | None = None
) -> CredentialRecord:
    """Hash with the process-wide hasher configured from ``PASSLAB_*`` env vars."""
    return await _get_default_hasher().hash(password, algorithm)


async def verify_password(password: str, record: Any) -> bool:
    """Verify with the process-wide hasher configured from ``PASSLAB_*`` env vars."""
    return await _get_default_hasher().verify(password, record)
