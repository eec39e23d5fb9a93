"""Application – AccountService: register and authenticate use cases."""
from __future__ import annotations

from passlab.application.accounts.models import UserAccount
from passlab.application.accounts.policy import PasswordPolicy
from passlab.application.accounts.store import CredentialStore
from passlab.kernel.errors import (
    ConflictError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from passlab.kernel.security import PasswordHasher
from passlab.observability.logging import AuditLogger, AuditOutcome
from passlab.security.passwords import Algorithm

__all__ = ["AccountService"]


class AccountService:
    """Register and authenticate accounts on top of a :class:`PasswordHasher`."""

    def __init__(
        self,
        store: CredentialStore,
        hasher: PasswordHasher,
        policy: PasswordPolicy | None = None,
        audit: AuditLogger | None = None,
    ) -> None:
        self._store = store
        self._hasher = hasher
        self._policy = policy or PasswordPolicy()
        self._audit = audit or AuditLogger()

    async def register(
        self,
        username: str,
        password: str,
        confirm_password: str,
        algorithm: Algorithm | str = Algorithm.SHA256,
    ) -> UserAccount:
        algorithm = Algorithm.parse(algorithm)
        self._policy.validate(username, password, confirm_password)
        username = username.strip()
        if await self._store.find_by_username(username) is not None:
            self._audit.log_security_event(
                "register", username, AuditOutcome.DENIED, "username already taken"
            )
            raise ConflictError(f"Username '{username}' is already taken")

        record = await self._hasher.hash(password, algorithm)
        account = UserAccount(username=username, credential=record)
        await self._store.save(account)
        self._audit.log_security_event(
            "register", username, AuditOutcome.SUCCESS, algorithm=algorithm.value
        )
        return account

    async def authenticate(self, username: str, password: str) -> UserAccount:
        if not username or not username.strip() or not password:
            raise ValidationError("Username and password are required")
        account = await self._store.find_by_username(username)
        if account is None:
            self._audit.log_security_event("login", username, AuditOutcome.FAILURE, "unknown user")
            raise NotFoundError("User", username.strip())
        if not await self._hasher.verify(password, account.credential):
            self._audit.log_security_event("login", username, AuditOutcome.FAILURE, "bad password")
            raise UnauthorizedError("Invalid username or password")
        self._audit.log_security_event(
            "login", account.username, AuditOutcome.SUCCESS,
            algorithm=account.credential.algorithm.value,
        )
        return account
