"""Application – account registration, login and credential storage."""
from passlab.application.accounts.models import UserAccount
from passlab.application.accounts.policy import PasswordPolicy
from passlab.application.accounts.service import AccountService
from passlab.application.accounts.store import CredentialStore, InMemoryCredentialStore

__all__ = [
    "AccountService",
    "CredentialStore",
    "InMemoryCredentialStore",
    "PasswordPolicy",
    "UserAccount",
]
