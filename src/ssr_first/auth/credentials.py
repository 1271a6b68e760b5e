"""
ssr_first.auth.credentials

Credential check collaborator used by the login route.

Responsibilities:
- Define the `CredentialStore` seam the login route depends on.
- Provide an in-memory store seeded from settings for dev/test.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from ssr_first.auth.models import Account
from ssr_first.auth.passwords import hash_password, verify_password
from ssr_first.i18n.locales import SupportedLocale
from ssr_first.observability.logging import get_logger
from ssr_first.settings import AccountSeed

log = get_logger(__name__)

USERNAME_MAX_LENGTH = 20
PASSWORD_MAX_LENGTH = 32

# Verified against when the username is unknown so both paths cost the same.
_DUMMY_HASH = hash_password("x" * PASSWORD_MAX_LENGTH)


class CredentialStore(Protocol):
    def verify(self, username: str, password: str) -> Account | None: ...

    def get(self, username: str) -> Account | None: ...

    def set_preferred_locale(self, username: str, locale: SupportedLocale) -> None: ...


def credentials_well_formed(username: str, password: str) -> bool:
    return 0 < len(username) <= USERNAME_MAX_LENGTH and 0 < len(password) <= PASSWORD_MAX_LENGTH


class InMemoryCredentialStore:
    def __init__(self, seeds: Iterable[AccountSeed]) -> None:
        self._password_hashes: dict[str, str] = {}
        self._accounts: dict[str, Account] = {}
        for seed in seeds:
            self._password_hashes[seed.username] = seed.password_hash
            self._accounts[seed.username] = Account(
                username=seed.username,
                display_name=seed.display_name or seed.username,
                preferred_locale=SupportedLocale.from_code(seed.preferred_locale),
            )

    def verify(self, username: str, password: str) -> Account | None:
        if not credentials_well_formed(username, password):
            return None
        stored = self._password_hashes.get(username)
        try:
            matched = verify_password(password, stored if stored is not None else _DUMMY_HASH)
        except ValueError:
            # Unrecognised or corrupt stored hash.
            log.warning("auth.bad_password_hash", username=username)
            return None
        if stored is None or not matched:
            return None
        return self._accounts[username]

    def get(self, username: str) -> Account | None:
        return self._accounts.get(username)

    def set_preferred_locale(self, username: str, locale: SupportedLocale) -> None:
        account = self._accounts.get(username)
        if account is not None:
            account.preferred_locale = locale
