"""
ssr_first.auth.models

Auth domain models.

Responsibilities:
- Define the two-valued authentication state (`AuthSession`) consumed by the gate.
- Define the account record returned by the credential check.
"""

from __future__ import annotations

from dataclasses import dataclass

from ssr_first.i18n.locales import SupportedLocale


@dataclass(frozen=True, slots=True)
class AuthSession:
    """
    Either anonymous (`subject is None`) or authenticated as `subject`.
    """

    subject: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.subject is not None

    @classmethod
    def authenticated(cls, subject: str) -> AuthSession:
        return cls(subject=subject)


ANONYMOUS = AuthSession()


@dataclass(slots=True)
class Account:
    username: str
    display_name: str
    preferred_locale: SupportedLocale | None = None


# --- Module Notes -----------------------------------------------------------
# The gate only ever asks `is_authenticated`; `subject` is for logging and for
# looking up the account's preferred locale.
