"""Resolve the invoking user from the process environment."""

from __future__ import annotations

import getpass

from ..usecases.ports import IdentityProvider


class EnvironmentIdentityProvider(IdentityProvider):
    """Use ``getpass.getuser`` (LOGNAME, USER, LNAME, USERNAME, then passwd)."""

    def current_user(self) -> str | None:
        try:
            user = getpass.getuser()
        except (KeyError, OSError):
            return None
        return user.strip() or None


__all__ = ["EnvironmentIdentityProvider"]
