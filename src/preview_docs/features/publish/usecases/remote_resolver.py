"""Pick the git remote that previews are pushed to."""

from __future__ import annotations

from collections.abc import Sequence
from logging import Logger, getLogger

from ..domain.errors import RemoteNotFoundError
from ..domain.models import RemoteDescriptor
from .ports import GitGateway


class RemoteResolver:
    """Walk candidate remotes in order and return the first recognized one."""

    _git: GitGateway
    _candidates: tuple[str, ...]
    _fragments: tuple[str, ...]
    _logger: Logger

    def __init__(
        self,
        *,
        git: GitGateway,
        candidates: Sequence[str],
        fragments: Sequence[str],
        logger: Logger | None = None,
    ) -> None:
        self._git = git
        self._candidates = tuple(candidates)
        self._fragments = tuple(fragments)
        self._logger = logger or getLogger(__name__)

    def resolve(self) -> RemoteDescriptor:
        """Return the first candidate whose push URL contains a known host fragment.

        Raises:
            RemoteNotFoundError: If no candidate qualifies.
        """

        for name in self._candidates:
            url = self._git.remote_push_url(name)
            if url is None:
                self._logger.debug("Remote %s is not configured", name)
                continue
            if any(fragment in url for fragment in self._fragments):
                return RemoteDescriptor(name=name, url=url)
            self._logger.debug("Remote %s (%s) is not a recognized host", name, url)

        raise RemoteNotFoundError(self._candidates, self._fragments)


__all__ = ["RemoteResolver"]
