"""Use case building a throwaway preview commit and pushing it to a sandbox ref."""

from __future__ import annotations

import logging
import tempfile
from logging import Logger, getLogger
from pathlib import Path

from ..domain import urls
from ..domain.errors import EmptyFileListError, UserIdentityError
from ..domain.models import PublishOptions, PublishRequest, PublishResult, RemoteDescriptor
from .ports import BrowserLauncher, FileSystemGateway, GitGateway, IdentityProvider
from .remote_resolver import RemoteResolver

SUPERUSER = "root"
INDEX_FILE_NAME = "index"


class PreviewPublisher:
    """Coordinate remote discovery, commit construction and the sandbox push."""

    _git: GitGateway
    _filesystem: FileSystemGateway
    _identity: IdentityProvider
    _browser: BrowserLauncher
    _options: PublishOptions
    _logger: Logger

    def __init__(
        self,
        *,
        git: GitGateway,
        filesystem: FileSystemGateway,
        identity: IdentityProvider,
        browser: BrowserLauncher,
        options: PublishOptions,
        logger: Logger | None = None,
    ) -> None:
        self._git = git
        self._filesystem = filesystem
        self._identity = identity
        self._browser = browser
        self._options = options
        self._logger = logger or getLogger(__name__)

    def publish(self, request: PublishRequest) -> PublishResult:
        """Push the requested files as a root commit and return the preview URL.

        Raises:
            EmptyFileListError: If ``request.files`` is empty.
            UserIdentityError: If the user is unknown or is the superuser.
            RemoteNotFoundError: If no candidate remote is recognized.
            GitCommandError: If any git subcommand fails.
        """

        user = self._check_preconditions(request)
        remote = self._resolve_remote()

        with tempfile.TemporaryDirectory(prefix=f"{self._options.tool_name}.") as scratch:
            index_file = Path(scratch) / INDEX_FILE_NAME

            prefix = self._git.show_prefix()
            files = self._assemble_files(request.files, prefix)
            self._logger.log(
                logging.INFO if request.verbose else logging.DEBUG,
                "Publishing files: %s",
                ", ".join(files),
            )

            self._git.add(files, index_file=index_file)
            tree = self._git.write_tree(index_file=index_file)
            commit = self._git.commit_tree(tree, self._options.commit_message)
            self._logger.info(
                "Created preview commit %s",
                commit,
                extra={"publish_event": "publish.commit.created", "commit": commit, "tree": tree},
            )

            ref = urls.sandbox_ref(user, self._options.tool_name)
            self._git.push(remote.url, commit, ref)
            self._logger.info(
                "Pushed %s to %s",
                commit,
                ref,
                extra={
                    "publish_event": "publish.push.complete",
                    "commit": commit,
                    "ref": ref,
                    "remote_name": remote.name,
                },
            )

        url = urls.preview_url(
            remote.url,
            commit,
            prefix,
            request.files,
            review_fragment=self._options.review_host_fragment,
            hosting_fragment=self._options.hosting_host_fragment,
        )
        return PublishResult(remote=remote, commit=commit, ref=ref, url=url, files=files)

    def open_preview(self, result: PublishResult) -> bool:
        """Open ``result.url`` in a browser; failures are logged and ignored."""

        opened = self._browser.open(result.url)
        result.browser_opened = opened
        if not opened:
            self._logger.debug(
                "Could not open a browser for %s",
                result.url,
                extra={"publish_event": "publish.browser.failed", "url": result.url},
            )
        return opened

    def _check_preconditions(self, request: PublishRequest) -> str:
        if not request.files:
            raise EmptyFileListError()

        user = self._identity.current_user()
        if not user:
            raise UserIdentityError("Unable to determine the current user")
        if user == SUPERUSER:
            raise UserIdentityError("Refusing to publish previews as root")
        return user

    def _resolve_remote(self) -> RemoteDescriptor:
        resolver = RemoteResolver(
            git=self._git,
            candidates=self._options.remotes,
            fragments=self._options.host_fragments,
            logger=self._logger,
        )
        remote = resolver.resolve()
        self._logger.info(
            "Using remote %s",
            remote.name,
            extra={
                "publish_event": "publish.remote.resolved",
                "remote_name": remote.name,
                "remote_url": remote.url,
            },
        )
        return remote

    def _assemble_files(self, requested: list[str], prefix: str) -> list[str]:
        files = list(dict.fromkeys(requested))

        navbar = urls.navbar_path(prefix, self._options.navbar_file)
        if navbar not in files and self._filesystem.exists(navbar):
            files.append(navbar)
            self._logger.debug(
                "Including navigation file %s",
                navbar,
                extra={"publish_event": "publish.navbar.included", "path": navbar},
            )
        return files


__all__ = ["PreviewPublisher"]
