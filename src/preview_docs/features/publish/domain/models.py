"""Data structures that describe a single preview publication."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class RemoteDescriptor:
    """A git remote selected for publishing and its push URL."""

    name: str
    url: str


@dataclass(slots=True, frozen=True)
class PublishOptions:
    """Tunable knobs for the publisher, normally sourced from configuration."""

    remotes: tuple[str, ...]
    review_host_fragment: str
    hosting_host_fragment: str
    navbar_file: str
    commit_message: str
    tool_name: str

    @property
    def host_fragments(self) -> tuple[str, str]:
        """Domain substrings a remote URL must contain to be accepted."""

        return (self.review_host_fragment, self.hosting_host_fragment)


@dataclass(slots=True)
class PublishRequest:
    """Inputs for one invocation."""

    files: list[str]
    verbose: bool = False
    open_browser: bool = True


@dataclass(slots=True)
class PublishResult:
    """Outcome of a successful publication."""

    remote: RemoteDescriptor
    commit: str
    ref: str
    url: str
    files: list[str] = field(default_factory=list)
    browser_opened: bool = False


__all__ = ["PublishOptions", "PublishRequest", "PublishResult", "RemoteDescriptor"]
