"""
Summary: Pure helpers deriving sandbox refs, navbar paths and preview URLs.
Why: Keep string rules testable without touching git or the network.
"""

from __future__ import annotations

import posixpath
from collections.abc import Sequence

SANDBOX_REF_ROOT = "refs/sandbox"


def sandbox_ref(user: str, tool_name: str) -> str:
    """Return ``refs/sandbox/<user>/<tool_name>``."""

    return f"{SANDBOX_REF_ROOT}/{user}/{tool_name}"


def relative_root(prefix: str) -> str:
    """Return the path from the prefix directory back to the repository root.

    ``git rev-parse --show-prefix`` yields ``""`` at the top level and
    ``"a/b/"`` two levels down, which maps to ``"."`` and ``"../.."``.
    """

    depth = len([part for part in prefix.split("/") if part])
    if depth == 0:
        return "."
    return posixpath.join(*([".."] * depth))


def navbar_path(prefix: str, navbar_file: str) -> str:
    """Path of the root navigation file as seen from the working directory."""

    root = relative_root(prefix)
    if root == ".":
        return navbar_file
    return posixpath.join(root, navbar_file)


def browsable_base(remote_url: str, review_fragment: str, hosting_fragment: str) -> str:
    """Rewrite the first review host fragment of ``remote_url`` to the hosting one."""

    return remote_url.replace(review_fragment, hosting_fragment, 1).rstrip("/")


def preview_url(
    remote_url: str,
    commit: str,
    prefix: str,
    files: Sequence[str],
    *,
    review_fragment: str,
    hosting_fragment: str,
) -> str:
    """Build ``<hosting-url>/+/<commit>/<prefix>[file]``.

    The file is appended only when exactly one was requested, verbatim as
    the caller spelled it.
    """

    url = f"{browsable_base(remote_url, review_fragment, hosting_fragment)}/+/{commit}/{prefix}"
    if len(files) == 1:
        url += files[0]
    return url


__all__ = [
    "SANDBOX_REF_ROOT",
    "browsable_base",
    "navbar_path",
    "preview_url",
    "relative_root",
    "sandbox_ref",
]
