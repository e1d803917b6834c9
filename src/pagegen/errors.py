"""Exceptions raised by pagegen."""

from __future__ import annotations

from pagegen.models import NamingRule


class PagegenError(Exception):
    """Base class for pagegen errors."""


class NamingPolicyError(PagegenError, ValueError):
    """A member file name violates the naming policy."""

    def __init__(
        self,
        name: str,
        rule: NamingRule,
        group: str | None = None,
        filename: str | None = None,
    ) -> None:
        self.name = name
        self.rule = rule
        self.group = group
        self.filename = filename
        target = filename or repr(name)
        if group:
            target = f"{group}/{target}"
        super().__init__(f"{rule.message}: {target}")


class DuplicateMemberError(PagegenError, ValueError):
    """Two files in a group strip to the same member name."""

    def __init__(self, name: str, filenames: list[str], group: str | None = None) -> None:
        self.name = name
        self.filenames = filenames
        self.group = group
        prefix = f"{group}/" if group else ""
        listed = ", ".join(f"{prefix}{f}" for f in filenames)
        super().__init__(f"Page name {name!r} is used by more than one file: {listed}")
