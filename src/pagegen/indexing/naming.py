"""Naming policy for member files.

Member base names become JS identifiers in the group index, so a poorly named
page should fail the build immediately.
"""

from __future__ import annotations

import re
from typing import Iterable

from pagegen.errors import NamingPolicyError
from pagegen.models import Group, NamingRule

_ALLOWED_SYMBOLS_RE = re.compile(r"[A-Za-z0-9_]*")
_LATIN_CAPITAL_RE = re.compile(r"[A-Z]")


def check_member_name(name: str) -> NamingRule | None:
    """Return the first rule ``name`` violates, or None if it is valid."""
    if not name:
        return NamingRule.NOT_EMPTY
    if not _ALLOWED_SYMBOLS_RE.fullmatch(name):
        return NamingRule.ALLOWED_SYMBOLS
    if not _LATIN_CAPITAL_RE.match(name):
        return NamingRule.LATIN_CAPITAL
    return None


def validate_member_name(
    name: str, group: str | None = None, filename: str | None = None
) -> None:
    rule = check_member_name(name)
    if rule is not None:
        raise NamingPolicyError(name, rule, group=group, filename=filename)


def validate_member_names(names: Iterable[str], group: str | None = None) -> None:
    """Raise NamingPolicyError for the first name that breaks the policy."""
    for name in names:
        validate_member_name(name, group=group)


def validate_group(group: Group) -> None:
    """Check every member of a group, reporting the offending file by name."""
    for name, filename in group.files.items():
        validate_member_name(name, group=group.name, filename=filename)
