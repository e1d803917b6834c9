"""Render index.js source for the build root and for each group.

Root index, for groups ``en`` and ``ru``::

    import en from './en'
    import ru from './ru'

    export default {
      en,
      ru
    }

Group index, for members ``About`` and ``Contact``::

    import About from './About'
    import Contact from './Contact'

    export default {
      about: About,
      contact: Contact
    }
"""

from __future__ import annotations

from pagegen.indexing.naming import validate_member_names
from pagegen.models import ModuleEntry


def root_entries(group_names: list[str]) -> list[ModuleEntry]:
    return [ModuleEntry(key=name, name=name) for name in group_names]


def group_entries(member_names: list[str]) -> list[ModuleEntry]:
    return [ModuleEntry(key=name.lower(), name=name) for name in member_names]


def render_entries(entries: list[ModuleEntry]) -> str:
    """Import lines, a blank line, then the default export object."""
    imports = "".join(f"import {e.name} from '{e.source}'\n" for e in entries)
    last = len(entries) - 1
    props = []
    for i, e in enumerate(entries):
        prop = e.name if e.is_shorthand else f"{e.key}: {e.name}"
        comma = "" if i == last else ","
        props.append(f"  {prop}{comma}\n")
    return f"{imports}\nexport default {{\n{''.join(props)}}}\n"


def render_root_index(group_names: list[str]) -> str:
    return render_entries(root_entries(group_names))


def render_group_index(member_names: list[str], group: str | None = None) -> str:
    """Render a group index; raises NamingPolicyError on a badly named member."""
    validate_member_names(member_names, group=group)
    return render_entries(group_entries(member_names))
