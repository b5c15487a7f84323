"""
Parse note references of the form `title @ project/path +vault`.

The vault marker is found first (last `+`), then the project marker (last `@`
before it), so `@` characters earlier in the title are kept verbatim:

    >>> parse_reference("Email @user@example.com @ projects/email")
    ParsedReference(title='Email @user@example.com', project='projects/email', vault=None)
"""

from __future__ import annotations

from .errors import EmptyTitle
from .models import ParsedReference

VAULT_MARKER = "+"
PROJECT_MARKER = "@"


def parse_reference(raw: str) -> ParsedReference:
    """Split a raw argument into title, project, and vault."""
    if not raw:
        raise EmptyTitle("Note title is required")

    title = raw
    project = ""
    vault: str | None = None

    head, sep, tail = raw.rpartition(VAULT_MARKER)
    if sep:
        vault = tail.strip()
        title = head

    head, sep, tail = title.rpartition(PROJECT_MARKER)
    if sep:
        project = tail.strip()
        title = head

        # The vault marker ended up inside the project segment.
        if vault is not None:
            p_head, p_sep, p_tail = project.rpartition(VAULT_MARKER)
            if p_sep:
                vault = p_tail.strip()
                project = p_head.strip()

    title = title.strip()
    if not title:
        raise EmptyTitle()

    return ParsedReference(title=title, project=project, vault=vault or None)
