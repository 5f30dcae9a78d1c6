"""Ownership check shared by every mutation path."""

from typing import Any


def authorize(resource_author_id: Any, actor_id: Any) -> bool:
    """Return True when the actor is the stored author of the resource.

    Identities are compared by their canonical string form so a UUID and
    its string spelling match. Reads never go through this check.
    """
    return str(resource_author_id) == str(actor_id)
