from __future__ import annotations

import keyword
import re
from typing import Any

from ..errors import InvalidSlugError


SLUG_RE = re.compile(r"^[a-z0-9]+(?:[-_][a-z0-9]+)*$")


def validate_slug(slug: Any) -> str:
    if not isinstance(slug, str):
        raise InvalidSlugError(f"Slug must be a string, got {type(slug).__name__}")
    if not slug:
        raise InvalidSlugError("Slug must not be empty")
    if not SLUG_RE.match(slug):
        raise InvalidSlugError(f"Slug {slug!r} contains path-unsafe characters")
    return slug


def slug_to_identifier(slug: str) -> str:
    """Turn ``create-a-topshot-set`` into ``create_a_topshot_set``.

    Slugs that start with a digit are valid paths but not module names.
    """
    identifier = validate_slug(slug).replace("-", "_")
    if not identifier.isidentifier() or keyword.iskeyword(identifier):
        raise InvalidSlugError(f"Slug {slug!r} cannot be used as a module name")
    return identifier
