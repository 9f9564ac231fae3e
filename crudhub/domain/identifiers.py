"""Identifier codec — the external hex form of store-assigned document ids."""

import re

from bson import ObjectId

from crudhub.domain.exceptions import InvalidIdentifierError

OBJECT_ID_PATTERN = r"^[0-9a-fA-F]{24}$"

_OBJECT_ID_RE = re.compile(OBJECT_ID_PATTERN)


def is_identifier(raw: object) -> bool:
    """True when ``raw`` is a 24-character hexadecimal string."""
    return isinstance(raw, str) and _OBJECT_ID_RE.fullmatch(raw) is not None


def parse_identifier(raw: str, entity_type: str = "document") -> ObjectId:
    """Parse a path identifier, rejecting malformed input before any store access."""
    if not is_identifier(raw):
        raise InvalidIdentifierError(entity_type, str(raw))
    return ObjectId(raw)
