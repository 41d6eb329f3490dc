# ialmark/markdown/scanner.py
"""
Scanner for Inline Attribute Lists.

Syntax accepted inside the braces, as space separated tokens:
    .name                 class name
    #name                 identifier
    key=value             attribute
    key="some value"      attribute with embedded spaces

A backslash escapes a following ``"`` or ``}``. The scanner returns the number
of characters consumed, or 0 when the text at this position is not an IAL:
- the closing brace is missing
- the bracket holds a document-structure keyword ({frontmatter}, {mainmatter},
  {backmatter})

Unrecognised tokens (``key`` without ``=``) are dropped without failing the scan.
"""

import logging
from typing import TYPE_CHECKING, Collection, Optional

from .ial import AttributeSet

if TYPE_CHECKING:
    from .session import ParseSession

logger = logging.getLogger(__name__)

RESERVED_KEYWORDS = frozenset({"frontmatter", "mainmatter", "backmatter"})


def _parse_key_value(token: str) -> tuple[str, str]:
    key, sep, value = token.partition("=")
    if not sep:
        return "", ""
    return key, value.replace('"', "")


def _classify_token(token: str, ial: AttributeSet) -> None:
    if not token:
        return
    if token[0] == ".":
        if len(token) > 1:
            ial.classes.add(token[1:])
    elif token[0] == "#":
        ial.id = token[1:]
    else:
        key, value = _parse_key_value(token)
        if key:
            ial.attributes[key] = value
        else:
            logger.debug("Dropping IAL token without key/value: %r", token)


def scan_ial(
    data: str,
    session: "ParseSession",
    reserved: Collection[str] = RESERVED_KEYWORDS,
) -> int:
    """
    Scan one IAL at the start of ``data`` and fold it into the session.

    Args:
        data: Text starting with the opening brace
        session: Parsing session owning the running aggregate
        reserved: Bracket contents that are never treated as an IAL

    Returns:
        Number of characters consumed including both braces, or 0
    """
    if not data or data[0] != "{":
        return 0

    escaped = False
    quoted = False
    boundary = 0
    ial = AttributeSet()

    for i, char in enumerate(data):
        if char == " ":
            if quoted:
                continue
            _classify_token(data[boundary + 1 : i], ial)
            boundary = i
        elif char == '"':
            if escaped:
                escaped = False
                continue
            quoted = not quoted
        elif char == "\\":
            escaped = not escaped
        elif char == "}":
            if escaped:
                escaped = False
                continue
            if data[1:i] in reserved:
                logger.debug("Skipping reserved keyword {%s}", data[1:i])
                return 0
            _classify_token(data[boundary + 1 : i], ial)
            session.fold(ial)
            return i + 1
        else:
            escaped = False

    logger.debug("Unterminated IAL: %r", data[:40])
    return 0


def parse_ial(text: str, reserved: Collection[str] = RESERVED_KEYWORDS) -> Optional[AttributeSet]:
    """
    Parse ``text`` as exactly one IAL.

    Returns the attribute set when the whole text is a single IAL, else None.
    """
    from .session import ParseSession

    session = ParseSession(reserved=reserved)
    consumed = session.scan(text)
    if consumed == 0 or consumed != len(text):
        return None
    return session.take()
