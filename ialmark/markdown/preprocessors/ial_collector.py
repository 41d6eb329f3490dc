# ialmark/markdown/preprocessors/ial_collector.py
"""
Preprocessor that collects block-level Inline Attribute Lists.

Converts:
    {#intro .lead}
    {data-kind="summary"}
    First paragraph of the post.

into:
    <!--ial:0-->

    First paragraph of the post.

and stores the merged attribute set in ``context["ial_blocks"][0]`` for the
ial_applier postprocessor.

Rules:
- An IAL line holds nothing but one or more IALs separated by spaces
- It must start a block: first line, after a blank line, or after another IAL line
- It must not be indented code: less than 4 spaces past the enclosing list item
- Consecutive IAL lines are merged, later values winning
- Lines inside fenced code blocks are never touched
- A line that only partially parses is left as ordinary text
"""

import logging
import re
from typing import List, Optional

from ..config import get_ial_config
from ..ial import AttributeSet
from ..session import ParseSession

logger = logging.getLogger(__name__)

IAL_CONTEXT_KEY = "ial_blocks"
IAL_MARKER = "<!--ial:{index}-->"

_FENCE_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})")
_LIST_ITEM_RE = re.compile(r"^( *)(?:[-*+]|\d{1,9}[.)])(?: +|$)")


def _scan_ial_line(line: str, reserved) -> Optional[AttributeSet]:
    """Return the merged attribute set if the line is made only of IALs."""
    scratch = ParseSession(reserved=reserved)
    pos = 0
    while pos < len(line):
        if line[pos] == " ":
            pos += 1
            continue
        if line[pos] != "{":
            return None
        consumed = scratch.scan(line[pos:])
        if consumed == 0:
            return None
        pos += consumed
    return scratch.take()


def collect_ials(text: str, context: dict, reserved=None) -> str:
    """
    Strip IAL lines from markdown and record them against the following block.

    Args:
        text: Markdown text
        context: Rendering context; attribute sets are appended to context["ial_blocks"]
        reserved: Bracket contents that are not IALs (default: from configuration)

    Returns:
        Markdown with IAL lines replaced by comment markers
    """
    if reserved is None:
        reserved = get_ial_config()["reserved_keywords"]

    blocks: List[AttributeSet] = context.setdefault(IAL_CONTEXT_KEY, [])
    session = ParseSession(reserved=reserved)

    output: List[str] = []
    fence: Optional[str] = None
    at_block_start = True
    # Column where the content of the enclosing list item starts
    container_indent = 0

    for line in text.split("\n"):
        stripped = line.strip()

        if fence is not None:
            output.append(line)
            if stripped.startswith(fence):
                fence = None
            continue

        indent = len(line) - len(line.lstrip(" "))
        list_item = _LIST_ITEM_RE.match(line)
        if stripped and at_block_start and indent < container_indent and not list_item:
            container_indent = 0

        is_code = indent - container_indent >= 4
        if at_block_start and not is_code and stripped.startswith("{"):
            ial = _scan_ial_line(line.rstrip(), reserved)
            if ial is not None:
                session.fold(ial)
                continue

        if stripped and session.ial is not None:
            marker_indent = " " * min(indent, container_indent)
            output.append(marker_indent + IAL_MARKER.format(index=len(blocks)))
            output.append("")
            blocks.append(session.take())

        if list_item and not is_code:
            container_indent = list_item.end()

        fence_match = _FENCE_RE.match(line)
        if fence_match:
            fence = fence_match.group(1)

        output.append(line)
        at_block_start = not stripped

    if session.ial is not None:
        logger.debug("Discarding IAL with no following block: %s", session.take())

    return "\n".join(output)


def ial_collector_default(text: str, context: dict) -> str:
    """
    Default configuration for ial_collector.

    Register this in PREPROCESSORS.
    """
    return collect_ials(text, context)
