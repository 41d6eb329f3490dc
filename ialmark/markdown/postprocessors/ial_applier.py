# ialmark/markdown/postprocessors/ial_applier.py
"""
Postprocessor that applies collected Inline Attribute Lists to rendered blocks.

This postprocessor:
- Finds the <!--ial:N--> markers left by the ial_collector preprocessor
- Applies context["ial_blocks"][N] to the element following each marker
- Keeps an existing id unless the IAL sets one
- Turns {lang=python} on code blocks into a language class on the inner <code>
- Turns {numbering=lower-roman} on ordered lists into the matching type attribute
- Merges IAL classes (and any class=... attribute) with existing classes
- Other attributes overwrite; an IAL id or id=... replaces the existing id
- Removes every marker, including ones with nothing to apply
"""

import logging
import re
from typing import Dict, List, Optional

from bs4 import BeautifulSoup, Comment, Tag

from ..config import get_ial_config
from ..ial import AttributeSet
from ..preprocessors.ial_collector import IAL_CONTEXT_KEY

logger = logging.getLogger(__name__)

_MARKER_RE = re.compile(r"ial:(\d+)")


def _add_classes(element: Tag, classes: List[str]) -> None:
    existing_classes = element.get("class", [])
    if isinstance(existing_classes, str):
        existing_classes = existing_classes.split()
    merged_classes = list(dict.fromkeys(list(existing_classes) + classes))
    if merged_classes:
        element["class"] = merged_classes


def _consume_code_language(element: Tag, ial: AttributeSet, prefix: str) -> None:
    lang = ial.get_or_default_attr("lang", "")
    if not lang:
        return
    code = element.find("code") or element
    _add_classes(code, [f"{prefix}{lang}"])


def _consume_numbering(element: Tag, ial: AttributeSet, numbering_types: Dict[str, str]) -> None:
    numbering = ial.get_or_default_attr("numbering", "")
    if not numbering:
        return
    list_type = numbering_types.get(numbering)
    if list_type is None:
        logger.debug("Unknown list numbering style: %s", numbering)
        return
    element["type"] = list_type


def apply_ial(
    element: Tag,
    ial: AttributeSet,
    language_class_prefix: str = "language-",
    numbering_types: Optional[Dict[str, str]] = None,
) -> None:
    """
    Apply an attribute set to a single element.

    Well-known attributes are consumed first so they do not show up again in
    the generic attribute output.
    """
    # {#anchor} wins over an id=... attribute, which wins over the existing id
    element_id = ial.get_or_default_id("") or ial.get_or_default_attr("id", "")
    if element_id:
        element["id"] = element_id

    if element.name == "pre":
        _consume_code_language(element, ial, language_class_prefix)
    elif element.name == "ol" and numbering_types:
        _consume_numbering(element, ial, numbering_types)

    _add_classes(element, sorted(ial.classes))
    for name in sorted(ial.attributes):
        value = ial.attributes[name]
        if name == "id":
            continue
        if name == "class":
            _add_classes(element, value.split())
        else:
            element[name] = value


def ial_applier(
    html: str,
    context: dict,
    language_class_prefix: str = "language-",
    numbering_types: Optional[Dict[str, str]] = None,
) -> str:
    """
    Apply IAL attribute sets to the elements following their markers.

    Args:
        html: HTML string to process
        context: Context dictionary holding "ial_blocks" from the preprocessor
        language_class_prefix: Prefix for the class derived from a code block's lang
        numbering_types: Map of numbering style names to <ol type> values

    Returns:
        Processed HTML with attributes applied and markers removed
    """
    blocks: List[AttributeSet] = context.get(IAL_CONTEXT_KEY) or []
    if "ial:" not in html:
        return html

    soup = BeautifulSoup(html, "html.parser")

    for comment in soup.find_all(string=lambda text: isinstance(text, Comment)):
        match = _MARKER_RE.fullmatch(comment.strip())
        if not match:
            continue

        index = int(match.group(1))
        target = comment.find_next_sibling(True)
        comment.extract()

        if index >= len(blocks):
            logger.debug("No IAL recorded for marker %d", index)
            continue
        if target is None:
            logger.debug("No element follows IAL marker %d", index)
            continue

        apply_ial(
            target,
            blocks[index],
            language_class_prefix=language_class_prefix,
            numbering_types=numbering_types,
        )

    return str(soup)


def ial_applier_default(html: str, context: dict) -> str:
    """
    Default configuration for ial_applier.

    This is the function that should be registered in POSTPROCESSORS.
    """
    config = get_ial_config()
    return ial_applier(
        html,
        context,
        language_class_prefix=config["language_class_prefix"],
        numbering_types=config["numbering_types"],
    )
