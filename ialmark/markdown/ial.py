# ialmark/markdown/ial.py
"""
Attribute sets carried by Inline Attribute Lists (IAL).

An IAL such as ``{#intro .lead .wide title="Hello World"}`` holds:
- one identifier (``#intro``), rendered as ``anchor="intro"``
- a set of class names (``.lead``, ``.wide``)
- key/value attributes (``title="Hello World"``)

Several IALs may be applied to the same block. They are folded together with
``merge``: the last non-empty id wins, classes are unioned and incoming
attribute values replace existing ones.

Rendering is sorted so that two sets with the same content always produce the
same attribute string, regardless of insertion order.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Set


@dataclass
class AttributeSet:
    id: str = ""
    classes: Set[str] = field(default_factory=set)
    attributes: Dict[str, str] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not (self.id or self.classes or self.attributes)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def update(self, other: "AttributeSet") -> "AttributeSet":
        """Fold ``other`` into this set in place and return self."""
        if other.id:
            self.id = other.id
        self.classes.update(other.classes)
        self.attributes.update(other.attributes)
        return self

    def get_or_default_attr(self, key: str, default: str) -> str:
        """
        Return the value stored under ``key`` and remove it from the set.

        Falls back to ``default`` when the key is missing or its value is empty.
        Empty values are left in place.
        """
        value = self.attributes.get(key, "")
        if not value:
            return default
        del self.attributes[key]
        return value

    def get_or_default_id(self, default: str) -> str:
        """Return the id and clear it, or ``default`` when no id is set."""
        if not self.id:
            return default
        value, self.id = self.id, ""
        return value

    def render(self, anchor_name: str = "anchor") -> str:
        return render_attributes(self, anchor_name=anchor_name)

    def __str__(self) -> str:
        return render_attributes(self)


def merge(target: Optional[AttributeSet], source: AttributeSet) -> AttributeSet:
    """
    Merge ``source`` into ``target``.

    Args:
        target: Running aggregate, or None when nothing has been collected yet
        source: Freshly scanned attribute set

    Returns:
        ``source`` itself when ``target`` is None, otherwise the mutated ``target``
    """
    if target is None:
        return source
    return target.update(source)


def render_attributes(ial: Optional[AttributeSet], anchor_name: str = "anchor") -> str:
    """
    Serialise an attribute set for inclusion in an opening tag.

    The result is either empty or starts with a space:
        ' anchor="id" class="a b" key="value"'

    Args:
        ial: Attribute set to render (None renders as "")
        anchor_name: Attribute name used for the identifier

    Returns:
        Attribute string with classes and keys sorted
    """
    if ial is None:
        return ""

    parts = []
    if ial.id:
        parts.append(f'{anchor_name}="{ial.id}"')
    if ial.classes:
        parts.append('class="{}"'.format(" ".join(sorted(ial.classes))))
    for key in sorted(ial.attributes):
        parts.append(f'{key}="{ial.attributes[key]}"')

    return "".join(f" {part}" for part in parts)
