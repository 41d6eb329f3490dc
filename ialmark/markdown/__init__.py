from .ial import AttributeSet, merge, render_attributes
from .scanner import RESERVED_KEYWORDS, parse_ial, scan_ial
from .session import ParseSession

__all__ = (
    "AttributeSet",
    "ParseSession",
    "RESERVED_KEYWORDS",
    "merge",
    "parse_ial",
    "render_attributes",
    "scan_ial",
)
