from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .scanner import RESERVED_KEYWORDS

DEFAULT_NUMBERING_TYPES = {
    "decimal": "1",
    "lower-alpha": "a",
    "upper-alpha": "A",
    "lower-roman": "i",
    "upper-roman": "I",
}


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    IAL lines are stripped by the ial_collector preprocessor and replaced with
    HTML comment markers, so raw_html must stay enabled for the markers to
    reach the postprocessors.
    """
    filters = getattr(settings, "IALMARK_PANDOC_FILTERS", [])

    return {
        "extra_args": [
            # Enable Pandoc markdown extensions (all in --from argument)
            "--from=markdown+autolink_bare_uris+strikeout+superscript+subscript+task_lists+smart+pipe_tables+grid_tables+definition_lists+footnotes+fenced_code_blocks+fenced_code_attributes+raw_html+header_attributes+implicit_header_references+fancy_lists+tex_math_dollars",
            # Math rendering with MathJax
            "--mathjax",
        ],
        "filters": [str(f) for f in filters],
    }


def get_ial_config():
    """
    Settings for IAL collection and application.

    Read from the IALMARK dict in Django settings, e.g.:

        IALMARK = {
            "reserved_keywords": ["frontmatter", "mainmatter", "backmatter", "appendix"],
            "language_class_prefix": "lang-",
        }
    """
    overrides = getattr(settings, "IALMARK", {}) or {}
    if not isinstance(overrides, dict):
        raise ImproperlyConfigured("IALMARK must be a dict")

    config = {
        "reserved_keywords": RESERVED_KEYWORDS,
        "language_class_prefix": "language-",
        "numbering_types": DEFAULT_NUMBERING_TYPES,
    }
    config.update(overrides)

    reserved = config["reserved_keywords"]
    if not isinstance(reserved, (list, tuple, set, frozenset)) or not all(
        isinstance(k, str) for k in reserved
    ):
        raise ImproperlyConfigured(
            "IALMARK['reserved_keywords'] must be a list of strings"
        )
    config["reserved_keywords"] = frozenset(reserved)

    if not isinstance(config["language_class_prefix"], str):
        raise ImproperlyConfigured("IALMARK['language_class_prefix'] must be a string")
    if not isinstance(config["numbering_types"], dict):
        raise ImproperlyConfigured("IALMARK['numbering_types'] must be a dict")

    return config
