# ialmark/markdown/preprocessors/__init__.py

from .ial_collector import ial_collector_default

PREPROCESSORS = [
    ial_collector_default,  # Strip IAL lines, leave markers for ial_applier
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
