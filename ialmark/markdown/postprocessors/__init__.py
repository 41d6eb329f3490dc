# ialmark/markdown/postprocessors/__init__.py

from .ial_applier import ial_applier_default

POSTPROCESSORS = [
    ial_applier_default,  # Apply collected IALs to the blocks that follow their markers
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
