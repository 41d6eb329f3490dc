"""Tests for the ial_collector preprocessor."""

from ialmark.markdown.preprocessors import apply_preprocessors
from ialmark.markdown.preprocessors.ial_collector import (
    IAL_CONTEXT_KEY,
    collect_ials,
    ial_collector_default,
)


def test_ial_line_replaced_with_marker():
    context = {}
    text = "{#intro .lead}\nFirst paragraph.\n"

    result = collect_ials(text, context)

    assert result == "<!--ial:0-->\n\nFirst paragraph.\n"
    [ial] = context[IAL_CONTEXT_KEY]
    assert ial.id == "intro"
    assert ial.classes == {"lead"}


def test_consecutive_ial_lines_are_merged():
    context = {}
    text = '{#a .x k=1}\n{#b .y k=2 title="Two words"}\nBody'

    result = collect_ials(text, context)

    assert result == "<!--ial:0-->\n\nBody"
    [ial] = context[IAL_CONTEXT_KEY]
    assert ial.id == "b"
    assert ial.classes == {"x", "y"}
    assert ial.attributes == {"k": "2", "title": "Two words"}


def test_several_ials_on_one_line():
    context = {}
    collect_ials("{.a} {.b #c}\nBody", context)
    [ial] = context[IAL_CONTEXT_KEY]
    assert ial.classes == {"a", "b"}
    assert ial.id == "c"


def test_each_block_gets_its_own_set():
    context = {}
    text = "{.one}\nFirst\n\n{.two}\nSecond\n"

    result = collect_ials(text, context)

    assert result == "<!--ial:0-->\n\nFirst\n\n<!--ial:1-->\n\nSecond\n"
    first, second = context[IAL_CONTEXT_KEY]
    assert first.classes == {"one"}
    assert second.classes == {"two"}


def test_ial_in_middle_of_paragraph_is_text():
    context = {}
    text = "line one\n{.x}\nline two"
    assert collect_ials(text, context) == text
    assert context[IAL_CONTEXT_KEY] == []


def test_partial_ial_line_is_text():
    context = {}
    text = "{.a} not an ial\n\n{.b} {.c\n"
    assert collect_ials(text, context) == text
    assert context[IAL_CONTEXT_KEY] == []


def test_reserved_keyword_line_is_left_alone():
    context = {}
    text = "{mainmatter}\n\n# Chapter"
    assert collect_ials(text, context) == text
    assert context[IAL_CONTEXT_KEY] == []


def test_fenced_code_is_not_scanned():
    context = {}
    text = "{lang=python}\n```\n\n{.inside}\n```\n"

    result = collect_ials(text, context)

    assert result == "<!--ial:0-->\n\n```\n\n{.inside}\n```\n"
    [ial] = context[IAL_CONTEXT_KEY]
    assert ial.attributes == {"lang": "python"}


def test_blank_lines_between_ial_and_block():
    context = {}
    result = collect_ials("{.a}\n\nBody", context)
    assert result == "\n<!--ial:0-->\n\nBody"


def test_indented_block_keeps_indentation():
    context = {}
    result = collect_ials("- item\n\n  {.x}\n  continued", context)
    assert result == "- item\n\n  <!--ial:0-->\n\n  continued"


def test_trailing_ial_without_block_is_dropped():
    context = {}
    assert collect_ials("Body\n\n{.orphan}\n", context) == "Body\n\n"
    assert context[IAL_CONTEXT_KEY] == []


def test_custom_reserved_keywords():
    context = {}
    text = "{appendix}\nBody"
    assert collect_ials(text, context, reserved={"appendix"}) == text


def test_default_uses_settings(settings_override):
    settings_override(IALMARK={"reserved_keywords": ["appendix"]})
    context = {}
    text = "{appendix}\nBody"
    assert ial_collector_default(text, context) == text


def test_apply_preprocessors_runs_collector():
    context = {}
    assert apply_preprocessors("{.a}\nBody", context) == "<!--ial:0-->\n\nBody"
    assert len(context[IAL_CONTEXT_KEY]) == 1


def test_indented_code_block_is_not_scanned():
    context = {}
    text = 'Para\n\n    {"json": 1}\n    more code\n'
    assert collect_ials(text, context) == text
    assert context[IAL_CONTEXT_KEY] == []


def test_indented_code_inside_list_item_is_not_scanned():
    context = {}
    text = "- item\n\n      {.x}\n"
    assert collect_ials(text, context) == text
    assert context[IAL_CONTEXT_KEY] == []


def test_list_indent_resets_after_list_ends():
    context = {}
    text = "- item\n\nPara\n\n    {.x}\n"
    assert collect_ials(text, context) == text


def test_ial_before_indented_code_block():
    context = {}
    result = collect_ials("{.listing}\n    code\n", context)
    assert result == "<!--ial:0-->\n\n    code\n"


def test_only_newlines_split_lines():
    context = {}
    text = "Body a\x0cb c\n"
    assert collect_ials(text, context) == text


def test_carriage_returns_are_tolerated():
    context = {}
    result = collect_ials("{.a}\r\nBody\r\n", context)
    assert result == "<!--ial:0-->\n\nBody\r\n"
    assert context[IAL_CONTEXT_KEY][0].classes == {"a"}
