from __future__ import annotations

import pytest

from portfolio_chat.chat.message_renderer import (
    Bold,
    CardBlock,
    CardGroupBlock,
    CardGroupSegment,
    CardSegment,
    FormattedText,
    LineBreak,
    Link,
    StagedText,
    TextRun,
    TextSegment,
    build_render_plan,
    format_user_text,
    is_identifier,
    paragraph_duration,
    render,
    split_paragraphs,
    stage_paragraphs,
)


def test_plain_text_is_single_segment() -> None:
    assert render("Just a normal reply.") == [TextSegment("Just a normal reply.")]


def test_empty_and_whitespace_content_render_nothing() -> None:
    assert render("") == []
    assert render("   \n\n  ") == []


def test_single_tag_splits_surrounding_text() -> None:
    segments = render("Here is my project: <project_chatbot> pretty neat.")
    assert segments == [
        TextSegment("Here is my project:"),
        CardSegment("project_chatbot"),
        TextSegment("pretty neat."),
    ]


def test_whitespace_around_tag_is_dropped() -> None:
    assert render("  <skill_ai>  ") == [CardSegment("skill_ai")]


def test_about_card_tag() -> None:
    assert render("<aboutmecard>") == [CardSegment("aboutmecard")]


def test_group_with_whitespace_and_commas() -> None:
    segments = render("My skills: [ <skill_ai> ,<skill_leadership>,  <tool_react> ]")
    assert segments == [
        TextSegment("My skills:"),
        CardGroupSegment(("skill_ai", "skill_leadership", "tool_react")),
    ]


def test_single_element_group_is_a_group() -> None:
    assert render("[<skill_ai>]") == [CardGroupSegment(("skill_ai",))]


def test_mixed_content_keeps_order() -> None:
    segments = render("A [<skill_a>,<skill_b>] B <tool_x> C")
    assert segments == [
        TextSegment("A"),
        CardGroupSegment(("skill_a", "skill_b")),
        TextSegment("B"),
        CardSegment("tool_x"),
        TextSegment("C"),
    ]


@pytest.mark.parametrize(
    "content",
    [
        "<foo_bar>",
        "<project_>",
        "<project_chatbot",
        "<Project_chatbot>",
        "<about>",
        "[]",
    ],
)
def test_invalid_tags_stay_text(content: str) -> None:
    assert render(content) == [TextSegment(content)]


def test_group_with_invalid_element_falls_back_to_singles() -> None:
    segments = render("[<skill_a>, hello]")
    assert segments == [
        TextSegment("["),
        CardSegment("skill_a"),
        TextSegment(", hello]"),
    ]


def test_unknown_identifiers_are_not_filtered() -> None:
    assert render("<project_doesnotexist>") == [CardSegment("project_doesnotexist")]


def test_groups_take_precedence_over_overlapping_singles() -> None:
    segments = render("<project_a[<skill_b>]>")
    assert CardGroupSegment(("skill_b",)) in segments
    assert all(not isinstance(s, CardSegment) for s in segments)


def test_nested_angle_bracket_matches_inner_tag() -> None:
    assert render("<<skill_ai>") == [TextSegment("<"), CardSegment("skill_ai")]


def test_render_is_deterministic() -> None:
    content = "Hi!\n\n<aboutmecard>\n\n[<skill_ai>, <skill_fullstack>]\n\nBye."
    assert render(content) == render(content)


def test_is_identifier() -> None:
    assert is_identifier("aboutmecard")
    assert is_identifier("gallery_chatbot_demo")
    assert is_identifier("work_current")
    assert not is_identifier("work_")
    assert not is_identifier("aboutme")
    assert not is_identifier("")


def test_split_paragraphs_drops_empty_parts() -> None:
    assert split_paragraphs("One.\n\n\n\nTwo.\r\n\r\nThree.\n\n") == ["One.", "Two.", "Three."]
    assert split_paragraphs("Line one\nline two") == ["Line one\nline two"]


def test_paragraph_duration() -> None:
    assert paragraph_duration("Para one.") == pytest.approx(2 * 0.05 + 0.6 + 0.3)


def test_stage_paragraphs_delays_accumulate() -> None:
    staged = stage_paragraphs("Para one.\n\nPara two has more words.\n\nEnd")
    assert [p.text for p in staged] == ["Para one.", "Para two has more words.", "End"]
    assert staged[0].delay == pytest.approx(0.0)
    assert staged[1].delay == pytest.approx(1.0)
    assert staged[2].delay == pytest.approx(1.0 + 5 * 0.05 + 0.9)


def test_stage_paragraphs_with_start_offset() -> None:
    staged = stage_paragraphs("Hello world", start=2.5)
    assert staged[0].delay == pytest.approx(2.5)


def test_assistant_plan_carries_offset_across_cards() -> None:
    plan = build_render_plan("Intro text.\n\n<project_chatbot>\n\nMore text here.", is_user=False)
    assert len(plan) == 3
    intro, card, outro = plan
    assert isinstance(intro, StagedText)
    assert intro.paragraphs[0].delay == pytest.approx(0.0)
    assert isinstance(card, CardBlock)
    assert card.identifier == "project_chatbot"
    assert card.delay == pytest.approx(1.0)
    assert isinstance(outro, StagedText)
    assert outro.paragraphs[0].delay == pytest.approx(1.0)


def test_assistant_plan_group_block() -> None:
    plan = build_render_plan("[<skill_ai>, <skill_fullstack>]", is_user=False)
    assert plan == [CardGroupBlock(("skill_ai", "skill_fullstack"), 0.0)]


def test_user_plan_is_not_staged() -> None:
    plan = build_render_plan("hello\n\nworld", is_user=True)
    assert plan == [
        FormattedText((TextRun("hello"), LineBreak(), LineBreak(), TextRun("world"))),
    ]


def test_format_user_text_bold_and_bare_url() -> None:
    tokens = format_user_text("Hi **there**\nsee https://example.com.")
    assert tokens == [
        TextRun("Hi "),
        Bold("there"),
        LineBreak(),
        TextRun("see "),
        Link("https://example.com", "https://example.com"),
        TextRun("."),
    ]


def test_format_user_text_markdown_link() -> None:
    tokens = format_user_text("Check [my repo](https://github.com/me/repo) please")
    assert tokens == [
        TextRun("Check "),
        Link("my repo", "https://github.com/me/repo"),
        TextRun(" please"),
    ]


def test_format_user_text_plain() -> None:
    assert format_user_text("no markup here") == [TextRun("no markup here")]
