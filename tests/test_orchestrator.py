import re

import pytest

from app.guidance import DialogueOrchestrator
from app.guidance.response_catalog import MISSING_DESCRIPTION, OUTSIDE_CATALOG_KEY, get_variants
from app.guidance.welcome import GENERAL_SUGGESTIONS, build_welcome
from app.models import ConversationContext, PageMode, QuestionType


def test_out_of_scope_reply(orchestrator, ctx):
    result = orchestrator.handle_message("What's the weather today?", ctx)

    assert result.question_type == QuestionType.OUT_OF_SCOPE
    assert "outside my scope" in result.reply
    assert not result.delegate_to_ai
    assert ctx.message_count == 1


def test_course_question_without_course(orchestrator, ctx):
    result = orchestrator.handle_message("Is this course good for me?", ctx)

    assert result.question_type == QuestionType.COURSE_REFERENCE_MISSING
    assert "which course" in result.reply


def test_interest_stated_reply(orchestrator, ctx):
    result = orchestrator.handle_message("I'm interested in web development", ctx)

    assert result.question_type == QuestionType.INTEREST_STATED
    assert result.reply.startswith("Great! web development is an exciting field!")
    assert "current level" in result.reply
    assert "goal" in result.reply
    assert ctx.stated_interest == "web development"


def test_prerequisites_listed(orchestrator, course_ctx):
    result = orchestrator.handle_message("What are the prerequisites?", course_ctx)

    assert result.question_type == QuestionType.PREREQUISITES
    assert "• Basic HTML\n• Basic CSS" in result.reply
    assert result.reply.count("• ") == 2


def test_decision_gives_no_verdict(orchestrator, course_ctx):
    for _ in range(3):
        result = orchestrator.handle_message("Should I take this course?", course_ctx)
        assert result.question_type == QuestionType.DECISION_RELATED
        assert re.search(r"\b(yes|no)\b", result.reply.lower()) is None
        assert "12 hours" in result.reply


def test_repeated_question_rotates(orchestrator, course_ctx):
    replies = [orchestrator.handle_message("Should I take this course?", course_ctx).reply for _ in range(4)]

    assert len(set(replies[:3])) == 3
    assert replies[3] == replies[0]
    assert course_ctx.message_count == 4


def test_every_message_counts(orchestrator, ctx):
    for text in ["hi", "What's the weather today?", "", "What should I learn?"]:
        orchestrator.handle_message(text, ctx)
    assert ctx.message_count == 4


def test_empty_message_falls_back(orchestrator, ctx):
    result = orchestrator.handle_message("", ctx)
    assert result.question_type == QuestionType.FALLBACK
    assert result.reply.startswith("I'm here to help you choose!")


def test_remembered_interest(orchestrator, ctx):
    orchestrator.handle_message("I'm interested in data science", ctx)
    result = orchestrator.handle_message("What should I learn?", ctx)

    assert result.question_type == QuestionType.INTEREST_STATED
    assert "data science" in result.reply


def test_content_without_description(orchestrator, course_factory):
    ctx = ConversationContext(selected_course=course_factory(description=None))
    result = orchestrator.handle_message("What will I learn?", ctx)

    assert result.question_type == QuestionType.CONTENT
    assert MISSING_DESCRIPTION in result.reply


def test_no_unfilled_placeholders(orchestrator, course_factory):
    ctx = ConversationContext(selected_course=course_factory(category=None, duration_text=None))
    for text in ["What comes next?", "How long is it?", "Compare this with Java Basics"]:
        assert "{" not in orchestrator.handle_message(text, ctx).reply


# -----------------------
# Delegation
# -----------------------

@pytest.fixture
def delegating_ctx(course_factory):
    return ConversationContext(selected_course=course_factory(id="c-101"))


def test_course_with_id_is_delegated(orchestrator, delegating_ctx):
    result = orchestrator.handle_message("What are the prerequisites?", delegating_ctx)

    assert result.delegate_to_ai
    assert result.reply == ""
    assert result.question_type == QuestionType.PREREQUISITES
    assert delegating_ctx.message_count == 1


def test_out_of_scope_is_never_delegated(orchestrator, delegating_ctx):
    result = orchestrator.handle_message("What's the weather today?", delegating_ctx)

    assert not result.delegate_to_ai
    assert result.question_type == QuestionType.OUT_OF_SCOPE


def test_delegation_disabled(delegating_ctx):
    orchestrator = DialogueOrchestrator(delegate_course_questions=False)
    result = orchestrator.handle_message("What are the prerequisites?", delegating_ctx)

    assert not result.delegate_to_ai
    assert "• Basic HTML" in result.reply


# -----------------------
# Pages other than the course catalog
# -----------------------

@pytest.mark.parametrize("chip", GENERAL_SUGGESTIONS)
def test_general_page_chips_point_to_catalog(orchestrator, chip):
    ctx = ConversationContext(page_mode=PageMode.GENERAL)
    welcome = build_welcome(ctx)
    assert chip in welcome.suggestions

    result = orchestrator.handle_message(chip, ctx)

    assert result.question_type == QuestionType.GENERAL_GUIDANCE
    assert result.reply == get_variants(OUTSIDE_CATALOG_KEY)[0]
    assert "Browse Courses page" in result.reply
    assert not result.delegate_to_ai
    assert ctx.stated_interest is None
    assert ctx.message_count == 1


def test_course_detail_without_id_points_to_catalog(orchestrator, course):
    ctx = ConversationContext(page_mode=PageMode.COURSE_DETAIL, selected_course=course)
    result = orchestrator.handle_message("What are the prerequisites?", ctx)

    assert result.question_type == QuestionType.GENERAL_GUIDANCE
    assert result.reply == get_variants(OUTSIDE_CATALOG_KEY)[0]


@pytest.mark.parametrize("chip", GENERAL_SUGGESTIONS)
def test_course_detail_chips_are_delegated(orchestrator, course_factory, chip):
    ctx = ConversationContext(page_mode=PageMode.COURSE_DETAIL, selected_course=course_factory(id="c-101"))
    result = orchestrator.handle_message(chip, ctx)

    assert result.delegate_to_ai
    assert result.reply == ""
    assert result.question_type != QuestionType.OUT_OF_SCOPE


def test_course_detail_without_delegation(course_factory):
    orchestrator = DialogueOrchestrator(delegate_course_questions=False)
    ctx = ConversationContext(page_mode=PageMode.COURSE_DETAIL, selected_course=course_factory(id="c-101"))
    result = orchestrator.handle_message("How long is it?", ctx)

    assert not result.delegate_to_ai
    assert result.reply == get_variants(OUTSIDE_CATALOG_KEY)[0]
