import pytest

from app.guidance import response_catalog as catalog
from app.guidance.response_catalog import RESPONSE_CATALOG, get_variants
from app.guidance.response_selector import ResponseSelector
from app.guidance.templating import placeholders_in, render
from app.models import CourseSummary, PlaceholderValues

KNOWN_TOKENS = {"courseName", "category", "level", "duration", "description", "interest", "prerequisites"}

ALL_KEYS = [
    (category, subtype)
    for category, subtypes in RESPONSE_CATALOG.items()
    for subtype in subtypes
]


def test_render_fills_tokens():
    assert render("{courseName} takes {duration} hours", {"courseName": "Go 101", "duration": "8"}) == "Go 101 takes 8 hours"


def test_render_missing_value_is_empty():
    assert render("{a} and {b}", {"a": "x"}) == "x and "
    assert render("{a} and {b}", {"a": None, "b": "y"}) == " and y"
    assert render("no tokens here") == "no tokens here"


@pytest.mark.parametrize("key", ALL_KEYS)
def test_catalog_uses_known_tokens_only(key):
    for template in get_variants(key):
        assert placeholders_in(template) <= KNOWN_TOKENS


def test_unknown_key_has_no_variants():
    assert get_variants(("nope", "nothing")) == ()


def test_rotation_cycles_through_variants():
    selector = ResponseSelector()
    data = PlaceholderValues(course_name="Go 101", level="Beginner", duration="8", description="Go basics")
    replies = [selector.respond(catalog.SHOULD_TAKE_KEY, data, count) for count in range(4)]

    assert len(set(replies[:3])) == 3
    assert replies[3] == replies[0]


@pytest.mark.parametrize("key", [k for k in ALL_KEYS if len(get_variants(k)) >= 2])
def test_consecutive_counts_differ(key):
    selector = ResponseSelector()
    assert selector.respond(key, None, 0) != selector.respond(key, None, 1)


def test_rotation_index():
    assert ResponseSelector.rotation_index(0, 3) == 0
    assert ResponseSelector.rotation_index(4, 3) == 1
    assert ResponseSelector.rotation_index(7, 1) == 0


def test_no_data_leaves_no_braces():
    reply = ResponseSelector().respond(catalog.INTEREST_STATED_KEY, None, 0)
    assert "{" not in reply
    assert reply.startswith("Great!  is an exciting field!")


def test_unknown_key_uses_default():
    selector = ResponseSelector()
    assert selector.respond(("nope", "nothing"), None, 5) == get_variants(catalog.DEFAULT_KEY)[0]


def test_placeholders_from_course():
    course = CourseSummary(
        title="Go 101",
        category="Programming",
        difficulty_level="Beginner",
        prerequisites=["Loops", "Functions"],
    )
    values = PlaceholderValues.from_course(course, interest="Go")
    tokens = values.as_tokens()

    assert tokens["courseName"] == "Go 101"
    assert tokens["duration"] == "varies"
    assert tokens["description"] == ""
    assert tokens["prerequisites"] == "• Loops\n• Functions"
    assert tokens["interest"] == "Go"


def test_prerequisite_reply_lists_each_item():
    course = CourseSummary(title="Go 101", prerequisites=["Loops", "Functions"])
    reply = ResponseSelector().respond(catalog.PREREQUISITES_KEY, PlaceholderValues.from_course(course), 0)
    assert "• Loops\n• Functions" in reply
