"""
Test configuration and fixtures.
"""
import json

import httpx
import pytest

from app.guidance import DialogueOrchestrator
from app.models import ConversationContext, CourseSummary, PageMode
from app.services.ai_chat import AIChatClient
from app.services.chat_service import GuidanceChatService

AI_BASE_URL = "http://ai.test/api/ai"


def make_course(**overrides) -> CourseSummary:
    data = {
        "title": "Intro to Web Development",
        "category": "Web Development",
        "difficulty_level": "Beginner",
        "duration_text": "12",
        "description": "HTML and CSS fundamentals",
        "prerequisites": ["Basic HTML", "Basic CSS"],
    }
    data.update(overrides)
    return CourseSummary(**data)


@pytest.fixture
def course_factory():
    return make_course


@pytest.fixture
def course():
    return make_course()


@pytest.fixture
def ctx():
    """Catalog page, nothing selected yet."""
    return ConversationContext(page_mode=PageMode.COURSE_CATALOG)


@pytest.fixture
def course_ctx(course):
    """Catalog page with a course snapshot that carries no id (answered locally)."""
    return ConversationContext(page_mode=PageMode.COURSE_CATALOG, selected_course=course)


@pytest.fixture
def orchestrator():
    return DialogueOrchestrator()


class FakeAIBackend:
    """Stands in for the hosted AI chat API; records what it was sent."""

    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self.payload = payload if payload is not None else {
            "success": True,
            "message": "Chat response generated successfully",
            "data": {"response": "Here is what the course AI says."},
        }
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last_body(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def ai_backend():
    return FakeAIBackend()


@pytest.fixture
def ai_client(ai_backend):
    return AIChatClient(base_url=AI_BASE_URL, timeout=5, transport=httpx.MockTransport(ai_backend))


@pytest.fixture
def chat_service(ai_client):
    return GuidanceChatService(ai_client=ai_client, default_user_id="guest")
