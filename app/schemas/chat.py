from pydantic import BaseModel, Field
from typing import List, Optional

from app.models import CourseSummary, PageMode, QuestionType


class OpenSessionRequest(BaseModel):
    """Sent by the widget when it opens"""
    page_mode: PageMode = PageMode.COURSE_CATALOG
    course: Optional[CourseSummary] = None
    user_id: Optional[str] = None


class OpenSessionResponse(BaseModel):
    session_id: str
    welcome: str
    suggestions: List[str] = Field(default_factory=list)


class ChatRequest(BaseModel):
    """One user message in an open session"""
    session_id: str
    message: str = Field(default="", max_length=500)


class ChatTurn(BaseModel):
    """Reply returned to the widget"""
    session_id: str
    reply: str
    question_type: QuestionType
    delegated: bool = False
    error: bool = False
