"""
Course Guide Assistant - Engine Models
Conversation context and result types shared by the guidance pipeline.
"""
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class PageMode(str, Enum):
    GENERAL = "general"
    COURSE_CATALOG = "course-catalog"
    COURSE_DETAIL = "course-detail"


class QuestionType(str, Enum):
    COURSE_REFERENCE_MISSING = "course-reference-missing"
    GENERAL_GUIDANCE_MISSING_INTEREST = "general-guidance-missing-interest"
    INTEREST_STATED = "interest-stated"
    DECISION_RELATED = "decision-related"
    COMPARISON = "comparison"
    SUITABILITY = "course-specific:suitability"
    PREREQUISITES = "course-specific:prerequisites"
    NEXT_STEPS = "course-specific:next-steps"
    DURATION = "course-specific:duration"
    CONTENT = "course-specific:content"
    GENERAL_GUIDANCE = "general-guidance"  # Static help: filters, roadmap, levels
    OUT_OF_SCOPE = "out-of-scope"
    FALLBACK = "fallback"

    @property
    def is_course_specific(self) -> bool:
        return self.value.startswith("course-specific:")


class CourseSummary(BaseModel):
    """Read-only snapshot of the course the host page attached."""
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    title: str
    category: Optional[str] = None
    difficulty_level: Optional[str] = None
    duration_text: Optional[str] = None
    description: Optional[str] = None
    prerequisites: Tuple[str, ...] = Field(default_factory=tuple)


class ConversationContext(BaseModel):
    """
    Per-conversation state owned by the orchestrator.

    Created when the widget opens and discarded when it closes. The
    message_count only ever grows; it drives template rotation.
    """
    page_mode: PageMode = PageMode.COURSE_CATALOG
    selected_course: Optional[CourseSummary] = None
    message_count: int = Field(default=0, ge=0)
    stated_interest: Optional[str] = None
    user_id: Optional[str] = None

    @property
    def course_id(self) -> Optional[str]:
        if self.selected_course is None:
            return None
        return self.selected_course.id or None

    def attach_course(self, course: CourseSummary) -> None:
        self.selected_course = course

    def detach_course(self) -> None:
        self.selected_course = None


class InterestMatch(BaseModel):
    found: bool = False
    topic: str = ""


class Classification(BaseModel):
    """Result from intent classification"""
    question_type: QuestionType
    response_key: Tuple[str, str]
    interest: Optional[str] = None


class PlaceholderValues(BaseModel):
    """Values substituted into response templates, keyed by token name."""
    model_config = ConfigDict(populate_by_name=True)

    course_name: str = Field(default="", alias="courseName")
    category: str = ""
    level: str = ""
    duration: str = ""
    description: str = ""
    interest: str = ""
    prerequisites: str = ""

    @classmethod
    def from_course(cls, course: CourseSummary, interest: str = "") -> "PlaceholderValues":
        prereqs = "\n".join(f"• {p}" for p in course.prerequisites)
        return cls(
            course_name=course.title,
            category=course.category or "",
            level=course.difficulty_level or "",
            duration=course.duration_text or "varies",
            description=course.description or "",
            interest=interest,
            prerequisites=prereqs,
        )

    def as_tokens(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True)


class DialogueResult(BaseModel):
    """What the orchestrator hands back to the caller for one message."""
    reply: str = ""
    delegate_to_ai: bool = False
    question_type: QuestionType = QuestionType.FALLBACK


class Welcome(BaseModel):
    message: str
    suggestions: List[str] = Field(default_factory=list)
