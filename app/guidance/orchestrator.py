"""
Course Guide Assistant - Step 4: Dialogue Orchestrator
Runs one user message through scope check, classification and reply selection.
"""
import logging
from typing import Optional

from app.guidance import response_catalog as catalog
from app.guidance.intent_classifier import IntentClassifier
from app.guidance.interest_extractor import InterestExtractor
from app.guidance.response_selector import ResponseSelector
from app.guidance.scope_filter import ScopeFilter
from app.models import (
    Classification,
    ConversationContext,
    DialogueResult,
    PageMode,
    PlaceholderValues,
    QuestionType,
)

logger = logging.getLogger(__name__)


class DialogueOrchestrator:
    """
    Sequences the guidance pipeline for a single conversation turn.

    Order on the course catalog page:
    1. ScopeFilter: an out-of-scope message gets the fixed reply and nothing else runs
    2. InterestExtractor + IntentClassifier
    3. Course with a concrete id -> delegate to the AI chat service
    4. Otherwise -> catalog reply rotated by ctx.message_count

    Any other page skips the keyword engine: a course with an id is
    delegated, everything else gets a pointer to the catalog page.

    ctx.message_count is bumped once per handled message, after the reply
    is chosen, so a turn always renders with the count it arrived with.
    """

    def __init__(
        self,
        scope_filter: Optional[ScopeFilter] = None,
        extractor: Optional[InterestExtractor] = None,
        classifier: Optional[IntentClassifier] = None,
        selector: Optional[ResponseSelector] = None,
        delegate_course_questions: bool = True,
    ):
        self.scope_filter = scope_filter or ScopeFilter()
        self.extractor = extractor or InterestExtractor()
        self.classifier = classifier or IntentClassifier(extractor=self.extractor)
        self.selector = selector or ResponseSelector()
        self.delegate_course_questions = delegate_course_questions

    def handle_message(self, text: str, ctx: ConversationContext) -> DialogueResult:
        result = self._process(text or "", ctx)
        ctx.message_count += 1
        return result

    def _process(self, text: str, ctx: ConversationContext) -> DialogueResult:
        if ctx.page_mode != PageMode.COURSE_CATALOG:
            return self._outside_catalog(text, ctx)

        if self.scope_filter.is_out_of_scope(text):
            return DialogueResult(
                reply=self.selector.respond(catalog.OUT_OF_SCOPE_KEY, None, ctx.message_count),
                question_type=QuestionType.OUT_OF_SCOPE,
            )

        interest = self.extractor.extract(text)
        classification = self.classifier.classify(text, ctx, interest=interest)

        if classification.question_type == QuestionType.INTEREST_STATED and classification.interest:
            ctx.stated_interest = classification.interest

        if self.delegate_course_questions and ctx.course_id:
            logger.info(
                f"Delegating {classification.question_type.value} to AI chat for course {ctx.course_id}"
            )
            return DialogueResult(delegate_to_ai=True, question_type=classification.question_type)

        reply = self.selector.respond(
            classification.response_key,
            self._placeholders(classification, ctx),
            ctx.message_count,
        )
        return DialogueResult(reply=reply, question_type=classification.question_type)

    def _outside_catalog(self, text: str, ctx: ConversationContext) -> DialogueResult:
        if self.delegate_course_questions and ctx.course_id:
            classification = self.classifier.classify(text, ctx)
            logger.info(f"Delegating {ctx.page_mode.value} message to AI chat for course {ctx.course_id}")
            return DialogueResult(delegate_to_ai=True, question_type=classification.question_type)

        return DialogueResult(
            reply=self.selector.respond(catalog.OUTSIDE_CATALOG_KEY, None, ctx.message_count),
            question_type=QuestionType.GENERAL_GUIDANCE,
        )

    @staticmethod
    def _placeholders(classification: Classification, ctx: ConversationContext) -> PlaceholderValues:
        interest = classification.interest or ""
        course = ctx.selected_course
        if course is None:
            return PlaceholderValues(interest=interest)

        values = PlaceholderValues.from_course(course, interest=interest)
        if classification.question_type == QuestionType.CONTENT and not values.description:
            values = values.model_copy(update={"description": catalog.MISSING_DESCRIPTION})
        return values
