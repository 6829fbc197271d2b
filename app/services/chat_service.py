import uuid
import logging
from typing import Dict, Optional, Tuple

from app.config import settings
from app.guidance import DialogueOrchestrator, build_welcome
from app.models import ConversationContext, CourseSummary, PageMode, Welcome
from app.schemas.chat import ChatTurn
from app.services.ai_chat import AIChatClient, AIChatError

logger = logging.getLogger("chat_service")

AI_ERROR_REPLY = "I'm sorry, I encountered an error processing your message. Please try again."


class SessionNotFoundError(KeyError):
    """No open conversation with this id."""


class GuidanceChatService:
    """
    Owns the open conversations and the AI chat client.

    Each session has its own ConversationContext; nothing is shared between
    sessions and nothing outlives the process.
    """

    def __init__(
        self,
        orchestrator: Optional[DialogueOrchestrator] = None,
        ai_client: Optional[AIChatClient] = None,
        default_user_id: Optional[str] = None,
    ):
        self.orchestrator = orchestrator or DialogueOrchestrator(
            delegate_course_questions=settings.enable_ai_delegation
        )
        self.ai_client = ai_client or AIChatClient()
        self.default_user_id = default_user_id or settings.default_user_id
        self._sessions: Dict[str, ConversationContext] = {}

    def open_session(
        self,
        page_mode: PageMode = PageMode.COURSE_CATALOG,
        course: Optional[CourseSummary] = None,
        user_id: Optional[str] = None,
    ) -> Tuple[str, Welcome]:
        session_id = str(uuid.uuid4())
        ctx = ConversationContext(page_mode=page_mode, selected_course=course, user_id=user_id)
        self._sessions[session_id] = ctx
        logger.info(f"Opened session {session_id} (page={page_mode.value}, course={course.title if course else None})")
        return session_id, build_welcome(ctx)

    def get_context(self, session_id: str) -> ConversationContext:
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None

    def attach_course(self, session_id: str, course: CourseSummary) -> ConversationContext:
        ctx = self.get_context(session_id)
        ctx.attach_course(course)
        return ctx

    def detach_course(self, session_id: str) -> ConversationContext:
        ctx = self.get_context(session_id)
        ctx.detach_course()
        return ctx

    def close_session(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)
        logger.info(f"Closed session {session_id}")

    async def send(self, session_id: str, message: str) -> ChatTurn:
        ctx = self.get_context(session_id)
        result = self.orchestrator.handle_message(message, ctx)

        if not result.delegate_to_ai:
            return ChatTurn(session_id=session_id, reply=result.reply, question_type=result.question_type)

        user_id = ctx.user_id or self.default_user_id
        try:
            reply = await self.ai_client.chat(ctx.course_id, message, user_id)
        except AIChatError as e:
            logger.error(f"AI chat failed for session {session_id}: {e}")
            return ChatTurn(
                session_id=session_id,
                reply=AI_ERROR_REPLY,
                question_type=result.question_type,
                delegated=True,
                error=True,
            )

        return ChatTurn(
            session_id=session_id,
            reply=reply,
            question_type=result.question_type,
            delegated=True,
        )
