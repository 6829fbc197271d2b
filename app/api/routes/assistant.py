import logging
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException

from app.models import CourseSummary
from app.schemas.chat import ChatRequest, ChatTurn, OpenSessionRequest, OpenSessionResponse
from app.schemas.errors import ErrorResponse
from app.services.chat_service import GuidanceChatService, SessionNotFoundError

logger = logging.getLogger("assistant_route")
router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse}}


@lru_cache
def get_chat_service() -> GuidanceChatService:
    return GuidanceChatService()


def _not_found(session_id: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Unknown session: {session_id}")


@router.post("/assistant/sessions", response_model=OpenSessionResponse)
async def open_session(request: OpenSessionRequest, service: GuidanceChatService = Depends(get_chat_service)):
    session_id, welcome = service.open_session(
        page_mode=request.page_mode,
        course=request.course,
        user_id=request.user_id,
    )
    return OpenSessionResponse(session_id=session_id, welcome=welcome.message, suggestions=welcome.suggestions)


@router.put("/assistant/sessions/{session_id}/course", status_code=204, responses=NOT_FOUND)
async def attach_course(
    session_id: str,
    course: CourseSummary,
    service: GuidanceChatService = Depends(get_chat_service),
):
    try:
        service.attach_course(session_id, course)
    except SessionNotFoundError:
        raise _not_found(session_id)


@router.delete("/assistant/sessions/{session_id}/course", status_code=204, responses=NOT_FOUND)
async def detach_course(session_id: str, service: GuidanceChatService = Depends(get_chat_service)):
    try:
        service.detach_course(session_id)
    except SessionNotFoundError:
        raise _not_found(session_id)


@router.delete("/assistant/sessions/{session_id}", status_code=204, responses=NOT_FOUND)
async def close_session(session_id: str, service: GuidanceChatService = Depends(get_chat_service)):
    try:
        service.close_session(session_id)
    except SessionNotFoundError:
        raise _not_found(session_id)


@router.post("/assistant/chat", response_model=ChatTurn, responses=NOT_FOUND)
async def chat_endpoint(request: ChatRequest, service: GuidanceChatService = Depends(get_chat_service)):
    try:
        turn = await service.send(request.session_id, request.message)
    except SessionNotFoundError:
        raise _not_found(request.session_id)

    logger.info(f"Session {request.session_id}: {turn.question_type.value} (delegated={turn.delegated})")
    return turn
