import json

import httpx
import pytest

from app.services.ai_chat import EMPTY_REPLY, AIChatClient, AIChatError


def client_for(handler) -> AIChatClient:
    return AIChatClient(base_url="http://ai.test/api/ai/", timeout=5, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_chat_posts_message_and_user():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"success": True, "data": {"response": "Sure, here you go."}})

    reply = await client_for(handler).chat("c-101", "What are the prerequisites?", "u-7")

    assert reply == "Sure, here you go."
    assert seen[0].method == "POST"
    assert str(seen[0].url) == "http://ai.test/api/ai/chat/course/c-101"
    assert json.loads(seen[0].content) == {"message": "What are the prerequisites?", "userId": "u-7"}


@pytest.mark.asyncio
async def test_empty_reply():
    def handler(request):
        return httpx.Response(200, json={"success": True, "data": {"response": ""}})

    assert await client_for(handler).chat("c-101", "hi", "u-7") == EMPTY_REPLY


@pytest.mark.asyncio
async def test_server_error_raises():
    def handler(request):
        return httpx.Response(500, json={"success": False, "message": "boom"})

    with pytest.raises(AIChatError):
        await client_for(handler).chat("c-101", "hi", "u-7")


@pytest.mark.asyncio
async def test_success_false_raises():
    def handler(request):
        return httpx.Response(200, json={"success": False, "message": "Course not found"})

    with pytest.raises(AIChatError, match="Course not found"):
        await client_for(handler).chat("c-404", "hi", "u-7")


@pytest.mark.asyncio
async def test_invalid_json_raises():
    def handler(request):
        return httpx.Response(200, content=b"<html>oops</html>")

    with pytest.raises(AIChatError):
        await client_for(handler).chat("c-101", "hi", "u-7")


@pytest.mark.asyncio
async def test_connection_error_raises():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(AIChatError):
        await client_for(handler).chat("c-101", "hi", "u-7")


def test_base_url_normalized():
    client = AIChatClient(base_url="localhost:9000/api/ai/")
    assert client.base_url == "http://localhost:9000/api/ai"
