"""Helpers shared by the test modules."""

import json
import time
from typing import Any, Dict, List, Optional

from jose import jwt

from life_manage.middleware.auth import AUTH_ALGORITHM, AUTH_SECRET

TEST_KEY = "sk-test-key"


def make_token(user_id: str = "user-1", email: Optional[str] = "user@example.com", **claims) -> str:
    """Mint a token the way the identity provider would."""
    payload: Dict[str, Any] = {"sub": user_id, "exp": int(time.time()) + 3600}
    if email:
        payload["email"] = email
    payload.update(claims)
    return jwt.encode(payload, AUTH_SECRET, algorithm=AUTH_ALGORITHM)


def auth_headers(user_id: str = "user-1") -> Dict[str, str]:
    return {"Authorization": f"Bearer {make_token(user_id)}"}


def export_entry(conv_id: str, title: Optional[str], *messages: str) -> Dict[str, Any]:
    """One entry of a chat-history export, alternating user/assistant turns."""
    mapping = {}
    for i, text in enumerate(messages, start=1):
        mapping[f"node_{i}"] = {
            "id": f"msg_{i}",
            "role": "user" if i % 2 else "assistant",
            "content": text,
        }
    return {
        "id": conv_id,
        "title": title,
        "create_time": 1700000000.0,
        "update_time": 1700003600.0,
        "mapping": mapping,
    }


def export_document(*entries: Dict[str, Any]) -> bytes:
    return json.dumps({"conversations": list(entries)}).encode("utf-8")


def completion_body(content: str) -> Dict[str, Any]:
    """A chat completions response whose first choice carries content."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {"index": 0, "message": {"role": "assistant", "content": content}, "finish_reason": "stop"}
        ],
    }


class StubCompletionClient:
    """Stands in for CompletionClient: replays queued answers or errors."""

    def __init__(self, *replies):
        self.replies: List[Any] = list(replies)
        self.calls: List[Dict[str, Any]] = []

    async def complete(self, messages, *, api_key, temperature=0.7):
        self.calls.append({"messages": messages, "api_key": api_key, "temperature": temperature})
        reply = self.replies.pop(0) if self.replies else ""
        if isinstance(reply, Exception):
            raise reply
        return reply
