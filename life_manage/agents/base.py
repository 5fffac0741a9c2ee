"""Shared plumbing for completion-assisted workflows."""

from typing import Any, Dict, List, Optional
import json

from life_manage.services.completion_client import CompletionClient
from life_manage.utils.logger import get_logger


def extract_json(text: str, opener: str = "{", closer: str = "}") -> Any:
    """
    Parse the JSON value embedded in a completion.

    Models sometimes wrap JSON in prose or code fences, so the outermost
    opener..closer span is parsed. Raises ValueError when there is none.
    """
    start = text.find(opener)
    end = text.rfind(closer) + 1
    if start == -1 or end == 0 or end <= start:
        raise ValueError("no JSON found in completion")
    return json.loads(text[start:end])


class CompletionWorkflow:
    """Base for workflows: holds the client and a structured logger."""

    name = "workflow"
    temperature = 0.7

    def __init__(self, client: Optional[CompletionClient] = None):
        self.client = client or CompletionClient()
        self.log = get_logger(f"life_manage.agents.{self.name}")

    async def ask(self, messages: List[Dict[str, str]], api_key: str) -> str:
        return await self.client.complete(messages, api_key=api_key, temperature=self.temperature)

    def log_fallback(self, reason: str, **fields):
        self.log.warning("Completion failed, using fallback", workflow=self.name, reason=reason, **fields)
