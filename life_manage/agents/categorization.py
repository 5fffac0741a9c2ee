"""
Categorization Workflow

Asks the completion API whether a conversation is work or personal and for
up to five tags.
"""

from typing import Any, Dict, List
import json

import pydantic

from life_manage.agents.base import CompletionWorkflow, extract_json
from life_manage.agents.outcome import Outcome
from life_manage.errors import ExternalServiceError
from life_manage.schemas.workflow import Categorization

FALLBACK_CATEGORIZATION = Categorization(category="personal", tags=["uncategorized"])

SYSTEM_PROMPT = """You are an AI assistant that categorizes conversations.
Analyze the conversation and categorize it as either "work" or "personal".
Also suggest up to 5 relevant tags based on the content.
Return your response as a JSON object with "category" and "tags" fields."""


class CategorizationAgent(CompletionWorkflow):
    """Categorize one conversation into (category, tags)."""

    name = "categorization"
    temperature = 0.3

    def build_messages(self, content: Dict[str, Any]) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": f"Categorize this conversation: {json.dumps(content, default=str)}"},
        ]

    async def categorize(self, content: Dict[str, Any], api_key: str) -> Outcome[Categorization]:
        """
        Categorize the conversation content.

        Returns Outcome.ok with the parsed answer, or Outcome.fallback with
        personal/["uncategorized"] if the call or the parsing fails.
        """
        try:
            text = await self.ask(self.build_messages(content), api_key)
            result = Categorization.model_validate(extract_json(text))
        except ExternalServiceError as e:
            self.log_fallback(e.message, status=e.status)
            return Outcome.fallback(FALLBACK_CATEGORIZATION.model_copy(deep=True), e.message)
        except (ValueError, pydantic.ValidationError) as e:
            # json.JSONDecodeError is a ValueError
            self.log_fallback(f"unparsable categorization: {e.__class__.__name__}")
            return Outcome.fallback(FALLBACK_CATEGORIZATION.model_copy(deep=True), "unparsable response")
        return Outcome.ok(result)
