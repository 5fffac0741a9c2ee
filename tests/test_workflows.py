"""Tests for the completion-assisted workflows and their fallbacks."""

import json

import pytest

from life_manage.agents import (
    CategorizationAgent,
    DashboardSummaryAgent,
    NextStepsAgent,
    OutcomeKind,
)
from life_manage.agents.base import extract_json
from life_manage.agents.dashboard_summary import fallback_summary
from life_manage.errors import ExternalServiceError
from tests.helpers import StubCompletionClient

CONTENT = {"id": "a", "title": "Website", "mapping": {}}


class TestExtractJson:
    def test_object_inside_prose(self):
        assert extract_json('Sure! {"category": "work"} Hope it helps') == {"category": "work"}

    def test_array_inside_code_fence(self):
        assert extract_json('```json\n[{"title": "x"}]\n```', "[", "]") == [{"title": "x"}]

    def test_no_json(self):
        with pytest.raises(ValueError):
            extract_json("no braces here")


class TestCategorizationAgent:
    @pytest.mark.asyncio
    async def test_parses_answer(self):
        client = StubCompletionClient('{"category": "work", "tags": ["design", "web"]}')
        outcome = await CategorizationAgent(client).categorize(CONTENT, "sk-test")

        assert outcome.kind is OutcomeKind.OK
        assert outcome.value.category == "work"
        assert outcome.value.tags == ["design", "web"]
        assert client.calls[0]["api_key"] == "sk-test"
        assert client.calls[0]["temperature"] == 0.3

    @pytest.mark.asyncio
    async def test_tags_limited_to_five(self):
        tags = json.dumps([f"t{i}" for i in range(8)])
        client = StubCompletionClient(f'{{"category": "personal", "tags": {tags}}}')
        outcome = await CategorizationAgent(client).categorize(CONTENT, "sk-test")
        assert outcome.value.tags == ["t0", "t1", "t2", "t3", "t4"]

    @pytest.mark.asyncio
    async def test_external_failure_falls_back(self):
        client = StubCompletionClient(ExternalServiceError("rate limited", status=429))
        outcome = await CategorizationAgent(client).categorize(CONTENT, "sk-test")

        assert outcome.is_fallback
        assert outcome.value.category == "personal"
        assert outcome.value.tags == ["uncategorized"]
        assert outcome.reason == "rate limited"

    @pytest.mark.asyncio
    async def test_unparsable_answer_falls_back(self):
        outcome = await CategorizationAgent(StubCompletionClient("I think it's work")).categorize(CONTENT, "sk-test")
        assert outcome.is_fallback
        assert outcome.value.tags == ["uncategorized"]

    @pytest.mark.asyncio
    async def test_unknown_category_falls_back(self):
        client = StubCompletionClient('{"category": "hobby", "tags": []}')
        outcome = await CategorizationAgent(client).categorize(CONTENT, "sk-test")
        assert outcome.is_fallback
        assert outcome.value.category == "personal"


class TestNextStepsAgent:
    async def generate(self, *replies):
        agent = NextStepsAgent(StubCompletionClient(*replies))
        return await agent.generate("Website", "work", ["design"], [CONTENT], "sk-test")

    @pytest.mark.asyncio
    async def test_parses_steps(self):
        outcome = await self.generate(json.dumps([
            {"title": "Draft sitemap", "description": "List every page"},
            {"title": "Pick a palette"},
        ]))
        assert outcome.is_ok
        assert [s.title for s in outcome.value] == ["Draft sitemap", "Pick a palette"]
        assert outcome.value[1].description is None

    @pytest.mark.asyncio
    async def test_at_most_five_steps(self):
        outcome = await self.generate(json.dumps([{"title": f"Step {i}"} for i in range(7)]))
        assert len(outcome.value) == 5

    @pytest.mark.asyncio
    async def test_failure_gives_three_fixed_steps(self):
        outcome = await self.generate(ExternalServiceError("boom"))
        assert outcome.is_fallback
        assert [s.title for s in outcome.value] == [
            "Review project details",
            "Identify key stakeholders",
            "Set project milestones",
        ]

    @pytest.mark.asyncio
    async def test_empty_list_falls_back(self):
        outcome = await self.generate("[]")
        assert outcome.is_fallback
        assert len(outcome.value) == 3

    @pytest.mark.asyncio
    async def test_prompt_mentions_project(self):
        client = StubCompletionClient("[]")
        await NextStepsAgent(client).generate("Website", "work", ["design", "ux"], [], "sk-test")
        prompt = client.calls[0]["messages"][1]["content"]
        assert "Project Title: Website" in prompt
        assert "Project Tags: design, ux" in prompt


class TestDashboardSummaryAgent:
    @pytest.mark.asyncio
    async def test_returns_text(self):
        agent = DashboardSummaryAgent(StubCompletionClient("  You are doing great.  "))
        outcome = await agent.summarize([{"title": "P"}], [], "sk-test")
        assert outcome.is_ok
        assert outcome.value == "You are doing great."

    @pytest.mark.asyncio
    async def test_failure_uses_template(self):
        agent = DashboardSummaryAgent(StubCompletionClient(ExternalServiceError("down")))
        outcome = await agent.summarize([{"title": "P"}, {"title": "Q"}], [{"title": "T"}], "sk-test")

        assert outcome.is_fallback
        assert outcome.value == fallback_summary(2, 1)
        assert "2 active projects" in outcome.value
        assert "1 pending tasks" in outcome.value
