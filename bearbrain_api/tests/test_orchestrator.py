"""
Tests for the fallback orchestrator.

Uses scripted adapters so ordering, skipping and fallback can be checked
without any HTTP traffic.
"""

import asyncio
import logging

import pytest

from bearbrain_api.fallback import STUDY_TIPS
from bearbrain_api.gateway_types import ResponseOrigin, TutorRequest
from bearbrain_api.models.base import EmptyReplyError, ProviderAdapter
from bearbrain_api.orchestrator import FallbackOrchestrator
from bearbrain_api.schemas import ChatMessage
from bearbrain_api.subjects import Subject


class ScriptedAdapter(ProviderAdapter):
    """
    Adapter whose per-model outcome is scripted.

    An outcome is either reply text, an exception instance to raise from
    `_send`, or "hang" to sleep past any timeout.
    """

    def __init__(self, provider_id, outcomes, api_key="key", calls=None):
        super().__init__(api_key, tuple(outcomes))
        self.provider_id = provider_id
        self.outcomes = outcomes
        self.calls = calls if calls is not None else []

    async def _send(self, request, model):
        self.calls.append((self.provider_id, model))
        outcome = self.outcomes[model]
        if outcome == "hang":
            await asyncio.sleep(10)
        if isinstance(outcome, Exception):
            raise outcome
        if not outcome:
            raise EmptyReplyError()
        return outcome


class ExplodingAdapter(ScriptedAdapter):
    """Adapter that breaks its own error boundary."""

    async def call(self, request, model):
        self.calls.append((self.provider_id, model))
        raise RuntimeError("bug in adapter")


def make_request(question: str, subject_name: str = "Physics") -> TutorRequest:
    return TutorRequest(
        subject_name=subject_name,
        subject=Subject.from_name(subject_name),
        messages=(ChatMessage(role="user", content=question),),
    )


class TestProviderOrdering:
    """Tests for the TRY_PROVIDER -> DONE path."""

    @pytest.mark.asyncio
    async def test_first_provider_wins(self):
        calls = []
        first = ScriptedAdapter("alpha", {"a1": "alpha reply"}, calls=calls)
        second = ScriptedAdapter("beta", {"b1": "beta reply"}, calls=calls)

        result = await FallbackOrchestrator([first, second]).resolve(make_request("what is energy"))

        assert result.origin == ResponseOrigin.PROVIDER
        assert result.reply == "alpha reply"
        assert calls == [("alpha", "a1")]

    @pytest.mark.asyncio
    async def test_failing_provider_falls_through(self, caplog):
        """Test A fails, B succeeds -> B answers and A was tried first."""
        calls = []
        first = ScriptedAdapter("alpha", {"a1": ValueError("bad json")}, calls=calls)
        second = ScriptedAdapter("beta", {"b1": "beta reply"}, calls=calls)

        with caplog.at_level(logging.INFO, logger="bearbrain_api"):
            result = await FallbackOrchestrator([first, second]).resolve(make_request("what is energy"))

        assert result.provider_id == "beta"
        assert result.model_id == "b1"
        assert calls == [("alpha", "a1"), ("beta", "b1")]

        alpha_failed = caplog.text.index("alpha/a1 failed")
        beta_answered = caplog.text.index("beta/b1 answered")
        assert alpha_failed < beta_answered

    @pytest.mark.asyncio
    async def test_models_tried_in_order_before_next_provider(self):
        """Test every model of a provider is tried before moving on."""
        calls = []
        gemini = ScriptedAdapter(
            "gemini",
            {"flash": "", "pro": RuntimeError("503"), "latest": "latest reply"},
            calls=calls,
        )
        other = ScriptedAdapter("other", {"o1": "other reply"}, calls=calls)

        result = await FallbackOrchestrator([gemini, other]).resolve(make_request("what is energy"))

        assert result.reply == "latest reply"
        assert result.model_id == "latest"
        assert calls == [("gemini", "flash"), ("gemini", "pro"), ("gemini", "latest")]

    @pytest.mark.asyncio
    async def test_unconfigured_provider_skipped(self):
        calls = []
        disabled = ScriptedAdapter("alpha", {"a1": "never"}, api_key="", calls=calls)
        enabled = ScriptedAdapter("beta", {"b1": "beta reply"}, calls=calls)
        orchestrator = FallbackOrchestrator([disabled, enabled])

        result = await orchestrator.resolve(make_request("what is energy"))

        assert result.provider_id == "beta"
        assert calls == [("beta", "b1")]
        assert list(orchestrator.attempts()) == [(enabled, "b1")]


class TestFallbackGuarantee:
    """Tests for the EXHAUSTED path and totality."""

    @pytest.mark.asyncio
    async def test_no_providers_configured(self):
        """Test the Physics scenario with no providers falls back."""
        disabled = ScriptedAdapter("alpha", {"a1": "never"}, api_key="")

        result = await FallbackOrchestrator([disabled]).resolve(
            make_request("Explain Newton's second law")
        )

        assert result.origin == ResponseOrigin.FALLBACK
        assert result.provider_id is None
        assert "Physics" in result.reply
        for tip in STUDY_TIPS[Subject.PHYSICS]:
            assert tip in result.reply

    @pytest.mark.asyncio
    async def test_all_providers_fail(self):
        calls = []
        first = ScriptedAdapter("alpha", {"a1": KeyError("choices")}, calls=calls)
        second = ScriptedAdapter("beta", {"b1": "", "b2": TypeError("x")}, calls=calls)

        result = await FallbackOrchestrator([first, second]).resolve(make_request("what is energy"))

        assert result.origin == ResponseOrigin.FALLBACK
        assert result.reply.strip()
        assert len(calls) == 3

    @pytest.mark.asyncio
    async def test_adapter_raising_is_contained(self):
        """Test an adapter that raises past its boundary does not break resolve."""
        calls = []
        broken = ExplodingAdapter("broken", {"x": "unused"}, calls=calls)
        working = ScriptedAdapter("beta", {"b1": "beta reply"}, calls=calls)

        result = await FallbackOrchestrator([broken, working]).resolve(make_request("what is energy"))

        assert result.provider_id == "beta"
        assert calls == [("broken", "x"), ("beta", "b1")]

    @pytest.mark.asyncio
    async def test_slow_provider_times_out(self):
        """Test an attempt exceeding the timeout is abandoned."""
        slow = ScriptedAdapter("slow", {"s1": "hang"})
        fast = ScriptedAdapter("fast", {"f1": "fast reply"})

        result = await FallbackOrchestrator([slow, fast], timeout=0.05).resolve(
            make_request("what is energy")
        )

        assert result.provider_id == "fast"

    @pytest.mark.asyncio
    async def test_empty_provider_list(self):
        result = await FallbackOrchestrator([]).resolve(make_request("what is energy"))
        assert result.origin == ResponseOrigin.FALLBACK


class TestRejection:
    """Tests for the REJECTED path."""

    @pytest.mark.asyncio
    async def test_off_topic_never_reaches_providers(self):
        calls = []
        adapter = ScriptedAdapter("alpha", {"a1": "reply"}, calls=calls)

        result = await FallbackOrchestrator([adapter]).resolve(make_request("pizza toppings", "Math"))

        assert result.origin == ResponseOrigin.RESTRICTED
        assert "help with Math questions" in result.reply
        assert calls == []

    @pytest.mark.asyncio
    async def test_unknown_subject_is_routed(self):
        adapter = ScriptedAdapter("alpha", {"a1": "reply"})
        result = await FallbackOrchestrator([adapter]).resolve(make_request("pizza toppings", "General"))
        assert result.origin == ResponseOrigin.PROVIDER
