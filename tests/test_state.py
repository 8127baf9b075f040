import asyncio

import pytest
from unittest.mock import AsyncMock

from truthcheck.exceptions import LLMException, MalformedResponseException, MALFORMED_RESPONSE_MESSAGE
from truthcheck.models import AnalysisResult, Classification
from truthcheck.ui.state import (
    UNEXPECTED_ERROR_MESSAGE,
    ClaimSession,
    classification_label,
    confidence_color,
    share_text,
)
from truthcheck.ui.translations import get_translations


def make_client(result=None, side_effect=None):
    client = AsyncMock()
    client.analyze = AsyncMock(return_value=result, side_effect=side_effect)
    return client


@pytest.fixture
def result():
    return AnalysisResult(classification=Classification.REAL, reasoning="Confirmed by several sources.")


class TestClaimInput:
    def test_bare_url_raises_alert(self):
        session = ClaimSession()
        session.set_claim("  https://example.com/news/story  ")
        assert session.url_alert == "https://example.com/news/story"

    @pytest.mark.parametrize("text", [
        "Check https://example.com please",
        "ftp://example.com/file",
        "example.com",
        "",
    ])
    def test_no_alert_for_other_text(self, text):
        session = ClaimSession()
        session.set_claim(text)
        assert session.url_alert is None

    def test_alert_cleared_when_text_changes(self):
        session = ClaimSession()
        session.set_claim("http://example.com")
        session.set_claim("http://example.com is a scam site")
        assert session.url_alert is None

    def test_use_example_clears_alert(self):
        session = ClaimSession()
        session.set_claim("http://example.com")
        session.use_example("Bananas are berries.")
        assert session.claim == "Bananas are berries."
        assert session.url_alert is None

    def test_dismiss_alert(self):
        session = ClaimSession()
        session.set_claim("http://example.com")
        session.dismiss_url_alert()
        assert session.url_alert is None
        assert session.claim == "http://example.com"


@pytest.mark.asyncio
class TestSubmit:
    async def test_success(self, result):
        session = ClaimSession(claim="Bananas are berries.")
        client = make_client(result=result)

        assert await session.submit(client) is True

        client.analyze.assert_awaited_once_with("Bananas are berries.")
        assert session.result == result
        assert session.error is None
        assert session.loading is False
        assert session.view == "result"

    async def test_blank_claim_is_ignored(self):
        session = ClaimSession(claim="   ")
        client = make_client()

        assert await session.submit(client) is False
        client.analyze.assert_not_called()
        assert session.view == "prompt"

    async def test_submit_while_loading_is_noop(self, result):
        session = ClaimSession(claim="Bananas are berries.")
        started = asyncio.Event()
        release = asyncio.Event()

        async def slow_analyze(claim):
            started.set()
            await release.wait()
            return result

        client = make_client(side_effect=slow_analyze)
        first = asyncio.ensure_future(session.submit(client))
        await started.wait()

        assert session.view == "loading"
        assert await session.submit(client) is False

        release.set()
        assert await first is True
        assert client.analyze.await_count == 1
        assert session.view == "result"

    async def test_error_clears_previous_result(self, result):
        session = ClaimSession(claim="Bananas are berries.")
        await session.submit(make_client(result=result))

        await session.submit(make_client(side_effect=MalformedResponseException("bad")))

        assert session.result is None
        assert session.error == MALFORMED_RESPONSE_MESSAGE
        assert session.loading is False
        assert session.view == "error"

    async def test_new_result_clears_previous_error(self, result):
        session = ClaimSession(claim="Bananas are berries.")
        await session.submit(make_client(side_effect=LLMException("timeout")))
        assert session.error == "Failed to get a response from the AI: timeout"

        await session.submit(make_client(result=result))

        assert session.error is None
        assert session.view == "result"

    async def test_unexpected_error(self):
        session = ClaimSession(claim="Bananas are berries.")
        await session.submit(make_client(side_effect=RuntimeError()))

        assert session.error == UNEXPECTED_ERROR_MESSAGE
        assert session.loading is False


class TestDisplayHelpers:
    def test_classification_labels(self):
        t = get_translations("en")
        assert classification_label(Classification.REAL, t) == "Likely Real"
        assert classification_label(Classification.FAKE, t) == "Likely Fake"
        assert classification_label(Classification.UNCERTAIN, t) == "Uncertain"

    @pytest.mark.parametrize("score,color", [(100, "green"), (76, "green"), (75, "orange"), (41, "orange"), (40, "red"), (0, "red")])
    def test_confidence_color(self, score, color):
        assert confidence_color(score) == color

    def test_share_text(self, result):
        assert share_text(result, get_translations("en")) == (
            'TruthCheck AI classified this as "Likely Real": Confirmed by several sources.'
        )
