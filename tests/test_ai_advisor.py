import asyncio
import time
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from ai_advisor import ZoningAdvisor, AdvisorResponse
from backend.errors import StoreUnavailableError
from tests.conftest import CITY_CENTRE


def groq_reply(text):
    message = SimpleNamespace(content=text)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)], usage=SimpleNamespace(total_tokens=42))


@pytest.fixture
def groq_client():
    client = MagicMock()
    client.chat.completions.create.return_value = groq_reply("CONDITIONAL - Hotels need OSC approval.")
    return client


@pytest.fixture
def advisor(service, sqlite_cache, groq_client):
    return ZoningAdvisor(service, cache=sqlite_cache, client=groq_client, timeout=5)


def test_answer_includes_footer_and_metadata(advisor, groq_client):
    result = advisor.ask("Can I build a hotel?", *CITY_CENTRE)

    assert isinstance(result, AdvisorResponse)
    assert result.response.startswith("CONDITIONAL - Hotels need OSC approval.")
    assert "📍 Location: -1.9441°, 30.0619°" in result.response
    assert "Article 6.1, Table 6.1" in result.response
    assert result.metadata['zone_code'] == "R1"
    assert result.metadata['language'] == "en"
    assert result.cached is False
    assert result.context.regulation.full_name == "Low Density Residential Zone"

    prompt = groq_client.chat.completions.create.call_args.kwargs['messages'][1]['content']
    assert "Low Density Residential Zone" in prompt
    assert "Can I build a hotel?" in prompt


def test_second_question_is_served_from_cache(advisor, groq_client):
    first = advisor.ask("Can I build a hotel?", *CITY_CENTRE)
    second = advisor.ask("Can I build a hotel?", -1.94412, 30.06193)

    assert second.cached is True
    assert second.response == first.response
    assert groq_client.chat.completions.create.call_count == 1


def test_language_footer(advisor):
    result = advisor.ask("Nshobora kubaka hoteli?", *CITY_CENTRE, language='rw')
    assert "📍 Aho hantu:" in result.response
    assert result.metadata['language'] == 'rw'


def test_unsupported_language_falls_back_to_english(advisor):
    result = advisor.ask("Kann ich ein Hotel bauen?", *CITY_CENTRE, language='de')
    assert result.metadata['language'] == 'en'
    assert "📍 Location:" in result.response


def test_outside_mapped_area(advisor, groq_client):
    result = advisor.ask("Can I build here?", 0.0, 0.0)

    assert result.metadata['fallback'] is True
    assert result.metadata['error'] == 'location_outside_zones'
    assert "No zoning data found for this location." in result.response
    assert result.context.zone_data is None
    groq_client.chat.completions.create.assert_not_called()


def test_collaborator_failure_returns_fallback(advisor, groq_client, sqlite_cache):
    groq_client.chat.completions.create.side_effect = RuntimeError("rate limited")

    result = advisor.ask("Can I build a hotel?", *CITY_CENTRE, language='fr')

    assert result.metadata['fallback'] is True
    assert "rate limited" in result.metadata['error']
    assert "Low Density Residential Zone (R1)" in result.response
    assert "Impossible de générer" in result.response
    assert result.context.zone_code == "R1"
    assert sqlite_cache.backend.count() == 0


def test_missing_api_key_uses_fallback(service, sqlite_cache, monkeypatch):
    monkeypatch.setattr("config.Config.GROQ_API_KEY", "")
    advisor = ZoningAdvisor(service, cache=sqlite_cache)

    result = advisor.ask("Can I build a hotel?", *CITY_CENTRE)
    assert result.metadata['fallback'] is True
    assert "Max FAR: 0.5" in result.response


def test_unknown_zone_label_still_answers(advisor, groq_client):
    result = advisor.ask("What can I build?", -1.9275, 30.0825)

    assert result.context.regulation is None
    assert result.metadata['authoritative'] is False
    prompt = groq_client.chat.completions.create.call_args.kwargs['messages'][1]['content']
    assert "ZONE: Special Economic Zone" in prompt


def test_works_without_cache(service, groq_client):
    advisor = ZoningAdvisor(service, client=groq_client)
    assert advisor.cache is None
    assert advisor.ask("Can I build a hotel?", *CITY_CENTRE).cached is False


def test_store_failure_propagates(groq_client):
    service = MagicMock()
    service.cache = None
    service.resolve_location.side_effect = StoreUnavailableError("not loaded")
    advisor = ZoningAdvisor(service, client=groq_client)

    with pytest.raises(StoreUnavailableError):
        advisor.ask("Can I build a hotel?", *CITY_CENTRE)


def test_async_ask_uses_cache(advisor, groq_client):
    async def scenario():
        first = await advisor.aask("Can I build a hotel?", *CITY_CENTRE, timeout=5)
        second = await advisor.aask("Can I build a hotel?", *CITY_CENTRE, timeout=5)
        return first, second

    first, second = asyncio.run(scenario())
    assert first.cached is False
    assert second.cached is True
    assert groq_client.chat.completions.create.call_count == 1


def test_async_collaborator_timeout_returns_fallback(service, groq_client):
    def slow_create(**kwargs):
        time.sleep(0.5)
        return groq_reply("too late")

    groq_client.chat.completions.create.side_effect = slow_create
    advisor = ZoningAdvisor(service, client=groq_client, timeout=0.05)

    result = asyncio.run(advisor.aask("Can I build a hotel?", *CITY_CENTRE))
    assert result.metadata['fallback'] is True
    assert "timed out" in result.metadata['error']
    assert result.context.zone_code == "R1"
