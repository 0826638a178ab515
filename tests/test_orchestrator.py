"""Tests for the fallback orchestrator."""

import asyncio
import json

import httpx
import pytest

from medibridge.core.exceptions import ValidationError
from medibridge.models.translation import Failure, FailureReason, Success, TranslationRequest
from medibridge.services.translation import (
    Glossary,
    HostedModelProvider,
    LibreTranslateProvider,
    TranslationOrchestrator,
)

from tests.helpers import LIBRE_URL, RecordingTransport, build_chain, run_with_transport

SCENARIO = TranslationRequest(text="I have a headache and fever", target_language="es")


def failing(request):
    return httpx.Response(503, json={"error": "unavailable"})


def orchestrate(glossary, transport, request=SCENARIO, timeout_ms=5000):
    async def call(client):
        orchestrator = TranslationOrchestrator(glossary, build_chain(client), timeout_ms=timeout_ms)
        return await orchestrator.orchestrate(request)

    return run_with_transport(transport, call)


class TestPreprocess:
    """Test case folding and the glossary pass."""

    def test_lowercases_then_substitutes(self, glossary):
        orchestrator = TranslationOrchestrator(glossary, [])
        assert orchestrator.preprocess("I have a HEADACHE and Fever") == "i have a cefalea and fiebre"

    def test_provider_receives_preprocessed_text(self, glossary):
        transport = RecordingTransport({
            "libre.test": lambda request: httpx.Response(200, json={"translatedText": "Tengo cefalea y fiebre"}),
            "mymemory.test": failing,
        })
        orchestrate(glossary, transport)

        sent = json.loads(transport.requests[0].content)
        assert sent["q"] == "i have a cefalea and fiebre"
        assert sent["target"] == "es"


class TestProviderTrial:
    """Test priority-ordered provider trial."""

    def test_first_provider_success_stops_the_chain(self, glossary):
        transport = RecordingTransport({
            "libre.test": lambda request: httpx.Response(200, json={"translatedText": "Tengo cefalea y fiebre"}),
            "mymemory.test": failing,
        })
        result = orchestrate(glossary, transport)

        assert result.translated_text == "Tengo cefalea y fiebre"
        assert result.used_fallback is False
        assert result.provider == "libretranslate"
        assert transport.calls == {"libre.test": 1, "mymemory.test": 0}
        assert result.attempts == [Success("libretranslate", "Tengo cefalea y fiebre")]

    def test_timeout_moves_on_to_next_provider(self, glossary):
        async def slow(request):
            await asyncio.sleep(6)
            return httpx.Response(200, json={"translatedText": "too late"})

        transport = RecordingTransport({
            "libre.test": slow,
            "mymemory.test": lambda request: httpx.Response(200, json={
                "responseData": {"translatedText": "X"},
                "responseStatus": 200,
            }),
        })
        result = orchestrate(glossary, transport, timeout_ms=50)

        assert result.translated_text == "X"
        assert result.used_fallback is False
        assert result.provider == "mymemory"
        assert transport.calls == {"libre.test": 1, "mymemory.test": 1}
        assert result.attempts[0].reason == FailureReason.TIMEOUT

    def test_invalid_response_moves_on(self, glossary):
        transport = RecordingTransport({
            "libre.test": lambda request: httpx.Response(200, json={"unexpected": True}),
            "mymemory.test": lambda request: httpx.Response(200, json={
                "responseData": {"translatedText": "Tengo cefalea"},
            }),
        })
        result = orchestrate(glossary, transport)

        assert result.translated_text == "Tengo cefalea"
        assert [type(a) for a in result.attempts] == [Failure, Success]

    def test_each_provider_tried_once(self, glossary):
        transport = RecordingTransport({"libre.test": failing, "mymemory.test": failing})
        orchestrate(glossary, transport)
        assert transport.calls == {"libre.test": 1, "mymemory.test": 1}

    def test_unexpected_provider_error_does_not_stop_the_chain(self, glossary):
        def exploding(request):
            raise RuntimeError("transport exploded")

        transport = RecordingTransport({
            "libre.test": exploding,
            "mymemory.test": lambda request: httpx.Response(200, json={
                "responseData": {"translatedText": "X"},
            }),
        })
        result = orchestrate(glossary, transport)

        assert result.translated_text == "X"
        assert result.provider == "mymemory"
        assert result.attempts[0].reason == FailureReason.NETWORK_ERROR

    def test_invalid_url_from_hosted_model_falls_through(self, glossary):
        transport = RecordingTransport({
            "models.test": lambda request: httpx.Response(200, json=[{"translation_text": "nope"}]),
            "libre.test": lambda request: httpx.Response(200, json={"translatedText": "hola"}),
        })

        async def call(client):
            providers = [
                HostedModelProvider(
                    "hosted-model", "https://models.test/opus-mt-{source}-{target}",
                    api_token="secret-token", client=client,
                ),
                LibreTranslateProvider("libretranslate", LIBRE_URL, priority=1, client=client),
            ]
            orchestrator = TranslationOrchestrator(glossary, providers)
            return await orchestrator.orchestrate(TranslationRequest("fever", "es\x01"))

        result = run_with_transport(transport, call)

        assert result.translated_text == "hola"
        assert result.provider == "libretranslate"
        assert transport.calls == {"models.test": 0, "libre.test": 1}


class TestExhausted:
    """Test the word-level glossary fallback."""

    def test_all_providers_fail_scenario(self, glossary):
        transport = RecordingTransport({"libre.test": failing, "mymemory.test": failing})
        result = orchestrate(glossary, transport)

        assert result.translated_text == "i have a cefalea and fiebre"
        assert result.used_fallback is True
        assert result.provider is None
        assert [a.reason for a in result.attempts] == [
            FailureReason.NETWORK_ERROR, FailureReason.NETWORK_ERROR
        ]

    def test_no_providers_configured(self, glossary):
        orchestrator = TranslationOrchestrator(glossary, [])
        result = asyncio.run(orchestrator.orchestrate(SCENARIO))
        assert result.translated_text == "i have a cefalea and fiebre"
        assert result.used_fallback is True

    def test_word_fallback_normalises_whitespace(self, glossary):
        orchestrator = TranslationOrchestrator(glossary, [])
        assert orchestrator.word_fallback("  fever\tand\n\nheadache  ") == "fiebre and cefalea"

    def test_word_fallback_matches_whole_words_only(self, glossary):
        orchestrator = TranslationOrchestrator(glossary, [])
        assert orchestrator.word_fallback("fever, feverish fever") == "fever, feverish fiebre"

    def test_multi_word_terms_do_not_match_in_word_fallback(self):
        orchestrator = TranslationOrchestrator(Glossary.from_mapping({"chest pain": "dolor de pecho"}), [])
        assert orchestrator.word_fallback("chest pain") == "chest pain"
        # The substring pass still handles them
        assert orchestrator.preprocess("Chest pain") == "dolor de pecho"

    def test_fallback_never_empty_for_non_empty_input(self, glossary):
        orchestrator = TranslationOrchestrator(glossary, [])
        request = TranslationRequest(text="?", target_language="es")
        result = asyncio.run(orchestrator.orchestrate(request))
        assert result.translated_text == "?"


class TestRequestValidation:
    """Test TranslationRequest construction."""

    @pytest.mark.parametrize("text,target", [
        ("", "es"),
        ("   ", "es"),
        (None, "es"),
        ("fever", ""),
        ("fever", None),
        ("fever", "  "),
    ])
    def test_invalid_requests(self, text, target):
        with pytest.raises(ValidationError):
            TranslationRequest(text=text, target_language=target)

    def test_target_language_normalised(self):
        assert TranslationRequest(text="fever", target_language=" ES ").target_language == "es"


class TestDegradedText:
    """Test the best-effort string used after an internal fault."""

    def test_returns_preprocessed_text(self, glossary):
        orchestrator = TranslationOrchestrator(glossary, [])
        assert orchestrator.degraded_text("Fever") == "fiebre"

    def test_falls_back_to_original_text(self):
        class BrokenGlossary:
            def substitute(self, text):
                raise RuntimeError("corrupt glossary")

        orchestrator = TranslationOrchestrator(BrokenGlossary(), [])
        assert orchestrator.degraded_text("Fever") == "Fever"
