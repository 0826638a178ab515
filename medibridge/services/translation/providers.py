# =============================================================================
# services/translation/providers.py
# =============================================================================

import asyncio
import logging
from typing import Any, Dict, List, Optional

import httpx

from ...core.exceptions import (
    ProviderError,
    ProviderInvalidResponse,
    ProviderNetworkError,
    ProviderTimeout,
)
from ...models.translation import (
    EndpointKind,
    Failure,
    FailureReason,
    ProviderDescriptor,
    Success,
    TranslationOutcome,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 5000

_FAILURE_REASONS = {
    ProviderTimeout: FailureReason.TIMEOUT,
    ProviderNetworkError: FailureReason.NETWORK_ERROR,
    ProviderInvalidResponse: FailureReason.INVALID_RESPONSE,
}


class ProviderAdapter:
    """
    Wraps one remote translation endpoint behind a common contract.

    Subclasses set ``endpoint_kind`` and implement ``parse_response``;
    ``build_request`` covers the JSON body and query string shapes.
    ``translate`` never raises for timeouts, transport errors or bad
    payloads, it returns a Failure outcome instead.
    """

    endpoint_kind: EndpointKind = EndpointKind.JSON_BODY

    def __init__(self, name: str, endpoint: str, source_language: str = "en",
                 priority: int = 0, client: Optional[httpx.AsyncClient] = None):
        self.name = name
        self.endpoint = endpoint
        self.source_language = source_language
        self.priority = priority
        self._client = client

    @property
    def descriptor(self) -> ProviderDescriptor:
        return ProviderDescriptor(self.name, self.endpoint_kind, self.priority)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, priority={self.priority})"

    def build_request(self, text: str, target_language: str) -> Dict[str, Any]:
        """Keyword arguments for ``httpx.AsyncClient.request``"""
        if self.endpoint_kind == EndpointKind.QUERY_STRING:
            return {
                "method": "GET",
                "url": self.endpoint,
                "params": {"q": text, "langpair": f"{self.source_language}|{target_language}"},
            }
        return {
            "method": "POST",
            "url": self.endpoint,
            "headers": {"Content-Type": "application/json"},
            "json": {
                "q": text,
                "source": self.source_language,
                "target": target_language,
                "format": "text",
            },
        }

    def parse_response(self, payload: Any) -> str:
        """Extract the translated text from a decoded payload; subclasses must override"""
        raise NotImplementedError(f"{type(self).__name__} must implement parse_response")

    async def translate(self, text: str, target_language: str,
                        timeout_ms: int = DEFAULT_TIMEOUT_MS) -> TranslationOutcome:
        timeout = timeout_ms / 1000
        try:
            # wait_for cancels the in-flight request, so a late reply is dropped
            translated = await asyncio.wait_for(
                self._exchange(text, target_language, timeout), timeout=timeout
            )
        except asyncio.TimeoutError:
            return self._failure(ProviderTimeout(f"no response within {timeout_ms} ms", self.name))
        except ProviderError as e:
            return self._failure(e)
        except Exception as e:
            logger.exception(f"❌ Provider {self.name} raised unexpectedly")
            return self._failure(ProviderNetworkError(f"{type(e).__name__}: {e}", self.name))

        logger.info(f"✅ {self.name} translated to '{target_language}'")
        return Success(provider=self.name, translated_text=translated)

    async def _exchange(self, text: str, target_language: str, timeout: float) -> str:
        request_kwargs = self.build_request(text, target_language)
        try:
            if self._client is not None:
                response = await self._client.request(timeout=timeout, **request_kwargs)
            else:
                async with httpx.AsyncClient(timeout=timeout) as client:
                    response = await client.request(**request_kwargs)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise ProviderTimeout(f"transport timeout: {e}", self.name)
        except httpx.HTTPStatusError as e:
            raise ProviderNetworkError(
                f"HTTP {e.response.status_code}", self.name, status_code=e.response.status_code
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise ProviderNetworkError(f"{type(e).__name__}: {e}", self.name)

        try:
            payload = response.json()
        except ValueError:
            raise ProviderInvalidResponse("response body is not JSON", self.name)

        try:
            translated = self.parse_response(payload)
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            raise ProviderInvalidResponse(f"unexpected response shape: {e!r}", self.name)

        if not isinstance(translated, str) or not translated.strip():
            raise ProviderInvalidResponse("empty translation", self.name)
        return translated

    def _failure(self, error: ProviderError) -> Failure:
        reason = _FAILURE_REASONS.get(type(error), FailureReason.NETWORK_ERROR)
        logger.warning(f"⚠️ Provider {self.name} failed ({reason.value}): {error.message}")
        return Failure(provider=self.name, reason=reason, detail=error.message)


class LibreTranslateProvider(ProviderAdapter):
    """LibreTranslate: JSON body, ``translatedText`` at top level"""

    endpoint_kind = EndpointKind.JSON_BODY

    def __init__(self, name: str, endpoint: str, source_language: str = "en",
                 priority: int = 0, client: Optional[httpx.AsyncClient] = None,
                 api_key: Optional[str] = None):
        super().__init__(name, endpoint, source_language, priority, client)
        self.api_key = api_key

    def build_request(self, text: str, target_language: str) -> Dict[str, Any]:
        request_kwargs = super().build_request(text, target_language)
        if self.api_key:
            request_kwargs["json"]["api_key"] = self.api_key
        return request_kwargs

    def parse_response(self, payload: Any) -> str:
        if "error" in payload:
            raise ProviderInvalidResponse(str(payload["error"]), self.name)
        return payload["translatedText"]


class MyMemoryProvider(ProviderAdapter):
    """MyMemory: query string, ``responseData.translatedText`` nested"""

    endpoint_kind = EndpointKind.QUERY_STRING

    def __init__(self, name: str, endpoint: str, source_language: str = "en",
                 priority: int = 0, client: Optional[httpx.AsyncClient] = None,
                 email: Optional[str] = None):
        super().__init__(name, endpoint, source_language, priority, client)
        self.email = email

    def build_request(self, text: str, target_language: str) -> Dict[str, Any]:
        request_kwargs = super().build_request(text, target_language)
        if self.email:
            request_kwargs["params"]["de"] = self.email
        return request_kwargs

    def parse_response(self, payload: Any) -> str:
        status = payload.get("responseStatus", 200)
        if str(status) != "200":
            details = payload.get("responseDetails") or f"status {status}"
            raise ProviderInvalidResponse(str(details), self.name)
        return payload["responseData"]["translatedText"]


class HostedModelProvider(ProviderAdapter):
    """Hosted translation model behind a bearer token (Hugging Face Inference style)"""

    endpoint_kind = EndpointKind.HOSTED_MODEL

    def __init__(self, name: str, endpoint: str, api_token: str, source_language: str = "en",
                 priority: int = 0, client: Optional[httpx.AsyncClient] = None):
        super().__init__(name, endpoint, source_language, priority, client)
        self.api_token = api_token

    def build_request(self, text: str, target_language: str) -> Dict[str, Any]:
        url = self.endpoint.format(source=self.source_language, target=target_language)
        return {
            "method": "POST",
            "url": url,
            "headers": {
                "Authorization": f"Bearer {self.api_token}",
                "Content-Type": "application/json",
            },
            "json": {"inputs": text},
        }

    def parse_response(self, payload: Any) -> str:
        if isinstance(payload, dict):
            raise ProviderInvalidResponse(str(payload.get("error", "unexpected object")), self.name)
        return payload[0]["translation_text"]


def build_providers(settings, client: Optional[httpx.AsyncClient] = None) -> List[ProviderAdapter]:
    """Static fallback chain, highest priority first"""
    source = settings.source_language
    providers: List[ProviderAdapter] = []

    if settings.huggingface_api_token:
        providers.append(HostedModelProvider(
            "hosted-model", settings.hosted_model_url_template,
            api_token=settings.huggingface_api_token, source_language=source, client=client,
        ))
    else:
        logger.info("🔒 No hosted model token configured, skipping hosted-model provider")

    if settings.libretranslate_url:
        providers.append(LibreTranslateProvider(
            "libretranslate", settings.libretranslate_url, source_language=source,
            client=client, api_key=settings.libretranslate_api_key,
        ))
    if settings.libretranslate_mirror_url:
        providers.append(LibreTranslateProvider(
            "libretranslate-mirror", settings.libretranslate_mirror_url, source_language=source,
            client=client, api_key=settings.libretranslate_api_key,
        ))
    if settings.mymemory_url:
        providers.append(MyMemoryProvider(
            "mymemory", settings.mymemory_url, source_language=source,
            client=client, email=settings.mymemory_email,
        ))

    for priority, provider in enumerate(providers):
        provider.priority = priority

    logger.info(f"🌐 Provider chain: {[p.name for p in providers]}")
    return providers
