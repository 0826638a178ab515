"""Mock transport helpers shared by the provider and orchestrator tests."""

import asyncio

import httpx

from medibridge.services.translation import LibreTranslateProvider, MyMemoryProvider

LIBRE_URL = "https://libre.test/translate"
MIRROR_URL = "https://mirror.test/translate"
MYMEMORY_URL = "https://mymemory.test/get"


class RecordingTransport:
    """Routes requests by host to per-host handlers and counts calls."""

    def __init__(self, handlers):
        self.handlers = handlers
        self.calls = {host: 0 for host in handlers}
        self.requests = []

    async def __call__(self, request: httpx.Request):
        host = request.url.host
        self.calls[host] = self.calls.get(host, 0) + 1
        self.requests.append(request)
        handler = self.handlers[host]
        response = handler(request)
        if asyncio.iscoroutine(response):
            response = await response
        return response


def build_chain(client):
    """LibreTranslate first, MyMemory second, both on a shared mock client."""
    return [
        LibreTranslateProvider("libretranslate", LIBRE_URL, priority=0, client=client),
        MyMemoryProvider("mymemory", MYMEMORY_URL, priority=1, client=client),
    ]


def run_with_transport(transport, make_coro):
    """Run ``make_coro(client)`` against a MockTransport-backed client."""

    async def runner():
        async with httpx.AsyncClient(transport=httpx.MockTransport(transport)) as client:
            return await make_coro(client)

    return asyncio.run(runner())
