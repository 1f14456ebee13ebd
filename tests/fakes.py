"""Fake vendor SDK clients and shared test constants."""

import inspect
from functools import reduce
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from promptlab.services.model_registry import ProviderName

USER_ID = "user-1"

STORED_KEYS = {
    ProviderName.OPENAI: "sk-openai-test",
    ProviderName.ANTHROPIC: "sk-ant-test",
    ProviderName.GOOGLE: "google-test-key",
}


def openai_completion(text):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=text))])


def anthropic_message(text):
    return SimpleNamespace(content=[SimpleNamespace(type="text", text=text)])


def gemini_response(text):
    return SimpleNamespace(text=text)


class FakeVendor:
    """Stands in for an SDK client class.

    Calling it like `AsyncOpenAI(api_key=...)` returns an AsyncMock client
    whose completion method records kwargs and answers with `reply(kwargs)`.
    `reply` may return text, raise, or be a coroutine function. Every client
    handed out is kept in `clients`; `sync_close` makes `close()` a plain method.
    """

    def __init__(self, method_path, envelope, user_turn, reply=None, sync_close=False):
        self.method_path = method_path
        self.envelope = envelope
        self.user_turn = user_turn
        self.reply = reply or (lambda kwargs: f"reply to: {self.user_turn(kwargs)}")
        self.api_keys = []
        self.calls = []
        self.clients = []
        self.sync_close = sync_close

    def __call__(self, api_key):
        self.api_keys.append(api_key)
        client = AsyncMock()
        if self.sync_close:
            client.close = MagicMock()
        self.clients.append(client)

        async def complete(**kwargs):
            self.calls.append(kwargs)
            result = self.reply(kwargs)
            if inspect.isawaitable(result):
                result = await result
            return self.envelope(result)

        method = reduce(getattr, self.method_path, client)
        method.side_effect = complete
        return client


def make_vendors():
    return {
        ProviderName.OPENAI: FakeVendor(
            ("chat", "completions", "create"),
            openai_completion,
            lambda kwargs: kwargs["messages"][-1]["content"],
        ),
        ProviderName.ANTHROPIC: FakeVendor(
            ("messages", "create"),
            anthropic_message,
            lambda kwargs: kwargs["messages"][-1]["content"],
        ),
        ProviderName.GOOGLE: FakeVendor(
            ("aio", "models", "generate_content"),
            gemini_response,
            lambda kwargs: kwargs["contents"],
            sync_close=True,
        ),
    }
