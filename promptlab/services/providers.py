"""
Vendor-specific calls behind one contract.

Each handler builds a client from the caller's decrypted key, sends the
system prompt as the system instruction and the message as the only user
turn, and pulls plain text out of that vendor's response envelope.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

import anthropic
import httpx
import openai
from anthropic import AsyncAnthropic
from google import genai
from google.genai import errors as genai_errors
from google.genai import types as genai_types
from openai import AsyncOpenAI

from promptlab.core.config import ANTHROPIC_MAX_TOKENS
from promptlab.core.exceptions import EmptyResponseError, ProviderError
from promptlab.services.model_registry import ProviderName

logger = logging.getLogger(__name__)

JSON_OBJECT_FORMAT = {"type": "json_object"}


@dataclass
class GenerationRequest:
    model: str
    message: str
    system_prompt: str
    temperature: float
    # Only set when structured JSON output is wanted
    response_format: Optional[dict] = None


class ProviderHandler:
    provider: ProviderName
    default_client_factory: Callable = None
    vendor_errors: tuple = ()

    def __init__(self, client_factory: Optional[Callable] = None):
        self.client_factory = client_factory or self.default_client_factory

    async def generate(self, api_key: str, request: GenerationRequest) -> str:
        client = self.client_factory(api_key=api_key)
        try:
            text = await self._complete(client, request)
        except self.vendor_errors as e:
            logger.error(f"{self.provider.value} call failed for model {request.model}: {e}")
            raise ProviderError(f"{self.provider.value} error: {e}") from e
        finally:
            await self._close(client)

        if not text:
            logger.error(f"{self.provider.value} returned no text for model {request.model}")
            raise EmptyResponseError(f"Empty response from {request.model}")
        return text

    async def _complete(self, client, request: GenerationRequest) -> Optional[str]:
        raise NotImplementedError

    async def _close(self, client):
        await client.close()


class OpenAIHandler(ProviderHandler):
    provider = ProviderName.OPENAI
    default_client_factory = AsyncOpenAI
    vendor_errors = (openai.OpenAIError,)

    async def _complete(self, client, request):
        kwargs = {}
        if request.response_format:
            kwargs["response_format"] = request.response_format

        response = await client.chat.completions.create(
            model=request.model,
            messages=[
                {"role": "system", "content": request.system_prompt},
                {"role": "user", "content": request.message},
            ],
            temperature=request.temperature,
            **kwargs,
        )
        if not response.choices:
            return None
        return response.choices[0].message.content


class AnthropicHandler(ProviderHandler):
    provider = ProviderName.ANTHROPIC
    default_client_factory = AsyncAnthropic
    vendor_errors = (anthropic.AnthropicError,)

    async def _complete(self, client, request):
        # No response_format on this API; the JSON instruction lives in the prompt
        message = await client.messages.create(
            model=request.model,
            system=request.system_prompt,
            max_tokens=ANTHROPIC_MAX_TOKENS,
            temperature=request.temperature,
            messages=[{"role": "user", "content": request.message}],
        )
        for block in message.content or []:
            if getattr(block, "type", None) == "text":
                return block.text
        return None


class GoogleHandler(ProviderHandler):
    provider = ProviderName.GOOGLE
    default_client_factory = genai.Client
    # The SDK lets httpx transport failures through unwrapped
    vendor_errors = (genai_errors.APIError, httpx.HTTPError)

    async def _complete(self, client, request):
        config = genai_types.GenerateContentConfig(
            system_instruction=request.system_prompt,
            temperature=request.temperature,
            response_mime_type="application/json" if request.response_format else None,
        )
        response = await client.aio.models.generate_content(
            model=request.model,
            contents=request.message,
            config=config,
        )
        return response.text

    async def _close(self, client):
        # Each genai.Client owns both a sync and an async httpx pool
        await client.aio.aclose()
        client.close()


def default_handlers() -> Dict[ProviderName, ProviderHandler]:
    return {
        ProviderName.OPENAI: OpenAIHandler(),
        ProviderName.ANTHROPIC: AnthropicHandler(),
        ProviderName.GOOGLE: GoogleHandler(),
    }
