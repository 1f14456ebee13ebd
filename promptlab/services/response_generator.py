import asyncio
import logging
from typing import Dict, List, Optional

from promptlab.core.exceptions import MissingCredentialError
from promptlab.services.credentials import CredentialStore
from promptlab.services.model_registry import ProviderName, resolve_provider
from promptlab.services.providers import GenerationRequest, ProviderHandler, default_handlers

logger = logging.getLogger(__name__)


class ResponseGenerator:
    """
    Routes a (model, message, system prompt) triple to the right vendor
    using the calling user's own key. Nothing is persisted here.
    """

    def __init__(
        self,
        credentials: CredentialStore,
        handlers: Optional[Dict[ProviderName, ProviderHandler]] = None,
    ):
        self.credentials = credentials
        self.handlers = handlers or default_handlers()

    async def _resolve(self, model: str, user_id: str):
        provider = resolve_provider(model)
        api_key = await self.credentials.get_decrypted_key(user_id, provider)
        if not api_key:
            raise MissingCredentialError(provider.value)
        return self.handlers[provider], api_key

    async def generate(
        self,
        model: str,
        message: str,
        system_prompt: str,
        user_id: str,
        temperature: float,
        response_format: Optional[dict] = None,
    ) -> str:
        handler, api_key = await self._resolve(model, user_id)
        return await handler.generate(
            api_key,
            GenerationRequest(
                model=model,
                message=message,
                system_prompt=system_prompt,
                temperature=temperature,
                response_format=response_format,
            ),
        )

    async def generate_many(
        self,
        model: str,
        messages: List[str],
        system_prompt: str,
        user_id: str,
        temperature: float,
    ) -> List[str]:
        """Generate one reply per message, all calls in flight together.

        The key is looked up once before the fan-out. Results come back in
        the order of `messages`. The first failure cancels the calls still
        running and propagates.
        """
        if not messages:
            return []

        handler, api_key = await self._resolve(model, user_id)
        logger.info(f"Generating {len(messages)} responses with {model}")

        tasks = [
            asyncio.ensure_future(handler.generate(
                api_key,
                GenerationRequest(
                    model=model,
                    message=content,
                    system_prompt=system_prompt,
                    temperature=temperature,
                ),
            ))
            for content in messages
        ]
        try:
            return await asyncio.gather(*tasks)
        except Exception:
            for task in tasks:
                task.cancel()
            # Collect the siblings so none is left running or unretrieved
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
