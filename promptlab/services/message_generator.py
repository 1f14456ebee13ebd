import logging
import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import ValidationError

from promptlab.core.config import DEFAULT_GENERATION_MODEL, GENERATION_TEMPERATURE
from promptlab.core.exceptions import InvalidGenerationFormat
from promptlab.schemas.generate import CandidateMessage, GenerateApiResponse
from promptlab.services.providers import JSON_OBJECT_FORMAT
from promptlab.services.response_generator import ResponseGenerator

logger = logging.getLogger(__name__)

GENERATION_PROMPT = (
    "Generate {count} different example user messages that might be asked given "
    "the system prompt above. Format the response as a JSON object with a 'messages' "
    "array where each message has a 'content' property. For example: "
    '{{"messages": [{{"content": "message 1"}}, {{"content": "message 2"}}]}}'
)


def _strip_code_fence(text: str) -> str:
    # Models without a JSON mode tend to wrap output in ```json ... ```
    stripped = text.strip()
    if stripped.startswith("```"):
        stripped = stripped.split("\n", 1)[1] if "\n" in stripped else ""
        if stripped.rstrip().endswith("```"):
            stripped = stripped.rstrip()[:-3]
    return stripped.strip()


class MessageCandidateGenerator:
    """Asks a model to invent user messages for a system prompt."""

    def __init__(self, generator: ResponseGenerator):
        self.generator = generator

    async def generate(
        self,
        count: int,
        system_prompt: str,
        user_id: str,
        model: Optional[str] = None,
    ) -> List[CandidateMessage]:
        model = model or DEFAULT_GENERATION_MODEL

        raw = await self.generator.generate(
            model=model,
            message=GENERATION_PROMPT.format(count=count),
            system_prompt=system_prompt,
            user_id=user_id,
            temperature=GENERATION_TEMPERATURE,
            response_format=JSON_OBJECT_FORMAT,
        )

        try:
            parsed = GenerateApiResponse.model_validate_json(_strip_code_fence(raw))
        except ValidationError as e:
            logger.error(f"Unparseable message generation from {model}: {raw!r}")
            raise InvalidGenerationFormat(raw) from e

        now = datetime.utcnow()
        return [
            CandidateMessage(id=str(uuid.uuid4()), content=item.content, created_at=now, included=True)
            for item in parsed.messages[:count]
        ]
