from pydantic import Field

from promptlab.schemas.base import CamelModel
from promptlab.services.model_registry import ProviderName


class ApiKeySave(CamelModel):
    provider: ProviderName
    key: str = Field(min_length=1)


# Booleans only; stored keys never leave the server
class ApiKeyStatus(CamelModel):
    has_openai: bool = False
    has_anthropic: bool = False
    has_google: bool = False
