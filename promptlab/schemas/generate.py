from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from promptlab.schemas.base import CamelModel


class GenerateMessagesRequest(CamelModel):
    count: int = Field(ge=1, le=10)
    system_prompt: str = Field(min_length=1)
    model: Optional[str] = None


# Shape the model is asked to return: {"messages": [{"content": "..."}]}
class GeneratedMessage(BaseModel):
    content: str


class GenerateApiResponse(BaseModel):
    messages: List[GeneratedMessage]


class CandidateMessage(CamelModel):
    id: str
    content: str
    created_at: datetime
    included: bool = True
