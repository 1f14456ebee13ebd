from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from promptlab.schemas.base import CamelModel

Rating = Literal["bad", "mild", "good"]


class MessageInput(CamelModel):
    # Candidates from /generate also carry id/createdAt; those are ignored
    content: str = Field(min_length=1)
    included: bool = True


class TestCreate(CamelModel):
    name: str = Field(min_length=1)
    system_prompt: str = Field(min_length=1)
    model: str
    temperature: float = Field(ge=0, le=1)
    messages: List[MessageInput]


class TestCreated(CamelModel):
    id: str


class TestSummary(CamelModel):
    id: str
    name: Optional[str] = None
    system_prompt: str
    created_at: datetime
    message_count: int = 0


class ResponseOut(CamelModel):
    id: str
    message_id: str
    model: str
    content: str
    notes: Optional[str] = None
    rating: Optional[Rating] = None
    created_at: datetime


class MessageOut(CamelModel):
    id: str
    model_test_id: str
    content: str
    included: bool
    created_at: datetime


class MessageDetail(MessageOut):
    responses: List[ResponseOut] = []


class ModelTestDetail(CamelModel):
    id: str
    test_id: str
    model: str
    display_name: str
    temperature: Optional[float] = None
    created_at: datetime
    messages: List[MessageDetail] = []


class TestDetail(CamelModel):
    id: str
    name: Optional[str] = None
    system_prompt: str
    created_at: datetime
    updated_at: datetime
    model_tests: List[ModelTestDetail] = []


class ModelTestCreate(CamelModel):
    model: str
    # Defaults to the temperature of the run the messages are cloned from
    temperature: Optional[float] = Field(default=None, ge=0, le=1)


class ModelTestCreated(CamelModel):
    id: str


class MessageCreate(CamelModel):
    content: str = Field(min_length=1)


class MessageCreated(CamelModel):
    message: MessageOut
    response: ResponseOut


class ResponseUpdate(CamelModel):
    response_id: str
    rating: Optional[Rating] = None
    notes: Optional[str] = None
