from typing import List

from fastapi import APIRouter, Depends

from promptlab.core.dependencies import SessionUser, get_message_generator, require_auth
from promptlab.schemas.generate import CandidateMessage, GenerateMessagesRequest
from promptlab.services.message_generator import MessageCandidateGenerator

router = APIRouter(prefix="/generate", tags=["Generation"],
    dependencies=[Depends(require_auth)])

@router.post("", response_model=List[CandidateMessage])
async def generate_messages(
    payload: GenerateMessagesRequest,
    generator: MessageCandidateGenerator = Depends(get_message_generator),
    current_user: SessionUser = Depends(require_auth)
):
    """Draft candidate user messages for a system prompt (not persisted)."""
    return await generator.generate(
        count=payload.count,
        system_prompt=payload.system_prompt,
        user_id=current_user.id,
        model=payload.model,
    )
