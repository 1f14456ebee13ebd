from fastapi import APIRouter, Depends

from promptlab.core.dependencies import get_test_aggregator, require_auth
from promptlab.schemas.base import SuccessResponse
from promptlab.services.test_aggregator import TestAggregator

router = APIRouter(prefix="/messages", tags=["Messages"],
    dependencies=[Depends(require_auth)])

@router.delete("/{message_id}", response_model=SuccessResponse)
async def delete_message(
    message_id: str,
    aggregator: TestAggregator = Depends(get_test_aggregator)
):
    await aggregator.delete_message(message_id)
    return SuccessResponse()
