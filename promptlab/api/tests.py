from typing import List

from fastapi import APIRouter, Depends

from promptlab.core.dependencies import SessionUser, get_test_aggregator, require_auth
from promptlab.schemas.base import SuccessResponse
from promptlab.schemas.test import (
    ModelTestCreate,
    ModelTestCreated,
    ResponseOut,
    ResponseUpdate,
    TestCreate,
    TestCreated,
    TestDetail,
    TestSummary,
)
from promptlab.services.test_aggregator import TestAggregator

router = APIRouter(prefix="/tests", tags=["Tests"],
    dependencies=[Depends(require_auth)])

@router.post("", response_model=TestCreated)
async def create_test(
    payload: TestCreate,
    aggregator: TestAggregator = Depends(get_test_aggregator),
    current_user: SessionUser = Depends(require_auth)
):
    test_id = await aggregator.create_test(payload, current_user.id)
    return TestCreated(id=test_id)

@router.get("", response_model=List[TestSummary])
async def list_tests(aggregator: TestAggregator = Depends(get_test_aggregator)):
    return await aggregator.list_tests()

@router.patch("/responses", response_model=ResponseOut)
async def update_response(
    payload: ResponseUpdate,
    aggregator: TestAggregator = Depends(get_test_aggregator)
):
    return await aggregator.update_response(payload)

@router.get("/{test_id}", response_model=TestDetail)
async def get_test(
    test_id: str,
    aggregator: TestAggregator = Depends(get_test_aggregator)
):
    return await aggregator.get_test(test_id)

@router.delete("/{test_id}", response_model=SuccessResponse)
async def delete_test(
    test_id: str,
    aggregator: TestAggregator = Depends(get_test_aggregator)
):
    # Cascades to model tests, messages and responses
    await aggregator.delete_test(test_id)
    return SuccessResponse()

@router.post("/{test_id}/model-test", response_model=ModelTestCreated)
async def add_model_test(
    test_id: str,
    payload: ModelTestCreate,
    aggregator: TestAggregator = Depends(get_test_aggregator),
    current_user: SessionUser = Depends(require_auth)
):
    model_test_id = await aggregator.add_model_test(
        test_id, payload.model, current_user.id, temperature=payload.temperature
    )
    return ModelTestCreated(id=model_test_id)
