from typing import List

from fastapi import APIRouter

from promptlab.schemas.model import ModelInfo
from promptlab.services.model_registry import list_models

router = APIRouter(prefix="/models", tags=["Models"])

@router.get("", response_model=List[ModelInfo])
def get_models():
    return list_models()
