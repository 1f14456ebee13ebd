from fastapi import APIRouter, Depends

from promptlab.core.dependencies import SessionUser, get_credential_store, require_auth
from promptlab.schemas.api_key import ApiKeySave, ApiKeyStatus
from promptlab.schemas.base import SuccessResponse
from promptlab.services.credentials import CredentialStore
from promptlab.services.model_registry import ProviderName

router = APIRouter(prefix="/keys", tags=["API Keys"])

@router.get("", response_model=ApiKeyStatus)
async def get_keys(
    credentials: CredentialStore = Depends(get_credential_store),
    current_user: SessionUser = Depends(require_auth)
):
    status = await credentials.key_status(current_user.id)
    # Return True/False per provider, never the key itself
    return ApiKeyStatus(
        has_openai=status[ProviderName.OPENAI],
        has_anthropic=status[ProviderName.ANTHROPIC],
        has_google=status[ProviderName.GOOGLE],
    )

@router.post("", response_model=SuccessResponse)
async def save_key(
    payload: ApiKeySave,
    credentials: CredentialStore = Depends(get_credential_store),
    current_user: SessionUser = Depends(require_auth)
):
    await credentials.save_key(current_user.id, payload.provider, payload.key)
    return SuccessResponse()

@router.delete("/{provider}", response_model=SuccessResponse)
async def delete_key(
    provider: ProviderName,
    credentials: CredentialStore = Depends(get_credential_store),
    current_user: SessionUser = Depends(require_auth)
):
    await credentials.delete_key(current_user.id, provider)
    return SuccessResponse()
