from dataclasses import dataclass

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import jwt, JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from promptlab.core.config import SECRET_KEY, ALGORITHM
from promptlab.db.deps import get_db
from promptlab.services.credentials import CredentialStore
from promptlab.services.message_generator import MessageCandidateGenerator
from promptlab.services.providers import default_handlers
from promptlab.services.response_generator import ResponseGenerator
from promptlab.services.test_aggregator import TestAggregator

# Tokens are minted by the session service; this API only verifies them
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")


@dataclass
class SessionUser:
    id: str


def require_auth(token: str = Depends(oauth2_scheme)) -> SessionUser:
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        user_id = payload.get("sub")
        if user_id is None:
            raise HTTPException(status_code=401, detail="Invalid token")
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token"
        )

    return SessionUser(id=str(user_id))


def get_provider_handlers():
    return default_handlers()


def get_credential_store(db: AsyncSession = Depends(get_db)) -> CredentialStore:
    return CredentialStore(db)


def get_response_generator(
    credentials: CredentialStore = Depends(get_credential_store),
    handlers=Depends(get_provider_handlers),
) -> ResponseGenerator:
    return ResponseGenerator(credentials, handlers)


def get_test_aggregator(
    db: AsyncSession = Depends(get_db),
    generator: ResponseGenerator = Depends(get_response_generator),
) -> TestAggregator:
    return TestAggregator(db, generator)


def get_message_generator(
    generator: ResponseGenerator = Depends(get_response_generator),
) -> MessageCandidateGenerator:
    return MessageCandidateGenerator(generator)
