import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime
from promptlab.db.base import Base

class ApiKey(Base):
    __tablename__ = "api_keys"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    # One row per user; upserts conflict on this column
    user_id = Column(String, unique=True, nullable=False, index=True)

    # Ciphertext only (see core/encryption.py)
    encrypted_openai_key = Column(String, nullable=True)
    encrypted_anthropic_key = Column(String, nullable=True)
    encrypted_google_key = Column(String, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
