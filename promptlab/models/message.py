import uuid
from datetime import datetime
from sqlalchemy import Column, String, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from promptlab.db.base import Base

class Message(Base):
    __tablename__ = "messages"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    model_test_id = Column(String, ForeignKey("model_tests.id", ondelete="CASCADE"), nullable=False, index=True)

    content = Column(Text, nullable=False)
    # Whether the message counts toward evaluation
    included = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    model_test = relationship("ModelTest", back_populates="messages")
    responses = relationship("Response", back_populates="message", cascade="all, delete-orphan")
