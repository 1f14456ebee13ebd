import uuid
from datetime import datetime
from sqlalchemy import Column, String, Text, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship
from promptlab.db.base import Base

RATINGS = ("bad", "mild", "good")

class Response(Base):
    __tablename__ = "responses"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    message_id = Column(String, ForeignKey("messages.id", ondelete="CASCADE"), nullable=False, index=True)

    model = Column(String, nullable=False)
    content = Column(Text, nullable=False)

    # Annotation fields, the only ones mutated after creation
    notes = Column(Text, nullable=True)
    rating = Column(Enum(*RATINGS, name="response_rating", native_enum=False), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    message = relationship("Message", back_populates="responses")
