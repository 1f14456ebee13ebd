import uuid
from datetime import datetime
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import relationship
from promptlab.db.base import Base

class Test(Base):
    __tablename__ = "tests"
    __test__ = False  # not a pytest class

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=True)
    system_prompt = Column(Text, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    model_tests = relationship(
        "ModelTest",
        back_populates="test",
        cascade="all, delete-orphan",
        order_by="ModelTest.created_at",
    )
