"""FAQ model."""

from sqlalchemy import Column, Text

from .base import BaseModel


class FAQ(BaseModel):
    __tablename__ = "faqs"

    question = Column(Text, nullable=False)
    answer = Column(Text, nullable=False)
