"""Pydantic schemas for FAQs."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FAQCreate(BaseModel):
    """Schema for adding a question and its answer."""

    question: str = Field(..., description="The question as users ask it")
    answer: str = Field(..., description="The answer shown under the question")

    @field_validator("question", "answer")
    @classmethod
    def validate_text(cls, v, info):
        if not v or not v.strip():
            raise ValueError(f"{info.field_name} cannot be empty")
        return v.strip()


class FAQResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    question: str
    answer: str
