"""
Chat Schemas - Request and response bodies of the patient assistant.
"""
from pydantic import BaseModel, Field, field_validator

class ChatRequest(BaseModel):
    """Free-text question from the chat panel."""
    message: str = Field(..., min_length=1, description="Question about patients")

    @field_validator("message")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Message cannot be blank")
        return value

class ChatResponse(BaseModel):
    """The model's answer, unchanged."""
    response: str

class ChatError(BaseModel):
    """Error body returned with HTTP 500."""
    error: str
