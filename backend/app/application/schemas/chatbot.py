"""Pydantic v2 schemas (DTOs) for the catalog chatbot."""

from pydantic import BaseModel, Field


class ChatbotAskRequest(BaseModel):
    """Both fields are checked by the endpoint so a blank value yields 400, not 422."""

    question: str | None = Field(None, examples=["What MCP servers are available?"])
    device_id: str | None = Field(None, examples=["device-3f2a9c"])


class ChatbotAnswerResponse(BaseModel):
    response: str
    remaining: int


class ChatbotQuotaExceededResponse(BaseModel):
    message: str
    remaining: int = 0


class ChatbotRemainingResponse(BaseModel):
    remaining: int


class ChatbotQuestionsResponse(BaseModel):
    questions: list[str]
