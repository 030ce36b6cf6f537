"""Catalog chatbot endpoints — predefined questions, quota, ask."""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from app.application.schemas import (
    ChatbotAnswerResponse,
    ChatbotAskRequest,
    ChatbotQuestionsResponse,
    ChatbotQuotaExceededResponse,
    ChatbotRemainingResponse,
)
from app.application.services import ChatbotService
from app.domain.entities import ChatOutcome
from app.infrastructure.dependencies import get_chatbot_service

router = APIRouter(prefix="/chatbot", tags=["Chatbot"])


@router.get("/questions", response_model=ChatbotQuestionsResponse)
async def list_questions(
    service: ChatbotService = Depends(get_chatbot_service),
) -> ChatbotQuestionsResponse:
    return ChatbotQuestionsResponse(questions=service.get_predefined_questions())


@router.get("/remaining/{device_id}", response_model=ChatbotRemainingResponse)
async def get_remaining(
    device_id: str,
    service: ChatbotService = Depends(get_chatbot_service),
) -> ChatbotRemainingResponse:
    return ChatbotRemainingResponse(remaining=await service.get_remaining(device_id))


@router.post(
    "/ask",
    response_model=ChatbotAnswerResponse,
    responses={status.HTTP_429_TOO_MANY_REQUESTS: {"model": ChatbotQuotaExceededResponse}},
)
async def ask(
    data: ChatbotAskRequest,
    service: ChatbotService = Depends(get_chatbot_service),
):
    """Answer a question about the catalog.

    LLM failures still return 200 with an apology and do not consume quota.
    """
    question = (data.question or "").strip()
    device_id = (data.device_id or "").strip()
    if not question or not device_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Question and device_id are required",
        )

    answer = await service.ask(device_id, question)
    if answer.outcome is ChatOutcome.QUOTA_EXCEEDED:
        body = ChatbotQuotaExceededResponse(message=answer.response, remaining=0)
        return JSONResponse(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS, content=body.model_dump()
        )
    return ChatbotAnswerResponse(response=answer.response, remaining=answer.remaining)
