"""Chatbot use case — quota gate, context assembly and one LLM completion."""

import asyncio
import logging
import weakref

from app.application.interfaces.chat_provider import ChatProvider
from app.application.services.chat_context_assembler import ChatContextAssembler
from app.application.services.chat_quota_tracker import ChatQuotaTracker
from app.domain.entities import ChatAnswer, ChatMessage, ChatOutcome
from app.domain.exceptions import ChatProviderError

logger = logging.getLogger(__name__)

PREDEFINED_QUESTIONS = [
    "What AI tools are available on this platform?",
    "How do I find code generation tools?",
    "What are the most popular development tools?",
    "Can you recommend tools for data integration?",
    "How do I search for specific features?",
]

UNAVAILABLE_MESSAGE = (
    "I'm experiencing some technical difficulties right now. Please try again "
    "later or browse the platform directly to find what you're looking for."
)
QUOTA_EXCEEDED_MESSAGE = (
    "You've reached your daily limit of questions. Please try again tomorrow."
)

_SYSTEM_PROMPT = """You are a helpful AI assistant for an AI Catalog Platform. \
Your role is to help users discover and understand the tools and resources \
available on the platform.

{context}

Guidelines:
- Be helpful, concise, and friendly
- Focus on the platform's content and capabilities
- If asked about specific tools, reference the ones available on the platform
- If asked about features not on the platform, politely redirect to what is available
- Keep responses under 200 words
- Use a conversational but professional tone
- Format responses using markdown for better readability:
  * Use **bold** for important terms and tool names
  * Use bullet points (-) for lists
  * Use code formatting for technical terms (use backticks)
  * Use line breaks for better structure
- If you don't know something specific about the platform, be honest and \
suggest they explore the relevant sections"""

# One lock per device id, alive only while a request for that device runs
_device_locks: "weakref.WeakValueDictionary[str, asyncio.Lock]" = weakref.WeakValueDictionary()


def _lock_for(device_id: str) -> asyncio.Lock:
    lock = _device_locks.get(device_id)
    if lock is None:
        lock = asyncio.Lock()
        _device_locks[device_id] = lock
    return lock


class ChatbotService:
    """Application service — answers catalog questions within a daily quota.

    A provider failure, a missing provider or an empty completion never
    consumes quota: only answered questions are recorded.
    """

    def __init__(
        self,
        quota: ChatQuotaTracker,
        context_assembler: ChatContextAssembler,
        provider: ChatProvider | None,
        *,
        model: str = "openai/gpt-4o",
        max_tokens: int = 300,
        temperature: float = 0.7,
    ):
        self._quota = quota
        self._context = context_assembler
        self._provider = provider
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature

    def get_predefined_questions(self) -> list[str]:
        return list(PREDEFINED_QUESTIONS)

    async def get_remaining(self, device_id: str) -> int:
        return await self._quota.get_remaining_questions(device_id)

    async def ask(self, device_id: str, question: str) -> ChatAnswer:
        # Check and record under one lock so concurrent asks cannot overshoot
        async with _lock_for(device_id):
            if not await self._quota.check_rate_limit(device_id):
                logger.info("Device %s exceeded its daily chatbot quota", device_id)
                return ChatAnswer(ChatOutcome.QUOTA_EXCEEDED, QUOTA_EXCEEDED_MESSAGE, 0)

            text = await self._generate(question)
            if text is None:
                remaining = await self._quota.get_remaining_questions(device_id)
                return ChatAnswer(ChatOutcome.UNAVAILABLE, UNAVAILABLE_MESSAGE, remaining)

            await self._quota.record_session(device_id, question, text)
            remaining = await self._quota.get_remaining_questions(device_id)
            return ChatAnswer(ChatOutcome.ANSWERED, text, remaining)

    async def _generate(self, question: str) -> str | None:
        """Return the completion text, or ``None`` when no answer was produced."""
        if self._provider is None:
            logger.warning("Chatbot asked but no LLM provider is configured")
            return None

        context = await self._context.build_context()
        messages = [
            ChatMessage(role="system", content=_SYSTEM_PROMPT.format(context=context)),
            ChatMessage(role="user", content=question),
        ]
        try:
            result = await self._provider.complete(
                messages,
                self._model,
                temperature=self._temperature,
                max_tokens=self._max_tokens,
            )
        except ChatProviderError as exc:
            logger.error("Chatbot completion failed: %s", exc)
            return None
        except Exception:
            logger.exception("Unexpected chatbot completion failure")
            return None

        text = result.content.strip()
        if not text:
            logger.warning("Chatbot completion from %s was empty", result.model or self._model)
            return None
        return text
