"""
Conversation controller for the catalog chat assistant.

Runs one message at a time through the pipeline:
sentiment -> intent -> (entity name | table match) -> store -> reply text,
and keeps the ordered message log for the session.
"""
import asyncio
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from shopchat.core.config import ShopChatConfig, get_config
from shopchat.data.catalog_store import PRODUCTS_TABLE, CatalogStore
from shopchat.formatting.currency import CurrencyFormat
from shopchat.formatting.response_formatter import (
    CLARIFICATION_PROMPT,
    EMPATHY_PREFIX,
    ERROR_REPLY,
    GREETING,
    format_help,
    format_no_product_match,
    format_product_answer,
    format_product_matches,
    format_retrieval_failure,
    format_table_count,
    format_table_listing,
)
from shopchat.parsing.entity_extractor import extract_entity_name
from shopchat.parsing.intent_classifier import IntentCategory, ResolvedIntent, Route, classify_intent
from shopchat.parsing.sentiment import SentimentResult, analyze_sentiment
from shopchat.utils.logger import get_logger

logger = get_logger("core.controller")


class ConversationState(str, Enum):
    IDLE = "idle"
    PROCESSING = "processing"


@dataclass(frozen=True)
class Message:
    """One entry of the conversation log."""
    text: str
    is_from_user: bool


@dataclass
class SessionState:
    """State for a chat session."""
    messages: List[Message] = field(default_factory=lambda: [Message(GREETING, False)])
    status: ConversationState = ConversationState.IDLE
    last_intent: Optional[IntentCategory] = None


class ConversationController:
    """
    Orchestrates a single chat conversation.

    Submissions are serialized: a message submitted while another is still
    being answered waits for that round to finish, so the log always holds
    user/assistant pairs in submission order.
    """

    def __init__(self, store: Optional[CatalogStore] = None, config: Optional[ShopChatConfig] = None):
        self.config = config or get_config()
        self.store = store or CatalogStore(config=self.config)
        self.currency = CurrencyFormat.from_config(self.config)
        self.state = SessionState()
        self._lock = asyncio.Lock()

    @property
    def messages(self) -> Tuple[Message, ...]:
        return tuple(self.state.messages)

    @property
    def is_typing(self) -> bool:
        return self.state.status == ConversationState.PROCESSING

    @property
    def last_intent(self) -> Optional[IntentCategory]:
        return self.state.last_intent

    def reset_session(self) -> None:
        """Start a new conversation with just the greeting."""
        self.state = SessionState()
        logger.info("Session reset")

    async def submit_message(self, text: str) -> Optional[Message]:
        """
        Handle one user message.

        Args:
            text: Raw user input

        Returns:
            The assistant reply that was appended, or None if the input was blank
        """
        if not text or not text.strip():
            return None

        async with self._lock:
            self.state.messages.append(Message(text, True))
            self.state.status = ConversationState.PROCESSING
            try:
                sentiment = analyze_sentiment(text)
                reply = await self._answer(text)
                reply = self._apply_sentiment(reply, sentiment)
            except Exception:
                logger.exception(f"Error handling query: {text[:100]}")
                reply = ERROR_REPLY
            finally:
                self.state.status = ConversationState.IDLE

            message = Message(reply, False)
            self.state.messages.append(message)
            return message

    def _apply_sentiment(self, reply: str, sentiment: SentimentResult) -> str:
        if sentiment.is_negative and sentiment.score > self.config.empathy_threshold:
            return f"{EMPATHY_PREFIX}{reply}"
        return reply

    async def _answer(self, text: str) -> str:
        intent = classify_intent(text)
        self.state.last_intent = intent.category
        logger.info(f"Processing input: {text[:100]} -> {intent.route.value}")

        if intent.route == Route.TABLE_COUNT:
            return await self._answer_table_count(intent)

        if intent.route == Route.TABLE_LIST:
            return await self._answer_table_list(intent)

        if intent.route == Route.HELP:
            return format_help()

        return await self._answer_product(text, intent)

    async def _answer_table_count(self, intent: ResolvedIntent) -> str:
        records = await self.store.fetch_table(intent.table)
        if records is None:
            return format_retrieval_failure(intent.table)
        return format_table_count(intent.table, records)

    async def _answer_table_list(self, intent: ResolvedIntent) -> str:
        records = await self.store.fetch_table(intent.table)
        if records is None:
            return format_retrieval_failure(intent.table)
        return format_table_listing(
            intent.table,
            records,
            sample_size=self.config.listing_sample_size,
        )

    async def _answer_product(self, text: str, intent: ResolvedIntent) -> str:
        phrase = extract_entity_name(text)
        if not phrase:
            return CLARIFICATION_PROMPT

        products = await self.store.find_product_by_name(phrase)
        if products is None:
            return format_retrieval_failure(PRODUCTS_TABLE)

        if not products:
            return format_no_product_match(phrase)

        if len(products) > 1:
            return format_product_matches(phrase, products, sample_size=self.config.product_sample_size)

        return format_product_answer(
            products[0],
            is_price=intent.match.is_price,
            is_stock=intent.match.is_stock,
            currency=self.currency,
        )
