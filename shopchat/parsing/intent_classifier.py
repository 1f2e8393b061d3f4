"""
Rule-based intent classification for catalog questions.

Keyword sets are checked independently, so one message can match several
categories (e.g. "how many products do we have" is both Count and Stock).
resolve_intent() applies a fixed precedence to pick the reply route:
1. Known table + Count keyword -> table count
2. Known table + List keyword  -> table listing
3. No Price and no Stock keyword -> help message
4. Otherwise -> product lookup (price and/or stock)
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from shopchat.parsing.lexicon import (
    COUNT_KEYWORDS,
    KNOWN_TABLES,
    LIST_KEYWORDS,
    PRICE_KEYWORDS,
    STOCK_KEYWORDS,
)


class IntentCategory(str, Enum):
    PRICE = "price"
    STOCK = "stock"
    LIST = "list"
    COUNT = "count"
    TABLE_LOOKUP = "table_lookup"
    UNRECOGNIZED = "unrecognized"


class Route(str, Enum):
    TABLE_COUNT = "table_count"
    TABLE_LIST = "table_list"
    HELP = "help"
    PRODUCT = "product"


@dataclass(frozen=True)
class IntentMatch:
    """Independent keyword-set membership for one message."""
    is_price: bool = False
    is_stock: bool = False
    is_list: bool = False
    is_count: bool = False
    table: Optional[str] = None


@dataclass(frozen=True)
class ResolvedIntent:
    route: Route
    category: IntentCategory
    match: IntentMatch

    @property
    def table(self) -> Optional[str]:
        return self.match.table


def _normalize(s: str) -> str:
    return (s or "").lower()


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    return any(keyword in text for keyword in keywords)


def find_table_name(text: str) -> Optional[str]:
    """
    Return the first known table mentioned in text.

    A table matches on its exact name or its name minus the last character
    ("suppliers" also matches "supplier").
    """
    text_lower = _normalize(text)
    for table in KNOWN_TABLES:
        if table in text_lower or table[:-1] in text_lower:
            return table
    return None


def match_intents(text: str) -> IntentMatch:
    """Compute keyword-set membership and table mention for a message."""
    text_lower = _normalize(text)
    return IntentMatch(
        is_price=_contains_any(text_lower, PRICE_KEYWORDS),
        is_stock=_contains_any(text_lower, STOCK_KEYWORDS),
        is_list=_contains_any(text_lower, LIST_KEYWORDS),
        is_count=_contains_any(text_lower, COUNT_KEYWORDS),
        table=find_table_name(text_lower),
    )


def resolve_intent(match: IntentMatch) -> ResolvedIntent:
    """Pick the reply route for a message using the fixed precedence."""
    if match.table and match.is_count:
        return ResolvedIntent(Route.TABLE_COUNT, IntentCategory.TABLE_LOOKUP, match)

    if match.table and match.is_list:
        return ResolvedIntent(Route.TABLE_LIST, IntentCategory.TABLE_LOOKUP, match)

    # Also covers a recognized table with nothing actionable to do with it
    if not match.is_price and not match.is_stock:
        return ResolvedIntent(Route.HELP, IntentCategory.UNRECOGNIZED, match)

    category = IntentCategory.PRICE if match.is_price else IntentCategory.STOCK
    return ResolvedIntent(Route.PRODUCT, category, match)


def classify_intent(text: str) -> ResolvedIntent:
    """Classify a raw chat message."""
    return resolve_intent(match_intents(text))
