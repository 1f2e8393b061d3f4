"""
Reply text for every route of the chat pipeline.

All functions are pure: they take already-retrieved records and return the
string the assistant posts back. Brand and collection names are only
defaulted to "" here, never earlier.
"""
from datetime import date, datetime
from decimal import Decimal
import json
import math
from typing import Any, Optional, Sequence

from shopchat.data.models import GenericRecord, Product
from shopchat.formatting.currency import CurrencyFormat, SEK
from shopchat.parsing.lexicon import KNOWN_TABLES

GREETING = (
    "Hello! I'm your assistant. I can help you with information about products, "
    "suppliers, orders, and more. How can I help you today?"
)
CLARIFICATION_PROMPT = "Which product would you like to know about?"
EMPATHY_PREFIX = "I understand your concern. Let me help you with that.\n\n"
ERROR_REPLY = "I'm sorry, I encountered an error while processing your request."

HELP_MESSAGE = """I can help you with:

1. Product information:
   - Prices: "How much does [product] cost?"
   - Stock: "Is [product] in stock?"

2. Data queries:
   - Lists: "Show me the suppliers"
   - Counts: "How many products do we have?"
   - Details: "Tell me about [table name]"

Available tables: {tables}"""

DEFAULT_SAMPLE_SIZE = 5


def _is_finite(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)


def format_value(value: Any, currency: CurrencyFormat = SEK) -> str:
    """Render a single column value for chat output."""
    if value is None:
        return "N/A"
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (float, Decimal)):
        if not _is_finite(value):
            return str(value)
        if value == int(value):
            return str(int(value))
        return currency.format(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (dict, list)):
        return json.dumps(value, default=str)
    return str(value)


def format_help() -> str:
    return HELP_MESSAGE.format(tables=", ".join(KNOWN_TABLES))


def format_retrieval_failure(table: str) -> str:
    return f"Sorry, I couldn't fetch data from {table}."


def format_table_count(table: str, records: Sequence[GenericRecord]) -> str:
    return f"There are {len(records)} records in {table}."


def _record_title(record: GenericRecord) -> str:
    if record.get("name"):
        return str(record["name"])
    if record.get("id"):
        return f"ID: {record['id']}"
    return ""


def format_table_listing(
    table: str,
    records: Sequence[GenericRecord],
    sample_size: int = DEFAULT_SAMPLE_SIZE,
) -> str:
    """List the first rows of a table in store order. Detail values are shown as stored."""
    samples = list(records[:sample_size])

    lines = []
    for index, record in enumerate(samples, start=1):
        line = f"{index}. {_record_title(record)}"

        details = []
        for field, label in (("code", "Code"), ("description", "Description"), ("status", "Status")):
            if record.get(field):
                details.append(f"{label}: {record[field]}")
        if details:
            line += f" ({', '.join(details)})"

        lines.append(line)

    response = f"Here are {len(samples)} records from {table}:\n\n" + "\n".join(lines)
    if len(records) > len(samples):
        response += f"\n\n...and {len(records) - len(samples)} more records."
    return response


def format_no_product_match(phrase: str) -> str:
    return (
        f"I couldn't find any products matching \"{phrase}\". "
        "Please try using the exact product name or brand."
    )


def format_product_matches(
    phrase: str,
    products: Sequence[Product],
    sample_size: int = DEFAULT_SAMPLE_SIZE,
) -> str:
    """Disambiguation reply when a search phrase matches several products."""
    lines = []
    for index, product in enumerate(products[:sample_size], start=1):
        brand = product.brand.name if product.brand and product.brand.name else ""
        collection = product.collection.name if product.collection and product.collection.name else ""
        lines.append(f"{index}. {brand} {product.name} ({collection})")

    response = f"I found {len(products)} products matching \"{phrase}\":\n\n" + "\n".join(lines)
    if len(products) > sample_size:
        response += f"\n\n...and {len(products) - sample_size} more products."
    response += "\n\nCould you be more specific?"
    return response


def format_price(product: Product, currency: CurrencyFormat = SEK) -> str:
    prices = [variant.sales_price for variant in product.variants]
    if not prices:
        return f"{product.full_name} has no priced variants yet."

    min_price = min(prices)
    max_price = max(prices)
    if min_price == max_price:
        return f"{product.full_name} costs {currency.format(min_price)}."
    return (
        f"{product.full_name} costs between {currency.format(min_price)} and "
        f"{currency.format(max_price)} depending on the size and color variant."
    )


def format_stock(product: Product) -> str:
    total_stock = sum(variant.stock for variant in product.variants)
    if total_stock == 0:
        return f"{product.full_name} is currently out of stock."

    in_stock = [variant for variant in product.variants if variant.stock > 0]
    variant_details = "\n".join(
        f"{format_value(variant.size)}/{format_value(variant.color)}: {variant.stock} units"
        for variant in in_stock
    )
    return (
        f"{product.full_name} is available in {len(in_stock)} variants "
        f"with a total of {total_stock} units in stock.\n\n"
        f"Available variants:\n{variant_details}"
    )


def format_product_answer(
    product: Product,
    is_price: bool,
    is_stock: bool,
    currency: CurrencyFormat = SEK,
) -> Optional[str]:
    """Answer for a single resolved product; price wins when both were asked."""
    if is_price:
        return format_price(product, currency)
    if is_stock:
        return format_stock(product)
    return None
