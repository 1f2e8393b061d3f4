"""
Static keyword tables used to read chat messages.

All matching against these tables is case-insensitive substring containment,
so multi-word phrases ("how much", "in store") are listed as-is.
"""

NEGATIVE_WORDS = (
    "not", "no", "bad", "wrong", "error", "issue", "problem", "fail", "broken",
)

PRICE_KEYWORDS = (
    "price", "cost", "how much", "what is the price", "what does it cost", "costs", "pricing",
)
STOCK_KEYWORDS = (
    "stock", "available", "in store", "have", "got", "inventory", "can i buy",
)
LIST_KEYWORDS = (
    "list", "show", "display", "what", "tell me about", "find",
)
COUNT_KEYWORDS = (
    "how many", "count", "total",
)

# Tokens dropped when turning a question into a product search phrase
STOP_WORDS = frozenset({
    "price", "cost", "stock", "available", "how", "much", "does", "is", "in", "store",
    "the", "a", "an", "any", "what", "have", "you", "got", "do", "can", "i", "buy", "?",
    "tell", "me", "about", "check", "pricing", "inventory", "costs",
})

# Order matters: the first table whose name appears in a message wins.
KNOWN_TABLES = (
    "addresses",
    "brands",
    "categories",
    "collections",
    "colors",
    "product_types",
    "products",
    "purchase_order_items",
    "purchase_orders",
    "sequence_counters",
    "settings",
    "sizes",
    "suppliers",
    "variants",
)
