"""
Message parsing for ShopChat.

- sentiment: negative-word check used to soften replies
- intent_classifier: keyword sets + known table names -> reply route
- entity_extractor: stop-word removal -> product search phrase
"""
from shopchat.parsing.sentiment import analyze_sentiment
from shopchat.parsing.intent_classifier import classify_intent
from shopchat.parsing.entity_extractor import extract_entity_name

__all__ = [
    "analyze_sentiment",
    "classify_intent",
    "extract_entity_name",
]
