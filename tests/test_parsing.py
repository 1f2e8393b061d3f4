"""
Tests for message parsing: sentiment, intent resolution and entity extraction.
"""

import pytest

from shopchat.parsing.entity_extractor import extract_entity_name
from shopchat.parsing.intent_classifier import (
    IntentCategory,
    IntentMatch,
    Route,
    classify_intent,
    find_table_name,
    match_intents,
    resolve_intent,
)
from shopchat.parsing.lexicon import KNOWN_TABLES
from shopchat.parsing.sentiment import SentimentLabel, analyze_sentiment


#  Sentiment

class TestSentiment:
    @pytest.mark.parametrize("text", [
        "This is NOT right",
        "the export is broken",
        "I got an error",
        "wrong price on the label",
    ])
    def test_negative_terms(self, text):
        result = analyze_sentiment(text)
        assert result.label == SentimentLabel.NEGATIVE
        assert result.score == 0.9

    def test_positive_default(self):
        result = analyze_sentiment("how much does the Oslo jacket cost")
        assert result.label == SentimentLabel.POSITIVE
        assert result.score == 0.7

    def test_substring_match(self):
        # "no" inside "know" still counts
        assert analyze_sentiment("I want to know").is_negative


#  Table names

class TestFindTableName:
    def test_plural(self):
        assert find_table_name("show me the suppliers") == "suppliers"

    def test_singular(self):
        assert find_table_name("which supplier ships fastest") == "suppliers"

    def test_catalog_order_breaks_ties(self):
        # "product_types" comes before "products" in the catalog
        assert find_table_name("list product_types") == "product_types"
        assert find_table_name("count the products") == "products"

    def test_no_table(self):
        assert find_table_name("hello there") is None

    def test_catalog_is_ordered(self):
        assert KNOWN_TABLES[0] == "addresses"
        assert KNOWN_TABLES[-1] == "variants"
        assert len(KNOWN_TABLES) == 14


#  Intent resolution

class TestIntentResolution:
    def test_memberships_are_independent(self):
        match = match_intents("how many products do we have in total")
        assert match.is_count
        assert match.is_stock
        assert match.table == "products"

    def test_table_count_beats_list(self):
        intent = classify_intent("what is the total count of brands")
        assert intent.route == Route.TABLE_COUNT
        assert intent.table == "brands"
        assert intent.category == IntentCategory.TABLE_LOOKUP

    def test_table_listing(self):
        intent = classify_intent("show me the suppliers")
        assert intent.route == Route.TABLE_LIST
        assert intent.table == "suppliers"

    def test_price(self):
        intent = classify_intent("how much does the Oslo jacket cost")
        assert intent.route == Route.PRODUCT
        assert intent.category == IntentCategory.PRICE

    def test_stock(self):
        intent = classify_intent("is the Oslo jacket in stock")
        assert intent.route == Route.PRODUCT
        assert intent.category == IntentCategory.STOCK

    def test_unrecognized(self):
        intent = classify_intent("hello")
        assert intent.route == Route.HELP
        assert intent.category == IntentCategory.UNRECOGNIZED

    def test_table_without_sub_intent_is_help(self):
        intent = resolve_intent(IntentMatch(table="colors"))
        assert intent.route == Route.HELP

    def test_table_with_price_falls_through_to_product(self):
        intent = classify_intent("price of the sizes chart")
        assert intent.route == Route.PRODUCT


#  Entity extraction

class TestExtractEntityName:
    def test_price_question(self):
        assert extract_entity_name("how much does the Oslo jacket cost") == "Oslo jacket"

    def test_stock_question(self):
        assert extract_entity_name("is the Oslo jacket in stock") == "Oslo jacket"

    def test_case_insensitive_and_whitespace(self):
        assert extract_entity_name("  Do   you HAVE  Bergen   boots ? ") == "Bergen boots"

    def test_only_stop_words(self):
        assert extract_entity_name("check the price") == ""

    @pytest.mark.parametrize("text", [
        "how much does the Oslo jacket cost",
        "can i buy the red Bergen boots",
        "tell me about pricing for Lofoten parka",
    ])
    def test_idempotent(self, text):
        once = extract_entity_name(text)
        assert extract_entity_name(once) == once
