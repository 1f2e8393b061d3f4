"""
ShopChat - catalog chat assistant

Answers back-office questions about the product catalog with:
- Keyword-based intent and sentiment detection
- Product price and stock lookups against Supabase
- Table counts and listings for the known catalog tables
"""

__version__ = '0.1.0'

from shopchat.core.controller import ConversationController, Message
from shopchat.core.config import ShopChatConfig, get_config, set_config

__all__ = [
    'ConversationController',
    'Message',
    'ShopChatConfig',
    'get_config',
    'set_config',
]
