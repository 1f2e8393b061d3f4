"""
Configuration management for ShopChat.

Loads settings from YAML config file and provides typed access.
"""
from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional
import yaml

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()


def _project_root() -> Path:
    """Return project root (parent of shopchat package)."""
    return Path(__file__).resolve().parent.parent.parent


DEFAULT_CONFIG_PATH = _project_root() / "config" / "default.yaml"


@dataclass
class ShopChatConfig:
    """Configuration for the chat assistant."""

    # Data store (secrets normally come from the environment)
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    request_timeout: float = 10.0       # Seconds before a store call counts as failed

    # Reply shaping
    listing_sample_size: int = 5        # Rows shown for "show me the <table>"
    product_sample_size: int = 5        # Products shown when a name is ambiguous
    empathy_threshold: float = 0.8      # Negative sentiment score above which we soften the reply

    # Currency formatting (defaults follow sv-SE / SEK)
    currency_symbol: str = "kr"
    currency_symbol_first: bool = False
    currency_decimal_separator: str = ","
    currency_group_separator: str = "\u00a0"
    currency_decimals: int = 2

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "ShopChatConfig":
        """Load configuration from YAML file."""
        path = config_path or DEFAULT_CONFIG_PATH
        if not path.exists():
            return cls(
                supabase_url=os.environ.get("SUPABASE_URL"),
                supabase_key=os.environ.get("SUPABASE_KEY"),
            )

        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}

        store_config = data.get('store', {})
        chat_config = data.get('chat', {})
        currency_config = data.get('currency', {})

        return cls(
            supabase_url=os.environ.get("SUPABASE_URL", store_config.get('url')),
            supabase_key=os.environ.get("SUPABASE_KEY", store_config.get('key')),
            request_timeout=float(store_config.get('request_timeout', 10.0)),
            listing_sample_size=chat_config.get('listing_sample_size', 5),
            product_sample_size=chat_config.get('product_sample_size', 5),
            empathy_threshold=chat_config.get('empathy_threshold', 0.8),
            currency_symbol=currency_config.get('symbol', 'kr'),
            currency_symbol_first=currency_config.get('symbol_first', False),
            currency_decimal_separator=currency_config.get('decimal_separator', ','),
            currency_group_separator=currency_config.get('group_separator', "\u00a0"),
            currency_decimals=currency_config.get('decimals', 2),
        )


# Global config instance
_config: Optional[ShopChatConfig] = None


def get_config() -> ShopChatConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ShopChatConfig.from_yaml()
    return _config


def set_config(config: ShopChatConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
