"""
Currency formatting policy for chat replies.

The default mirrors the sv-SE rendering of SEK amounts: "1 234,50 kr" with a
non-breaking space for grouping and before the symbol.
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from shopchat.core.config import ShopChatConfig

NBSP = "\u00a0"


@dataclass(frozen=True)
class CurrencyFormat:
    symbol: str = "kr"
    symbol_first: bool = False
    decimal_separator: str = ","
    group_separator: str = NBSP
    decimals: int = 2

    @classmethod
    def from_config(cls, config: ShopChatConfig) -> "CurrencyFormat":
        return cls(
            symbol=config.currency_symbol,
            symbol_first=config.currency_symbol_first,
            decimal_separator=config.currency_decimal_separator,
            group_separator=config.currency_group_separator,
            decimals=config.currency_decimals,
        )

    def format(self, amount: Union[Decimal, float, int]) -> str:
        value = Decimal(str(amount))
        quantum = Decimal(1).scaleb(-self.decimals)
        value = value.quantize(quantum, rounding=ROUND_HALF_UP)

        sign = "-" if value < 0 else ""
        digits = f"{abs(value):,.{self.decimals}f}"
        whole, _, fraction = digits.partition(".")
        number = whole.replace(",", self.group_separator)
        if fraction:
            number = f"{number}{self.decimal_separator}{fraction}"

        if not self.symbol:
            return f"{sign}{number}"
        if self.symbol_first:
            return f"{sign}{self.symbol}{number}"
        return f"{sign}{number}{NBSP}{self.symbol}"


SEK = CurrencyFormat()
