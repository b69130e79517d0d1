from pydantic import BaseModel, Field, computed_field
from decimal import Decimal
from typing import Optional

from rupee_words.utils.formatting import format_indian_currency, to_currency_words
from rupee_words.utils.number_words import to_words


class NumberInWords(BaseModel):
    number: int

    @computed_field
    def words(self) -> str:
        return to_words(self.number)


class AmountInWords(BaseModel):
    amount: Decimal = Field(..., description="Amount in rupees, paise as the fractional part")
    negative_mode: Optional[str] = None

    # Computed fields for formatted display
    @computed_field
    def amount_str(self) -> str:
        return format_indian_currency(self.amount)

    @computed_field
    def amount_words(self) -> str:
        return to_currency_words(self.amount, negative_mode=self.negative_mode)


class RupeesInWords(BaseModel):
    amount: int = Field(..., description="Whole rupees")

    @computed_field
    def amount_words(self) -> str:
        return to_currency_words(self.amount)
