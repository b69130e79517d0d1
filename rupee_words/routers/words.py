from fastapi import APIRouter, HTTPException
from decimal import Decimal
from typing import Optional
import logging

from rupee_words.schemas.words import AmountInWords, NumberInWords, RupeesInWords
from rupee_words.utils.formatting import negative_currency_mode

router = APIRouter(prefix="/words", tags=["Words"])
logger = logging.getLogger(__name__)


@router.get("/number", response_model=NumberInWords)
def number_in_words(number: int):
    """Spell out an integer using lakh, crore, arab and kharab."""
    return NumberInWords(number=number)


@router.get("/amount", response_model=AmountInWords)
def amount_in_words(amount: Decimal, negative_mode: Optional[str] = None):
    """
    Spell out a rupee amount, with paise taken from the first two decimal places.
    """
    if negative_mode is not None:
        try:
            negative_mode = negative_currency_mode(negative_mode)
        except ValueError as e:
            logger.warning(f"Rejected negative_mode for amount {amount}: {e}")
            raise HTTPException(status_code=400, detail=str(e))
    return AmountInWords(amount=amount, negative_mode=negative_mode)


@router.get("/rupees", response_model=RupeesInWords)
def rupees_in_words(amount: int):
    """Spell out a whole number of rupees."""
    return RupeesInWords(amount=amount)
