"""Locale-aware currency strings ("$123", "1.234 £", ...).

Formatting uses the locale's standard currency pattern from Babel, keeping at
most ten significant digits and dropping fraction digits that are zero.
"""

import re
from decimal import Context, Decimal
from typing import Any, Optional

from babel import Locale, UnknownLocaleError
from babel.numbers import format_currency

from core.config import settings
from core.logging import get_module_logger

logger = get_module_logger()

MAX_SIGNIFICANT_DIGITS = 10
FRACTION_PATTERN = re.compile(r"\.0+")


def _is_number(amount: Any) -> bool:
    return isinstance(amount, (int, float, Decimal)) and not isinstance(amount, bool)


def _significant_pattern(locale: Locale) -> str:
    pattern = locale.currency_formats["standard"].pattern
    return FRACTION_PATTERN.sub("." + "#" * MAX_SIGNIFICANT_DIGITS, pattern)


def get_localized_currency_string(
    amount: Any,
    currency: Optional[str] = None,
    locale: Optional[str] = None,
) -> Optional[str]:
    """Localize a monetary amount into a string.

    Args:
        amount: Amount or price value.
        currency: ISO 4217 currency code ("USD", "GBP"). Omitted means the
            amount is returned as a plain string.
        locale: Optional locale identifier ("en-US", "de_DE"). Defaults to
            settings.locale.DEFAULT_CURRENCY_LOCALE.

    Returns:
        Localized currency string, None for a falsy amount, the plain amount
        without a currency, or "<amount> <currency>" when the amount or
        locale cannot be formatted.
    """
    if not amount:
        return None

    if not currency:
        return str(amount)

    if not _is_number(amount):
        return f"{amount} {currency}"

    locale_id = locale or settings.locale.DEFAULT_CURRENCY_LOCALE
    try:
        babel_locale = Locale.parse(locale_id.replace("-", "_"))
    except (UnknownLocaleError, ValueError) as e:
        logger.warning("unknown_currency_locale", locale=locale_id, error=str(e))
        return f"{amount} {currency}"

    value = Context(prec=MAX_SIGNIFICANT_DIGITS).plus(Decimal(str(amount)))
    return format_currency(
        value,
        currency,
        format=_significant_pattern(babel_locale),
        locale=babel_locale,
        currency_digits=False,
    )
