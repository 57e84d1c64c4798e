"""
Module for formatting and parsing decimal, currency and date values using Babel.

"""
import datetime
import logging
from typing import List

from babel import Locale, numbers
from babel.dates import format_datetime

CURRENCY_MAP: dict[str, str] = {
    'US': 'USD',
    'GB': 'GBP',
    'DE': 'EUR',
    'FR': 'EUR',
    'BE': 'EUR',
    'IT': 'EUR',
    'ES': 'EUR',
    'JP': 'JPY',
    'CA': 'CAD',
    'AU': 'AUD',
    'IN': 'INR',
    'BR': 'BRL',
    'CN': 'CNY',
    'KR': 'KRW',
    'DK': 'DKK',
    'SE': 'SEK',
    'NO': 'NOK',
    'FI': 'EUR',
    'HU': 'HUF',
    'MX': 'MXN',
    'ZA': 'ZAR',
    'NL': 'EUR',
}

LOCALE_MAP: List[str] = [
    'en_GB',
    'en_US',
    'en_AU',
    'en_CA',
    'en_IN',
    'en_ZA',
    'de_DE',
    'es_ES',
    'es_MX',
    'hu_HU',
    'da_DK',
    'fi_FI',
    'fr_BE',
    'fr_FR',
    'it_IT',
    'ja_JP',
    'ko_KR',
    'nb_NO',
    'nl_NL',
    'pt_BR',
    'sv_SE',
    'zh_CN',
]


def get_currency_from_locale(locale: str) -> str:
    """
    Retrieve the default currency code based on the locale's territory.

    Args:
        locale (str): Locale string, e.g. 'fr_FR'.

    Returns:
        str: Currency code such as 'EUR'. Defaults to 'EUR' if the territory is unknown.
    """
    parts = locale.split('_')
    if len(parts) < 2:
        return 'EUR'
    country_code = parts[1]
    return CURRENCY_MAP.get(country_code, 'EUR')


def format_float(value: float, locale: str) -> str:
    """
    Format a float as a decimal string according to the locale conventions.

    Args:
        value (float): The numeric value to be formatted.
        locale (str): Locale string, e.g. 'en_US'.

    Returns:
        str: The formatted decimal string.
    """
    try:
        locale_obj = Locale.parse(locale)
        return numbers.format_decimal(value, locale=locale_obj)
    except Exception as e:
        logging.debug(f'Error formatting decimal: {e}')
        return str(value)


def format_currency_value(value: float, locale: str) -> str:
    """
    Format a float as a currency string based on the locale's default currency.

    The default currency is determined by the territory extracted from the locale.

    Args:
        value (float): The numeric value to be formatted.
        locale (str): Locale string, e.g. 'fr_FR'.

    Returns:
        str: The formatted currency string.
    """
    try:
        currency_code = get_currency_from_locale(locale)
        locale_obj = Locale.parse(locale)
        return numbers.format_currency(value, currency=currency_code, locale=locale_obj)
    except Exception as e:
        logging.error(f'Error formatting currency: {e}')
        return str(value)


def format_timestamp(value: datetime.datetime, locale: str) -> str:
    """
    Format a timestamp using the locale's short date and time pattern.

    Args:
        value (datetime.datetime): The timestamp to format.
        locale (str): Locale string, e.g. 'en_GB'.

    Returns:
        str: The formatted timestamp.
    """
    try:
        return format_datetime(value, format='short', locale=Locale.parse(locale))
    except Exception as e:
        logging.error(f'Error formatting timestamp: {e}')
        return value.strftime('%d/%m/%Y %H:%M')


def parse_amount(text: str, locale: str) -> float:
    """
    Parse a user-entered amount using the locale's decimal conventions.

    Args:
        text (str): The text to parse, e.g. '1,234.50' for 'en_US'.
        locale (str): Locale string.

    Returns:
        float: The parsed amount.

    Raises:
        ValueError: If the text is not a number in the given locale.
    """
    text = (text or '').strip()
    if not text:
        raise ValueError('Amount is empty.')
    return float(numbers.parse_decimal(text, locale=Locale.parse(locale)))
