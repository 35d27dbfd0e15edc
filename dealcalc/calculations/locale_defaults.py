"""
Locale defaults for the deal form.

Typical investment-property mortgage rates and loan terms per country.
Unknown locales fall back to en-US.
"""

from types import MappingProxyType
from typing import Dict, List, Union

from dealcalc.calculations.models import DEFAULT_LOCALE

DEFAULT_LOAN_TERM_YEARS = 30

DEFAULT_INTEREST_RATES = MappingProxyType({
    "pt-BR": 11.5,  # Brazil investment average
    "en-US": 7.5,  # US investment property rate
})

# Brazil: max 30 years, 20-25 common. US: 15 or 30 typical.
LOAN_TERM_OPTIONS = MappingProxyType({
    "pt-BR": (5, 10, 15, 20, 25, 30),
    "en-US": (10, 15, 20, 25, 30),
})

CURRENCIES = MappingProxyType({
    "pt-BR": "BRL",
    "en-US": "USD",
})

SUPPORTED_LOCALES = tuple(DEFAULT_INTEREST_RATES)


def resolve_locale(locale: str) -> str:
    """Return the locale if it has defaults, otherwise the fallback locale."""
    return locale if locale in DEFAULT_INTEREST_RATES else DEFAULT_LOCALE


def get_default_interest_rate(locale: str) -> float:
    """Get the default annual interest rate (percent) for a locale."""
    return DEFAULT_INTEREST_RATES[resolve_locale(locale)]


def get_loan_term_options(locale: str) -> List[int]:
    """Get the loan term options (years) offered for a locale."""
    return list(LOAN_TERM_OPTIONS[resolve_locale(locale)])


def get_locale_defaults(locale: str) -> Dict[str, Union[str, float, List[int]]]:
    """Get every form default for a locale in one record."""
    resolved = resolve_locale(locale)
    return {
        "locale": resolved,
        "currency": CURRENCIES[resolved],
        "default_interest_rate": get_default_interest_rate(resolved),
        "loan_term_options": get_loan_term_options(resolved),
        "default_loan_term_years": DEFAULT_LOAN_TERM_YEARS,
    }
