"""
Locale defaults API endpoints.

Pre-populates the deal form with the rate and loan terms typical for the
user's country.
"""

from fastapi import APIRouter

from dealcalc.api.schemas import LocaleDefaultsResponse
from dealcalc.calculations.locale_defaults import SUPPORTED_LOCALES, get_locale_defaults

router = APIRouter()


@router.get("/")
async def list_locales():
    """List locales with dedicated defaults."""
    return {"locales": list(SUPPORTED_LOCALES), "total": len(SUPPORTED_LOCALES)}


@router.get("/{locale}/defaults", response_model=LocaleDefaultsResponse)
async def get_defaults(locale: str):
    """Get form defaults for a locale, falling back to en-US."""
    return get_locale_defaults(locale)
