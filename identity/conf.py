from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .services.id_number import DEFAULT_CENTURY_PIVOT
from .services.identity_service import IdentityValidationService

PIVOT_ERROR = "IDENTITY_CENTURY_PIVOT must be an int within 0..99 (got {!r})"

def century_pivot() -> int:
    """Pivot de siècle configuré; toute valeur invalide est une erreur de configuration."""
    raw = getattr(settings, "IDENTITY_CENTURY_PIVOT", DEFAULT_CENTURY_PIVOT)
    if isinstance(raw, bool):
        raise ImproperlyConfigured(PIVOT_ERROR.format(raw))
    if isinstance(raw, int):
        pivot = raw
    elif isinstance(raw, str) and raw.strip().isascii() and raw.strip().isdigit():
        pivot = int(raw.strip())
    else:
        raise ImproperlyConfigured(PIVOT_ERROR.format(raw))
    if not 0 <= pivot <= 99:
        raise ImproperlyConfigured(PIVOT_ERROR.format(raw))
    return pivot

def identity_service() -> IdentityValidationService:
    """Service construit à la demande avec le pivot configuré (pas de singleton)."""
    return IdentityValidationService.with_pivot(century_pivot())
