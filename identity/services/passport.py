import re

from .normalize import strip_whitespace
from .types import BaseIdentityValidator, ValidationResult, INVALID_PASSPORT

PASSPORT_MIN_LENGTH = 6
PASSPORT_MAX_LENGTH = 12

MSG_PASSPORT = "Passport number must be 6-12 characters (letters and numbers only)"

_PASSPORT_PATTERN = re.compile(r"[A-Za-z0-9]{%d,%d}" % (PASSPORT_MIN_LENGTH, PASSPORT_MAX_LENGTH))


class PassportValidator(BaseIdentityValidator):
    """
    Contrôle volontairement superficiel: pas de checksum ni de structure par pays.
    La casse est conservée.
    """
    def validate(self, raw: str) -> ValidationResult:
        value = strip_whitespace(raw)
        if not _PASSPORT_PATTERN.fullmatch(value):
            return ValidationResult.fail(INVALID_PASSPORT, MSG_PASSPORT)
        return ValidationResult.ok(value)
