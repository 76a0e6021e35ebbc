"""
Contrat commun des validateurs d'identité.
Types valeur uniquement: rien n'est persisté ici, tout est créé à l'appel
et jeté une fois le résultat consommé par l'appelant.
"""
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

# Codes d'erreur machine (le message reste lisible par l'utilisateur)
INVALID_FORMAT = "invalid_format"
INVALID_DATE = "invalid_date"
INVALID_CHECKSUM = "invalid_checksum"
INVALID_PASSPORT = "invalid_passport"
UNSUPPORTED_TYPE = "unsupported_type"


class IdentityType(str, Enum):
    NATIONAL_ID = "sa_id"
    PASSPORT = "passport"

    @classmethod
    def coerce(cls, value) -> Optional["IdentityType"]:
        """Enum ou valeur 'wire' ('sa_id' | 'passport'); None si inconnu."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    error_message: Optional[str] = None
    normalized_value: Optional[str] = None
    error_code: Optional[str] = None

    def __post_init__(self):
        if self.valid and self.error_message is not None:
            raise ValueError("a valid result cannot carry an error message")
        if not self.valid and not self.error_message:
            raise ValueError("an invalid result needs a non-empty error message")

    @classmethod
    def ok(cls, normalized_value: str) -> "ValidationResult":
        return cls(valid=True, normalized_value=normalized_value)

    @classmethod
    def fail(cls, code: str, message: str) -> "ValidationResult":
        return cls(valid=False, error_message=message, error_code=code)

    def as_dict(self) -> dict:
        return {
            "valid": self.valid,
            "error_code": self.error_code,
            "error_message": self.error_message,
            "normalized_value": self.normalized_value,
        }


@dataclass(frozen=True)
class NationalIdComponents:
    year2: int             # 0..99
    month: int             # 1..12
    day: int               # 1..31
    century_full_year: int # 19YY | 20YY selon le pivot

    @property
    def date_of_birth(self) -> date:
        return date(self.century_full_year, self.month, self.day)


class BaseIdentityValidator:
    def validate(self, raw: str) -> ValidationResult:
        raise NotImplementedError
