from typing import Optional

from .id_number import IdNumberValidator
from .passport import PassportValidator
from .types import BaseIdentityValidator, IdentityType, ValidationResult, UNSUPPORTED_TYPE

MSG_UNSUPPORTED = "Unsupported identification type"


class IdentityValidationService:
    """
    Point d'entrée unique: dispatch sur le type de pièce.
    Fonction pure (pas d'I/O, pas de log): même résultat pour les mêmes entrées.
    """
    def __init__(self, id_validator: Optional[BaseIdentityValidator] = None,
                 passport_validator: Optional[BaseIdentityValidator] = None) -> None:
        self.validators = {
            IdentityType.NATIONAL_ID: id_validator or IdNumberValidator(),
            IdentityType.PASSPORT: passport_validator or PassportValidator(),
        }

    @classmethod
    def with_pivot(cls, century_pivot: int) -> "IdentityValidationService":
        return cls(id_validator=IdNumberValidator(century_pivot=century_pivot))

    def validate_identity(self, id_type, raw_value: str) -> ValidationResult:
        kind = IdentityType.coerce(id_type)
        if kind is None:
            return ValidationResult.fail(UNSUPPORTED_TYPE, MSG_UNSUPPORTED)
        return self.validators[kind].validate(raw_value)
