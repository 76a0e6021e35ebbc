"""
Numéro d'identité sud-africain: YYMMDD SSSS C A Z (13 chiffres).
- YYMMDD: date de naissance (siècle via pivot fixe)
- Z: chiffre de contrôle Luhn sur les 13 chiffres
"""
import re
from datetime import date

from .normalize import require_str
from .types import (
    BaseIdentityValidator, NationalIdComponents, ValidationResult,
    INVALID_FORMAT, INVALID_DATE, INVALID_CHECKSUM,
)

NATIONAL_ID_LENGTH = 13
DEFAULT_CENTURY_PIVOT = 50

MSG_FORMAT = "ID number must be 13 digits in format: YYMMDD + 7 digits"
MSG_DATE = "Invalid date in ID number"
MSG_CHECKSUM = "Invalid ID number checksum"

_ID_PATTERN = re.compile(r"[0-9]{%d}" % NATIONAL_ID_LENGTH)


def full_year(year2: int, pivot: int = DEFAULT_CENTURY_PIVOT) -> int:
    return (2000 if year2 < pivot else 1900) + year2


def parse_components(id_number: str, pivot: int = DEFAULT_CENTURY_PIVOT) -> NationalIdComponents:
    """Découpe YYMMDD (les 6 premiers chiffres). Ne vérifie pas le calendrier."""
    year2 = int(id_number[0:2])
    return NationalIdComponents(
        year2=year2,
        month=int(id_number[2:4]),
        day=int(id_number[4:6]),
        century_full_year=full_year(year2, pivot),
    )


def is_calendar_date(components: NationalIdComponents) -> bool:
    try:
        components.date_of_birth
    except ValueError:
        return False
    return True


def luhn_ok(digits: str) -> bool:
    total = 0
    second = False
    for ch in reversed(digits):
        d = int(ch)
        if second:
            d *= 2
            if d > 9:
                d -= 9
        total += d
        second = not second
    return total % 10 == 0


class IdNumberValidator(BaseIdentityValidator):
    def __init__(self, century_pivot: int = DEFAULT_CENTURY_PIVOT) -> None:
        if not 0 <= century_pivot <= 99:
            raise ValueError("century_pivot must be within 0..99")
        self.century_pivot = century_pivot

    def validate(self, raw: str) -> ValidationResult:
        require_str(raw, "raw")

        # 1) Longueur / chiffres: entrée littérale, aucun nettoyage
        if not _ID_PATTERN.fullmatch(raw):
            return ValidationResult.fail(INVALID_FORMAT, MSG_FORMAT)

        # 2) Date de naissance
        if not is_calendar_date(parse_components(raw, self.century_pivot)):
            return ValidationResult.fail(INVALID_DATE, MSG_DATE)

        # 3) Luhn
        if not luhn_ok(raw):
            return ValidationResult.fail(INVALID_CHECKSUM, MSG_CHECKSUM)

        return ValidationResult.ok(raw)

    def date_of_birth(self, id_number: str) -> date | None:
        """Date de naissance d'un numéro déjà valide, sinon None."""
        if not self.validate(id_number).valid:
            return None
        return parse_components(id_number, self.century_pivot).date_of_birth
