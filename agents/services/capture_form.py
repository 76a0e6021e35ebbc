"""
Validation du formulaire de capture d'un agent.

Ordre:
  1) règles par champ (serializer DRF)
  2) pièce d'identité via IdentityValidationService (SA ID ou passeport)
  3) règles croisées: coordonnées bancaires complètes, dates liées aux cases cochées
Les erreurs sont rendues sous forme {champ_formulaire: message}, un message par champ,
la première règle en échec l'emporte.

Rien n'est persisté ici: seul `record` (valeurs normalisées) est destiné au stockage.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional

from core.exceptions import flatten_errors
from identity.services.identity_service import IdentityValidationService
from identity.services.normalize import digits_only
from identity.services.types import IdentityType

from ..serializers.capture import AgentCaptureInputSerializer

BANK_FIELDS = ("bank_name", "account_holder", "account_number", "branch_code")

FIELD_LABELS = {
    "bank_name": "Bank name",
    "account_holder": "Account holder",
    "account_number": "Account number",
    "branch_code": "Branch code",
}

MSG_SA_ID_REQUIRED = "SA ID number is required."
MSG_PASSPORT_REQUIRED = "Passport number is required."
MSG_BANK_REQUIRED = "{label} is required when providing banking details."
MSG_AGREEMENT_DATE = "Agreement date is required when agreement is signed."
MSG_CRIMINAL_DATE = "Criminal record check date is required."
MSG_NOT_A_STRING = "Not a valid string."

# champ formulaire -> colonne agent
FIELD_MAP = {
    "title": "title",
    "first_name": "first_name",
    "surname": "last_name",
    "known_as": "known_as",
    "initials": "initials",
    "gender": "gender",
    "race": "race",
    "tel_number": "phone",
    "email_address": "email",
    "city_town": "city",
    "province_region": "province",
    "postal_code": "postal_code",
    "sace_number": "sace_number",
    "phase_registered": "phase_registered",
    "subjects_registered": "subjects_registered",
    "highest_qualification": "highest_qualification",
    "quantum_communications": "quantum_communications",
    "quantum_mathematics": "quantum_mathematics",
    "quantum_training": "quantum_training",
    "criminal_record_checked": "criminal_record_checked",
    "criminal_record_date": "criminal_record_date",
    "signed_agreement": "signed_agreement",
    "signed_agreement_date": "signed_agreement_date",
    "agent_training_date": "agent_training_date",
    "bank_name": "bank_name",
    "account_holder": "account_holder",
    "account_number": "account_number",
    "branch_code": "branch_code",
    "account_type": "account_type",
}

DIGITS_ONLY_FIELDS = ("postal_code", "account_number", "branch_code")


@dataclass
class CaptureResult:
    valid: bool
    errors: Dict[str, str] = field(default_factory=dict)
    record: Optional[Dict] = None


def _filled(data, key: str) -> bool:
    value = data.get(key)
    if isinstance(value, str):
        return bool(value.strip())
    return bool(value)


def sanitize_phone(value: str) -> str:
    value = value.strip()
    prefix = "+" if value.startswith("+") else ""
    return prefix + digits_only(value)


class AgentCaptureForm:
    def __init__(self, data, identity: Optional[IdentityValidationService] = None) -> None:
        self.data = data
        self.identity = identity or IdentityValidationService()
        self.errors: Dict[str, str] = {}
        self.identity_value: Optional[str] = None

    def validate(self) -> CaptureResult:
        self.errors = {}
        self.identity_value = None

        ser = AgentCaptureInputSerializer(data=self.data)
        if not ser.is_valid():
            self.errors.update(flatten_errors(ser.errors))
        if not hasattr(self.data, "get"):
            return CaptureResult(valid=False, errors=dict(self.errors))

        self._validate_identity()
        self._validate_banking()
        self._validate_dates()

        if self.errors:
            return CaptureResult(valid=False, errors=dict(self.errors))
        return CaptureResult(valid=True, record=self.prepare(ser.validated_data))

    # ------------------------------------------------------------------
    def _add_error(self, name: str, message: str) -> None:
        self.errors.setdefault(name, message)

    def _validate_identity(self) -> None:
        if "id_type" in self.errors:
            return
        id_type = self.data.get("id_type") or IdentityType.NATIONAL_ID.value
        if IdentityType.coerce(id_type) is IdentityType.PASSPORT:
            form_field, required_msg = "passport_number", MSG_PASSPORT_REQUIRED
        else:
            form_field, required_msg = "sa_id_no", MSG_SA_ID_REQUIRED

        if form_field in self.errors:
            return
        raw = self.data.get(form_field)
        if not _filled(self.data, form_field):
            self._add_error(form_field, required_msg)
            return
        if not isinstance(raw, str):
            self._add_error(form_field, MSG_NOT_A_STRING)
            return

        res = self.identity.validate_identity(id_type, raw)
        if not res.valid:
            self._add_error(form_field, res.error_message)
        else:
            self.identity_value = res.normalized_value

    def _validate_banking(self) -> None:
        if not any(_filled(self.data, f) for f in BANK_FIELDS):
            return
        for name in BANK_FIELDS:
            if not _filled(self.data, name):
                self._add_error(name, MSG_BANK_REQUIRED.format(label=FIELD_LABELS[name]))

    def _validate_dates(self) -> None:
        if self._checked("signed_agreement") and not _filled(self.data, "signed_agreement_date"):
            self._add_error("signed_agreement_date", MSG_AGREEMENT_DATE)
        if self._checked("criminal_record_checked") and not _filled(self.data, "criminal_record_date"):
            self._add_error("criminal_record_date", MSG_CRIMINAL_DATE)

    def _checked(self, name: str) -> bool:
        value = self.data.get(name)
        if isinstance(value, str):
            return value.strip().lower() in ("1", "true", "on", "yes")
        return bool(value)

    # ------------------------------------------------------------------
    def prepare(self, validated: Dict) -> Dict:
        """Construit l'enregistrement agent (noms de colonnes) à partir des données validées."""
        record = {}
        for form_field, column in FIELD_MAP.items():
            value = validated.get(form_field)
            if form_field in DIGITS_ONLY_FIELDS and value:
                value = digits_only(value)
            elif form_field == "tel_number":
                value = sanitize_phone(value)
            elif hasattr(value, "isoformat"):
                value = value.isoformat()
            record[column] = value

        # une seule pièce active, l'autre champ est vidé
        record["id_type"] = validated["id_type"]
        if validated["id_type"] == IdentityType.PASSPORT.value:
            record["id_number"] = ""
            record["passport_number"] = self.identity_value
        else:
            record["id_number"] = self.identity_value
            record["passport_number"] = ""

        record["street_address"] = "\n".join(
            line for line in (validated.get("address_line_1"), validated.get("address_line_2")) if line
        )
        record["preferred_areas"] = [
            validated[name] for name in
            ("preferred_working_area_1", "preferred_working_area_2", "preferred_working_area_3")
            if validated.get(name)
        ]
        return record
