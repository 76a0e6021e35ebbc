from rest_framework import serializers

from identity.services.normalize import digits_only
from identity.services.types import IdentityType

TITLE_CHOICES = ["Mr", "Mrs", "Ms", "Miss", "Dr", "Prof"]
GENDER_CHOICES = ["M", "F"]
RACE_CHOICES = ["African", "Coloured", "White", "Indian"]
PROVINCE_CHOICES = [
    "Eastern Cape", "Free State", "Gauteng", "KwaZulu-Natal", "Limpopo",
    "Mpumalanga", "Northern Cape", "North West", "Western Cape",
]
PHASE_CHOICES = ["Foundation", "Intermediate", "Senior", "FET"]
ACCOUNT_TYPE_CHOICES = ["Savings", "Current", "Transmission"]

# id -> libellé (liste fixe du formulaire de capture)
WORKING_AREAS = {
    "1": "Sandton, Johannesburg, Gauteng, 2196",
    "2": "Durbanville, Cape Town, Western Cape, 7551",
    "3": "Durban, Durban, KwaZulu-Natal, 4320",
    "4": "Hatfield, Pretoria, Gauteng, 0028",
    "5": "Stellenbosch, Stellenbosch, Western Cape, 7600",
    "6": "Polokwane, Polokwane, Limpopo, 0699",
    "7": "Kimberley, Kimberley, Northern Cape, 8301",
    "8": "Nelspruit, Mbombela, Mpumalanga, 1200",
    "9": "Bloemfontein, Bloemfontein, Free State, 9300",
    "10": "Port Elizabeth, Gqeberha, Eastern Cape, 6001",
    "11": "Soweto, Johannesburg, Gauteng, 1804",
    "12": "Paarl, Paarl, Western Cape, 7620",
    "13": "Pietermaritzburg, Pietermaritzburg, KwaZulu-Natal, 3201",
    "14": "East London, East London, Eastern Cape, 5201",
}
WORKING_AREA_CHOICES = list(WORKING_AREAS)

# "" envoyé par un <input> vide -> None pour ces champs non texte
BLANK_AS_NULL = (
    "criminal_record_date", "signed_agreement_date", "agent_training_date",
    "quantum_communications", "quantum_mathematics", "quantum_training",
)

def _optional_text(max_length, **kwargs):
    return serializers.CharField(required=False, allow_blank=True, default="", max_length=max_length, **kwargs)

def _optional_choice(choices):
    return serializers.ChoiceField(choices=choices, required=False, allow_blank=True, default="")

def _score():
    return serializers.FloatField(required=False, allow_null=True, default=None, min_value=0, max_value=100)

class AgentCaptureInputSerializer(serializers.Serializer):
    # Personal
    title = _optional_choice(TITLE_CHOICES)
    first_name = serializers.CharField(max_length=50)
    surname = serializers.CharField(max_length=50)
    known_as = _optional_text(50)
    initials = serializers.RegexField(r"^[A-Za-z]*$", max_length=10, required=False, allow_blank=True, default="",
                                      error_messages={"invalid": "Initials may only contain letters."})
    gender = serializers.ChoiceField(choices=GENDER_CHOICES)
    race = serializers.ChoiceField(choices=RACE_CHOICES)

    # Identification (la pièce elle-même est contrôlée par le service d'identité)
    id_type = serializers.ChoiceField(choices=[t.value for t in IdentityType], default=IdentityType.NATIONAL_ID.value)
    sa_id_no = _optional_text(None, trim_whitespace=False)
    passport_number = _optional_text(None)

    # Contact
    tel_number = serializers.CharField(max_length=20)
    email_address = serializers.EmailField(max_length=254)
    address_line_1 = serializers.CharField(max_length=255)
    address_line_2 = _optional_text(255)
    city_town = serializers.CharField(max_length=100)
    province_region = serializers.ChoiceField(choices=PROVINCE_CHOICES)
    postal_code = serializers.CharField(max_length=10)

    # Preferred working areas
    preferred_working_area_1 = serializers.ChoiceField(choices=WORKING_AREA_CHOICES)
    preferred_working_area_2 = _optional_choice(WORKING_AREA_CHOICES)
    preferred_working_area_3 = _optional_choice(WORKING_AREA_CHOICES)

    # SACE
    sace_number = _optional_text(60)
    phase_registered = _optional_choice(PHASE_CHOICES)
    subjects_registered = _optional_text(255)

    # Qualifications / quantum tests
    highest_qualification = _optional_text(100)
    quantum_communications = _score()
    quantum_mathematics = _score()
    quantum_training = _score()

    # Compliance
    criminal_record_checked = serializers.BooleanField(default=False)
    criminal_record_date = serializers.DateField(required=False, allow_null=True, default=None)
    signed_agreement = serializers.BooleanField(default=False)
    signed_agreement_date = serializers.DateField(required=False, allow_null=True, default=None)
    agent_training_date = serializers.DateField(required=False, allow_null=True, default=None)

    # Banking
    bank_name = _optional_text(100)
    account_holder = _optional_text(100)
    account_number = _optional_text(30)
    branch_code = _optional_text(10)
    account_type = _optional_choice(ACCOUNT_TYPE_CHOICES)

    def to_internal_value(self, data):
        if hasattr(data, "items"):
            data = {k: (None if k in BLANK_AS_NULL and v == "" else v) for k, v in data.items()}
        return super().to_internal_value(data)

    def validate_tel_number(self, value):
        if not 10 <= len(digits_only(value)) <= 15:
            raise serializers.ValidationError("Please enter a valid phone number.")
        return value

    def validate_postal_code(self, value):
        if len(digits_only(value)) != 4:
            raise serializers.ValidationError("Postal code must be 4 digits.")
        return value
