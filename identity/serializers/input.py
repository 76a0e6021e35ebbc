from rest_framework import serializers

from ..services.types import IdentityType

ID_TYPE_CHOICES = [t.value for t in IdentityType]

class StrictCharField(serializers.CharField):
    """CharField qui refuse les nombres JSON au lieu de les convertir en texte."""
    default_error_messages = {
        "not_a_string": "Not a valid string.",
    }

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail("not_a_string")
        return super().to_internal_value(data)


class IdentityValidateInputSerializer(serializers.Serializer):
    id_type = serializers.ChoiceField(choices=ID_TYPE_CHOICES)  # "sa_id" | "passport"
    # Pas de trim ni de longueur max ici: la normalisation et le format appartiennent au service
    value = StrictCharField(allow_blank=True, trim_whitespace=False)
