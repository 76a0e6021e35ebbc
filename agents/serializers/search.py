from rest_framework import serializers

SEARCH_FIELD_CHOICES = ["all", "name", "email", "phone", "id_number"]
STATUS_CHOICES = ["all", "active", "inactive", "suspended"]

class AgentSearchInputSerializer(serializers.Serializer):
    search_query = serializers.CharField(max_length=100, required=False, allow_blank=True, default="")
    search_field = serializers.ChoiceField(choices=SEARCH_FIELD_CHOICES, default="all")
    status = serializers.ChoiceField(choices=STATUS_CHOICES, default="all")
    province = serializers.CharField(max_length=50, required=False, allow_blank=True, default="")
    date_from = serializers.DateField(required=False, allow_null=True, default=None)
    date_to = serializers.DateField(required=False, allow_null=True, default=None)

    def to_internal_value(self, data):
        if hasattr(data, "items"):
            data = {k: (None if k in ("date_from", "date_to") and v == "" else v) for k, v in data.items()}
        return super().to_internal_value(data)

    def validate(self, attrs):
        date_from, date_to = attrs.get("date_from"), attrs.get("date_to")
        if date_from and date_to and date_from > date_to:
            raise serializers.ValidationError({"date_to": "End date must be after start date."})
        return attrs
