from rest_framework import serializers

class IdentityValidateOutputSerializer(serializers.Serializer):
    valid = serializers.BooleanField()
    error_code = serializers.CharField(allow_null=True)
    error_message = serializers.CharField(allow_null=True)
    normalized_value = serializers.CharField(allow_null=True)

class IdentityPolicyOutputSerializer(serializers.Serializer):
    id_types = serializers.ListField(child=serializers.CharField())
    century_pivot = serializers.IntegerField()
    national_id_length = serializers.IntegerField()
    passport = serializers.DictField()  # {"min_length": 6, "max_length": 12}
    messages = serializers.DictField(child=serializers.CharField())
