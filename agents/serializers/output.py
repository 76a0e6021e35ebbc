from rest_framework import serializers

class AgentValidateOutputSerializer(serializers.Serializer):
    valid = serializers.BooleanField()
    agent = serializers.DictField()  # enregistrement préparé (noms de colonnes agent)

class AgentSearchOutputSerializer(serializers.Serializer):
    valid = serializers.BooleanField()
    criteria = serializers.DictField()

class FieldErrorsSerializer(serializers.Serializer):
    code = serializers.CharField()     # "VALIDATION_FAILED"
    message = serializers.CharField()
    details = serializers.DictField(child=serializers.CharField())  # {"sa_id_no": "Invalid ID number checksum"}
