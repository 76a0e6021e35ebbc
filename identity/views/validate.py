import logging

from rest_framework.views import APIView
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiExample, OpenApiResponse

from ..conf import identity_service
from ..serializers.input import IdentityValidateInputSerializer
from ..serializers.output import IdentityValidateOutputSerializer
from ..services.normalize import mask

logger = logging.getLogger("agentcheck.identity")

@extend_schema(
    tags=["Identity Validation"],
    request=IdentityValidateInputSerializer,
    responses={
        200: OpenApiResponse(response=IdentityValidateOutputSerializer,
             description="Résultat de validation (valid=false pour une saisie invalide)"),
        400: OpenApiResponse(description="INVALID_REQUEST (id_type inconnu, payload mal formé)"),
        429: OpenApiResponse(description="THROTTLED"),
    },
    examples=[
        OpenApiExample("Requête SA ID", value={"id_type": "sa_id", "value": "8001015009087"}, request_only=True),
        OpenApiExample("Requête passeport", value={"id_type": "passport", "value": "ab123456"}, request_only=True),
        OpenApiExample(
            "Réponse checksum invalide",
            value={"valid": False, "error_code": "invalid_checksum",
                   "error_message": "Invalid ID number checksum", "normalized_value": None},
            response_only=True,
        ),
    ],
)
class IdentityValidateView(APIView):
    """
    POST /identity/validate
    Re-validation autoritaire côté serveur de la pièce saisie dans le navigateur.
    """
    serializer_class = IdentityValidateInputSerializer

    def post(self, request):
        ser = self.serializer_class(data=request.data)
        ser.is_valid(raise_exception=True)
        id_type = ser.validated_data["id_type"]
        value = ser.validated_data["value"]

        res = identity_service().validate_identity(id_type, value)

        if not res.valid:
            logger.info("identity rejected type=%s value=%s code=%s", id_type, mask(value, 2), res.error_code)

        return Response(res.as_dict(), status=200)
