import logging

from rest_framework.views import APIView
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiExample, OpenApiResponse

from core.exceptions import error_response
from identity.conf import identity_service
from identity.services.normalize import mask

from ..serializers.capture import AgentCaptureInputSerializer
from ..serializers.output import AgentValidateOutputSerializer, FieldErrorsSerializer
from ..services.capture_form import AgentCaptureForm

logger = logging.getLogger("agentcheck.agents")

@extend_schema(
    tags=["Agents"],
    request=AgentCaptureInputSerializer,
    responses={
        200: OpenApiResponse(response=AgentValidateOutputSerializer, description="Formulaire valide + enregistrement préparé"),
        400: OpenApiResponse(response=FieldErrorsSerializer, description="VALIDATION_FAILED (un message par champ)"),
        429: OpenApiResponse(description="THROTTLED"),
    },
    examples=[
        OpenApiExample(
            "Réponse erreur",
            value={"error": {"code": "VALIDATION_FAILED", "message": "Please correct the errors and try again.",
                             "details": {"sa_id_no": "Invalid ID number checksum"}}},
            response_only=True,
            status_codes=["400"],
        ),
    ],
)
class AgentCaptureValidateView(APIView):
    """
    POST /agents/validate
    Contrôle autoritaire du formulaire de capture avant persistance.
    Seul `agent` (valeurs normalisées) doit être transmis au stockage.
    """
    def post(self, request):
        form = AgentCaptureForm(request.data, identity=identity_service())
        res = form.validate()

        if not res.valid:
            logger.info("agent capture rejected fields=%s", ",".join(sorted(res.errors)))
            return error_response("VALIDATION_FAILED", "Please correct the errors and try again.",
                                  details=res.errors, status_code=400)

        logger.info("agent capture accepted id_type=%s id=%s", res.record["id_type"],
                    mask(res.record["id_number"] or res.record["passport_number"], 2))
        return Response({"valid": True, "agent": res.record}, status=200)
