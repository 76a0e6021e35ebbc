from rest_framework.views import APIView
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiResponse

from core.exceptions import error_response, flatten_errors

from ..serializers.search import AgentSearchInputSerializer
from ..serializers.output import AgentSearchOutputSerializer, FieldErrorsSerializer

@extend_schema(
    tags=["Agents"],
    request=AgentSearchInputSerializer,
    responses={
        200: OpenApiResponse(response=AgentSearchOutputSerializer),
        400: OpenApiResponse(response=FieldErrorsSerializer, description="VALIDATION_FAILED"),
    },
)
class AgentSearchValidateView(APIView):
    """POST /agents/search/validate — critères normalisés pour la recherche d'agents."""
    serializer_class = AgentSearchInputSerializer

    def post(self, request):
        ser = self.serializer_class(data=request.data)
        if not ser.is_valid():
            return error_response("VALIDATION_FAILED", "Please correct the errors and try again.",
                                  details=flatten_errors(ser.errors), status_code=400)
        criteria = {k: (v.isoformat() if hasattr(v, "isoformat") else v) for k, v in ser.validated_data.items()}
        return Response({"valid": True, "criteria": criteria}, status=200)
