from rest_framework.views import APIView
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiResponse

from ..conf import century_pivot
from ..serializers.output import IdentityPolicyOutputSerializer
from ..services import id_number, passport
from ..services.identity_service import MSG_UNSUPPORTED
from ..services.types import (
    IdentityType, INVALID_FORMAT, INVALID_DATE, INVALID_CHECKSUM, INVALID_PASSPORT, UNSUPPORTED_TYPE,
)

def build_policy() -> dict:
    return {
        "id_types": [t.value for t in IdentityType],
        "century_pivot": century_pivot(),
        "national_id_length": id_number.NATIONAL_ID_LENGTH,
        "passport": {"min_length": passport.PASSPORT_MIN_LENGTH, "max_length": passport.PASSPORT_MAX_LENGTH},
        "messages": {
            INVALID_FORMAT: id_number.MSG_FORMAT,
            INVALID_DATE: id_number.MSG_DATE,
            INVALID_CHECKSUM: id_number.MSG_CHECKSUM,
            INVALID_PASSPORT: passport.MSG_PASSPORT,
            UNSUPPORTED_TYPE: MSG_UNSUPPORTED,
        },
    }

@extend_schema(
    tags=["Identity Validation"],
    responses={200: OpenApiResponse(response=IdentityPolicyOutputSerializer,
                                    description="Constantes partagées avec la copie navigateur")},
)
class IdentityPolicyView(APIView):
    """GET /identity/policy"""
    def get(self, request):
        return Response(build_policy(), status=200)
