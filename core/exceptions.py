"""
Enveloppe d'erreur commune à toute l'API:
  {"error": {"code": "...", "message": "...", "details": {...}}}
"""
from django.http import Http404
from django.core.exceptions import PermissionDenied
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

# DRF default_code -> code API
CODE_MAP = {
    "invalid": "INVALID_REQUEST",
    "parse_error": "INVALID_REQUEST",
    "throttled": "THROTTLED",
    "method_not_allowed": "METHOD_NOT_ALLOWED",
    "not_found": "NOT_FOUND",
    "unsupported_media_type": "UNSUPPORTED_MEDIA_TYPE",
    "not_acceptable": "NOT_ACCEPTABLE",
    "permission_denied": "FORBIDDEN",
    "not_authenticated": "UNAUTHORIZED",
    "authentication_failed": "UNAUTHORIZED",
}

def error_response(code: str, message: str, details=None, status_code: int = status.HTTP_400_BAD_REQUEST) -> Response:
    body = {"code": code, "message": message}
    if details:
        body["details"] = details
    return Response({"error": body}, status=status_code)

def flatten_errors(detail) -> dict:
    """
    {"field": ["msg1", "msg2"]} -> {"field": "msg1"} (un message par champ).
    Les erreurs imbriquées sont aplaties en "parent.child".
    """
    flat = {}
    if isinstance(detail, dict):
        for field, value in detail.items():
            if isinstance(value, dict):
                for sub, msg in flatten_errors(value).items():
                    flat[f"{field}.{sub}"] = msg
            elif isinstance(value, list):
                if value:
                    flat[str(field)] = str(value[0])
            else:
                flat[str(field)] = str(value)
    elif isinstance(detail, list) and detail:
        flat["non_field_errors"] = str(detail[0])
    return flat

def api_exception_handler(exc, context):
    if isinstance(exc, Http404):
        exc = exceptions.NotFound()
    elif isinstance(exc, PermissionDenied):
        exc = exceptions.PermissionDenied()

    response = exception_handler(exc, context)
    if response is None:
        return None  # 500 laissé à Django

    if isinstance(exc, exceptions.ValidationError):
        return error_response("INVALID_REQUEST", "Request payload is invalid",
                              details=flatten_errors(exc.detail), status_code=response.status_code)

    code = CODE_MAP.get(getattr(exc, "default_code", ""), "ERROR")
    message = str(exc.detail) if isinstance(exc, exceptions.APIException) else str(exc)
    details = None
    if isinstance(exc, exceptions.Throttled) and exc.wait is not None:
        details = {"retry_after": int(exc.wait)}
    new = error_response(code, message, details=details, status_code=response.status_code)
    # conserve Retry-After / Allow posés par DRF
    for header in ("Retry-After", "Allow", "WWW-Authenticate"):
        if header in response:
            new[header] = response[header]
    return new
