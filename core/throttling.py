from django.conf import settings
from rest_framework.throttling import SimpleRateThrottle

def _client_cache_key(prefix: str, ident: str) -> str:
    return f"{prefix}:{ident}"

class _ClientThrottle(SimpleRateThrottle):
    """
    Throttle par adresse client (pas d'auth sur l'API de validation).
    Le débit est relu dans les settings à chaque requête.
    """
    setting_name = ""

    def __init__(self):
        # SimpleRateThrottle lit la rate dans __init__: on la résout dans allow_request
        pass

    def get_cache_key(self, request, view):
        return _client_cache_key(f"throttle:{self.scope}", self.get_ident(request))

    def get_rate(self):
        return getattr(settings, self.setting_name, None)

    def allow_request(self, request, view):
        self.rate = self.get_rate()
        if not self.rate:
            return True
        self.num_requests, self.duration = self.parse_rate(self.rate)
        return super().allow_request(request, view)

class ClientMinuteThrottle(_ClientThrottle):
    scope = "client_minute"
    setting_name = "IDENTITY_THROTTLE_MINUTE"

class ClientDailyThrottle(_ClientThrottle):
    scope = "client_day"
    setting_name = "IDENTITY_THROTTLE_DAY"
