from django.urls import path

from agents.views.capture import AgentCaptureValidateView
from agents.views.search import AgentSearchValidateView

urlpatterns = [
    path("validate", AgentCaptureValidateView.as_view(), name="agents-validate"),
    path("search/validate", AgentSearchValidateView.as_view(), name="agents-search-validate"),
]
