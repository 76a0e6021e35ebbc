from django.urls import path

from identity.views.validate import IdentityValidateView
from identity.views.policy import IdentityPolicyView

urlpatterns = [
    path("validate", IdentityValidateView.as_view(), name="identity-validate"),
    path("policy", IdentityPolicyView.as_view(), name="identity-policy"),
]
