from .identity_urls import urlpatterns
