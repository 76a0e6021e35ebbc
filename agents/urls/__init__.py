from .agents_urls import urlpatterns
