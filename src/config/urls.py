from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from django.urls import include, path

urlpatterns = [
    path("", include("modules.core.urls")),
    # Domain modules
    path("api/products", include("modules.products.urls")),
    # OpenAPI schema & docs (public)
    path("docs/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "docs/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
]
