"""Product URL configuration.

Mounted under ``api/products`` by the root URLconf.  The id segment
accepts any text so malformed ids reach the view's rule chains and are
answered with 400 instead of falling through to a 404.
"""

from __future__ import annotations

from django.urls import re_path

from modules.products.views import ProductCollectionView, ProductDetailView

urlpatterns = [
    re_path(r"^/?$", ProductCollectionView.as_view(), name="product-list"),
    re_path(r"^/(?P<id>[^/]+)/?$", ProductDetailView.as_view(), name="product-detail"),
]
