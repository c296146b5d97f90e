from django.contrib import admin
from django.urls import path, include
from django.conf import settings

urlpatterns = [
    path("admin/", admin.site.urls),
    path("", include("quote_app.urls")),
]

if settings.DEBUG and not settings.TESTING:
    import debug_toolbar

    urlpatterns += [path("__debug__/", include(debug_toolbar.urls))]
