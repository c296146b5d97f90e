from django.urls import path
from . import views

# Paths match the routes the storefront widget and the admin embed call
urlpatterns = [
    path("app", views.index, name="index"),
    path("app/quotes", views.quotes_page, name="quotes_page"),
    path("app/quotes/<uuid:quote_id>/status", views.quote_status, name="quote_status"),
    path("app/settings", views.settings_page, name="settings_page"),
    path("quotes", views.quotes_list, name="quotes_list"),
    path("quotes/delete", views.delete_quote_endpoint, name="delete_quote"),
    path("create-quote", views.create_quote_endpoint, name="create_quote"),
]
