from django.apps import AppConfig


class QuoteAppConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "quote_app"
    verbose_name = "Quotes"
