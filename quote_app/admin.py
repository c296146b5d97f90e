from django.contrib import admin

from .models import Quote, ShopSettings


@admin.register(Quote)
class QuoteAdmin(admin.ModelAdmin):
    list_display = ("title", "shop_id", "product_id", "variant_id", "email", "status", "created_at")
    list_filter = ("status", "shop_id")
    search_fields = ("title", "name", "email", "product_id")


@admin.register(ShopSettings)
class ShopSettingsAdmin(admin.ModelAdmin):
    list_display = ("shop_id", "admin_email", "updated_at")
