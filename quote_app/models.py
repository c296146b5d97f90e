import uuid

from django.db import models


class Quote(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    shop_id = models.CharField(max_length=255, db_index=True)
    product_id = models.CharField(max_length=255)
    variant_id = models.CharField(max_length=255)
    title = models.CharField(max_length=255)
    name = models.CharField(max_length=200, blank=True, default="")
    email = models.EmailField(blank=True, default="")
    image = models.URLField(max_length=500, blank=True, default="")
    # Raw string blob from the storefront widget, never parsed server side
    metadata = models.TextField(blank=True, default="")
    message = models.TextField(blank=True, default="")
    status = models.CharField(max_length=50, default="pending")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "Quote"
        ordering = ["-created_at"]

    def __str__(self):
        return f"Quote for {self.title} ({self.shop_id})"

    def to_dict(self):
        """Serialize using the camelCase keys the storefront widget expects."""
        return {
            "id": str(self.id),
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
            "shopId": self.shop_id,
            "productId": self.product_id,
            "variantId": self.variant_id,
            "title": self.title,
            "name": self.name,
            "email": self.email,
            "image": self.image,
            "metadata": self.metadata,
            "message": self.message,
            "status": self.status,
        }


class ShopSettings(models.Model):
    shop_id = models.CharField(max_length=255, unique=True)
    admin_email = models.EmailField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "Settings"
        verbose_name = "settings"
        verbose_name_plural = "settings"

    def __str__(self):
        return f"Settings for {self.shop_id}"
