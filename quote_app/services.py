import logging

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import DEFAULT_DB_ALIAS
from django.utils import timezone

from .models import Quote, ShopSettings
from .utils import invariant, serialize_metadata

logger = logging.getLogger(__name__)

DEFAULT_STATUS = "pending"


def update_settings(shop_id, admin_email, using=DEFAULT_DB_ALIAS):
    """Create or update the notification settings of a shop."""
    invariant(shop_id, "Shop ID is required")
    shop_settings, created = ShopSettings.objects.using(using).update_or_create(
        shop_id=shop_id,
        defaults={"admin_email": admin_email},
    )
    logger.info(f"{'Created' if created else 'Updated'} settings for shop {shop_id}")
    return shop_settings


def get_settings(shop_id, using=DEFAULT_DB_ALIAS):
    return ShopSettings.objects.using(using).filter(shop_id=shop_id).first()


def create_quote(
    shop_id,
    product_id,
    variant_id,
    title,
    name="",
    email="",
    image="",
    metadata=None,
    message="",
    status=None,
    using=DEFAULT_DB_ALIAS,
):
    """
    Insert a new quote.
    Raises InvariantError before touching the database when a required
    field is empty.
    """
    invariant(shop_id, "Shop ID is required")
    invariant(product_id, "Product ID is required")
    invariant(variant_id, "Variant ID is required")
    invariant(title, "Title is required")
    if getattr(settings, "QUOTES_REQUIRE_EMAIL", False):
        invariant(email, "Email is required")

    quote = Quote.objects.using(using).create(
        shop_id=shop_id,
        product_id=product_id,
        variant_id=variant_id,
        title=title,
        name=name or "",
        email=email or "",
        image=image or "",
        metadata=serialize_metadata(metadata),
        message=message or "",
        status=status or DEFAULT_STATUS,
    )
    logger.info(f"Created quote {quote.id} for shop {shop_id}")
    return quote


def update_quote(quote_id, using=DEFAULT_DB_ALIAS, **fields):
    """Merge `fields` into the quote. No read happens before the write."""
    if "metadata" in fields:
        fields["metadata"] = serialize_metadata(fields["metadata"])
    fields["updated_at"] = timezone.now()

    updated = Quote.objects.using(using).filter(pk=quote_id).update(**fields)
    if not updated:
        raise Quote.DoesNotExist(f"Quote {quote_id} does not exist")
    return Quote.objects.using(using).get(pk=quote_id)


def update_quote_status(quote_id, status, using=DEFAULT_DB_ALIAS):
    invariant(status, "Status is required")
    quote = update_quote(quote_id, using=using, status=status)
    logger.info(f"Quote {quote_id} status set to {status!r}")
    return quote


def validate_quote(data):
    """
    Check the fields a merchant has to fill in.
    Returns a dict of field -> message, or None when nothing is missing.
    """
    errors = {}

    if not data.get("title"):
        errors["title"] = "Title is required"

    if not (data.get("productId") or data.get("product_id")):
        errors["productId"] = "Product is required"

    if not (data.get("variantId") or data.get("variant_id")):
        errors["variantId"] = "Variant is required"

    return errors or None


def get_quote(quote_id, using=DEFAULT_DB_ALIAS):
    try:
        return Quote.objects.using(using).get(pk=quote_id)
    except (Quote.DoesNotExist, ValidationError):
        return None


def get_quotes(shop_id, using=DEFAULT_DB_ALIAS):
    """All quotes of a shop, newest first."""
    return list(Quote.objects.using(using).filter(shop_id=shop_id).order_by("-created_at"))


def delete_quote(quote_id, using=DEFAULT_DB_ALIAS):
    quote = Quote.objects.using(using).get(pk=quote_id)
    quote.delete()
    logger.info(f"Deleted quote {quote_id}")
    return quote
