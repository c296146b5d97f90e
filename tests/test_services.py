import uuid
from datetime import timedelta

import pytest
from django.utils import timezone

from quote_app.models import Quote, ShopSettings
from quote_app.services import (
    create_quote,
    delete_quote,
    get_quote,
    get_quotes,
    get_settings,
    update_quote,
    update_quote_status,
    update_settings,
    validate_quote,
)
from quote_app.utils import InvariantError

from .conftest import OTHER_SHOP, SHOP


def test_validate_quote_reports_missing_fields():
    assert validate_quote({}) == {
        "title": "Title is required",
        "productId": "Product is required",
        "variantId": "Variant is required",
    }


def test_validate_quote_accepts_complete_data():
    assert validate_quote({"title": "t", "productId": "p", "variantId": "v"}) is None
    assert validate_quote({"title": "t", "product_id": "p", "variant_id": "v"}) is None


def test_validate_quote_ignores_format():
    data = {"title": "t", "productId": "p", "variantId": "v", "email": "not-an-email", "image": "nope"}
    assert validate_quote(data) is None


@pytest.mark.django_db
@pytest.mark.parametrize("missing", ["shop_id", "product_id", "variant_id", "title"])
def test_create_quote_requires_fields_before_touching_storage(quote_data, missing, django_assert_num_queries):
    quote_data[missing] = ""
    with django_assert_num_queries(0):
        with pytest.raises(InvariantError):
            create_quote(**quote_data)
    assert Quote.objects.count() == 0


@pytest.mark.django_db
def test_create_quote_email_required_when_configured(quote_data, settings):
    settings.QUOTES_REQUIRE_EMAIL = True
    quote_data["email"] = ""
    with pytest.raises(InvariantError, match="Email is required"):
        create_quote(**quote_data)


@pytest.mark.django_db
def test_create_then_get_quote(quote_data):
    created = create_quote(metadata={"finish": "walnut"}, **quote_data)

    quote = get_quote(created.id)
    assert quote is not None
    assert quote.shop_id == SHOP
    assert quote.product_id == quote_data["product_id"]
    assert quote.variant_id == quote_data["variant_id"]
    assert quote.title == quote_data["title"]
    assert quote.name == "Jane Doe"
    assert quote.email == "jane@example.com"
    assert quote.message == "Need 4 of these"
    assert quote.metadata == '{"finish": "walnut"}'
    assert quote.status == "pending"
    assert quote.created_at is not None


@pytest.mark.django_db
def test_create_quote_defaults_optional_fields(quote_data):
    quote = create_quote(
        shop_id=SHOP,
        product_id="p",
        variant_id="v",
        title="t",
        name=None,
        email=None,
        image=None,
        message=None,
    )
    quote.refresh_from_db()
    assert (quote.name, quote.email, quote.image, quote.metadata, quote.message) == ("", "", "", "", "")


@pytest.mark.django_db
def test_create_quote_keeps_explicit_status(quote_data):
    quote = create_quote(status="quoted", **quote_data)
    assert get_quote(quote.id).status == "quoted"


@pytest.mark.django_db
def test_get_quote_missing_or_malformed_id():
    assert get_quote(uuid.uuid4()) is None
    assert get_quote("not-a-uuid") is None


@pytest.mark.django_db
def test_get_quotes_scoped_to_shop_newest_first(quote_data):
    older = create_quote(**quote_data)
    newer = create_quote(**{**quote_data, "title": "Walnut desk"})
    create_quote(**{**quote_data, "shop_id": OTHER_SHOP})

    now = timezone.now()
    Quote.objects.filter(pk=older.pk).update(created_at=now - timedelta(days=1))
    Quote.objects.filter(pk=newer.pk).update(created_at=now)

    quotes = get_quotes(SHOP)
    assert [q.id for q in quotes] == [newer.id, older.id]
    assert get_quotes("unknown.myshopify.com") == []


@pytest.mark.django_db
def test_update_quote_merges_fields(quote_data):
    quote = create_quote(**quote_data)

    updated = update_quote(quote.id, message="Changed my mind", metadata={"qty": 2})

    assert updated.message == "Changed my mind"
    assert updated.metadata == '{"qty": 2}'
    assert updated.title == quote_data["title"]
    assert updated.updated_at >= quote.updated_at


@pytest.mark.django_db
def test_update_quote_missing_id_raises():
    with pytest.raises(Quote.DoesNotExist):
        update_quote(uuid.uuid4(), message="x")


@pytest.mark.django_db
def test_update_quote_status_accepts_any_string(quote_data):
    quote = create_quote(**quote_data)

    assert update_quote_status(quote.id, "approved").status == "approved"
    assert update_quote_status(quote.id, "something custom").status == "something custom"


@pytest.mark.django_db
def test_update_quote_status_requires_status(quote_data):
    quote = create_quote(**quote_data)
    with pytest.raises(InvariantError):
        update_quote_status(quote.id, "")
    assert get_quote(quote.id).status == "pending"


@pytest.mark.django_db
def test_delete_quote(quote_data):
    quote = create_quote(**quote_data)
    quote_id = quote.id

    delete_quote(quote_id)

    assert get_quote(quote_id) is None


@pytest.mark.django_db
def test_delete_missing_quote_raises():
    with pytest.raises(Quote.DoesNotExist):
        delete_quote(uuid.uuid4())


@pytest.mark.django_db
def test_update_settings_upserts():
    update_settings(SHOP, "first@example.com")
    update_settings(SHOP, "second@example.com")

    assert ShopSettings.objects.filter(shop_id=SHOP).count() == 1
    assert get_settings(SHOP).admin_email == "second@example.com"


@pytest.mark.django_db
def test_get_settings_missing():
    assert get_settings(OTHER_SHOP) is None


@pytest.mark.django_db(databases=["default", "other"])
def test_operations_follow_database_alias(quote_data):
    quote = create_quote(using="other", **quote_data)

    assert Quote.objects.using("default").count() == 0
    assert Quote.objects.using("other").count() == 1
    assert get_quote(quote.id) is None
    assert get_quote(quote.id, using="other").title == quote_data["title"]
    assert get_quotes(SHOP) == []
    assert [q.id for q in get_quotes(SHOP, using="other")] == [quote.id]

    with pytest.raises(Quote.DoesNotExist):
        update_quote(quote.id, message="wrong store")
    assert update_quote(quote.id, using="other", message="Bulk order").message == "Bulk order"
    assert update_quote_status(quote.id, "quoted", using="other").status == "quoted"

    update_settings(SHOP, "owner@example.com", using="other")
    assert get_settings(SHOP) is None
    assert get_settings(SHOP, using="other").admin_email == "owner@example.com"
    assert ShopSettings.objects.using("default").count() == 0

    with pytest.raises(Quote.DoesNotExist):
        delete_quote(quote.id)
    delete_quote(quote.id, using="other")
    assert Quote.objects.using("other").count() == 0
