import hashlib
import hmac

import pytest

from quote_app.shopify_auth import SESSION_SHOP_KEY

SHOP = "test-shop.myshopify.com"
OTHER_SHOP = "other-shop.myshopify.com"


def sign(params, secret):
    message = "&".join(f"{k}={v}" for k, v in sorted(params.items()))
    return hmac.new(secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).hexdigest()


@pytest.fixture
def shop():
    return SHOP


@pytest.fixture
def shop_client(client, db):
    """Test client whose session is already bound to SHOP."""
    session = client.session
    session[SESSION_SHOP_KEY] = SHOP
    session.save()
    return client


@pytest.fixture
def quote_data():
    return {
        "shop_id": SHOP,
        "product_id": "gid://shopify/Product/1001",
        "variant_id": "gid://shopify/ProductVariant/2001",
        "title": "Oak dining table",
        "name": "Jane Doe",
        "email": "jane@example.com",
        "message": "Need 4 of these",
    }
