import hashlib
import hmac
import logging
import time
from functools import wraps

from django.conf import settings
from django.http import JsonResponse

logger = logging.getLogger(__name__)

SESSION_SHOP_KEY = "shopify_shop"


def verify_hmac(params, secret):
    """
    Check the `hmac` query parameter Shopify adds to admin requests.
    The digest covers every other parameter, sorted and joined as k=v&k=v.
    """
    received = params.get("hmac")
    if not received or not secret:
        return False

    message = "&".join(
        f"{key}={value}"
        for key, value in sorted(params.items())
        if key not in ("hmac", "signature")
    )
    digest = hmac.new(secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).hexdigest()
    return hmac.compare_digest(digest, received)


def is_fresh(timestamp, max_age):
    """True when `timestamp` (unix seconds) is at most `max_age` seconds away from now."""
    try:
        issued_at = int(timestamp)
    except (TypeError, ValueError):
        return False
    return abs(time.time() - issued_at) <= max_age


def get_session_shop(request):
    return request.session.get(SESSION_SHOP_KEY)


def shopify_admin_required(view_func):
    """
    Resolve the shop of an admin request into `request.shop`.

    A signed request from the Shopify admin (re)binds the shop to the
    Django session; later requests rely on the session alone.
    """
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        params = request.GET.dict()
        if "hmac" in params and "shop" in params:
            if not verify_hmac(params, settings.SHOPIFY_API_SECRET):
                logger.warning(f"Rejected request with invalid hmac for shop {params['shop']}")
                return JsonResponse({"error": "Invalid signature"}, status=401)
            if not is_fresh(params.get("timestamp"), settings.SHOPIFY_HMAC_MAX_AGE):
                logger.warning(f"Rejected stale signed request for shop {params['shop']}")
                return JsonResponse({"error": "Expired signature"}, status=401)
            request.session[SESSION_SHOP_KEY] = params["shop"]

        shop = get_session_shop(request)
        if not shop:
            logger.warning(f"Unauthenticated admin request to {request.path}")
            return JsonResponse({"error": "Unauthorized"}, status=401)

        request.shop = shop
        return view_func(request, *args, **kwargs)

    return wrapper
