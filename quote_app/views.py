import json
import logging

from django.http import JsonResponse
from django.shortcuts import redirect, render
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from .notifications import notify_admin
from .services import (
    create_quote,
    delete_quote,
    get_quotes,
    get_settings,
    update_quote_status,
    update_settings,
    validate_quote,
)
from .shopify_auth import shopify_admin_required
from .utils import quote_fields_from_payload

logger = logging.getLogger(__name__)

# Fields a merchant may set from the admin form; the shop comes from the session
ADMIN_QUOTE_FIELDS = ("title", "productId", "variantId", "image", "metadata", "message")
# Fields the storefront widget may send
STOREFRONT_QUOTE_FIELDS = (
    "shopId", "productId", "variantId", "title", "name", "email", "image", "metadata", "message",
)


def is_json(request):
    return request.content_type == "application/json"


### Admin pages ###
@require_GET
@shopify_admin_required
def index(request):
    return render(request, "quote_app/index.html", {"shop": request.shop})


@require_http_methods(["GET", "POST"])
@shopify_admin_required
def quotes_page(request):
    shop_id = request.shop

    if request.method == "POST":
        if is_json(request):
            try:
                data = json.loads(request.body)
            except json.JSONDecodeError:
                return JsonResponse({"error": "Invalid JSON"}, status=400)
        else:
            data = request.POST.dict()

        errors = validate_quote(data)
        if errors:
            if is_json(request):
                return JsonResponse({"errors": errors}, status=422)
            return render(request, "quote_app/quotes.html", {
                "quotes": get_quotes(shop_id),
                "shop": shop_id,
                "errors": errors,
                "values": data,
            }, status=422)

        fields = quote_fields_from_payload(data, allowed=ADMIN_QUOTE_FIELDS)
        create_quote(shop_id=shop_id, **fields)
        return redirect("quotes_page")

    return render(request, "quote_app/quotes.html", {
        "quotes": get_quotes(shop_id),
        "shop": shop_id,
    })


@require_POST
@shopify_admin_required
def quote_status(request, quote_id):
    status = request.POST.get("status", "").strip()
    if not status:
        return render(request, "quote_app/quotes.html", {
            "quotes": get_quotes(request.shop),
            "shop": request.shop,
            "errors": {"status": "Status is required"},
        }, status=422)

    update_quote_status(quote_id, status)
    return redirect("quotes_page")


@require_http_methods(["GET", "POST"])
@shopify_admin_required
def settings_page(request):
    shop_id = request.shop

    if request.method == "POST":
        admin_email = request.POST.get("adminEmail", "").strip()
        if not admin_email:
            return render(request, "quote_app/settings.html", {
                "shop": shop_id,
                "admin_email": admin_email,
                "errors": {"adminEmail": "Email is required"},
            }, status=422)

        update_settings(shop_id, admin_email)
        return redirect("settings_page")

    shop_settings = get_settings(shop_id)
    return render(request, "quote_app/settings.html", {
        "shop": shop_id,
        "admin_email": shop_settings.admin_email if shop_settings else "",
    })


### JSON endpoints ###
@require_GET
@shopify_admin_required
def quotes_list(request):
    quotes = get_quotes(request.shop)
    return JsonResponse({
        "quotes": [quote.to_dict() for quote in quotes],
        "shop": request.shop,
    })


@csrf_exempt
@require_POST
def create_quote_endpoint(request):
    """Storefront widget endpoint; the shop is taken from the request body."""
    if not is_json(request):
        return JsonResponse({"error": "Invalid Content-Type"}, status=400)

    try:
        data = json.loads(request.body)
    except json.JSONDecodeError:
        return JsonResponse({"error": "Invalid JSON"}, status=400)

    fields = quote_fields_from_payload(data, allowed=STOREFRONT_QUOTE_FIELDS)
    quote = create_quote(
        shop_id=fields.pop("shop_id", None),
        product_id=fields.pop("product_id", None),
        variant_id=fields.pop("variant_id", None),
        title=fields.pop("title", None),
        **fields,
    )
    notify_admin(quote)

    return JsonResponse({"success": True})


@require_POST
@shopify_admin_required
def delete_quote_endpoint(request):
    if not is_json(request):
        return JsonResponse({"error": "Invalid Content-Type"}, status=400)

    try:
        data = json.loads(request.body)
    except json.JSONDecodeError:
        return JsonResponse({"error": "Invalid JSON"}, status=400)

    delete_quote(data.get("id"))
    return redirect("quotes_page")
