# quote_app/utils.py
import json

# Wire (camelCase) name -> model field name
QUOTE_FIELDS = {
    "shopId": "shop_id",
    "productId": "product_id",
    "variantId": "variant_id",
    "title": "title",
    "name": "name",
    "email": "email",
    "image": "image",
    "metadata": "metadata",
    "message": "message",
    "status": "status",
}


class InvariantError(Exception):
    """A required value was missing when a data-access call was made."""


def invariant(condition, message):
    """Raise InvariantError with `message` unless `condition` is truthy."""
    if not condition:
        raise InvariantError(message)


def serialize_metadata(metadata):
    """
    Store metadata as a string blob.
    Strings are kept as they are, anything else is dumped to JSON.
    None and the empty string become an empty string.
    """
    if metadata is None or metadata == "":
        return ""
    if isinstance(metadata, str):
        return metadata
    return json.dumps(metadata)


def quote_fields_from_payload(payload, allowed=None):
    """
    Map a camelCase request payload onto model field names.
    Unknown keys are dropped, so is anything not listed in `allowed`.
    """
    fields = {}
    for key, value in payload.items():
        field = QUOTE_FIELDS.get(key)
        if field is None:
            continue
        if allowed is not None and key not in allowed:
            continue
        fields[field] = value
    return fields
