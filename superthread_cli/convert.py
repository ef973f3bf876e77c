"""
Response conversion: raw parsed JSON + hints → object, variant, or Collection.
"""

from superthread_cli.objects import Collection, SuperthreadObject, construct_from

SUCCESS_RESPONSE = {"success": True}


def success_object():
    return SuperthreadObject(dict(SUCCESS_RESPONSE))


def convert(raw, variant=None, unwrap_key=None, items_key=None, as_collection=False):
    """Convert a parsed payload using the caller's hints.

    *unwrap_key* is applied only when *raw* is a dict containing it; a
    missing key leaves *raw* as is. Empty-body handling happens before this
    (see ``SuperthreadClient.request``).
    """
    if unwrap_key and isinstance(raw, dict) and unwrap_key in raw:
        raw = raw[unwrap_key]
    if as_collection:
        return Collection.from_response(raw, items_key=items_key, item_class=variant)
    if variant is not None:
        if isinstance(raw, dict):
            return variant(raw)
        if isinstance(raw, list):
            return [variant(item) if isinstance(item, dict) else item for item in raw]
        return raw
    return construct_from(raw)
