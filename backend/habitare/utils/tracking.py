from urllib.parse import parse_qsl, urlencode


def build_tracked_link(pin, *, shop_base_url: str, tracking_source: str) -> str:
    """
    Outbound product URL for a pin, carrying the analytics parameters.

    Absolute cta_path values are used as-is; anything else is resolved against
    the shop base URL. Pairs from the pin's tracking_code override the ones
    already in the URL, utm_source defaults to the tracking source and
    utm_content always identifies the pin.
    """
    cta_path = (pin.cta_path or "").strip()
    if cta_path.startswith("http"):
        base = cta_path
    else:
        path = (cta_path or pin.slug or "").lstrip("/")
        base = f"{shop_base_url.rstrip('/')}/{path}"

    clean_base, _, base_query = base.partition("?")
    params = dict(parse_qsl(base_query, keep_blank_values=True))

    if pin.tracking_code:
        params.update(parse_qsl(pin.tracking_code.lstrip("?"), keep_blank_values=True))

    params.setdefault("utm_source", tracking_source)
    params["utm_content"] = pin.slug

    return f"{clean_base}?{urlencode(params)}"


def default_tracking_code(slug: str, tracking_source: str) -> str:
    return urlencode(
        {
            "utm_source": tracking_source,
            "utm_medium": "magazine",
            "utm_content": slug,
        }
    )
