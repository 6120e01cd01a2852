def normalize_pin(pin, tracked_url=None):
    data = {
        "id": pin.id,
        "article_id": pin.article_id,
        "slug": pin.slug,
        "name": pin.name,
        "description": pin.description,
        "price_label": pin.price_label,
        "x_percent": pin.x_percent,
        "y_percent": pin.y_percent,
        "cta_path": pin.cta_path,
        "tracking_code": pin.tracking_code,
        "badge": pin.badge,
    }

    if tracked_url is not None:
        data["tracking_url"] = tracked_url

    return data
