from typing import Any, Dict, List
from flask import current_app
from sqlalchemy.exc import IntegrityError
from habitare.extensions import db
from habitare.models.article import Article
from habitare.models.pin import ProductPin
from habitare.domain.invariants.exceptions import ArticleNotFound, PinSlugConflict
from habitare.domain.invariants.pin import assert_unique_pin_slugs
from habitare.utils.text import clamp_percent, clean_text, placeholder_slug, slugify
from habitare.utils.tracking import default_tracking_code
from habitare.utils.transaction import transactional

DEFAULT_PIN_NAME = "Produto sem nome"
DEFAULT_PRICE_LABEL = "Sob consulta"
DEFAULT_BADGE = "Destaque"


def build_pin(article_id: int, payload: Dict[str, Any], tracking_source: str) -> ProductPin:
    """Turn one editor payload entry into a ProductPin, filling every default."""
    slug = slugify(
        clean_text(payload.get("slug"))
        or clean_text(payload.get("name"))
        or placeholder_slug("pin")
    )

    pin = ProductPin()
    pin.article_id = article_id
    pin.slug = slug
    pin.name = clean_text(payload.get("name"), DEFAULT_PIN_NAME)
    pin.description = clean_text(payload.get("description"))
    pin.price_label = clean_text(payload.get("price_label"), DEFAULT_PRICE_LABEL)
    pin.x_percent = clamp_percent(payload.get("x_percent"))
    pin.y_percent = clamp_percent(payload.get("y_percent"))
    pin.cta_path = clean_text(payload.get("cta_path"), slug)
    pin.tracking_code = clean_text(
        payload.get("tracking_code"), default_tracking_code(slug, tracking_source)
    )
    pin.badge = clean_text(payload.get("badge"), DEFAULT_BADGE)
    return pin


def replace_pins(*, article_id: int, pins_payload: Any) -> int:
    """
    Replace the whole pin set of an article with the submitted one.

    There is no partial update: existing pins are deleted and the payload
    is inserted in their place, all inside one transaction so a failed save
    leaves the previous pins untouched.

    Returns the number of pins saved.
    """
    article = Article.find_by_id(article_id)
    if not article:
        raise ArticleNotFound(article_id=article_id)

    if not isinstance(pins_payload, list):
        pins_payload = []

    tracking_source = current_app.config["TRACKING_SOURCE"]
    pins: List[ProductPin] = [
        build_pin(article.id, entry, tracking_source)
        for entry in pins_payload
        if isinstance(entry, dict)
    ]

    assert_unique_pin_slugs(pins)

    try:
        with transactional():
            ProductPin.delete_by_article_id(article.id)
            db.session.expire(article, ["pins"])
            db.session.add_all(pins)
            db.session.flush()
    except IntegrityError as exc:
        raise PinSlugConflict(
            "Um dos pins usa um identificador que já pertence a outro artigo."
        ) from exc

    current_app.logger.info("Saved %d pins for article %s", len(pins), article.id)
    return len(pins)
