from flask import current_app, render_template
from habitare.domain.invariants.exceptions import ArticleNotFound
from habitare.models.article import Article
from habitare.models.image import ArticleImage
from habitare.models.pin import ProductPin
from habitare.models.section import ArticleSection
from habitare.normalizers.article import normalize_article
from habitare.normalizers.image import normalize_image
from habitare.normalizers.pin import normalize_pin
from habitare.normalizers.section import normalize_section
from habitare.utils.tracking import build_tracked_link
from . import site_bp


def _pins_with_links(pins):
    shop_base_url = current_app.config["SHOP_BASE_URL"]
    tracking_source = current_app.config["TRACKING_SOURCE"]
    return [
        normalize_pin(
            pin,
            tracked_url=build_tracked_link(
                pin, shop_base_url=shop_base_url, tracking_source=tracking_source
            ),
        )
        for pin in pins
    ]


def order_for_home(articles):
    """Articles that carry pins lead the page; each group keeps its order."""
    with_pins = [a for a in articles if a["pin_count"] > 0]
    without_pins = [a for a in articles if a["pin_count"] == 0]
    return with_pins + without_pins


@site_bp.route("/", methods=["GET"])
def home():
    cards = []
    for article in Article.find_all():
        card = normalize_article(article)
        card["pins"] = _pins_with_links(ProductPin.find_by_article_id(article.id))
        card["pin_count"] = len(card["pins"])
        cards.append(card)

    ordered = order_for_home(cards)
    brand = current_app.config["BRAND_NAME"]

    return render_template(
        "home.html",
        page_title=f"{brand} — Arquitetura com alto engajamento",
        meta_description=current_app.config["BRAND_TAGLINE"],
        hero_article=ordered[0] if ordered else None,
        articles=ordered[1:],
    )


@site_bp.route("/artigos/<slug>", methods=["GET"])
def show_article(slug):
    article = Article.find_by_slug(slug)
    if not article:
        raise ArticleNotFound(slug=slug)

    return render_template(
        "article.html",
        page_title=f"{article.title} — {current_app.config['BRAND_NAME']}",
        meta_description=article.subtitle,
        article=normalize_article(article),
        sections=[normalize_section(s) for s in ArticleSection.find_by_article_id(article.id)],
        pins=_pins_with_links(ProductPin.find_by_article_id(article.id)),
        images=[normalize_image(i) for i in ArticleImage.find_by_article_id(article.id)],
    )


@site_bp.route("/em-desenvolvimento", methods=["GET"])
def coming_soon():
    return render_template(
        "coming_soon.html",
        page_title="Em Desenvolvimento — Revista Habitare",
        meta_description="Estamos trabalhando nisso. Em breve você terá acesso a este conteúdo.",
    )
