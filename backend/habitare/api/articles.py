from flask import jsonify, request
from habitare.domain.invariants.exceptions import ArticleNotFound
from habitare.models.article import Article
from habitare.models.image import ArticleImage
from habitare.models.pin import ProductPin
from habitare.models.section import ArticleSection
from habitare.normalizers.article import normalize_article
from habitare.normalizers.image import normalize_image
from habitare.normalizers.pagination import normalize_offset_page
from habitare.normalizers.pin import normalize_pin
from habitare.normalizers.section import normalize_section
from habitare.utils.text import to_number
from . import api_bp


def _get_article_or_404(article_id):
    article = Article.find_by_id(article_id)
    if not article:
        raise ArticleNotFound(article_id=article_id)
    return article


@api_bp.route("/articles", methods=["GET"])
def list_articles():
    articles = Article.find_all()
    return jsonify(normalize_offset_page(
        articles,
        normalize_article,
        key="articles",
        limit=to_number(request.args.get("limit"), 0),
        offset=to_number(request.args.get("offset"), 0),
    ))


@api_bp.route("/articles/<int:article_id>", methods=["GET"])
def get_article(article_id):
    return jsonify(normalize_article(_get_article_or_404(article_id)))


@api_bp.route("/articles/slug/<slug>", methods=["GET"])
def get_article_by_slug(slug):
    article = Article.find_by_slug(slug)
    if not article:
        raise ArticleNotFound(slug=slug)
    return jsonify(normalize_article(article))


@api_bp.route("/articles/<int:article_id>/pins", methods=["GET"])
def get_article_pins(article_id):
    article = _get_article_or_404(article_id)
    pins = ProductPin.find_by_article_id(article.id)
    return jsonify({
        "article_id": article.id,
        "count": len(pins),
        "pins": [normalize_pin(p) for p in pins],
    })


@api_bp.route("/articles/<int:article_id>/sections", methods=["GET"])
def get_article_sections(article_id):
    article = _get_article_or_404(article_id)
    sections = ArticleSection.find_by_article_id(article.id)
    return jsonify({
        "article_id": article.id,
        "count": len(sections),
        "sections": [normalize_section(s) for s in sections],
    })


@api_bp.route("/articles/<int:article_id>/images", methods=["GET"])
def get_article_images(article_id):
    article = _get_article_or_404(article_id)
    images = ArticleImage.find_by_article_id(article.id)
    return jsonify({
        "article_id": article.id,
        "count": len(images),
        "images": [normalize_image(i) for i in images],
    })


@api_bp.route("/articles/<int:article_id>/complete", methods=["GET"])
def get_article_complete(article_id):
    article = _get_article_or_404(article_id)
    pins = ProductPin.find_by_article_id(article.id)
    sections = ArticleSection.find_by_article_id(article.id)
    images = ArticleImage.find_by_article_id(article.id)

    return jsonify({
        "article": normalize_article(article),
        "pins": [normalize_pin(p) for p in pins],
        "sections": [normalize_section(s) for s in sections],
        "images": [normalize_image(i) for i in images],
        "counts": {
            "pins": len(pins),
            "sections": len(sections),
            "images": len(images),
        },
    })
