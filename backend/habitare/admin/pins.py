from flask import jsonify, render_template, request
from habitare.application.pins.replace_pins import replace_pins
from habitare.domain.invariants.exceptions import ArticleNotFound
from habitare.errors import render_error
from habitare.models.article import Article
from habitare.models.pin import ProductPin
from habitare.normalizers.pin import normalize_pin
from habitare.utils.decorators import login_required
from . import admin_bp


@admin_bp.route("/articles/<int:article_id>/pins", methods=["GET"])
@login_required
def edit_pins(article_id):
    article = Article.find_by_id(article_id)
    if not article:
        return render_error(
            404,
            "Artigo não encontrado",
            "Não encontramos este artigo para edição de pins.",
        )

    return render_template(
        "admin/pins.html",
        page_title=f"Pins — {article.title}",
        meta_description="Arraste e solte pins interativos sobre a imagem destaque.",
        article=article,
        pins=[normalize_pin(p) for p in ProductPin.find_by_article_id(article.id)],
    )


@admin_bp.route("/articles/<int:article_id>/pins", methods=["POST"])
@login_required
def save_pins(article_id):
    payload = request.get_json(silent=True) or {}
    pins_payload = payload.get("pins") if isinstance(payload, dict) else None

    try:
        total = replace_pins(article_id=article_id, pins_payload=pins_payload)
    except ArticleNotFound:
        return jsonify({"error": "Artigo não encontrado"}), 404

    return jsonify({"success": True, "total": total})
