from datetime import date
from flask import jsonify, redirect, render_template, request
from habitare.application.articles.create_article import create_article
from habitare.application.articles.delete_article import delete_article
from habitare.application.articles.update_article import update_article
from habitare.domain.invariants.exceptions import ArticleNotFound
from habitare.errors import render_error
from habitare.models.article import Article
from habitare.models.image import ArticleImage
from habitare.utils.decorators import login_required
from . import admin_bp

MAX_CAROUSEL_UPLOADS = 20


def _uploads():
    hero_file = request.files.get("hero_image")
    image_files = request.files.getlist("article_images")[:MAX_CAROUSEL_UPLOADS]
    return hero_file, image_files


@admin_bp.route("", methods=["GET"])
@login_required
def dashboard():
    return render_template(
        "admin/index.html",
        page_title="Painel editorial Habitare",
        meta_description="Gerencie artigos, uploads e pins interativos.",
        articles=Article.find_all(),
        flash=request.args.get("flash"),
        today=date.today().isoformat(),
    )


@admin_bp.route("/articles", methods=["POST"])
@login_required
def create():
    hero_file, image_files = _uploads()
    create_article(data=request.form, hero_file=hero_file, image_files=image_files)
    return redirect("/admin?flash=artigo-criado")


@admin_bp.route("/articles/<int:article_id>/edit", methods=["GET"])
@login_required
def edit(article_id):
    article = Article.find_by_id(article_id)
    if not article:
        return render_error(
            404,
            "Artigo não encontrado",
            "Não encontramos este artigo para edição.",
        )

    return render_template(
        "admin/edit.html",
        page_title=f"Editar — {article.title}",
        meta_description="Edite os detalhes do artigo.",
        article=article,
        images=ArticleImage.find_by_article_id(article.id),
    )


@admin_bp.route("/articles/<int:article_id>", methods=["POST"])
@login_required
def update(article_id):
    hero_file, image_files = _uploads()
    try:
        update_article(
            article_id=article_id,
            data=request.form,
            hero_file=hero_file,
            image_files=image_files,
        )
    except ArticleNotFound:
        return render_error(
            404,
            "Artigo não encontrado",
            "Não encontramos este artigo para edição.",
        )
    return redirect("/admin?flash=artigo-atualizado")


@admin_bp.route("/articles/<int:article_id>", methods=["DELETE"])
@login_required
def delete(article_id):
    try:
        delete_article(article_id=article_id)
    except ArticleNotFound:
        return jsonify({"error": "Artigo não encontrado"}), 404
    return jsonify({"success": True})
