from flask import current_app, jsonify, render_template, request
from werkzeug.exceptions import HTTPException
from habitare.domain.invariants.exceptions import ArticleNotFound, InvariantViolation

NOT_FOUND_TITLE = "404 — Página não encontrada"
NOT_FOUND_MESSAGE = "Nada por aqui. Que tal voltar para a edição atual?"


def wants_json():
    """API calls and admin AJAX calls get JSON; browsers get a rendered page."""
    if request.path.startswith("/api"):
        return True
    if request.is_json:
        return True
    best = request.accept_mimetypes.best_match(["text/html", "application/json"])
    return best == "application/json"


def render_error(status_code, title, message):
    return render_template(
        "error.html",
        page_title=title,
        meta_description=message,
        message=message,
    ), status_code


def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        current_app.logger.info("Rejected write on %s: %s", request.path, error)
        if wants_json():
            response = jsonify({
                "error": type(error).__name__,
                "message": str(error),
            })
            response.status_code = error.status_code
            return response
        return render_error(error.status_code, error.title, str(error))

    @app.errorhandler(ArticleNotFound)
    def handle_article_not_found(error):
        if wants_json():
            return jsonify({
                "error": "Artigo não encontrado",
                "message": str(error),
            }), 404
        return render_error(
            404,
            "Conteúdo não encontrado",
            "O artigo que você procura saiu do ar ou mudou de endereço.",
        )

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        if wants_json():
            return jsonify({
                "error": error.name,
                "message": error.description,
            }), error.code
        if error.code == 404:
            return render_error(404, NOT_FOUND_TITLE, NOT_FOUND_MESSAGE)
        return render_error(error.code, error.name, error.description)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        current_app.logger.exception("Unhandled error on %s %s", request.method, request.path)
        if request.path.startswith("/api") or (
            request.path.startswith("/admin") and wants_json()
        ):
            return jsonify({"error": "Erro interno ao processar a requisição."}), 500
        return render_error(
            500,
            "Erro inesperado",
            "Algo saiu do roteiro. Atualize a página ou tente novamente.",
        )
