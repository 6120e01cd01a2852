from flask import jsonify, request
from . import api_bp

ARTICLE_SCHEMA = {
    "id": "integer",
    "slug": "string",
    "title": "string",
    "subtitle": "string",
    "category": "string",
    "author": "string",
    "author_role": "string",
    "published_at": "string (YYYY-MM-DD)",
    "reading_time": "integer (minutos)",
    "hero_image": "string (URL)",
    "hero_caption": "string",
    "excerpt": "string",
    "body_html": "string (HTML)",
    "highlight_quote": "string",
    "highlight_focus": "string",
    "highlight_stat_label": "string",
    "highlight_stat_value": "string",
    "highlight_stat_helper": "string",
}

PIN_SCHEMA = {
    "id": "integer",
    "article_id": "integer",
    "slug": "string",
    "name": "string",
    "description": "string",
    "price_label": "string",
    "x_percent": "number (0-100)",
    "y_percent": "number (0-100)",
    "cta_path": "string (URL)",
    "tracking_code": "string",
    "badge": "string",
}

SECTION_SCHEMA = {
    "id": "integer",
    "article_id": "integer",
    "heading": "string",
    "content": "string",
    "media_url": "string (URL)",
    "media_caption": "string",
    "sort_order": "integer",
    "layout_type": "string",
}

IMAGE_SCHEMA = {
    "id": "integer",
    "article_id": "integer",
    "image_url": "string (URL)",
    "image_caption": "string",
    "sort_order": "integer",
}


@api_bp.route("/doc", methods=["GET"], endpoint="documentation")
def documentation():
    """Self-describing index of the read API. The only route without a key."""
    base_url = request.host_url.rstrip("/") + "/api"

    def endpoint(description, example_path, response):
        return {
            "description": description,
            "authentication": True,
            "example": f"{base_url}{example_path}?api_key=YOUR_KEY",
            "response": response,
        }

    return jsonify({
        "title": "API Revista Habitare",
        "version": "1.0.0",
        "description": "API REST para acessar artigos, pins, seções e imagens da Revista Habitare",
        "authentication": {
            "type": "API Key",
            "methods": [
                "Header: X-API-Key",
                "Query parameter: ?api_key=YOUR_KEY",
                "Body parameter: api_key (para POST/PUT)",
            ],
            "note": "Configure sua API key na variável de ambiente API_KEY",
        },
        "baseUrl": base_url,
        "openapi": request.host_url.rstrip("/") + "/openapi/api.yaml",
        "endpoints": {
            "GET /articles": {
                **endpoint(
                    "Lista todos os artigos",
                    "/articles",
                    {"type": "object", "schema": {
                        "total": "integer",
                        "limit": "integer",
                        "offset": "integer",
                        "count": "integer",
                        "articles": [ARTICLE_SCHEMA],
                    }},
                ),
                "queryParams": {
                    "limit": "Número máximo de resultados (opcional)",
                    "offset": "Número de resultados para pular (opcional)",
                },
            },
            "GET /articles/:id": endpoint(
                "Busca um artigo específico por ID",
                "/articles/1",
                {"type": "object", "schema": ARTICLE_SCHEMA},
            ),
            "GET /articles/slug/:slug": endpoint(
                "Busca um artigo específico por slug",
                "/articles/slug/casa-observatorio-mata-atlantica",
                {"type": "object", "schema": ARTICLE_SCHEMA},
            ),
            "GET /articles/:id/pins": endpoint(
                "Lista todos os pins de um artigo",
                "/articles/1/pins",
                {"type": "object", "schema": {"article_id": "integer", "count": "integer", "pins": [PIN_SCHEMA]}},
            ),
            "GET /articles/:id/sections": endpoint(
                "Lista todas as seções de um artigo",
                "/articles/1/sections",
                {"type": "object", "schema": {"article_id": "integer", "count": "integer", "sections": [SECTION_SCHEMA]}},
            ),
            "GET /articles/:id/images": endpoint(
                "Lista todas as imagens de um artigo",
                "/articles/1/images",
                {"type": "object", "schema": {"article_id": "integer", "count": "integer", "images": [IMAGE_SCHEMA]}},
            ),
            "GET /articles/:id/complete": endpoint(
                "Retorna um artigo completo com pins, seções e imagens",
                "/articles/1/complete",
                {"type": "object", "schema": {
                    "article": ARTICLE_SCHEMA,
                    "pins": [PIN_SCHEMA],
                    "sections": [SECTION_SCHEMA],
                    "images": [IMAGE_SCHEMA],
                    "counts": {"pins": "integer", "sections": "integer", "images": "integer"},
                }},
            ),
        },
        "examples": {
            "curl": {
                "listArticles": f'curl -H "X-API-Key: YOUR_KEY" {base_url}/articles',
                "getArticle": f'curl -H "X-API-Key: YOUR_KEY" {base_url}/articles/1',
                "getArticleComplete": f'curl -H "X-API-Key: YOUR_KEY" {base_url}/articles/1/complete',
            },
        },
        "errorCodes": {
            "401": "Não autorizado - API key inválida ou ausente",
            "404": "Recurso não encontrado",
            "500": "Erro interno do servidor",
        },
    })
