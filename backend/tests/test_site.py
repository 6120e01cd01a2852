import os
from datetime import date

from habitare.models import Article
from habitare.site.pages import order_for_home


def test_order_for_home_puts_articles_with_pins_first():
    cards = [
        {"slug": "a", "pin_count": 0},
        {"slug": "b", "pin_count": 2},
        {"slug": "c", "pin_count": 0},
        {"slug": "d", "pin_count": 1},
    ]
    assert [c["slug"] for c in order_for_home(cards)] == ["b", "d", "a", "c"]


def test_home_uses_article_with_pins_as_hero(client, make_article, add_pin):
    make_article(title="Mais Recente Sem Pins", published_at=date(2024, 9, 1))
    with_pins = make_article(title="Matéria Com Pins", published_at=date(2024, 1, 1))
    add_pin(with_pins, slug="poltrona-aurora")

    response = client.get("/")
    html = response.get_data(as_text=True)

    assert response.status_code == 200
    assert html.index("Matéria Com Pins") < html.index("Mais Recente Sem Pins")
    assert "utm_content=poltrona-aurora" in html


def test_home_without_articles(client):
    assert client.get("/").status_code == 200


def test_article_page(client, make_article, add_pin, add_section):
    article = make_article(slug="casa-patio", title="Casa Pátio")
    add_pin(article, slug="mesa-lume", name="Mesa Lume")
    add_section(article, heading="Estrutura leve")

    response = client.get("/artigos/casa-patio")
    html = response.get_data(as_text=True)

    assert response.status_code == 200
    assert "Casa Pátio" in html
    assert "Mesa Lume" in html
    assert "Estrutura leve" in html


def test_unknown_article_page(client):
    response = client.get("/artigos/nao-existe")

    assert response.status_code == 404
    assert "Conteúdo não encontrado" in response.get_data(as_text=True)


def test_unknown_page_renders_html_404(client):
    response = client.get("/qualquer-coisa")

    assert response.status_code == 404
    assert response.mimetype == "text/html"


def test_coming_soon(client):
    assert client.get("/em-desenvolvimento").status_code == 200


def test_manifest_and_service_worker(client):
    manifest = client.get("/manifest.json")
    worker = client.get("/sw.js")

    assert manifest.status_code == 200
    assert manifest.mimetype == "application/manifest+json"
    assert worker.status_code == 200
    assert worker.headers["Service-Worker-Allowed"] == "/"


def test_uploaded_files_are_served(app, client):
    folder = app.config["UPLOAD_FOLDER"]
    with open(os.path.join(folder, "img-teste.png"), "wb") as fh:
        fh.write(b"png")

    response = client.get("/uploads/img-teste.png")

    assert response.status_code == 200
    assert response.data == b"png"


def _explode(*args, **kwargs):
    raise RuntimeError("database went away")


def test_unexpected_error_renders_html_page(client, monkeypatch):
    monkeypatch.setattr(Article, "find_all", classmethod(_explode))

    response = client.get("/")

    assert response.status_code == 500
    assert response.mimetype == "text/html"
    assert "Erro inesperado" in response.get_data(as_text=True)


def test_unexpected_error_is_json_under_api(client, api_headers, monkeypatch):
    monkeypatch.setattr(Article, "find_all", classmethod(_explode))

    response = client.get("/api/articles", headers=api_headers)

    assert response.status_code == 500
    assert response.get_json() == {"error": "Erro interno ao processar a requisição."}


def test_unexpected_error_is_json_for_admin_ajax(admin_client, monkeypatch):
    monkeypatch.setattr(Article, "find_all", classmethod(_explode))

    response = admin_client.get("/admin", headers={"Accept": "application/json"})

    assert response.status_code == 500
    assert response.is_json


def test_unexpected_error_is_logged(app, client, monkeypatch, caplog):
    monkeypatch.setattr(Article, "find_all", classmethod(_explode))

    client.get("/")

    assert any("Unhandled error on GET /" in r.getMessage() for r in caplog.records)
