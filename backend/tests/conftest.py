from datetime import date

import pytest

from habitare import create_app
from habitare.extensions import db
from habitare.models import Article, ArticleImage, ArticleSection, ProductPin

ADMIN_CREDENTIALS = {"username": "admin", "password": "habitare2024"}
API_KEY = "test-api-key"


@pytest.fixture
def app(tmp_path):
    app = create_app("testing", overrides={"UPLOAD_FOLDER": str(tmp_path / "uploads")})

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    """A test client that already holds an admin session."""
    response = client.post("/admin/login", data=ADMIN_CREDENTIALS)
    assert response.status_code == 302
    return client


@pytest.fixture
def api_headers():
    return {"X-API-Key": API_KEY}


@pytest.fixture
def make_article(app):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        n = counter["n"]
        fields = {
            "slug": f"materia-{n}",
            "title": f"Matéria {n}",
            "subtitle": "Subtítulo",
            "category": "Residencial",
            "author": "Cecília Paes",
            "author_role": "Curadora de Conteúdo",
            "published_at": date(2024, 6, n if n <= 28 else 28),
            "reading_time": 5,
            "hero_image": "https://images.example.com/hero.jpg",
            "excerpt": "Resumo",
            "body_html": "<p>Texto.</p>",
        }
        fields.update(overrides)
        article = Article(**fields)
        db.session.add(article)
        db.session.commit()
        return article

    return _make


@pytest.fixture
def add_pin(app):
    def _add(article, **overrides):
        fields = {
            "slug": f"pin-{article.id}-{len(article.pins) + 1}",
            "name": "Poltrona Aurora",
            "description": "Freijó e linho cru",
            "price_label": "R$ 4.890",
            "x_percent": 28,
            "y_percent": 62,
            "cta_path": "poltrona-aurora",
            "tracking_code": "utm_campaign=pin-biofilia",
            "badge": "Edição limitada",
        }
        fields.update(overrides)
        pin = ProductPin(article_id=article.id, **fields)
        db.session.add(pin)
        db.session.commit()
        return pin

    return _add


@pytest.fixture
def add_section(app):
    def _add(article, **overrides):
        fields = {
            "heading": "Estrutura leve",
            "content": "Apoios metálicos liberam o solo.",
            "sort_order": 1,
        }
        fields.update(overrides)
        section = ArticleSection(article_id=article.id, **fields)
        db.session.add(section)
        db.session.commit()
        return section

    return _add


@pytest.fixture
def add_image(app):
    def _add(article, **overrides):
        fields = {"image_url": "https://images.example.com/1.jpg", "sort_order": 0}
        fields.update(overrides)
        image = ArticleImage(article_id=article.id, **fields)
        db.session.add(image)
        db.session.commit()
        return image

    return _add
