import io
import os
from datetime import date

from habitare.application.articles.fields import (
    DEFAULT_AUTHOR,
    DEFAULT_CATEGORY,
    DEFAULT_STAT_VALUE,
)
from habitare.models import Article, ArticleImage, ArticleSection, ProductPin

BODY = "<p>Primeira frase. Segunda frase. Terceira frase.</p>"


def _upload_path(app, url):
    return os.path.join(app.config["UPLOAD_FOLDER"], url.rsplit("/", 1)[1])


def test_create_article_derives_fields(admin_client):
    response = admin_client.post(
        "/admin/articles",
        data={"title": "Casa Observatório na Mata", "body_text": BODY, "published_at": "2024-08-12"},
    )

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/admin?flash=artigo-criado")

    article = Article.find_by_slug("casa-observatorio-na-mata")
    assert article.subtitle == "Primeira frase"
    assert article.highlight_quote == "Primeira frase"
    assert article.highlight_stat_helper == "Segunda frase. Terceira frase"
    assert article.excerpt == "Primeira frase. Segunda frase. Terceira frase."
    assert article.reading_time == 3
    assert article.published_at == date(2024, 8, 12)
    assert article.category == DEFAULT_CATEGORY
    assert article.author == DEFAULT_AUTHOR
    assert article.highlight_stat_value == DEFAULT_STAT_VALUE


def test_create_article_defaults(app, admin_client):
    admin_client.post("/admin/articles", data={"title": "Sem data", "body_text": "<p>Texto</p>"})

    article = Article.find_by_slug("sem-data")
    assert article.published_at == date.today()
    assert article.hero_image == app.config["DEFAULT_HERO_IMAGE"]


def test_create_article_requires_title_and_body(admin_client):
    response = admin_client.post("/admin/articles", data={"title": "", "body_text": BODY})

    assert response.status_code == 400
    assert Article.find_all() == []


def test_create_article_rejects_duplicate_slug(admin_client, make_article):
    make_article(slug="casa-nova")

    response = admin_client.post(
        "/admin/articles",
        data={"title": "Casa Nova", "body_text": BODY},
        headers={"Accept": "application/json"},
    )

    assert response.status_code == 400
    assert response.get_json()["error"] == "DuplicateSlugError"
    assert len(Article.find_all()) == 1


def test_create_article_with_uploads(app, admin_client):
    response = admin_client.post(
        "/admin/articles",
        data={
            "title": "Ateliê de Luz",
            "body_text": BODY,
            "hero_image_url": "https://images.example.com/ignorada.jpg",
            "hero_image": (io.BytesIO(b"hero"), "capa.jpg"),
            "article_images": [
                (io.BytesIO(b"one"), "um.png"),
                (io.BytesIO(b"two"), "dois.webp"),
            ],
        },
        content_type="multipart/form-data",
    )

    assert response.status_code == 302
    article = Article.find_by_slug("atelie-de-luz")
    assert article.hero_image.startswith("/uploads/hero-")
    assert os.path.exists(_upload_path(app, article.hero_image))

    images = ArticleImage.find_by_article_id(article.id)
    assert [i.sort_order for i in images] == [0, 1]
    assert all(i.image_url.startswith("/uploads/img-") for i in images)


def test_create_article_prefers_pasted_hero_url(admin_client):
    admin_client.post(
        "/admin/articles",
        data={
            "title": "Varanda",
            "body_text": BODY,
            "hero_image_url": "https://images.example.com/varanda.jpg",
        },
    )

    assert Article.find_by_slug("varanda").hero_image == "https://images.example.com/varanda.jpg"


def test_create_article_rejects_unsupported_upload(admin_client):
    response = admin_client.post(
        "/admin/articles",
        data={"title": "Arquivo", "body_text": BODY, "hero_image": (io.BytesIO(b"x"), "script.exe")},
        content_type="multipart/form-data",
    )

    assert response.status_code == 400
    assert Article.find_all() == []


def test_update_article(admin_client, make_article, add_image):
    article = make_article(category="Residencial", author="Cecília Paes")
    add_image(article, sort_order=0)

    response = admin_client.post(
        f"/admin/articles/{article.id}",
        data={
            "title": "Título Revisto",
            "body_text": "<p>Nova abertura. Mais contexto.</p>",
            "category": "",
            "author": "Rafael Moura",
            "article_images": [(io.BytesIO(b"new"), "nova.jpg")],
        },
        content_type="multipart/form-data",
    )

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/admin?flash=artigo-atualizado")

    updated = Article.find_by_id(article.id)
    assert updated.slug == "titulo-revisto"
    assert updated.subtitle == "Nova abertura"
    assert updated.category == "Residencial"
    assert updated.author == "Rafael Moura"
    assert updated.hero_image == "https://images.example.com/hero.jpg"
    assert [i.sort_order for i in ArticleImage.find_by_article_id(article.id)] == [0, 1]


def test_update_article_rejects_slug_of_another_article(admin_client, make_article):
    make_article(slug="ocupado")
    article = make_article()

    response = admin_client.post(
        f"/admin/articles/{article.id}",
        data={"title": "Ocupado", "body_text": BODY},
    )

    assert response.status_code == 400
    assert Article.find_by_id(article.id).slug != "ocupado"


def test_update_unknown_article(admin_client):
    response = admin_client.post("/admin/articles/9999", data={"title": "X", "body_text": BODY})
    assert response.status_code == 404


def test_edit_page(admin_client, make_article):
    article = make_article(title="Casa Pátio")

    assert admin_client.get(f"/admin/articles/{article.id}/edit").status_code == 200
    assert admin_client.get("/admin/articles/9999/edit").status_code == 404


def test_delete_article_cascades(app, admin_client, make_article, add_pin, add_section, add_image):
    article = make_article()
    add_pin(article)
    add_section(article)
    add_image(article)
    article_id = article.id

    response = admin_client.delete(f"/admin/articles/{article_id}")

    assert response.status_code == 200
    assert response.get_json() == {"success": True}
    assert Article.find_by_id(article_id) is None
    assert ProductPin.find_by_article_id(article_id) == []
    assert ArticleSection.find_by_article_id(article_id) == []
    assert ArticleImage.find_by_article_id(article_id) == []


def test_delete_article_removes_uploaded_files(app, admin_client):
    admin_client.post(
        "/admin/articles",
        data={"title": "Com Upload", "body_text": BODY, "hero_image": (io.BytesIO(b"hero"), "capa.png")},
        content_type="multipart/form-data",
    )
    article = Article.find_by_slug("com-upload")
    path = _upload_path(app, article.hero_image)
    assert os.path.exists(path)

    admin_client.delete(f"/admin/articles/{article.id}")

    assert not os.path.exists(path)


def test_delete_unknown_article(admin_client):
    response = admin_client.delete("/admin/articles/9999")

    assert response.status_code == 404
    assert response.get_json() == {"error": "Artigo não encontrado"}


def test_dashboard_lists_articles(admin_client, make_article):
    make_article(title="Casa Pátio")

    response = admin_client.get("/admin?flash=artigo-criado")

    assert response.status_code == 200
    assert "Casa Pátio" in response.get_data(as_text=True)


def _stored_files(app):
    return sorted(os.listdir(app.config["UPLOAD_FOLDER"]))


def test_rejected_carousel_file_discards_earlier_uploads(app, admin_client):
    response = admin_client.post(
        "/admin/articles",
        data={
            "title": "Carrossel Misto",
            "body_text": BODY,
            "hero_image": (io.BytesIO(b"hero"), "capa.jpg"),
            "article_images": [
                (io.BytesIO(b"one"), "um.png"),
                (io.BytesIO(b"bad"), "ruim.exe"),
            ],
        },
        content_type="multipart/form-data",
    )

    assert response.status_code == 400
    assert Article.find_all() == []
    assert _stored_files(app) == []


def test_failed_update_discards_new_uploads(app, admin_client, make_article):
    article = make_article()

    response = admin_client.post(
        f"/admin/articles/{article.id}",
        data={
            "title": "Nova Capa",
            "body_text": BODY,
            "hero_image": (io.BytesIO(b"hero"), "capa.png"),
            "article_images": [(io.BytesIO(b"bad"), "ruim.exe")],
        },
        content_type="multipart/form-data",
    )

    assert response.status_code == 400
    assert _stored_files(app) == []
    assert Article.find_by_id(article.id).hero_image == "https://images.example.com/hero.jpg"


def test_replaced_hero_upload_is_removed(app, admin_client):
    admin_client.post(
        "/admin/articles",
        data={"title": "Troca de Capa", "body_text": BODY, "hero_image": (io.BytesIO(b"a"), "a.png")},
        content_type="multipart/form-data",
    )
    article = Article.find_by_slug("troca-de-capa")
    first_hero = article.hero_image

    admin_client.post(
        f"/admin/articles/{article.id}",
        data={"title": "Troca de Capa", "body_text": BODY, "hero_image": (io.BytesIO(b"b"), "b.png")},
        content_type="multipart/form-data",
    )

    second_hero = Article.find_by_id(article.id).hero_image
    assert second_hero != first_hero
    assert not os.path.exists(_upload_path(app, first_hero))
    assert _stored_files(app) == [second_hero.rsplit("/", 1)[1]]

    admin_client.delete(f"/admin/articles/{article.id}")

    assert _stored_files(app) == []


def test_update_keeps_hero_upload_when_unchanged(app, admin_client):
    admin_client.post(
        "/admin/articles",
        data={"title": "Mesma Capa", "body_text": BODY, "hero_image": (io.BytesIO(b"a"), "a.png")},
        content_type="multipart/form-data",
    )
    article = Article.find_by_slug("mesma-capa")

    admin_client.post(
        f"/admin/articles/{article.id}",
        data={"title": "Mesma Capa Revista", "body_text": BODY},
    )

    assert os.path.exists(_upload_path(app, Article.find_by_id(article.id).hero_image))
