from typing import Any, Dict, Iterable
from flask import current_app
from sqlalchemy.exc import IntegrityError
from habitare.extensions import db
from habitare.models.article import Article
from habitare.models.image import ArticleImage
from habitare.domain.invariants.exceptions import DuplicateSlugError
from habitare.utils.media import delete_files, has_upload, save_file, save_files
from habitare.utils.text import clean_text
from habitare.utils.transaction import transactional
from .fields import (
    DEFAULT_AUTHOR,
    DEFAULT_AUTHOR_ROLE,
    DEFAULT_CATEGORY,
    DEFAULT_HERO_CAPTION,
    DEFAULT_HIGHLIGHT_FOCUS,
    DEFAULT_STAT_LABEL,
    DEFAULT_STAT_VALUE,
    derive_article_fields,
    parse_published_at,
)

DUPLICATE_SLUG_MESSAGE = "Já existe um artigo com este título. Tente outro nome."


def create_article(
    *,
    data: Dict[str, Any],
    hero_file=None,
    image_files: Iterable = (),
) -> Article:
    """
    Publish a new article from the admin form.

    Edge cases handled:
    - Missing title or body
    - Duplicate slug (checked up front and again by the unique index)
    - Hero image precedence: upload, then pasted URL, then the default
    - Uploads are removed again when the insert fails
    """
    fields = derive_article_fields(data)
    published_at = parse_published_at(data.get("published_at"))

    if Article.slug_taken(fields["slug"]):
        raise DuplicateSlugError(DUPLICATE_SLUG_MESSAGE)

    saved_urls = []
    try:
        if has_upload(hero_file):
            hero_image = save_file(hero_file, prefix="hero")
            saved_urls.append(hero_image)
        else:
            hero_image = clean_text(
                data.get("hero_image_url"), current_app.config["DEFAULT_HERO_IMAGE"]
            )

        carousel_urls = save_files(image_files, prefix="img")
        saved_urls.extend(carousel_urls)

        article = Article(**fields)
        article.published_at = published_at
        article.category = DEFAULT_CATEGORY
        article.author = DEFAULT_AUTHOR
        article.author_role = DEFAULT_AUTHOR_ROLE
        article.hero_image = hero_image
        article.hero_caption = DEFAULT_HERO_CAPTION
        article.highlight_focus = DEFAULT_HIGHLIGHT_FOCUS
        article.highlight_stat_label = DEFAULT_STAT_LABEL
        article.highlight_stat_value = DEFAULT_STAT_VALUE

        with transactional():
            db.session.add(article)
            db.session.flush()  # ensures article.id is available
            ArticleImage.create_many(article.id, carousel_urls)

    except IntegrityError as exc:
        # Lost a race against another editor publishing the same title
        delete_files(saved_urls)
        raise DuplicateSlugError(DUPLICATE_SLUG_MESSAGE) from exc
    except Exception:
        delete_files(saved_urls)
        raise

    current_app.logger.info(
        "Article %s created (%s, %d carousel images)",
        article.id, article.slug, len(carousel_urls),
    )
    return article
