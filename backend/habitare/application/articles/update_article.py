from typing import Any, Dict, Iterable
from flask import current_app
from sqlalchemy.exc import IntegrityError
from habitare.models.article import Article
from habitare.models.image import ArticleImage
from habitare.domain.invariants.exceptions import ArticleNotFound, DuplicateSlugError
from habitare.utils.media import delete_file, delete_files, has_upload, save_file, save_files
from habitare.utils.text import clean_text
from habitare.utils.transaction import transactional
from .create_article import DUPLICATE_SLUG_MESSAGE
from .fields import (
    DEFAULT_AUTHOR,
    DEFAULT_AUTHOR_ROLE,
    DEFAULT_CATEGORY,
    derive_article_fields,
)


def update_article(
    *,
    article_id: int,
    data: Dict[str, Any],
    hero_file=None,
    image_files: Iterable = (),
) -> Article:
    """
    Rewrite an article in place from the edit form.

    Design rules:
    - Title and body are revalidated and every derived field recomputed
    - Byline fields keep their previous value when left blank
    - The hero image only changes when a new upload or URL is supplied
    - New carousel uploads are appended after the existing ones
    """
    article = Article.find_by_id(article_id)
    if not article:
        raise ArticleNotFound(article_id=article_id)

    fields = derive_article_fields(data, subtitle_fallback=article.subtitle)

    if Article.slug_taken(fields["slug"], exclude_id=article.id):
        raise DuplicateSlugError(DUPLICATE_SLUG_MESSAGE)

    previous_hero = article.hero_image
    saved_urls = []
    try:
        if has_upload(hero_file):
            hero_image = save_file(hero_file, prefix="hero")
            saved_urls.append(hero_image)
        else:
            hero_image = clean_text(data.get("hero_image_url"), previous_hero)

        carousel_urls = save_files(image_files, prefix="img")
        saved_urls.extend(carousel_urls)

        with transactional():
            for name, value in fields.items():
                setattr(article, name, value)

            article.category = clean_text(
                data.get("category"), article.category or DEFAULT_CATEGORY
            )
            article.author = clean_text(
                data.get("author"), article.author or DEFAULT_AUTHOR
            )
            article.author_role = clean_text(
                data.get("author_role"), article.author_role or DEFAULT_AUTHOR_ROLE
            )
            article.hero_image = hero_image

            if carousel_urls:
                ArticleImage.create_many(
                    article.id,
                    carousel_urls,
                    start_at=ArticleImage.next_sort_order(article.id),
                )
    except IntegrityError as exc:
        delete_files(saved_urls)
        raise DuplicateSlugError(DUPLICATE_SLUG_MESSAGE) from exc
    except Exception:
        delete_files(saved_urls)
        raise

    # The replaced hero is no longer referenced by any row
    if previous_hero and previous_hero != hero_image:
        delete_file(previous_hero)

    current_app.logger.info(
        "Article %s updated (%s, +%d carousel images)",
        article.id, article.slug, len(carousel_urls),
    )
    return article
