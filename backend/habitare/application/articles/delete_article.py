from flask import current_app
from habitare.extensions import db
from habitare.models.article import Article
from habitare.domain.invariants.exceptions import ArticleNotFound
from habitare.utils.media import delete_files
from habitare.utils.transaction import transactional


def delete_article(*, article_id: int) -> None:
    """
    Hard-delete an article and everything it owns.

    Notes:
    - Sections, images and pins go with it (ORM cascade + ON DELETE CASCADE)
    - Files uploaded for the article are removed once the rows are gone
    """
    article = Article.find_by_id(article_id)
    if not article:
        raise ArticleNotFound(article_id=article_id)

    owned_files = [article.hero_image] + [image.image_url for image in article.images]

    with transactional():
        db.session.delete(article)

    removed = delete_files(owned_files)
    current_app.logger.info(
        "Article %s deleted (%d uploaded files removed)", article_id, removed
    )
