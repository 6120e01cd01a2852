from .exceptions import ArticleValidationError


def assert_article_input(title, body_html):
    """Title and body are the only fields an editor must fill in."""
    if not title or not body_html:
        raise ArticleValidationError("Preencha título e texto da matéria para publicar.")
