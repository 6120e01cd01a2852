class InvariantViolation(Exception):
    """A write was refused because it would break a content rule."""

    title = "Dados inválidos"
    status_code = 400


class ArticleValidationError(InvariantViolation):
    pass


class DuplicateSlugError(InvariantViolation):
    title = "Slug duplicado"


class UnsupportedMediaError(InvariantViolation):
    title = "Arquivo não suportado"


class PinSlugConflict(InvariantViolation):
    title = "Pins duplicados"


class ArticleNotFound(LookupError):
    def __init__(self, article_id=None, slug=None):
        self.article_id = article_id
        self.slug = slug
        if slug is not None:
            message = f'Nenhum artigo encontrado com o slug "{slug}"'
        else:
            message = f"Nenhum artigo encontrado com o ID {article_id}"
        super().__init__(message)
