from typing import Any, Dict
from datetime import date
from dateutil.parser import parse as parse_date, ParserError
from habitare.domain.invariants.article import assert_article_input
from habitare.domain.invariants.exceptions import ArticleValidationError
from habitare.utils.text import (
    DEFAULT_SUBTITLE,
    build_excerpt,
    calculate_reading_time,
    clean_text,
    extract_helper_text,
    extract_subtitle,
    slugify,
    strip_html,
)

DEFAULT_CATEGORY = "Edição interativa"
DEFAULT_AUTHOR = "Estúdio Habitare"
DEFAULT_AUTHOR_ROLE = "Conteúdo & ativações"
DEFAULT_HERO_CAPTION = "Imagem enviada pelo editor Habitare"
DEFAULT_HIGHLIGHT_FOCUS = "Pins interativos"
DEFAULT_STAT_LABEL = "Cliques rastreáveis"
DEFAULT_STAT_VALUE = "100%"


def derive_article_fields(
    data: Dict[str, Any],
    *,
    subtitle_fallback: str | None = DEFAULT_SUBTITLE,
) -> Dict[str, Any]:
    """
    Everything an article needs that is computed from title and body.

    The editor only types a title and a rich-text body; slug, excerpt,
    subtitle, reading time and highlight copy are derived here so create
    and update stay in lockstep.
    """
    title = clean_text(data.get("title"))
    body_html = clean_text(data.get("body_text"))

    assert_article_input(title, body_html)

    plain_body = strip_html(body_html)
    subtitle = extract_subtitle(plain_body, subtitle_fallback)

    return {
        "slug": slugify(title),
        "title": title,
        "subtitle": subtitle,
        "excerpt": build_excerpt(plain_body),
        "body_html": body_html,
        "reading_time": calculate_reading_time(plain_body),
        "highlight_quote": subtitle or title,
        "highlight_stat_helper": extract_helper_text(plain_body),
    }


def parse_published_at(value) -> date:
    raw = clean_text(value)
    if not raw:
        return date.today()
    try:
        return parse_date(raw, dayfirst=("/" in raw)).date()
    except (ParserError, OverflowError, ValueError) as exc:
        raise ArticleValidationError(f"Data de publicação inválida: {raw}") from exc
