ARTICLE_FIELDS = (
    "id",
    "slug",
    "title",
    "subtitle",
    "category",
    "author",
    "author_role",
    "reading_time",
    "hero_image",
    "hero_caption",
    "excerpt",
    "body_html",
    "highlight_quote",
    "highlight_focus",
    "highlight_stat_label",
    "highlight_stat_value",
    "highlight_stat_helper",
)


def normalize_article(article):
    data = {field: getattr(article, field) for field in ARTICLE_FIELDS}
    data["published_at"] = (
        article.published_at.isoformat() if article.published_at else None
    )
    return data
