from sqlalchemy import select
from habitare.extensions import db
from .base import BaseModel


class Article(BaseModel):
    __tablename__ = "articles"

    slug = db.Column(db.String(255), unique=True, nullable=False, index=True)
    title = db.Column(db.String(255), nullable=False)
    subtitle = db.Column(db.Text)
    category = db.Column(db.String(120))
    author = db.Column(db.String(120))
    author_role = db.Column(db.String(120))
    published_at = db.Column(db.Date, index=True)
    reading_time = db.Column(db.Integer)
    hero_image = db.Column(db.String(512))
    hero_caption = db.Column(db.Text)
    excerpt = db.Column(db.Text)
    body_html = db.Column(db.Text)
    highlight_quote = db.Column(db.Text)
    highlight_focus = db.Column(db.String(255))
    highlight_stat_label = db.Column(db.String(255))
    highlight_stat_value = db.Column(db.String(64))
    highlight_stat_helper = db.Column(db.Text)

    # Children are owned by the article and go away with it
    sections = db.relationship(
        "ArticleSection",
        back_populates="article",
        order_by="ArticleSection.sort_order",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    images = db.relationship(
        "ArticleImage",
        back_populates="article",
        order_by="ArticleImage.sort_order",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    pins = db.relationship(
        "ProductPin",
        back_populates="article",
        order_by="ProductPin.id",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @classmethod
    def find_all(cls):
        """Newest first; same-day articles fall back to insertion order."""
        return db.session.scalars(
            select(cls).order_by(cls.published_at.desc(), cls.id.desc())
        ).all()

    @classmethod
    def find_by_id(cls, article_id):
        if article_id is None:
            return None
        return db.session.get(cls, article_id)

    @classmethod
    def find_by_slug(cls, slug):
        return db.session.scalars(select(cls).where(cls.slug == slug)).first()

    @classmethod
    def slug_taken(cls, slug, exclude_id=None):
        query = select(cls.id).where(cls.slug == slug)
        if exclude_id is not None:
            query = query.where(cls.id != exclude_id)
        return db.session.scalars(query).first() is not None

    def __repr__(self):
        return f"<Article {self.id} {self.slug!r}>"
