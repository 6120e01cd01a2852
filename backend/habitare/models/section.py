from sqlalchemy import select
from habitare.extensions import db
from .base import BaseModel


class ArticleSection(BaseModel):
    __tablename__ = "article_sections"

    article_id = db.Column(
        db.Integer,
        db.ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    heading = db.Column(db.String(255))
    content = db.Column(db.Text)
    media_url = db.Column(db.String(512))
    media_caption = db.Column(db.Text)
    sort_order = db.Column(db.Integer, nullable=False, default=0)
    layout_type = db.Column(db.String(50), nullable=False, default="text")  # text, media-left, media-right

    article = db.relationship("Article", back_populates="sections")

    @classmethod
    def find_by_article_id(cls, article_id):
        return db.session.scalars(
            select(cls)
            .where(cls.article_id == article_id)
            .order_by(cls.sort_order.asc(), cls.id.asc())
        ).all()
