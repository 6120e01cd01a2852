from sqlalchemy import func, select
from habitare.extensions import db
from .base import BaseModel


class ArticleImage(BaseModel):
    __tablename__ = "article_images"

    article_id = db.Column(
        db.Integer,
        db.ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    image_url = db.Column(db.String(512), nullable=False)
    image_caption = db.Column(db.Text)
    sort_order = db.Column(db.Integer, nullable=False, default=0)

    article = db.relationship("Article", back_populates="images")

    @classmethod
    def find_by_article_id(cls, article_id):
        return db.session.scalars(
            select(cls)
            .where(cls.article_id == article_id)
            .order_by(cls.sort_order.asc(), cls.id.asc())
        ).all()

    @classmethod
    def next_sort_order(cls, article_id):
        """Carousel numbering continues after the highest existing slot."""
        current = db.session.scalar(
            select(func.max(cls.sort_order)).where(cls.article_id == article_id)
        )
        return 0 if current is None else current + 1

    @classmethod
    def create_many(cls, article_id, image_urls, start_at=0):
        images = []
        for index, url in enumerate(image_urls):
            image = cls()
            image.article_id = article_id
            image.image_url = url
            image.sort_order = start_at + index
            db.session.add(image)
            images.append(image)
        return images
