from sqlalchemy import delete, select
from sqlalchemy.orm import validates
from habitare.extensions import db
from habitare.utils.text import clamp_percent
from .base import BaseModel


class ProductPin(BaseModel):
    __tablename__ = "product_pins"

    article_id = db.Column(
        db.Integer,
        db.ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    slug = db.Column(db.String(255), unique=True, nullable=False)
    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    price_label = db.Column(db.String(120))
    x_percent = db.Column(db.Float, nullable=False, default=0)
    y_percent = db.Column(db.Float, nullable=False, default=0)
    cta_path = db.Column(db.String(512))
    tracking_code = db.Column(db.String(512))
    badge = db.Column(db.String(120))

    article = db.relationship("Article", back_populates="pins")

    @validates("x_percent", "y_percent")
    def _clamp_coordinate(self, key, value):
        return clamp_percent(value)

    @classmethod
    def find_by_article_id(cls, article_id):
        return db.session.scalars(
            select(cls).where(cls.article_id == article_id).order_by(cls.id.asc())
        ).all()

    @classmethod
    def delete_by_article_id(cls, article_id):
        db.session.execute(
            delete(cls)
            .where(cls.article_id == article_id)
            .execution_options(synchronize_session=False)
        )
