from .article import Article
from .section import ArticleSection
from .image import ArticleImage
from .pin import ProductPin

__all__ = ["Article", "ArticleSection", "ArticleImage", "ProductPin"]
