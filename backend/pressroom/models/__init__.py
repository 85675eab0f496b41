"""ORM Models: SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Article is the aggregate root; versions, engagement facts and comments
      are scoped by article_id with ON DELETE CASCADE

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all/autogenerate
"""

from pressroom.models.article import Article  # noqa: F401
from pressroom.models.article_version import ArticleVersion  # noqa: F401
from pressroom.models.engagement import ArticleView, ArticleLike  # noqa: F401
from pressroom.models.comment import Comment  # noqa: F401
