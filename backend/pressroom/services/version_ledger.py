"""Version Ledger: pending-edit proposals and snapshot-before-overwrite application.

Invariants:
    - propose_edit ALWAYS inserts a new pending version and never mutates existing ones
    - propose_edit never touches the live title/body/images; only language and the
      publish-date override are applied immediately
    - apply_version writes (and flushes) the historical snapshot BEFORE the live row
      is overwritten, and both writes share one transaction: they commit together or
      the session manager rolls both back
    - A version belonging to another article is indistinguishable from an unknown one

Design Decisions:
    - Field merging is pure (core/versioning.py); this module only sequences store IO
    - Publish-date override delegates to core/publication.set_override so the
      published/timestamp invariant has exactly one implementation
"""

import logging
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pressroom.core import publication
from pressroom.core.domain_types import ArticleId, VersionId
from pressroom.core.errors import ErrorContext, ResourceNotFoundError
from pressroom.core.summarize import summarize
from pressroom.core.versioning import EditableFields, language_changed, merge_edit
from pressroom.models.article import Article
from pressroom.models.article_version import ArticleVersion
from pressroom.schemas.article import ArticleEdit
from pressroom.services.articles import load_article
from pressroom.services.publication import apply_publication_state, publication_state

logger = logging.getLogger(__name__)


@dataclass
class ProposedEdit:
    version: ArticleVersion
    article: Article


def _editable_fields(article: Article) -> EditableFields:
    return EditableFields(
        title=article.title,
        body=article.body,
        language=article.language,
        images=list(article.images or []),
    )


class VersionLedger:
    """Append-only version history for articles."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def propose_edit(
        self, article_id: ArticleId, edit: ArticleEdit,
    ) -> ProposedEdit:
        """Record a pending version; apply only metadata to the live article."""
        article = await load_article(self.db, article_id)
        merged = merge_edit(
            _editable_fields(article),
            title=edit.title,
            body=edit.body,
            language=edit.language,
            images=edit.images,
        )
        version = ArticleVersion(
            article_id=article.id,
            title=merged.title,
            body=merged.body,
            language=merged.language,
            images=merged.images,
            is_pending=True,
        )
        self.db.add(version)

        if language_changed(article.language, edit.language):
            article.language = merged.language
        if edit.custom_date is not None:
            apply_publication_state(
                article,
                publication.set_override(
                    publication_state(article), edit.custom_date,
                ),
            )

        await self.db.commit()
        logger.info(
            "Pending version proposed",
            extra={"article_id": article.id, "version_id": version.id},
        )
        return ProposedEdit(version=version, article=article)

    async def apply_version(
        self, article_id: ArticleId, version_id: VersionId,
    ) -> Article:
        """Snapshot the live content, then overwrite it with the target version."""
        article = await load_article(self.db, article_id)
        version = await self._load_version(article_id, version_id)

        snapshot = ArticleVersion(
            article_id=article.id,
            title=article.title,
            body=article.body,
            language=article.language,
            images=list(article.images or []),
            is_pending=False,
        )
        self.db.add(snapshot)
        await self.db.flush()

        article.title = version.title
        article.body = version.body
        article.language = version.language
        article.images = list(version.images or [])
        article.preview = summarize(version.body)
        version.is_pending = False

        await self.db.commit()
        logger.info(
            "Version applied",
            extra={"article_id": article.id, "version_id": version.id},
        )
        return article

    async def list_versions(self, article_id: ArticleId) -> list[ArticleVersion]:
        """All versions of an article, newest first."""
        await load_article(self.db, article_id)
        result = await self.db.execute(
            select(ArticleVersion)
            .where(ArticleVersion.article_id == article_id)
            .order_by(ArticleVersion.created_at.desc()),
        )
        return list(result.scalars().all())

    async def _load_version(
        self, article_id: ArticleId, version_id: VersionId,
    ) -> ArticleVersion:
        result = await self.db.execute(
            select(ArticleVersion)
            .where(ArticleVersion.id == version_id)
            .where(ArticleVersion.article_id == article_id),
        )
        version = result.scalar_one_or_none()
        if version is None:
            raise ResourceNotFoundError(
                "Version", str(version_id),
                ErrorContext(article_id=str(article_id), version_id=str(version_id)),
            )
        return version
