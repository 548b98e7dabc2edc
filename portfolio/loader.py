"""Reads content directories into ordered collections of records.

Every call goes back to the file system; nothing is cached between calls.
"""

from __future__ import annotations

from pathlib import Path

from portfolio.errors import ContentNotFoundError, ContentParseError
from portfolio.logger import logger
from portfolio.models import Category, ContentRecord
from portfolio.parser import ContentParser

CONTENT_EXTENSION = ".md"


def sort_blog_posts(records: list[ContentRecord]) -> list[ContentRecord]:
    """Newest first, filename ascending on equal dates."""
    ordered = sorted(records, key=lambda r: r.slug)
    return sorted(ordered, key=lambda r: r.metadata.date, reverse=True)


def sort_projects(records: list[ContentRecord]) -> list[ContentRecord]:
    """Featured first, then by status priority, then filename."""
    return sorted(
        records,
        key=lambda r: (not r.metadata.featured, r.metadata.status.rank, r.slug),
    )


def sort_pages(records: list[ContentRecord]) -> list[ContentRecord]:
    return sorted(records, key=lambda r: r.slug)


SORTERS = {
    Category.BLOG: sort_blog_posts,
    Category.PROJECT: sort_projects,
    Category.PAGE: sort_pages,
}


class ContentLoader:
    def __init__(self, content_dir, parser: ContentParser | None = None):
        self.content_dir = Path(content_dir)
        self.parser = parser or ContentParser()

    def _category_dir(self, category) -> Path:
        try:
            category = Category.parse(category)
        except ValueError as e:
            raise ContentNotFoundError(str(category), str(e)) from e
        return self.content_dir / category.directory

    def _source_files(self, category) -> list[Path]:
        directory = self._category_dir(category)
        if not directory.is_dir():
            logger.debug(f"No content directory at {directory}")
            return []
        return sorted(
            p for p in directory.iterdir()
            if p.is_file() and p.suffix == CONTENT_EXTENSION
        )

    def _source_path(self, category, slug: str) -> Path:
        if not slug or "/" in slug or "\\" in slug or slug.startswith("."):
            raise ContentNotFoundError(slug, f"Invalid slug: {slug!r}")
        path = self._category_dir(category) / f"{slug}{CONTENT_EXTENSION}"
        if not path.is_file():
            raise ContentNotFoundError(slug, f"No source file for {category}/{slug}")
        return path

    def load_file(self, path, category) -> ContentRecord:
        path = Path(path)
        try:
            raw_md = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise ContentParseError(path.stem, f"Cannot read {path.name}: {e}") from e
        return self.parser.parse(raw_md, path.name, category)

    def list_slugs(self, category) -> list[str]:
        """Slugs for every source file of a category, without parsing them."""
        try:
            return [p.stem for p in self._source_files(category)]
        except ContentNotFoundError as e:
            logger.warning(f"Content category not found: {e}")
            return []

    def get_all(self, category) -> list[ContentRecord]:
        """Every parseable record of a category, drafts included, in listing order."""
        try:
            files = self._source_files(category)
        except ContentNotFoundError as e:
            logger.warning(f"Content category not found: {e}")
            return []

        records = []
        for path in files:
            try:
                records.append(self.load_file(path, category))
            except ContentParseError as e:
                logger.warning(f"Skipping {path.name}: {e}")

        return SORTERS[Category.parse(category)](records)

    def get_published(self, category) -> list[ContentRecord]:
        return [r for r in self.get_all(category) if not r.is_draft]

    def get_by_slug(self, category, slug: str) -> ContentRecord | None:
        """Single record lookup; None when missing or unparseable."""
        try:
            return self.load_file(self._source_path(category, slug), category)
        except ContentNotFoundError as e:
            logger.info(f"Content not found: {e}")
        except ContentParseError as e:
            logger.error(f"Failed to parse {category}/{e.identifier}: {e}")
        return None
