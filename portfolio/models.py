"""Typed content records and metadata.

Front matter is validated into one closed model per category so that the
rest of the package can rely on field presence instead of dict lookups.
"""

from __future__ import annotations

import datetime
from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Category(str, Enum):
    BLOG = "blog"
    PROJECT = "project"
    PAGE = "page"

    def __str__(self):
        return self.value

    @property
    def directory(self) -> str:
        return {"blog": "blog", "project": "projects", "page": "pages"}[self.value]

    @property
    def url_prefix(self) -> str:
        return {"blog": "/blog/", "project": "/projects/", "page": "/"}[self.value]

    @classmethod
    def parse(cls, value: Union[str, "Category"]) -> "Category":
        """Accept enum members, values or directory names ("projects")."""
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        for member in cls:
            if name in (member.value, member.directory):
                return member
        raise ValueError(f"Unknown content category: {value!r}")


class ProjectStatus(str, Enum):
    ACTIVE = "Active"
    PAUSED = "Paused"
    COMPLETED = "Completed"
    PLANNING = "Planning"

    def __str__(self):
        return self.value

    @property
    def rank(self) -> int:
        return STATUS_PRIORITY[self]


STATUS_PRIORITY = {
    ProjectStatus.ACTIVE: 0,
    ProjectStatus.PLANNING: 1,
    ProjectStatus.PAUSED: 2,
    ProjectStatus.COMPLETED: 3,
}


class _FrontMatter(BaseModel):
    # camelCase keys from hand-written files are accepted too
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
        coerce_numbers_to_str=True,
    )

    @field_validator("tags", "technologies", "images", mode="before", check_fields=False)
    @classmethod
    def _split_list(cls, value):
        # "python, web" is as common as a YAML list
        if value is None:
            return ()
        if isinstance(value, str):
            return tuple(item.strip() for item in value.split(",") if item.strip())
        if isinstance(value, (list, tuple)):
            return tuple(str(item) for item in value if item is not None)
        return value

    @field_validator("date", "updated", mode="before", check_fields=False)
    @classmethod
    def _drop_time(cls, value):
        if isinstance(value, datetime.datetime):
            return value.date()
        if isinstance(value, str):
            try:
                return datetime.datetime.fromisoformat(value.strip()).date()
            except ValueError:
                return value
        return value


class BlogMetadata(_FrontMatter):
    title: str
    date: datetime.date
    status: Literal["published", "draft"]
    updated: datetime.date | None = None
    description: str | None = None
    excerpt: str | None = None
    meta_title: str | None = None
    author: str | None = None
    tags: tuple[str, ...] = ()
    images: tuple[str, ...] = ()


class ProjectMetadata(_FrontMatter):
    title: str
    status: ProjectStatus
    featured: bool = False
    description: str | None = None
    meta_title: str | None = None
    date: datetime.date | None = None
    technologies: tuple[str, ...] = ()
    images: tuple[str, ...] = ()
    github_url: str | None = None
    demo_url: str | None = None
    tags: tuple[str, ...] = ()


class PageMetadata(_FrontMatter):
    title: str | None = None
    description: str | None = None
    meta_title: str | None = None
    updated: datetime.date | None = None
    images: tuple[str, ...] = ()


METADATA_MODELS = {
    Category.BLOG: BlogMetadata,
    Category.PROJECT: ProjectMetadata,
    Category.PAGE: PageMetadata,
}

Metadata = Union[BlogMetadata, ProjectMetadata, PageMetadata]


class ContentRecord(BaseModel):
    """One parsed source file."""

    model_config = ConfigDict(frozen=True)

    slug: str
    category: Category
    content: str
    html: str
    metadata: Metadata
    excerpt: str | None = None
    word_count: int = 0
    reading_time: int = 1

    @property
    def title(self) -> str:
        return self.metadata.title or self.slug.replace("-", " ").title()

    @property
    def status(self) -> str | None:
        status = getattr(self.metadata, "status", None)
        if isinstance(status, ProjectStatus):
            return status.value
        return status

    @property
    def is_draft(self) -> bool:
        return (self.status or "").lower() == "draft"


class MetadataBundle(BaseModel):
    """Page-level metadata handed to the rendering layer."""

    title: str
    description: str
    canonical_url: str
    image: str
    indexable: bool = True
    robots: str = "index, follow"
    open_graph: dict[str, str] = Field(default_factory=dict)
    json_ld: dict = Field(default_factory=dict)
