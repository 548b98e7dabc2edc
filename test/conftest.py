from pathlib import Path

import pytest

from portfolio.config import SiteConfig
from portfolio.loader import ContentLoader

BLOG_POST = """\
---
title: "Shipping a static site"
date: 2024-07-30
status: published
tags: [python, web]
---

This is the first paragraph of the post. It explains what the post is about.

## Details

More text lives here.
"""

DRAFT_POST = """\
---
title: "Half written"
date: 2024-08-15
status: draft
---

Not ready yet.
"""

PROJECT = """\
---
title: "{title}"
status: {status}
featured: {featured}
technologies:
  - Python
  - Markdown
---

Project body.
"""

ABOUT_PAGE = """\
---
title: About
---

Hello there.
"""


def write_content(content_dir: Path, directory: str, slug: str, text: str) -> Path:
    path = content_dir / directory / f"{slug}.md"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def project_source(title, status, featured=False):
    return PROJECT.format(title=title, status=status, featured=str(featured).lower())


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("PORTFOLIO_SITE_URL", raising=False)
    monkeypatch.delenv("PORTFOLIO_CONTENT_DIR", raising=False)


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    root = tmp_path / "content"
    write_content(root, "blog", "shipping-a-static-site", BLOG_POST)
    write_content(root, "blog", "half-written", DRAFT_POST)
    write_content(root, "projects", "site-engine", project_source("Site Engine", "Active"))
    write_content(root, "projects", "old-tool", project_source("Old Tool", "Completed", True))
    write_content(root, "pages", "about", ABOUT_PAGE)
    return root


@pytest.fixture
def loader(content_dir: Path) -> ContentLoader:
    return ContentLoader(content_dir)


@pytest.fixture
def config() -> SiteConfig:
    return SiteConfig(
        site_name="Jane Doe",
        site_url="https://jane.dev/",
        default_description="Notes and projects by Jane.",
        default_image="/images/og.png",
        author="Jane Doe",
    )
