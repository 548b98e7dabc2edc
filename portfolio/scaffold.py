"""Interactive scaffolding for new content files."""

import re
import unicodedata
from datetime import date
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from portfolio.logger import logger
from portfolio.models import Category, ProjectStatus
from portfolio.parser import ContentParser

TEMPLATE_DIR = Path(__file__).parent / "templates"

PROMPTS = {
    Category.BLOG: [
        ("title", "Post title", ""),
        ("description", "Short description", ""),
        ("tags", "Tags (comma separated)", ""),
        ("status", "Status [published/draft]", "draft"),
    ],
    Category.PROJECT: [
        ("title", "Project name", ""),
        ("description", "Short description", ""),
        ("technologies", "Technologies (comma separated)", ""),
        ("status", "Status [Active/Paused/Completed/Planning]", "Planning"),
        ("featured", "Featured? [y/N]", "n"),
        ("github_url", "Repository URL", ""),
        ("demo_url", "Demo URL", ""),
    ],
    Category.PAGE: [
        ("title", "Page title", ""),
        ("description", "Short description", ""),
    ],
}


def slugify(text):
    text = unicodedata.normalize('NFKD', text).encode('ascii', 'ignore').decode()
    slug = re.sub(r'[^a-z0-9-]', '', re.sub(r'\s+', '-', text.lower().strip()))
    return re.sub(r'-{2,}', '-', slug).strip('-')


def _split(value):
    if isinstance(value, (list, tuple)):
        return [str(v).strip() for v in value if str(v).strip()]
    return [v.strip() for v in (value or "").split(",") if v.strip()]


def prompt_answers(category, input_fn=None):
    """Ask for each field of the category; title is asked until given."""
    input_fn = input_fn or input
    category = Category.parse(category)
    answers = {}
    for key, label, default in PROMPTS[category]:
        suffix = f" ({default})" if default else ""
        value = input_fn(f"{label}{suffix}: ").strip()
        while key == "title" and not value:
            value = input_fn(f"{label} is required: ").strip()
        answers[key] = value or default
    return answers


def _template_context(category, answers, today):
    context = {
        "title": answers["title"].strip(),
        "description": (answers.get("description") or "").strip(),
        "date": today.isoformat(),
    }
    if category is Category.BLOG:
        status = (answers.get("status") or "draft").strip().lower()
        if status not in ("published", "draft"):
            raise ValueError(f"Invalid blog status: {status!r}")
        context.update(status=status, tags=_split(answers.get("tags")))
    elif category is Category.PROJECT:
        status = ProjectStatus((answers.get("status") or "Planning").strip().capitalize())
        featured = answers.get("featured", False)
        if isinstance(featured, str):
            featured = featured.strip().lower() in ("y", "yes", "true", "1")
        context.update(
            status=status.value,
            featured=bool(featured),
            technologies=_split(answers.get("technologies")),
            github_url=(answers.get("github_url") or "").strip(),
            demo_url=(answers.get("demo_url") or "").strip(),
        )
    return context


def scaffold_content(category, answers, content_dir, today=None):
    """
    Render the category template with the given answers and write it to
    <content_dir>/<category dir>/<slug>.md. Existing files are never
    overwritten.
    """
    category = Category.parse(category)
    if not (answers.get("title") or "").strip():
        raise ValueError("A title is required")

    slug = answers.get("slug")
    if slug and slug != slugify(slug):
        raise ValueError(f"Invalid slug: {slug!r}")
    slug = slug or slugify(answers["title"])
    if not slug:
        raise ValueError(f"Cannot derive a slug from {answers['title']!r}")

    path = Path(content_dir) / category.directory / f"{slug}.md"
    if path.exists():
        raise FileExistsError(f"{path} already exists")

    env = Environment(loader=FileSystemLoader(str(TEMPLATE_DIR)), keep_trailing_newline=True)
    template = env.get_template(f"{category.value}.md.j2")
    rendered = template.render(**_template_context(category, answers, today or date.today()))

    # Catch template/answer combinations the loader would reject
    ContentParser().parse(rendered, path.name, category)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(rendered, encoding="utf-8")
    logger.info(f"Created {category.value} scaffold: {path}")
    return path
