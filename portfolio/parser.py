import math
from pathlib import Path

import frontmatter
import markdown
from bs4 import BeautifulSoup
from pydantic import ValidationError
from yaml import YAMLError

from portfolio.errors import ContentParseError
from portfolio.models import METADATA_MODELS, Category, ContentRecord

MARKDOWN_EXTENSIONS = [
    'tables',
    'fenced_code',
    'codehilite',
    'pymdownx.tilde',
    'pymdownx.tasklist',
]

MARKDOWN_EXTENSION_CONFIGS = {
    'codehilite': {'guess_lang': False, 'css_class': 'highlight'},
    'pymdownx.tilde': {'subscript': False},
    'pymdownx.tasklist': {'custom_checkbox': False},
}

ELLIPSIS = "..."


def reading_time(word_count, words_per_minute=200):
    """Minutes to read, never less than one."""
    return max(1, math.ceil(word_count / words_per_minute))


def truncate(text, length=150):
    # Cuts at a fixed character count, even mid-word
    if len(text) <= length:
        return text
    return text[:length] + ELLIPSIS


def first_paragraph(html):
    paragraph = BeautifulSoup(html, 'html.parser').find('p')
    if paragraph is None:
        return ""
    return " ".join(paragraph.get_text().split())


class ContentParser:
    def __init__(self, words_per_minute=200, excerpt_length=150):
        self.md = markdown.Markdown(
            extensions=MARKDOWN_EXTENSIONS,
            extension_configs=MARKDOWN_EXTENSION_CONFIGS,
        )
        self.words_per_minute = words_per_minute
        self.excerpt_length = excerpt_length

    def render(self, body):
        html = self.md.convert(body)
        self.md.reset()
        return html

    def parse(self, raw_md, filename, category):
        """Build a ContentRecord from the raw text of one source file."""
        category = Category.parse(category)
        slug = Path(filename).stem

        try:
            post = frontmatter.loads(raw_md)
        except YAMLError as e:
            raise ContentParseError(slug, f"Malformed front matter in {filename}: {e}") from e

        model = METADATA_MODELS[category]
        try:
            metadata = model.model_validate(post.metadata)
        except ValidationError as e:
            raise ContentParseError(slug, f"Invalid front matter in {filename}: {e}") from e

        html = self.render(post.content)
        word_count = len(post.content.split())

        # Fallbacks
        excerpt = getattr(metadata, 'excerpt', None)
        if not excerpt and category is Category.BLOG:
            excerpt = truncate(first_paragraph(html), self.excerpt_length) or None

        return ContentRecord(
            slug=slug,
            category=category,
            content=post.content,
            html=html,
            metadata=metadata,
            excerpt=excerpt,
            word_count=word_count,
            reading_time=reading_time(word_count, self.words_per_minute),
        )

    def dump(self, record):
        """Serialize a record back to front matter plus markdown body."""
        data = record.metadata.model_dump(mode='json', exclude_none=True)
        post = frontmatter.Post(record.content, **data)
        return frontmatter.dumps(post) + "\n"
