import os
import xml.etree.ElementTree as ET
from datetime import date, datetime, time, timezone
from email.utils import format_datetime

from portfolio.config import SiteConfig
from portfolio.logger import logger
from portfolio.models import Category, MetadataBundle

SCHEMA_CONTEXT = "https://schema.org"

TITLE_TEMPLATES = {
    Category.BLOG: "{title} | {site_name} Blog",
    Category.PROJECT: "{title} - Project | {site_name}",
    Category.PAGE: "{title} | {site_name}",
}


def first_non_empty(*options):
    """Return the first option that is not None or blank."""
    for option in options:
        if option is None:
            continue
        if isinstance(option, str) and not option.strip():
            continue
        return option
    return None


def canonical_url(record, category, config):
    return config.absolute_url(f"{category.url_prefix}{record.slug}")


def resolve_image(record, category, config):
    images = record.metadata.images
    if not images:
        return config.absolute_url(config.default_image)

    image = images[0]
    if not image.startswith(("http://", "https://", "/")):
        base = config.image_paths.get(category.value, "/images/")
        image = f"{base.rstrip('/')}/{image}"
    return config.absolute_url(image)


def _blog_linked_data(record, config):
    meta = record.metadata
    data = {
        "@type": "BlogPosting",
        "headline": record.title,
        "datePublished": meta.date.isoformat(),
        "dateModified": (meta.updated or meta.date).isoformat(),
        "wordCount": record.word_count,
        "timeRequired": f"PT{record.reading_time}M",
        "author": {"@type": "Person", "name": meta.author or config.author},
    }
    if meta.tags:
        data["keywords"] = ", ".join(meta.tags)
    return data


def _project_linked_data(record, config):
    meta = record.metadata
    data = {
        "@type": "SoftwareSourceCode",
        "name": record.title,
        "creativeWorkStatus": meta.status.value,
        "author": {"@type": "Person", "name": config.author},
    }
    if meta.technologies:
        data["programmingLanguage"] = list(meta.technologies)
    if meta.github_url:
        data["codeRepository"] = meta.github_url
    if meta.demo_url:
        data["url"] = meta.demo_url
    if meta.date:
        data["dateCreated"] = meta.date.isoformat()
    return data


def _page_linked_data(record, config):
    data = {"@type": "WebPage", "name": record.title}
    if record.metadata.updated:
        data["dateModified"] = record.metadata.updated.isoformat()
    return data


LINKED_DATA_BUILDERS = {
    Category.BLOG: _blog_linked_data,
    Category.PROJECT: _project_linked_data,
    Category.PAGE: _page_linked_data,
}


def generate_metadata(record, category=None, config=None):
    """
    Build the page metadata for one record.
    Every field has a fallback, so this never raises for a loaded record.
    """
    category = Category.parse(category) if category else record.category
    config = config or SiteConfig()
    meta = record.metadata

    title = first_non_empty(
        meta.meta_title,
        TITLE_TEMPLATES[category].format(title=record.title, site_name=config.site_name),
    )
    description = first_non_empty(
        meta.description,
        record.excerpt,
        config.default_description,
        config.site_description,
        record.title,
    )
    url = canonical_url(record, category, config)
    image = resolve_image(record, category, config)
    indexable = not record.is_draft

    # shape follows the metadata actually loaded
    builder = LINKED_DATA_BUILDERS[record.category]
    json_ld = {"@context": SCHEMA_CONTEXT}
    json_ld.update(builder(record, config))
    json_ld.setdefault("url", url)
    json_ld["mainEntityOfPage"] = url
    json_ld["description"] = description
    json_ld["image"] = image

    return MetadataBundle(
        title=title,
        description=description,
        canonical_url=url,
        image=image,
        indexable=indexable,
        robots="index, follow" if indexable else "noindex, nofollow",
        open_graph={
            "og:title": title,
            "og:description": description,
            "og:url": url,
            "og:image": image,
            "og:type": "article" if category is Category.BLOG else "website",
            "og:site_name": config.site_name,
        },
        json_ld=json_ld,
    )


def _lastmod(record):
    meta = record.metadata
    value = getattr(meta, "updated", None) or getattr(meta, "date", None)
    return (value or date.today()).isoformat()


def generate_sitemap(loader, config, output_dir=None):
    """
    Write sitemap.xml with the home page and every indexable record.
    """
    output_dir = output_dir or config.output_dir
    os.makedirs(output_dir, exist_ok=True)

    urlset = ET.Element("urlset", xmlns="http://www.sitemaps.org/schemas/sitemap/0.9")

    url = ET.SubElement(urlset, "url")
    ET.SubElement(url, "loc").text = f"{config.site_url}/"
    ET.SubElement(url, "lastmod").text = date.today().isoformat()
    ET.SubElement(url, "changefreq").text = "weekly"

    count = 0
    for category in Category:
        for record in loader.get_published(category):
            url = ET.SubElement(urlset, "url")
            ET.SubElement(url, "loc").text = canonical_url(record, category, config)
            ET.SubElement(url, "lastmod").text = _lastmod(record)
            ET.SubElement(url, "changefreq").text = "monthly"
            count += 1

    path = os.path.join(output_dir, "sitemap.xml")
    ET.ElementTree(urlset).write(path, encoding='utf-8', xml_declaration=True)
    logger.info(f"sitemap.xml written with {count} entries")
    return path


def generate_rss(posts, config, output_dir=None):
    """
    Write rss.xml from published blog posts, newest first.
    """
    output_dir = output_dir or config.output_dir
    os.makedirs(output_dir, exist_ok=True)

    rss = ET.Element("rss", version="2.0")
    channel = ET.SubElement(rss, "channel")

    ET.SubElement(channel, "title").text = config.site_name
    ET.SubElement(channel, "link").text = f"{config.site_url}/"
    ET.SubElement(channel, "description").text = config.site_description
    ET.SubElement(channel, "lastBuildDate").text = format_datetime(datetime.now(timezone.utc))

    published = [p for p in posts if p.category is Category.BLOG and not p.is_draft]
    published.sort(key=lambda p: p.metadata.date, reverse=True)

    for post in published:
        link = canonical_url(post, Category.BLOG, config)
        item = ET.SubElement(channel, "item")
        ET.SubElement(item, "title").text = post.title
        ET.SubElement(item, "link").text = link
        ET.SubElement(item, "guid").text = link
        ET.SubElement(item, "description").text = first_non_empty(
            post.metadata.description, post.excerpt, config.default_description
        )
        published_at = datetime.combine(post.metadata.date, time(), tzinfo=timezone.utc)
        ET.SubElement(item, "pubDate").text = format_datetime(published_at)

    path = os.path.join(output_dir, "rss.xml")
    ET.ElementTree(rss).write(path, encoding='utf-8', xml_declaration=True)
    logger.info(f"rss.xml written with {len(published)} items")
    return path
