import argparse
import json
import sys

from portfolio.config import load_config
from portfolio.errors import ContentError
from portfolio.loader import ContentLoader
from portfolio.logger import logger
from portfolio.models import Category
from portfolio.parser import ContentParser
from portfolio.scaffold import prompt_answers, scaffold_content
from portfolio.seo import generate_metadata, generate_rss, generate_sitemap

CATEGORY_CHOICES = ["blog", "project", "projects", "page", "pages"]


def build_parser():
    parser = argparse.ArgumentParser(
        description="Portfolio content tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List published blog posts
  python main.py list blog

  # Page metadata for one project
  python main.py meta project my-project

  # Scaffold a new post interactively
  python main.py new blog
        """
    )
    parser.add_argument('--config', '-c', default='config.json',
                        help='Path to the JSON site configuration')
    parser.add_argument('--content-dir', help='Override the content directory')

    sub = parser.add_subparsers(dest='command')

    p_list = sub.add_parser('list', help='List the records of a category in listing order')
    p_list.add_argument('category', choices=CATEGORY_CHOICES)
    p_list.add_argument('--drafts', action='store_true', help='Include draft posts')

    p_slugs = sub.add_parser('slugs', help='Print every slug of a category')
    p_slugs.add_argument('category', choices=CATEGORY_CHOICES)

    p_show = sub.add_parser('show', help='Print one record as JSON')
    p_show.add_argument('category', choices=CATEGORY_CHOICES)
    p_show.add_argument('slug')

    p_meta = sub.add_parser('meta', help='Print the page metadata of one record as JSON')
    p_meta.add_argument('category', choices=CATEGORY_CHOICES)
    p_meta.add_argument('slug')

    p_new = sub.add_parser('new', help='Scaffold a new content file')
    p_new.add_argument('category', choices=CATEGORY_CHOICES)

    p_feeds = sub.add_parser('feeds', help='Write sitemap.xml and rss.xml')
    p_feeds.add_argument('--output-dir', help='Override the output directory')

    return parser


def _describe(record):
    meta = record.metadata
    if record.category is Category.BLOG:
        return f"{meta.date.isoformat()}  {record.title}  [{meta.status}]"
    if record.category is Category.PROJECT:
        star = "*" if meta.featured else " "
        return f"{star} {record.title}  [{meta.status.value}]"
    return record.title


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
    except ValueError as e:
        logger.error(str(e))
        return 1

    content_dir = args.content_dir or config.content_dir
    loader = ContentLoader(
        content_dir,
        ContentParser(config.words_per_minute, config.excerpt_length),
    )

    if args.command == 'list':
        category = Category.parse(args.category)
        records = loader.get_all(category) if args.drafts else loader.get_published(category)
        for i, record in enumerate(records, 1):
            print(f"  {i}. {record.slug}  {_describe(record)}")
        return 0

    if args.command == 'slugs':
        for slug in loader.list_slugs(args.category):
            print(slug)
        return 0

    if args.command in ('show', 'meta'):
        record = loader.get_by_slug(args.category, args.slug)
        if record is None:
            print(f"Not found: {args.category}/{args.slug}", file=sys.stderr)
            return 1
        if args.command == 'show':
            payload = record.model_dump(mode='json')
        else:
            payload = generate_metadata(record, args.category, config).model_dump(mode='json')
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return 0

    if args.command == 'new':
        answers = prompt_answers(args.category)
        try:
            path = scaffold_content(args.category, answers, content_dir)
        except (ValueError, FileExistsError, ContentError) as e:
            logger.error(str(e))
            return 1
        print(path)
        return 0

    if args.command == 'feeds':
        output_dir = args.output_dir or config.output_dir
        generate_sitemap(loader, config, output_dir)
        generate_rss(loader.get_published(Category.BLOG), config, output_dir)
        return 0

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
