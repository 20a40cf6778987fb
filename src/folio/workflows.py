"""Shared workflow layer between the CLI commands.

build_site loads content, renders every page through the shell template and
writes the results. A page with broken front-matter is skipped and reported;
a broken shell template stops the whole build.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from .adapters.file_content import FileContentSource
from .adapters.file_output import FileSiteWriter
from .config import Config
from .core.collection import (
    BLOG_PATH,
    RESERVED_SLUGS,
    check_post_slug,
    duplicate_slugs,
    link_neighbours,
    post_url,
    publishable,
    render_listing,
    sort_by_date,
)
from .core.document import Document, format_front_matter, normalize_slug, parse_document
from .core.errors import FolioError, FrontMatterError
from .core.markup import SUMMARY_MARKER
from .core.render import ShellTemplate, render
from .layout import DEFAULT_SHELL
from .ports.content_source import ContentSource, SourceFile
from .ports.site_writer import SiteWriter

logger = logging.getLogger(__name__)

HOME_SLUG = "index"


@dataclass
class BuildReport:
    """What a build produced and which pages it had to skip."""

    written: list[Path] = field(default_factory=list)
    static: list[Path] = field(default_factory=list)
    failures: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failures


def load_shell(config: Config) -> ShellTemplate:
    """Compile the configured shell template, or the built-in one."""
    path = config.shell_template_path
    if path is None:
        return ShellTemplate(DEFAULT_SHELL, name="default layout")
    if not path.exists():
        raise FolioError(f"Shell template not found: {path}")
    return ShellTemplate(path.read_text(encoding="utf-8"), name=path.name)


def _parse(
    source: SourceFile,
    report: BuildReport | None,
    is_post: bool = False,
) -> Document | None:
    try:
        document = parse_document(source.text, slug=source.slug)
        if is_post:
            check_post_slug(document, source.slug)
        return document
    except FrontMatterError as e:
        logger.error(f"Skipping {source.path or source.slug}: {e}")
        if report is not None:
            report.failures[source.slug] = str(e)
        return None


def load_posts(
    source: ContentSource,
    include_drafts: bool = False,
    report: BuildReport | None = None,
) -> list[Document]:
    """
    Parse every post, dropping drafts and pages that fail to parse.

    When two posts share a slug the first one (by file name) wins.
    """
    documents = [doc for doc in (_parse(s, report, is_post=True) for s in source.list_posts()) if doc]
    documents = publishable(documents, include_drafts)

    duplicates = duplicate_slugs(documents)
    if not duplicates:
        return documents

    seen = set()
    kept = []
    for doc in documents:
        if doc.slug in seen:
            logger.error(f"Skipping duplicate post slug: {doc.slug}")
            if report is not None:
                report.failures[doc.slug] = f"{doc.slug}: duplicate slug"
            continue
        seen.add(doc.slug)
        kept.append(doc)
    return kept


def load_home(source: ContentSource, report: BuildReport | None = None) -> Document | None:
    """Parse the home page, or an empty one if the site has none."""
    home = source.read_home()
    if home is None:
        return Document(body="", slug=HOME_SLUG, layout="home")
    return _parse(SourceFile(slug=HOME_SLUG, data=home.data, path=home.path), report)


def build_site(
    config: Config,
    include_drafts: bool = False,
    source: ContentSource | None = None,
    writer: SiteWriter | None = None,
) -> BuildReport:
    """
    Render the home page, blog listing and every post.

    Every page is rendered before anything is written, so a shell template
    error reached on any page leaves the output directory untouched.
    """
    source = source or FileContentSource(config.content_path)
    writer = writer or FileSiteWriter(config.output_path)
    shell = load_shell(config)
    site = config.site_info()
    report = BuildReport()

    posts = load_posts(source, include_drafts, report)
    navigation = link_neighbours(posts)
    pages: dict[str, str] = {}

    for post in sort_by_date(posts):
        pages[f"{BLOG_PATH}/{post.slug}/index.html"] = render(
            post,
            shell,
            site=site,
            nav=navigation[post.slug],
            url=post_url(post),
            date_format=config.date_format,
        )

    listing = Document(body="", title="Blog", slug=BLOG_PATH, layout="listing")
    pages[f"{BLOG_PATH}/index.html"] = render(
        listing,
        shell,
        site=site,
        url=f"/{BLOG_PATH}/",
        date_format=config.date_format,
        extra_html=render_listing(posts, date_format=config.date_format),
    )

    home = load_home(source, report)
    if home is not None:
        recent = ""
        if posts and config.recent_posts > 0:
            recent = render_listing(posts, date_format=config.date_format, limit=config.recent_posts)
        pages["index.html"] = render(
            home,
            shell,
            site=site,
            url="/",
            date_format=config.date_format,
            extra_html=recent,
        )

    for relative_path, html in pages.items():
        report.written.append(writer.write_page(relative_path, html))
    report.static = writer.copy_static(config.static_path)

    logger.info(
        f"Built {len(report.written)} pages, copied {len(report.static)} static files, "
        f"{len(report.failures)} failures"
    )
    return report


def render_file(path: Path, config: Config) -> str:
    """Render a single markdown file without neighbours."""
    source = SourceFile(slug=path.stem, data=path.read_bytes(), path=path)
    document = parse_document(source.text, slug=source.slug)
    return render(
        document,
        load_shell(config),
        site=config.site_info(),
        url=post_url(document),
        date_format=config.date_format,
    )


def list_posts(config: Config, include_drafts: bool = False) -> list[Document]:
    """Parsed posts, newest first."""
    source = FileContentSource(config.content_path)
    return sort_by_date(load_posts(source, include_drafts))


def new_post(config: Config, title: str, post_date: date | None = None) -> Path:
    """Scaffold a post file with front-matter. Refuses to overwrite."""
    slug = normalize_slug(title)
    if slug in RESERVED_SLUGS:
        raise FolioError(f"Cannot derive a usable file name from title: {title!r}")

    source = FileContentSource(config.content_path)
    path = source.post_path(slug)
    if path.exists():
        raise FolioError(f"Post already exists: {path}")

    path.parent.mkdir(parents=True, exist_ok=True)
    front_matter = format_front_matter(title, post_date or date.today())
    path.write_text(f"{front_matter}\n{SUMMARY_MARKER}\n", encoding="utf-8")
    logger.info(f"Created {path}")
    return path
