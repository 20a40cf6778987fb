"""Folio CLI - static site generator."""

import json
import logging
import sys
from datetime import date
from pathlib import Path

import click

from .config import load_config
from .core.errors import FolioError
from .workflows import build_site, list_posts, new_post, render_file


@click.group()
@click.version_option(package_name="folio")
def main():
    """Folio - build a personal static site from markdown."""
    pass


@main.command()
@click.option("--drafts", is_flag=True, help="Include posts marked draft")
@click.option("--output", "-o", "output_dir", default=None, help="Output directory (overrides OUTPUT_DIR)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def build(drafts: bool, output_dir: str | None, debug: bool):
    """Build the whole site."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    config = load_config()
    if output_dir:
        config.output_dir = str(Path(output_dir).resolve())

    try:
        report = build_site(config, include_drafts=drafts)
    except FolioError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Wrote {len(report.written)} pages to {config.output_path}")
    if report.static:
        click.echo(f"Copied {len(report.static)} static files")

    if not report.ok:
        for reason in report.failures.values():
            click.echo(f"Failed: {reason}", err=True)
        sys.exit(1)


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def render(path: Path):
    """Render a single markdown file to stdout."""
    try:
        click.echo(render_file(path, load_config()), nl=False)
    except FolioError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--drafts", is_flag=True, help="Include posts marked draft")
def posts(as_json: bool, drafts: bool):
    """List blog posts, newest first."""
    documents = list_posts(load_config(), include_drafts=drafts)

    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "slug": d.slug,
                        "title": d.title,
                        "date": d.date.isoformat() if d.date else None,
                        "updated": d.updated.isoformat() if d.updated else None,
                        "draft": d.draft,
                    }
                    for d in documents
                ],
                indent=2,
            )
        )
        return

    if not documents:
        click.echo("No posts yet.")
        return

    for doc in documents:
        when = doc.date.isoformat() if doc.date else "undated"
        draft = " [draft]" if doc.draft else ""
        click.echo(f"{when:10}  {doc.title or doc.slug}{draft}")


@main.command()
@click.argument("title")
@click.option("--date", "-d", "post_date", default=None, help="Post date (YYYY-MM-DD), defaults to today")
def new(title: str, post_date: str | None):
    """Create a new blog post."""
    try:
        target = date.fromisoformat(post_date) if post_date else date.today()
    except ValueError:
        click.echo(f"Error: invalid date '{post_date}'", err=True)
        sys.exit(1)

    try:
        path = new_post(load_config(), title, target)
    except FolioError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Created {path}")


if __name__ == "__main__":
    main()
