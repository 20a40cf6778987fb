"""Tests for the folio command group."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from folio.cli import main


@pytest.fixture
def site_dir(tmp_path):
    blog = tmp_path / "content" / "blog"
    blog.mkdir(parents=True)
    (blog / "hello.md").write_text("---\ntitle: Hello\ndate: 2024-01-01\n---\nHi.<!--more-->Rest.\n")
    (blog / "later.md").write_text("---\ntitle: Later\ndate: 2024-02-01\ndraft: true\n---\nSoon.\n")
    (tmp_path / "folio.conf").write_text("SITE_TITLE=Test Site\n")
    return tmp_path


@pytest.fixture
def runner(site_dir):
    with patch("folio.config.CONFIG_FILE", site_dir / "folio.conf"):
        yield CliRunner()


class TestBuild:
    def test_builds_site(self, runner, site_dir):
        result = runner.invoke(main, ["build"])

        assert result.exit_code == 0, result.output
        assert "Wrote 3 pages" in result.output
        assert (site_dir / "public" / "blog" / "hello" / "index.html").exists()

    def test_output_override(self, runner, tmp_path):
        out = tmp_path / "elsewhere"
        result = runner.invoke(main, ["build", "--output", str(out)])

        assert result.exit_code == 0, result.output
        assert (out / "index.html").exists()

    def test_drafts_flag(self, runner, site_dir):
        result = runner.invoke(main, ["build", "--drafts"])

        assert result.exit_code == 0, result.output
        assert (site_dir / "public" / "blog" / "later" / "index.html").exists()

    def test_fails_on_broken_page(self, runner, site_dir):
        (site_dir / "content" / "blog" / "bad.md").write_text("---\ntitle: [\n---\n")
        result = runner.invoke(main, ["build"])

        assert result.exit_code == 1
        assert "Failed: bad" in result.output

    def test_fails_on_non_utf8_post(self, runner, site_dir):
        (site_dir / "content" / "blog" / "bad.md").write_bytes(b"---\ntitle: x\n---\n\xff\xfe")
        result = runner.invoke(main, ["build"])

        assert result.exit_code == 1
        assert "Failed: bad" in result.output
        assert (site_dir / "public" / "blog" / "hello" / "index.html").exists()

    def test_fails_on_bad_shell(self, runner, site_dir):
        (site_dir / "shell.html").write_text("{{ nothing }}")
        (site_dir / "folio.conf").write_text("SHELL_TEMPLATE=shell.html\n")
        result = runner.invoke(main, ["build"])

        assert result.exit_code == 1
        assert "Error:" in result.output


class TestRender:
    def test_prints_html(self, runner, site_dir):
        result = runner.invoke(main, ["render", str(site_dir / "content" / "blog" / "hello.md")])

        assert result.exit_code == 0, result.output
        assert "<h1>Hello</h1>" in result.output
        assert '<meta name="description" content="Hi.">' in result.output

    def test_non_utf8_file(self, runner, site_dir):
        path = site_dir / "latin1.md"
        path.write_bytes("caf\u00e9".encode("latin-1"))
        result = runner.invoke(main, ["render", str(path)])

        assert result.exit_code == 1
        assert "Error: latin1: not valid UTF-8" in result.output

    def test_broken_file(self, runner, site_dir):
        path = site_dir / "bad.md"
        path.write_text("---\nunterminated\n")
        result = runner.invoke(main, ["render", str(path)])

        assert result.exit_code == 1
        assert "Error:" in result.output


class TestPosts:
    def test_lists_published(self, runner):
        result = runner.invoke(main, ["posts"])

        assert result.exit_code == 0
        assert "2024-01-01  Hello" in result.output
        assert "Later" not in result.output

    def test_json_with_drafts(self, runner):
        result = runner.invoke(main, ["posts", "--json", "--drafts"])

        data = json.loads(result.output)
        assert [p["slug"] for p in data] == ["later", "hello"]
        assert data[0]["draft"] is True
        assert data[1]["date"] == "2024-01-01"

    def test_no_posts(self, runner, site_dir):
        for path in (site_dir / "content" / "blog").glob("*.md"):
            path.unlink()
        result = runner.invoke(main, ["posts"])

        assert "No posts yet." in result.output

    def test_skips_non_utf8(self, runner, site_dir):
        (site_dir / "content" / "blog" / "bad.md").write_bytes(b"\xff\xfe")
        result = runner.invoke(main, ["posts"])

        assert result.exit_code == 0
        assert "Hello" in result.output


class TestNew:
    def test_creates_post(self, runner, site_dir):
        result = runner.invoke(main, ["new", "Parsing S-expressions", "--date", "2024-04-01"])

        assert result.exit_code == 0, result.output
        assert (site_dir / "content" / "blog" / "parsing-s-expressions.md").exists()

    def test_refuses_existing(self, runner):
        result = runner.invoke(main, ["new", "Hello"])

        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_bad_date(self, runner):
        result = runner.invoke(main, ["new", "Whatever", "--date", "tomorrow"])

        assert result.exit_code == 1
        assert "invalid date" in result.output
