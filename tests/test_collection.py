"""Tests for post ordering, neighbours and listings."""

from datetime import date

import pytest

from folio.core.collection import (
    check_post_slug,
    duplicate_slugs,
    link_neighbours,
    listing_entries,
    post_url,
    publishable,
    render_listing,
    sort_by_date,
)
from folio.core.document import Document
from folio.core.errors import FrontMatterError


@pytest.fixture
def posts():
    return [
        Document(body="First.<!--more-->More", title="January", date=date(2024, 1, 1), slug="jan"),
        Document(body="Third.", title="March", date=date(2024, 3, 1), slug="mar"),
        Document(body="Second.", title="February", date=date(2024, 2, 1), slug="feb"),
    ]


class TestSortByDate:
    def test_newest_first(self, posts):
        assert [d.slug for d in sort_by_date(posts)] == ["mar", "feb", "jan"]

    def test_undated_last_by_title(self, posts):
        undated = [
            Document(body="", title="Zebra", slug="z"),
            Document(body="", title="apple", slug="a"),
        ]
        ordered = sort_by_date(undated + posts)
        assert [d.slug for d in ordered] == ["mar", "feb", "jan", "a", "z"]


class TestPublishable:
    def test_drops_drafts(self, posts):
        draft = Document(body="", slug="wip", draft=True)
        assert [d.slug for d in publishable(posts + [draft])] == ["jan", "mar", "feb"]

    def test_keeps_drafts_when_asked(self, posts):
        draft = Document(body="", slug="wip", draft=True)
        assert len(publishable(posts + [draft], include_drafts=True)) == 4


class TestLinkNeighbours:
    def test_middle_post_has_both(self, posts):
        nav = link_neighbours(posts)

        assert nav["feb"].previous.url == "/blog/jan/"
        assert nav["feb"].previous.title == "January"
        assert nav["feb"].next.url == "/blog/mar/"

    def test_ends_have_one_side(self, posts):
        nav = link_neighbours(posts)

        assert nav["jan"].previous is None
        assert nav["jan"].next.url == "/blog/feb/"
        assert nav["mar"].next is None
        assert nav["mar"].previous.url == "/blog/feb/"

    def test_single_post(self):
        nav = link_neighbours([Document(body="", slug="only")])
        assert nav["only"].previous is None
        assert nav["only"].next is None

    def test_untitled_uses_slug(self):
        docs = [
            Document(body="", slug="older", date=date(2024, 1, 1)),
            Document(body="", slug="newer", date=date(2024, 1, 2)),
        ]
        nav = link_neighbours(docs)
        assert nav["newer"].previous.title == "older"

    def test_custom_urls(self, posts):
        nav = link_neighbours(posts, url_for=lambda d: f"/posts/{d.slug}.html")
        assert nav["feb"].next.url == "/posts/mar.html"


class TestListing:
    def test_entries(self, posts):
        entries = listing_entries(posts)

        assert [e.title for e in entries] == ["March", "February", "January"]
        assert entries[2].summary == "First."
        assert entries[0].summary == ""
        assert entries[0].date == "March 01, 2024"
        assert entries[0].date_iso == "2024-03-01"

    def test_description_preferred_for_summary(self):
        doc = Document(body="Body<!--more-->", slug="x", description="Explicit")
        assert listing_entries([doc])[0].summary == "Explicit"

    def test_render_orders_newest_first(self, posts):
        html = render_listing(posts)

        assert html.index("March") < html.index("February") < html.index("January")
        assert '<a href="/blog/jan/">January</a>' in html
        assert "<p>First.</p>" in html

    def test_render_limit(self, posts):
        html = render_listing(posts, limit=2)
        assert "March" in html
        assert "February" in html
        assert "January" not in html

    def test_render_empty(self):
        assert "Nothing here yet." in render_listing([])

    def test_titles_escaped(self):
        html = render_listing([Document(body="", title="<script>", slug="x")])
        assert "&lt;script&gt;" in html
        assert "<script>" not in html


class TestHelpers:
    def test_post_url(self):
        assert post_url(Document(body="", slug="hello")) == "/blog/hello/"

    def test_duplicate_slugs(self):
        docs = [
            Document(body="", slug="a"),
            Document(body="", slug="b"),
            Document(body="", slug="a"),
        ]
        assert duplicate_slugs(docs) == {"a"}


class TestCheckPostSlug:
    def test_accepts_normal_slug(self):
        doc = Document(body="", slug="hello")
        assert check_post_slug(doc, "hello") is doc

    @pytest.mark.parametrize("slug", ["", "index"])
    def test_rejects_reserved(self, slug):
        with pytest.raises(FrontMatterError) as exc:
            check_post_slug(Document(body="", slug=slug), "日本語")
        assert exc.value.slug == "日本語"
