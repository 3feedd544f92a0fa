"""Tests for the default port implementations."""
from starlette.requests import Request

from metamanager.adapters.images import PillowImageInspector
from metamanager.adapters.paths import BaseUrlBuilder, PathAliasResolver
from metamanager.adapters.starlette import StarletteRequestContext
from metamanager.adapters.view import PageView
from metamanager.models import Breadcrumb, LinkTagEntry, MetaTagEntry


def make_request(headers=None) -> Request:
    raw_headers = [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()]
    return Request({"type": "http", "method": "GET", "path": "/", "headers": raw_headers})


class TestPathAliasResolver:
    """Test alias expansion."""

    def test_expands_known_alias(self, tmp_path):
        resolver = PathAliasResolver({"@webroot": str(tmp_path)})

        assert resolver.resolve("@webroot/img/a.png") == str(tmp_path / "img" / "a.png")

    def test_unknown_alias_and_plain_paths_pass_through(self):
        resolver = PathAliasResolver({"@webroot": "/srv/static"})

        assert resolver.resolve("@uploads/a.png") == "@uploads/a.png"
        assert resolver.resolve("/img/a.png") == "/img/a.png"
        assert resolver.resolve("https://cdn.example.com/a.png") == "https://cdn.example.com/a.png"


class TestBaseUrlBuilder:
    """Test absolute URL building."""

    def test_absolute_urls_are_kept(self, url_builder):
        assert url_builder.to("https://cdn.example.com/a.png") == "https://cdn.example.com/a.png"

    def test_alias_is_expanded_and_joined(self, url_builder):
        assert url_builder.to("@webroot/img/a.png") == "https://example.com/static/img/a.png"

    def test_relative_path_without_scheme(self, url_builder):
        assert url_builder.to("@webroot/img/a.png", scheme=False) == "/static/img/a.png"

    def test_base_url_prefix_is_kept(self):
        builder = BaseUrlBuilder("https://example.com/site/")

        assert builder.to("/img/a.png") == "https://example.com/site/img/a.png"


class TestPillowImageInspector:
    """Test image size lookup."""

    def test_reads_size(self, webroot):
        assert PillowImageInspector().size(str(webroot / "hero.png")) == (120, 80)

    def test_broken_file_returns_none(self, webroot):
        assert PillowImageInspector().size(str(webroot / "broken.jpg")) is None

    def test_missing_file_returns_none(self, tmp_path):
        assert PillowImageInspector().size(str(tmp_path / "missing.png")) is None


class TestStarletteRequestContext:
    """Test AJAX / PJAX detection."""

    def test_plain_request(self):
        context = StarletteRequestContext(make_request())

        assert context.is_ajax is False
        assert context.is_pjax is False

    def test_ajax_request(self):
        context = StarletteRequestContext(make_request({"X-Requested-With": "XMLHttpRequest"}))

        assert context.is_ajax is True
        assert context.is_pjax is False

    def test_pjax_request(self):
        context = StarletteRequestContext(make_request({
            "X-Requested-With": "XMLHttpRequest",
            "X-PJAX": "true",
        }))

        assert context.is_pjax is True

    def test_pjax_header_without_ajax(self):
        assert StarletteRequestContext(make_request({"X-PJAX": "true"})).is_pjax is False


class TestPageView:
    """Test the in-memory view and its HTML rendering."""

    def test_keyless_tags_get_increasing_indexes(self):
        view = PageView()
        view.register_meta_tag({"name": "a"})
        view.register_meta_tag({"name": "b"}, "b")
        view.register_meta_tag({"name": "c"})

        assert list(view.meta_tags) == [0, "b", 1]

    def test_meta_tag_rendering_escapes_attributes(self):
        entry = MetaTagEntry("og:title", {"property": "og:title", "content": 'Tom & "Jerry"'})

        assert entry.__html__() == '<meta property="og:title" content="Tom &amp; &#34;Jerry&#34;">'

    def test_link_tag_rendering(self):
        entry = LinkTagEntry("canonical", {"rel": "canonical", "href": "https://example.com/"})

        assert entry.__html__() == '<link rel="canonical" href="https://example.com/">'

    def test_none_attributes_are_skipped(self):
        assert MetaTagEntry(None, {"name": "x", "content": None}).__html__() == '<meta name="x">'

    def test_render_head(self):
        view = PageView(title="<Home>")
        view.register_meta_tag({"name": "description", "content": "Hello"}, "description")
        view.register_link_tag({"rel": "canonical", "href": "/"}, "canonical")

        assert str(view.render_head()) == (
            "<title>&lt;Home&gt;</title>\n"
            '<meta name="description" content="Hello">\n'
            '<link rel="canonical" href="/">'
        )

    def test_breadcrumbs_default_to_empty(self):
        view = PageView()
        assert view.breadcrumbs == []

        view.params["breadcrumbs"] = [Breadcrumb("Blogs", "/blog")]
        assert view.breadcrumbs[0].to_dict() == {"label": "Blogs", "url": "/blog"}
