"""Tests for article URL filtering."""

from blogsmith.config import IngestionConfig
from blogsmith.pipeline import UrlFilter


def test_prefix_defaults_to_target_root_path():
    assert UrlFilter("https://example.com/blog").article_path_prefix == "/blog/"
    assert UrlFilter("https://example.com/blogs/").article_path_prefix == "/blogs/"


def test_keeps_article_urls_in_discovery_order():
    url_filter = UrlFilter("https://example.com/blog", exclude_segments=["/page/", "/tag/"])
    links = [
        "https://example.com/blog/b-post",
        "https://example.com/blog/page/2/",
        "https://example.com/blog/a-post",
        "https://example.com/blog/tag/ai/",
    ]

    assert url_filter.filter(links) == [
        "https://example.com/blog/b-post",
        "https://example.com/blog/a-post",
    ]


def test_rejects_root_fragments_and_other_sections():
    url_filter = UrlFilter.from_config(IngestionConfig(target_root="https://example.com/blog"))

    assert not url_filter.is_article("https://example.com/blog")
    assert not url_filter.is_article("https://example.com/blog/")
    assert not url_filter.is_article("https://example.com/blog/post#comments")
    assert not url_filter.is_article("https://example.com/pricing")
    assert not url_filter.is_article("https://example.com/blog/category/news/")
    assert not url_filter.is_article("")
    assert url_filter.is_article("https://example.com/blog/post")


def test_path_variant_is_configuration_not_code():
    blogs = UrlFilter("https://example.com/blogs")
    blog = UrlFilter("https://example.com/blog")

    assert blogs.is_article("https://example.com/blogs/post")
    assert not blog.is_article("https://example.com/blogs/post")

    explicit = UrlFilter("https://example.com/", article_path_prefix="/posts/")
    assert explicit.is_article("https://example.com/posts/hello")
    assert not explicit.is_article("https://example.com/about")
