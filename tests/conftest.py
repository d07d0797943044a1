# File: tests/conftest.py
import pytest

from robots_builder import Group, RobotsTxt, Rule


@pytest.fixture()
def star_group() -> Group:
    """
    Group for all agents: Allow /, Disallow /private, Disallow /secret.
    """
    return Group("*", [Rule.allow("/"), Rule.disallow("/private"), Rule.disallow("/secret")])


@pytest.fixture()
def googlebot_group() -> Group:
    return Group("Googlebot").add_allow("/").add_disallow("/sensitive").add_crawl_delay(5)


@pytest.fixture()
def sample_document(star_group, googlebot_group) -> RobotsTxt:
    """
    Return a document with two groups, a host and two sitemaps.
    """
    robots = RobotsTxt()
    robots.add_group(star_group)
    robots.add_group(googlebot_group)
    robots.set_host("example.com")
    robots.add_sitemap("https://example.com/sitemap.xml")
    robots.add_sitemap("https://example.com/blog-sitemap.xml")
    return robots
