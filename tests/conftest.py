import textwrap

import pytest

from gh_changelog.models import FeedEntry


SAMPLE_FEED = textwrap.dedent(
    """\
    <?xml version="1.0" encoding="UTF-8"?>
    <rss version="2.0" xmlns:content="http://purl.org/rss/1.0/modules/content/">
    <channel>
      <title>GitHub Changelog</title>
      <link>https://github.blog/changelog/</link>
      <item>
        <title>Oldest</title>
        <link>https://github.blog/changelog/oldest</link>
        <pubDate>Mon, 19 Jan 2026 10:00:00 +0000</pubDate>
        <description>Oldest description</description>
      </item>
      <item>
        <title>Newest</title>
        <link>https://github.blog/changelog/newest</link>
        <pubDate>Wed, 21 Jan 2026 10:00:00 +0000</pubDate>
        <description>Newest description</description>
        <content:encoded><![CDATA[<p>Newest <a href="https://docs.github.com">docs</a>.</p><p>The post Newest appeared first on The GitHub Blog.</p>]]></content:encoded>
      </item>
      <item>
        <title>Middle</title>
        <link>https://github.blog/changelog/middle</link>
        <pubDate>Tue, 20 Jan 2026 10:00:00 +0000</pubDate>
        <description>Middle description</description>
      </item>
    </channel>
    </rss>
    """
).encode("utf-8")


@pytest.fixture
def sample_feed() -> bytes:
    return SAMPLE_FEED


@pytest.fixture
def make_entry():
    def _make_entry(title="Title", published="Tue, 20 Jan 2026 10:00:00 +0000", **kwargs):
        return FeedEntry(title=title, published=published, **kwargs)

    return _make_entry
