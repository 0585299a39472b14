from fetch_feeds.models import ProxyStrategy

RSS_FEEDS = {
    "fox": "http://feeds.foxnews.com/foxnews/world",
    "cnn": "http://rss.cnn.com/rss/edition_world.rss",
    "cbs": "https://www.cbsnews.com/world/rss",
    "abc": "https://abcnews.go.com/abcnews/internationalheadlines",
    "jpost": "https://rss.jpost.com/rss/rssfeedsiran.aspx",
    "aljazeera": "https://www.aljazeera.com/xml/rss/all.xml",
}

# Regional outlets whose feeds are on-topic by construction
RELAXED_SOURCES = frozenset({"jpost", "aljazeera"})

PROXY_STRATEGIES = (
    ProxyStrategy(name="direct"),
    ProxyStrategy(name="allorigins", prefix="https://api.allorigins.win/get?url=", unwrap="json_contents"),
    ProxyStrategy(name="allorigins-raw", prefix="https://api.allorigins.win/raw?url=", unwrap="raw"),
)


def source_display_name(source: str) -> str:
    return source.upper()
