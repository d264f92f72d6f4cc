"""
Ordered extraction rules. Position in each tuple is precedence.
"""
import re

from core.models import DateLayout, DatePattern

# Meta key -> record attribute. Later duplicates in a page override earlier ones.
OPENGRAPH_FIELDS = (
    ("og:url", "url"),
    ("og:title", "title"),
    ("og:description", "description"),
    ("og:image", "image"),
    ("og:site_name", "source"),
)

# Meta keys that carry a publish date. The first one met in document order wins.
DATE_META_KEYS = (
    "article:published_time",
    "datePublished",
    "pubdate",
    "publishdate",
    "DC.date.issued",
    "article:modified_time",
)

STRUCTURED_DATA_TYPES = (
    "application/ld+json",
    "application/json",
)

STRUCTURED_DATE_FIELDS = (
    "datePublished",
    "dateCreated",
    "publishedTime",
    "dateModified",
    "pubDate",
)

ARTICLE_TYPES = ("Article", "NewsArticle")

URL_DATE_PATTERNS = (
    # example.com/2023/05/15/article-title
    DatePattern(re.compile(r"/(\d{4})/(\d{2})/(\d{2})/"), (1, 2, 3), DateLayout.SLASHED),
    # example.com/article/2023-05-15-title
    DatePattern(re.compile(r"/(\d{4})-(\d{2})-(\d{2})"), (1, 2, 3), DateLayout.ISO_HYPHENATED),
    # example.com/article/15-05-2023
    DatePattern(re.compile(r"/(\d{2})-(\d{2})-(\d{4})"), (3, 2, 1), DateLayout.DAY_FIRST_HYPHENATED),
    # example.com/article/20230515 (no trailing delimiter required)
    DatePattern(re.compile(r"/(\d{4})(\d{2})(\d{2})"), (1, 2, 3), DateLayout.COMPACT),
)
