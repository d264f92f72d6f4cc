import re
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Optional, Tuple


@dataclass
class RecordDraft:
    """Filled in place while a page is being walked."""
    url: str = ""
    title: str = ""
    description: str = ""
    image: str = ""
    slug: str = ""
    publish_date: Optional[str] = None  # Verbatim, no normalization
    source: Optional[str] = None  # og:site_name

    @property
    def has_publish_date(self) -> bool:
        return bool(self.publish_date)

    def freeze(self) -> "MetadataRecord":
        data = asdict(self)
        for optional in ("publish_date", "source"):
            data[optional] = data[optional] or None
        return MetadataRecord(**data)


@dataclass(frozen=True)
class MetadataRecord:
    url: str = ""
    title: str = ""
    description: str = ""
    image: str = ""
    slug: str = ""
    publish_date: Optional[str] = None
    source: Optional[str] = None

    def to_dict(self) -> dict:
        """
        On-disk shape of one entry in the articles collection.
        Optional fields are left out entirely when they are unset or empty.
        """
        data = {
            "url": self.url,
            "title": self.title,
            "description": self.description,
            "image": self.image,
            "slug": self.slug,
        }
        if self.publish_date:
            data["publishDate"] = self.publish_date
        if self.source:
            data["source"] = self.source
        return data


class DateLayout(Enum):
    SLASHED = "YYYY/MM/DD"
    ISO_HYPHENATED = "YYYY-MM-DD"
    DAY_FIRST_HYPHENATED = "DD-MM-YYYY"
    COMPACT = "YYYYMMDD"


@dataclass(frozen=True)
class DatePattern:
    regex: re.Pattern
    group_order: Tuple[int, int, int]  # Group numbers holding year, month, day
    layout: DateLayout

    def candidate(self, match: re.Match) -> str:
        year, month, day = (match.group(i) for i in self.group_order)
        return f"{year}-{month}-{day}"
