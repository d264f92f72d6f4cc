import logging

from bs4 import BeautifulSoup

from core.http_client import HTTPClient
from core.models import MetadataRecord, RecordDraft
from extractors.dates import extract_date_from_url
from extractors.markup import parse_document, walk_markup
from extractors.slug import derive_slug

logger = logging.getLogger(__name__)


def build_record(url: str, document: BeautifulSoup) -> MetadataRecord:
    """
    Builds the metadata record for one already-parsed page.

    Order: slug from the URL, then the markup walk (meta tags and
    structured data), then the URL date patterns if no date was found.
    Always returns a record; publish_date may be absent.
    """
    record = RecordDraft(slug=derive_slug(url))
    walk_markup(document, record)

    if not record.has_publish_date:
        record.publish_date = extract_date_from_url(url)
        if record.publish_date:
            logger.info(f"Publish date {record.publish_date} taken from URL")

    return record.freeze()


async def extract_metadata(url: str, http_client: HTTPClient) -> MetadataRecord:
    """
    Fetches the page and builds its metadata record.
    Fetch errors propagate to the caller.
    """
    logger.info(f"Extracting metadata from {url}")
    html = await http_client.fetch(url)
    return build_record(url, parse_document(html))
