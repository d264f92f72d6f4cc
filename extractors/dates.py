import json
import logging
from datetime import datetime

from core.models import RecordDraft
from extractors.rules import ARTICLE_TYPES, STRUCTURED_DATE_FIELDS, URL_DATE_PATTERNS

logger = logging.getLogger(__name__)


def is_valid_date(date_str: str) -> bool:
    """True if date_str is a real calendar date in YYYY-MM-DD form."""
    try:
        datetime.strptime(date_str, "%Y-%m-%d")
        return True
    except ValueError:
        return False


def _scan_date_fields(data: dict, record: RecordDraft):
    for field in STRUCTURED_DATE_FIELDS:
        value = data.get(field)
        if isinstance(value, str) and not record.has_publish_date:
            record.publish_date = value
            return


def extract_date_from_structured_data(text: str, record: RecordDraft):
    """
    Fills record.publish_date from a JSON-LD block if it is still unset.
    Blocks that are not a JSON object are skipped without error.
    """
    try:
        data = json.loads(text)
    except ValueError as e:
        logger.debug(f"Skipping unparseable structured data block: {e}")
        return

    if not isinstance(data, dict):
        logger.debug("Skipping structured data block that is not a JSON object")
        return

    _scan_date_fields(data, record)

    # Same scan again for article types; the first pass has already decided.
    if data.get("@type") in ARTICLE_TYPES:
        _scan_date_fields(data, record)


def extract_date_from_url(url: str) -> str:
    """
    Finds a publish date embedded in the URL path.
    Patterns are tried in priority order, each against the whole URL; a
    match that is not a real calendar date moves on to the next pattern.
    Returns YYYY-MM-DD, or an empty string when nothing matched.
    """
    for pattern in URL_DATE_PATTERNS:
        match = pattern.regex.search(url)
        if not match:
            continue
        candidate = pattern.candidate(match)
        if is_valid_date(candidate):
            return candidate
        logger.debug(f"Rejected {pattern.layout.value} match {match.group(0)!r} in {url}")
    return ""
