import logging
from typing import List

from bs4 import BeautifulSoup, NavigableString, Tag

from core.models import RecordDraft
from extractors.dates import extract_date_from_structured_data
from extractors.rules import DATE_META_KEYS, OPENGRAPH_FIELDS, STRUCTURED_DATA_TYPES

logger = logging.getLogger(__name__)

_OPENGRAPH_ATTRS = dict(OPENGRAPH_FIELDS)


def parse_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def _apply_meta(tag: Tag, record: RecordDraft):
    key = tag.get("property") or tag.get("name")
    if not key:
        return
    content = tag.get("content", "")

    attr = _OPENGRAPH_ATTRS.get(key)
    if attr:
        setattr(record, attr, content)
    elif key in DATE_META_KEYS and not record.has_publish_date:
        record.publish_date = content


def _script_text(tag: Tag):
    if tag.get("type") not in STRUCTURED_DATA_TYPES or not tag.contents:
        return None
    first = tag.contents[0]
    if isinstance(first, NavigableString):
        return str(first)
    return None


def walk_markup(document: BeautifulSoup, record: RecordDraft) -> List[str]:
    """
    Single pre-order pass over the document.

    Meta tags fill OpenGraph fields and the publish date; JSON/JSON-LD script
    blocks are handed to the structured-data date extractor as they are met.
    Both compete for publish_date under first-in-document-order wins.
    Returns the raw text of every structured-data block seen.
    """
    scripts = []
    for node in document.descendants:
        if not isinstance(node, Tag):
            continue
        if node.name == "meta":
            _apply_meta(node, record)
        elif node.name == "script":
            text = _script_text(node)
            if text is not None:
                scripts.append(text)
                extract_date_from_structured_data(text, record)

    logger.debug(f"Walked markup: {len(scripts)} structured data block(s), publish date {record.publish_date!r}")
    return scripts
