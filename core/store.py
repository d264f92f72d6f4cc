import json
import logging
import os
import shutil
from datetime import date
from typing import Optional

from core.models import MetadataRecord

logger = logging.getLogger(__name__)


class StoreError(Exception):
    pass


def backup_path(path: str, today: Optional[date] = None) -> str:
    """<base><ext>.<YYYYMMDD>.bkp, e.g. articles.json -> articles.json.20240102.bkp"""
    today = today or date.today()
    base, ext = os.path.splitext(path)
    return f"{base}{ext}.{today.strftime('%Y%m%d')}.bkp"


def create_backup(path: str, today: Optional[date] = None) -> str:
    """Copies the current file aside. A backup from earlier the same day is overwritten."""
    destination = backup_path(path, today)
    try:
        shutil.copyfile(path, destination)
    except OSError as e:
        raise StoreError(f"failed to create backup: {e}") from e
    logger.info(f"Backed up {path} to {destination}")
    return destination


def load_collection(path: str) -> dict:
    """
    Reads an existing {"articles": [...]} file.
    Entries are kept as-is, including keys this tool does not write.
    """
    try:
        with open(path, encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise StoreError(f"failed to read existing file: {e}") from e

    try:
        collection = json.loads(content)
    except ValueError as e:
        raise StoreError(f"invalid JSON format in existing file: {e}") from e

    if not isinstance(collection, dict):
        raise StoreError("invalid JSON format in existing file: top level must be an object")

    articles = collection.setdefault("articles", [])
    if articles is None:
        collection["articles"] = []
    elif not isinstance(articles, list):
        raise StoreError("invalid JSON format in existing file: 'articles' must be an array")

    return collection


def append_record(record: MetadataRecord, path: str, today: Optional[date] = None) -> Optional[str]:
    """
    Appends one record to the collection file at path.

    A non-empty existing file is backed up before anything else happens;
    a missing or empty file starts a fresh collection with no backup.
    Returns the backup path, or None if no backup was made.
    """
    backup = None
    if os.path.exists(path) and os.path.getsize(path) > 0:
        backup = create_backup(path, today)
        collection = load_collection(path)
    else:
        collection = {"articles": []}

    collection["articles"].append(record.to_dict())

    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(collection, f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise StoreError(f"failed to write to file: {e}") from e

    logger.info(f"Appended {record.url or record.slug} to {path} ({len(collection['articles'])} articles)")
    return backup
