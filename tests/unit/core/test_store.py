"""Tests for core.store module."""

import json
from datetime import date

import pytest

from core.models import MetadataRecord
from core.store import StoreError, append_record, backup_path, load_collection

TODAY = date(2024, 1, 2)


def _record(**kwargs) -> MetadataRecord:
    defaults = dict(url="https://a.com/p", title="T", description="D", image="I", slug="p")
    defaults.update(kwargs)
    return MetadataRecord(**defaults)


class TestBackupPath:
    def test_keeps_extension_and_appends_date(self) -> None:
        assert backup_path("data/articles.json", TODAY) == "data/articles.json.20240102.bkp"

    def test_no_extension(self) -> None:
        assert backup_path("articles", TODAY) == "articles.20240102.bkp"


class TestLoadCollection:
    def test_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "a.json"
        path.write_text("{nope")
        with pytest.raises(StoreError, match="invalid JSON format"):
            load_collection(str(path))

    def test_top_level_array_rejected(self, tmp_path) -> None:
        path = tmp_path / "a.json"
        path.write_text("[]")
        with pytest.raises(StoreError, match="invalid JSON format"):
            load_collection(str(path))

    def test_articles_not_array_rejected(self, tmp_path) -> None:
        path = tmp_path / "a.json"
        path.write_text('{"articles": {}}')
        with pytest.raises(StoreError, match="must be an array"):
            load_collection(str(path))

    def test_missing_articles_key(self, tmp_path) -> None:
        path = tmp_path / "a.json"
        path.write_text('{"other": 1}')
        assert load_collection(str(path)) == {"other": 1, "articles": []}


class TestAppendRecord:
    def test_creates_new_file_without_backup(self, tmp_path) -> None:
        path = tmp_path / "new.json"
        backup = append_record(_record(), str(path), TODAY)

        assert backup is None
        assert json.loads(path.read_text()) == {"articles": [_record().to_dict()]}
        assert list(tmp_path.glob("*.bkp")) == []

    def test_empty_file_treated_as_new(self, tmp_path) -> None:
        path = tmp_path / "empty.json"
        path.write_text("")
        assert append_record(_record(), str(path), TODAY) is None
        assert len(json.loads(path.read_text())["articles"]) == 1

    def test_appends_and_backs_up(self, tmp_path) -> None:
        path = tmp_path / "articles.json"
        original = json.dumps({"articles": [{"url": "old", "published_date": "2023-01-01"}]})
        path.write_text(original)

        backup = append_record(_record(publish_date="2023-05-15"), str(path), TODAY)

        assert backup == str(tmp_path / "articles.json.20240102.bkp")
        assert (tmp_path / "articles.json.20240102.bkp").read_text() == original
        articles = json.loads(path.read_text())["articles"]
        assert articles[0] == {"url": "old", "published_date": "2023-01-01"}
        assert articles[1]["publishDate"] == "2023-05-15"

    def test_two_space_indent(self, tmp_path) -> None:
        path = tmp_path / "articles.json"
        append_record(_record(), str(path), TODAY)
        assert path.read_text().startswith('{\n  "articles": [\n    {\n      "url"')

    def test_non_ascii_preserved(self, tmp_path) -> None:
        path = tmp_path / "articles.json"
        append_record(_record(title="Café"), str(path), TODAY)
        assert "Café" in path.read_text(encoding="utf-8")

    def test_invalid_existing_file_is_backed_up_and_left_untouched(self, tmp_path) -> None:
        path = tmp_path / "articles.json"
        path.write_text("not json")

        with pytest.raises(StoreError):
            append_record(_record(), str(path), TODAY)

        assert path.read_text() == "not json"
        assert (tmp_path / "articles.json.20240102.bkp").read_text() == "not json"

    def test_write_failure(self, tmp_path) -> None:
        with pytest.raises(StoreError, match="failed to write to file"):
            append_record(_record(), str(tmp_path / "missing_dir" / "a.json"), TODAY)
