"""Unit tests for WordRecord serialization."""

import pytest

from wordmaster.models import WordRecord, WordStatus


class TestWordRecord:

    def test_to_dict_uses_plain_status(self):
        data = WordRecord(id=7, term="sun", definition="太阳").to_dict()

        assert data["status"] == "unknown"
        assert type(data["status"]) is str

    def test_from_dict_defaults_counters(self):
        record = WordRecord.from_dict({"id": "7", "term": "sun", "definition": "太阳", "status": "familiar"})

        assert record.id == 7
        assert record.status == WordStatus.FAMILIAR
        assert (record.attempts, record.correct) == (0, 0)

    def test_from_dict_rejects_empty_term(self):
        with pytest.raises(ValueError):
            WordRecord.from_dict({"id": 1, "term": "", "definition": "太阳"})

    def test_from_dict_requires_definition(self):
        with pytest.raises(KeyError):
            WordRecord.from_dict({"id": 1, "term": "sun"})

    @pytest.mark.parametrize("bad", [None, 42, "   "])
    def test_from_dict_rejects_non_string_fields(self, bad):
        with pytest.raises(ValueError):
            WordRecord.from_dict({"id": 1, "term": bad, "definition": "太阳"})
        with pytest.raises(ValueError):
            WordRecord.from_dict({"id": 1, "term": "sun", "definition": bad})
