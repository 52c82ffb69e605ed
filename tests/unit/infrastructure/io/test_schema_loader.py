"""Tests for loading data structure definitions."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from nda_validator.domain.entities.schema import RequirementLevel
from nda_validator.infrastructure.io.exceptions import (
    SchemaParseError,
    SchemaSourceNotFoundError,
)
from nda_validator.infrastructure.io.schema_loader import SchemaLoader

DICTIONARY_CSV = (
    "ElementName,DataType,Size,Required,Condition,ElementDescription,ValueRange,Notes,Aliases\n"
    'subjectkey,GUID,,Required,,Global unique identifier,,,"subject_id,guid"\n'
    "interview_age,Integer,,Required,,Age in months,0::1260,,\n"
    'sex,String,20,Required,,Sex of subject,M;F;O;NR,"M = Male; F = Female",\n'
    "handedness,String,20,Recommended,,Dominant hand,R;L,,\n"
)


def _write_json(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class TestJsonSchema:
    def test_nda_document(self, tmp_path):
        path = _write_json(
            tmp_path / "structure.json",
            {
                "shortName": "demographics02",
                "title": "Demographics",
                "dataElements": [
                    {
                        "name": "subjectkey",
                        "type": "GUID",
                        "required": "Required",
                        "aliases": ["subject_id"],
                        "position": 1,
                    },
                    {
                        "name": "sex",
                        "type": "String",
                        "size": 20,
                        "required": "Required",
                        "valueRange": "M;F;O;NR",
                        "position": 2,
                    },
                ],
            },
        )

        structure = SchemaLoader().load(path)

        assert structure.short_name == "demographics02"
        assert structure.title == "Demographics"
        assert structure.field_names() == ["subjectkey", "sex"]
        assert structure.elements[0].aliases == ("subject_id",)
        assert structure.elements[1].value_range == "M;F;O;NR"
        assert structure.elements[1].size == "20"

    def test_bare_element_list(self, tmp_path):
        path = _write_json(
            tmp_path / "image03.json",
            [{"name": "image_file", "required": "Required"}],
        )

        structure = SchemaLoader().load(path)

        assert structure.short_name == "image03"
        assert structure.elements[0].requirement_level == RequirementLevel.REQUIRED

    def test_missing_file(self, tmp_path):
        with pytest.raises(SchemaSourceNotFoundError):
            SchemaLoader().load(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(SchemaParseError, match="Invalid JSON"):
            SchemaLoader().load(path)

    def test_unexpected_payload(self, tmp_path):
        path = _write_json(tmp_path / "number.json", 42)

        with pytest.raises(SchemaParseError, match="Expected an object or list"):
            SchemaLoader().load(path)

    def test_element_without_name(self, tmp_path):
        path = _write_json(tmp_path / "bad.json", [{"type": "String"}])

        with pytest.raises(SchemaParseError, match="Invalid data structure"):
            SchemaLoader().load(path)

    def test_duplicate_elements(self, tmp_path):
        path = _write_json(tmp_path / "dup.json", [{"name": "a"}, {"name": "a"}])

        with pytest.raises(SchemaParseError, match="Duplicate schema field name"):
            SchemaLoader().load(path)

    def test_load_many(self, tmp_path):
        first = _write_json(tmp_path / "a01.json", [{"name": "x"}])
        second = _write_json(tmp_path / "b01.json", [{"name": "y"}])

        structures = SchemaLoader().load_many([first, second])

        assert [s.short_name for s in structures] == ["a01", "b01"]


class TestDictionarySchema:
    def test_data_dictionary_csv(self, tmp_path):
        path = tmp_path / "demographics02_definitions.csv"
        path.write_text(DICTIONARY_CSV, encoding="utf-8")

        structure = SchemaLoader().load(path)

        assert structure.short_name == "demographics02"
        assert structure.field_names() == [
            "subjectkey",
            "interview_age",
            "sex",
            "handedness",
        ]
        subjectkey, age, sex, handedness = structure.elements
        assert subjectkey.aliases == ("subject_id", "guid")
        assert subjectkey.value_range is None
        assert age.value_range == "0::1260"
        assert sex.notes == "M = Male; F = Female"
        assert sex.size == "20"
        assert handedness.requirement_level == RequirementLevel.RECOMMENDED

    def test_missing_element_name_column(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("Name,Type\nx,String\n", encoding="utf-8")

        with pytest.raises(SchemaParseError, match="no ElementName column"):
            SchemaLoader().load(path)

    def test_empty_dictionary(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")

        with pytest.raises(SchemaParseError):
            SchemaLoader().load(path)
