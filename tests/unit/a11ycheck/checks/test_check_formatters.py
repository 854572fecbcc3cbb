import json

import pytest

from a11ycheck.checks.data.checks.class_name import ClassNameCheck
from a11ycheck.checks.formatters import format_results
from a11ycheck.checks.formatters import to_serializable
from a11ycheck.checks.spec.metadata import ResultMetadata
from a11ycheck.checks.strings import default_catalog
from a11ycheck.checks.wire import MetadataValueMessage
from tests.data.a11ycheck.hierarchies import mixed_hierarchy


def _results():
    return ClassNameCheck().run_check_on_hierarchy(mixed_hierarchy())


class TestToSerializable:
    def test_result(self):
        result = _results()[0]

        assert to_serializable(result) == {
            "check_class": "a11ycheck.checks.data.checks.class_name.ClassNameCheck",
            "type": "WARNING",
            "element_id": 3,
            "result_id": 5,
            "metadata": {"KEY_ACCESSIBILITY_CLASS_NAME": "com.example.Foo"},
        }

    def test_nested_values(self):
        metadata = ResultMetadata({"names": ["a", "b"]})

        assert to_serializable({"m": metadata, "t": (1, 2)}) == {
            "m": {"names": ["a", "b"]},
            "t": [1, 2],
        }

    def test_pydantic_model(self):
        assert to_serializable(MetadataValueMessage(int_value=3)) == {
            "string_value": None,
            "int_value": 3,
            "bool_value": None,
            "float_value": None,
            "string_list_value": None,
        }


class TestFormatResults:
    def test_json(self):
        output = format_results(_results(), "en", default_catalog(), "json")

        data = json.loads(output)
        assert len(data) == 6
        assert data[0]["element_id"] == 3
        assert "com.example.Foo" in data[0]["message"]
        assert data[0]["short_message"] == default_catalog().lookup(
            "en", "result_message_class_name_not_supported_brief"
        )
        assert data[1]["metadata"] is None

    def test_text(self):
        output = format_results(_results(), "en", default_catalog())

        lines = output.splitlines()
        assert len(lines) == 6
        assert lines[0].startswith("WARNING    ClassNameCheck element=3 id=5: ")
        assert lines[2].startswith("NOT_RUN    ClassNameCheck element=5 id=3: ")

    def test_text_without_results(self):
        assert format_results([], "en", default_catalog()) == "No results"

    def test_json_without_results(self):
        assert json.loads(format_results([], "en", default_catalog(), "json")) == []

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unknown output format"):
            format_results(_results(), "en", default_catalog(), "xml")
