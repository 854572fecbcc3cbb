from dataclasses import FrozenInstanceError

import pytest

from a11ycheck.checks.data.checks.class_name import ClassNameCheck
from a11ycheck.checks.data.checks.class_name import KEY_ACCESSIBILITY_CLASS_NAME
from a11ycheck.checks.data.checks.class_name import RESULT_ID_CLASS_NAME_NOT_SUPPORTED
from a11ycheck.checks.spec.metadata import FrozenMetadataError
from a11ycheck.checks.spec.metadata import ResultMetadata
from a11ycheck.checks.spec.result import AccessibilityCheckResultType
from a11ycheck.checks.spec.result import AccessibilityHierarchyCheckResult
from a11ycheck.checks.strings import default_catalog
from a11ycheck.uielement.hierarchy import ElementNotFoundError
from tests.data.a11ycheck.hierarchies import mixed_hierarchy


def _warning(metadata=None, element_id=3):
    return AccessibilityHierarchyCheckResult(
        check_class=ClassNameCheck,
        type=AccessibilityCheckResultType.WARNING,
        element_id=element_id,
        result_id=RESULT_ID_CLASS_NAME_NOT_SUPPORTED,
        metadata=metadata,
    )


class TestAccessibilityHierarchyCheckResult:
    def test_equal_results_hash_equally(self):
        first = _warning(ResultMetadata({KEY_ACCESSIBILITY_CLASS_NAME: "com.example.Foo"}))
        second = _warning(ResultMetadata({KEY_ACCESSIBILITY_CLASS_NAME: "com.example.Foo"}))

        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_metadata_is_part_of_equality(self):
        with_metadata = _warning(ResultMetadata({KEY_ACCESSIBILITY_CLASS_NAME: "a"}))
        other_metadata = _warning(ResultMetadata({KEY_ACCESSIBILITY_CLASS_NAME: "b"}))

        assert with_metadata != other_metadata
        assert with_metadata != _warning()

    def test_absent_and_empty_metadata_differ(self):
        assert _warning(None) != _warning(ResultMetadata())
        assert _warning(None).get_metadata() is None
        assert _warning(ResultMetadata()).get_metadata() == ResultMetadata()

    def test_metadata_is_frozen_copy(self):
        # Arrange
        metadata = ResultMetadata({KEY_ACCESSIBILITY_CLASS_NAME: "com.example.Foo"})

        # Act
        result = _warning(metadata)
        metadata.put_string("later", "value")

        # Assert
        assert "later" not in result.get_metadata()
        with pytest.raises(FrozenMetadataError):
            result.get_metadata().put_string("other", "value")

    def test_fields_are_immutable(self):
        result = _warning()

        with pytest.raises(FrozenInstanceError):
            result.type = AccessibilityCheckResultType.ERROR

    def test_with_type(self):
        result = _warning(ResultMetadata({KEY_ACCESSIBILITY_CLASS_NAME: "com.example.Foo"}))

        suppressed = result.with_type(AccessibilityCheckResultType.SUPPRESSED)

        assert suppressed.type == AccessibilityCheckResultType.SUPPRESSED
        assert suppressed.element_id == result.element_id
        assert suppressed.metadata == result.metadata
        assert result.type == AccessibilityCheckResultType.WARNING

    def test_get_element(self):
        hierarchy = mixed_hierarchy()

        assert _warning().get_element(hierarchy).class_name == "com.example.Foo"
        with pytest.raises(ElementNotFoundError):
            _warning(element_id=99).get_element(hierarchy)

    def test_messages_delegate_to_check(self):
        catalog = default_catalog()
        result = _warning(ResultMetadata({KEY_ACCESSIBILITY_CLASS_NAME: "com.example.Foo"}))

        assert result.get_message("en", catalog) == (
            ClassNameCheck().get_message_for_result_data(
                "en", catalog, result.result_id, result.metadata
            )
        )
        assert result.get_short_message("en", catalog) == (
            ClassNameCheck().get_short_message_for_result_data(
                "en", catalog, result.result_id, result.metadata
            )
        )

    def test_str(self):
        result = _warning()

        assert str(result) == (
            "AccessibilityHierarchyCheckResult ClassNameCheck WARNING 3 5 None"
        )
