from a11ycheck.checks.spec.metadata import MissingRequiredMetadataError
from a11ycheck.checks.spec.metadata import ResultMetadata
from a11ycheck.checks.spec.model import AccessibilityHierarchyCheck
from a11ycheck.checks.spec.model import Category
from a11ycheck.checks.spec.model import Parameters
from a11ycheck.checks.spec.result import AccessibilityCheckResultType
from a11ycheck.checks.spec.result import AccessibilityHierarchyCheckResult
from a11ycheck.checks.strings import StringCatalog
from a11ycheck.uielement.hierarchy import AccessibilityHierarchy
from a11ycheck.uielement.hierarchy import ViewHierarchyElement

RESULT_ID_NOT_VISIBLE = 1
"""The element is not visible."""
RESULT_ID_NOT_IMPORTANT_FOR_ACCESSIBILITY = 2
"""The element is not important for accessibility."""
RESULT_ID_CLASS_NAME_UNKNOWN = 3
"""The element's class name was not captured."""
RESULT_ID_CLASS_NAME_IS_EMPTY = 4
"""The element's class name is an empty string."""
RESULT_ID_CLASS_NAME_NOT_SUPPORTED = 5
"""The element's class name is not one accessibility services know how to announce."""

KEY_ACCESSIBILITY_CLASS_NAME = "KEY_ACCESSIBILITY_CLASS_NAME"
"""Metadata key for the full class name. Set on RESULT_ID_CLASS_NAME_NOT_SUPPORTED results."""

VALID_UI_PACKAGE_NAME_PREFIXES = (
    "android.app",
    "android.appwidget",
    "android.inputmethodservice",
    "android.support",
    "android.view",
    "android.webkit",
    "android.widget",
    "androidx",
)


class ClassNameCheck(AccessibilityHierarchyCheck):
    """Checks that each element's accessibility class name is one accessibility services support."""

    help_topic = "7661305"

    def get_category(self) -> Category:
        return Category.IMPLEMENTATION

    def run_check_on_hierarchy(
        self,
        hierarchy: AccessibilityHierarchy,
        from_root: ViewHierarchyElement | None = None,
        parameters: Parameters | None = None,
    ) -> list[AccessibilityHierarchyCheckResult]:
        results: list[AccessibilityHierarchyCheckResult] = []

        for view in self.get_elements_to_evaluate(from_root, hierarchy):
            if not view.important_for_accessibility:
                results.append(
                    self._result(
                        view,
                        AccessibilityCheckResultType.NOT_RUN,
                        RESULT_ID_NOT_IMPORTANT_FOR_ACCESSIBILITY,
                    )
                )
                continue

            # Unknown visibility counts as not visible
            if view.visible_to_user is not True:
                results.append(
                    self._result(
                        view,
                        AccessibilityCheckResultType.NOT_RUN,
                        RESULT_ID_NOT_VISIBLE,
                    )
                )
                continue

            class_name = view.class_name
            if class_name is None:
                results.append(
                    self._result(
                        view,
                        AccessibilityCheckResultType.NOT_RUN,
                        RESULT_ID_CLASS_NAME_UNKNOWN,
                    )
                )
                continue

            if not class_name:
                results.append(
                    self._result(
                        view,
                        AccessibilityCheckResultType.WARNING,
                        RESULT_ID_CLASS_NAME_IS_EMPTY,
                    )
                )
                continue

            if not class_name.startswith(VALID_UI_PACKAGE_NAME_PREFIXES):
                metadata = ResultMetadata()
                metadata.put_string(KEY_ACCESSIBILITY_CLASS_NAME, class_name)
                results.append(
                    self._result(
                        view,
                        AccessibilityCheckResultType.WARNING,
                        RESULT_ID_CLASS_NAME_NOT_SUPPORTED,
                        metadata,
                    )
                )
        return results

    def _result(
        self,
        view: ViewHierarchyElement,
        result_type: AccessibilityCheckResultType,
        result_id: int,
        metadata: ResultMetadata | None = None,
    ) -> AccessibilityHierarchyCheckResult:
        return AccessibilityHierarchyCheckResult(
            check_class=type(self),
            type=result_type,
            element_id=view.id,
            result_id=result_id,
            metadata=metadata,
        )

    def get_message_for_result_data(
        self,
        locale: str,
        catalog: StringCatalog,
        result_id: int,
        metadata: ResultMetadata | None,
    ) -> str:
        if result_id == RESULT_ID_NOT_VISIBLE:
            return catalog.lookup(locale, "result_message_not_visible")
        if result_id == RESULT_ID_NOT_IMPORTANT_FOR_ACCESSIBILITY:
            return catalog.lookup(
                locale, "result_message_not_important_for_accessibility"
            )
        if result_id == RESULT_ID_CLASS_NAME_UNKNOWN:
            return catalog.lookup(locale, "result_message_class_name_is_unknown")
        if result_id == RESULT_ID_CLASS_NAME_IS_EMPTY:
            return catalog.lookup(locale, "result_message_class_name_is_empty")
        if result_id == RESULT_ID_CLASS_NAME_NOT_SUPPORTED:
            # Always set for this result id
            if metadata is None:
                raise MissingRequiredMetadataError(KEY_ACCESSIBILITY_CLASS_NAME)
            return catalog.lookup(
                locale, "result_message_class_name_not_supported_detail"
            ).format(metadata.require_string(KEY_ACCESSIBILITY_CLASS_NAME))
        raise self.unsupported_result_id(result_id)

    def get_short_message_for_result_data(
        self,
        locale: str,
        catalog: StringCatalog,
        result_id: int,
        metadata: ResultMetadata | None,
    ) -> str:
        if result_id == RESULT_ID_NOT_VISIBLE:
            return catalog.lookup(locale, "result_message_not_visible")
        if result_id == RESULT_ID_NOT_IMPORTANT_FOR_ACCESSIBILITY:
            return catalog.lookup(
                locale, "result_message_not_important_for_accessibility"
            )
        if result_id == RESULT_ID_CLASS_NAME_UNKNOWN:
            return catalog.lookup(locale, "result_message_class_name_is_unknown")
        if result_id in (
            RESULT_ID_CLASS_NAME_IS_EMPTY,
            RESULT_ID_CLASS_NAME_NOT_SUPPORTED,
        ):
            return catalog.lookup(
                locale, "result_message_class_name_not_supported_brief"
            )
        raise self.unsupported_result_id(result_id)

    def get_title_message(self, locale: str, catalog: StringCatalog) -> str:
        return catalog.lookup(locale, "check_title_class_name_not_supported")
