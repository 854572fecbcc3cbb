from a11ycheck.checks.spec.model import AccessibilityHierarchyCheck
from a11ycheck.checks.spec.model import Category
from a11ycheck.checks.spec.result import AccessibilityCheckResultType
from a11ycheck.checks.spec.result import AccessibilityHierarchyCheckResult

RESULT_ID_ELEMENT_SEEN = 1


class EveryElementInfoCheck(AccessibilityHierarchyCheck):
    """Reports one INFO result per evaluated element. Used as an extension kind."""

    def get_category(self):
        return Category.OTHER

    def run_check_on_hierarchy(self, hierarchy, from_root=None, parameters=None):
        return [
            AccessibilityHierarchyCheckResult(
                check_class=type(self),
                type=AccessibilityCheckResultType.INFO,
                element_id=element.id,
                result_id=RESULT_ID_ELEMENT_SEEN,
            )
            for element in self.get_elements_to_evaluate(from_root, hierarchy)
        ]

    def get_message_for_result_data(self, locale, catalog, result_id, metadata):
        if result_id == RESULT_ID_ELEMENT_SEEN:
            return "Element seen."
        raise self.unsupported_result_id(result_id)

    def get_short_message_for_result_data(self, locale, catalog, result_id, metadata):
        return self.get_message_for_result_data(locale, catalog, result_id, metadata)

    def get_title_message(self, locale, catalog):
        return "Every element"


A11YCHECK_KINDS = (EveryElementInfoCheck,)
