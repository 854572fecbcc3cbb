import logging

from a11ycheck.checks.data.answers import BooleanAnswerType
from a11ycheck.checks.data.checks.class_name import ClassNameCheck
from a11ycheck.checks.data.checks.class_name import KEY_ACCESSIBILITY_CLASS_NAME
from a11ycheck.checks.data.checks.class_name import RESULT_ID_CLASS_NAME_NOT_SUPPORTED
from a11ycheck.checks.data.questions.types import UserConfirmationQuestionType
from a11ycheck.checks.spec.metadata import ResultMetadata
from a11ycheck.checks.spec.question import Answer
from a11ycheck.checks.spec.question import Question
from a11ycheck.checks.spec.question import QuestionHandler
from a11ycheck.checks.spec.result import AccessibilityCheckResultType
from a11ycheck.checks.spec.result import AccessibilityHierarchyCheckResult
from a11ycheck.checks.strings import StringCatalog

logger = logging.getLogger(__name__)

QUESTION_ID_IS_CUSTOM_VIEW_ACCESSIBLE = 1
"""Does the custom view expose its role and state to accessibility services?"""


class ClassNameQuestionHandler(QuestionHandler):
    """
    Asks whether an unsupported custom view handles accessibility itself.

    A custom view that reports its own role and state is fine even though its
    class name is not on the allow-list, so a yes suppresses the warning.
    """

    def get_questions(
        self, result: AccessibilityHierarchyCheckResult
    ) -> list[Question]:
        if (
            result.check_class is not ClassNameCheck
            or result.result_id != RESULT_ID_CLASS_NAME_NOT_SUPPORTED
            or result.type != AccessibilityCheckResultType.WARNING
            or result.metadata is None
        ):
            return []

        metadata = ResultMetadata()
        metadata.put_string(
            KEY_ACCESSIBILITY_CLASS_NAME,
            result.metadata.require_string(KEY_ACCESSIBILITY_CLASS_NAME),
        )
        return [
            Question.from_handler(
                QUESTION_ID_IS_CUSTOM_VIEW_ACCESSIBLE,
                UserConfirmationQuestionType,
                BooleanAnswerType,
                self,
                result,
                metadata,
            )
        ]

    def process_answer(
        self, answer: Answer
    ) -> AccessibilityHierarchyCheckResult | None:
        question = answer.question
        if question.question_id != QUESTION_ID_IS_CUSTOM_VIEW_ACCESSIBLE:
            logger.warning(
                "%s cannot process answers to question %d",
                type(self).__name__,
                question.question_id,
            )
            return None
        if not BooleanAnswerType.get_value(answer):
            return None
        return question.original_result.with_type(
            AccessibilityCheckResultType.SUPPRESSED
        )

    def get_question_message(
        self, locale: str, catalog: StringCatalog, question: Question
    ) -> str:
        if question.question_id != QUESTION_ID_IS_CUSTOM_VIEW_ACCESSIBLE:
            raise AssertionError(
                f"{type(self).__name__} does not ask question {question.question_id}"
            )
        metadata = question.get_metadata() or ResultMetadata()
        return catalog.lookup(
            locale, "question_message_is_custom_view_accessible"
        ).format(metadata.require_string(KEY_ACCESSIBILITY_CLASS_NAME))
