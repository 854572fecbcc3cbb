"""
Check and question execution logic.
"""

import logging
from typing import Iterable

from a11ycheck.checks.spec.model import AccessibilityHierarchyCheck
from a11ycheck.checks.spec.model import Parameters
from a11ycheck.checks.spec.question import Answer
from a11ycheck.checks.spec.question import Question
from a11ycheck.checks.spec.question import QuestionHandler
from a11ycheck.checks.spec.result import AccessibilityCheckResultType
from a11ycheck.checks.spec.result import AccessibilityHierarchyCheckResult
from a11ycheck.uielement.hierarchy import AccessibilityHierarchy
from a11ycheck.uielement.hierarchy import ViewHierarchyElement

logger = logging.getLogger(__name__)


def _run_check(
    check: AccessibilityHierarchyCheck,
    hierarchy: AccessibilityHierarchy,
    from_root: ViewHierarchyElement | None,
    parameters: Parameters | None,
) -> list[AccessibilityHierarchyCheckResult]:
    """Execute a single check and return its results."""
    results = check.run_check_on_hierarchy(hierarchy, from_root, parameters)
    logger.debug(
        "%s produced %d result(s) over %d element(s)",
        type(check).__name__,
        len(results),
        len(hierarchy),
    )
    return results


def run_checks(
    checks: Iterable[AccessibilityHierarchyCheck],
    hierarchy: AccessibilityHierarchy,
    from_root: ViewHierarchyElement | None = None,
    parameters: Parameters | None = None,
) -> list[AccessibilityHierarchyCheckResult]:
    """
    Run each check over the hierarchy and return all results.

    :param checks: The checks to run, in order.
    :param hierarchy: The snapshot to evaluate.
    :param from_root: Restrict evaluation to this subtree. Defaults to the whole hierarchy.
    :param parameters: Optional parameters passed to every check.
    :return: The results of the first check, followed by those of the second, and so on.
    """
    all_results: list[AccessibilityHierarchyCheckResult] = []
    check_count = 0
    for check in checks:
        check_count += 1
        all_results.extend(_run_check(check, hierarchy, from_root, parameters))

    logger.info(
        "Ran %d check(s), %d result(s), %d actionable",
        check_count,
        len(all_results),
        len(
            filter_results(
                all_results,
                AccessibilityCheckResultType.ERROR,
                AccessibilityCheckResultType.WARNING,
            )
        ),
    )
    return all_results


def filter_results(
    results: Iterable[AccessibilityHierarchyCheckResult],
    *result_types: AccessibilityCheckResultType,
) -> list[AccessibilityHierarchyCheckResult]:
    """Return the results whose type is one of `result_types`, preserving order."""
    wanted = set(result_types)
    return [result for result in results if result.type in wanted]


def get_questions(
    results: Iterable[AccessibilityHierarchyCheckResult],
    handlers: Iterable[QuestionHandler],
) -> list[Question]:
    """Ask every handler about every result and collect the questions they raise."""
    handlers = list(handlers)
    questions: list[Question] = []
    for result in results:
        for handler in handlers:
            questions.extend(handler.get_questions(result))
    logger.debug("Raised %d question(s)", len(questions))
    return questions


def process_answers(
    answers: Iterable[Answer],
) -> list[AccessibilityHierarchyCheckResult]:
    """
    Fold answers back into results.

    Each answer is processed by a fresh instance of the handler class recorded on it.
    Where the handler leaves the verdict unchanged the question's original result is
    returned in its place, so the output has one result per answer.
    """
    refined: list[AccessibilityHierarchyCheckResult] = []
    for answer in answers:
        handler = answer.question_handler_class()
        result = handler.process_answer(answer)
        if result is None:
            result = answer.question.original_result
        elif result != answer.question.original_result:
            logger.info(
                "Answer to question %d from %s changed result to %s",
                answer.question.question_id,
                answer.question_handler_class.__name__,
                result.type.value,
            )
        refined.append(result)
    return refined
