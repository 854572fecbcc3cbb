from a11ycheck.checks.data.questions.class_name import ClassNameQuestionHandler
from a11ycheck.checks.data.questions.types import QUESTION_TYPES

# Question handler registry - all built-in handlers
QUESTION_HANDLERS = {
    ClassNameQuestionHandler.kind_name(): ClassNameQuestionHandler,
}

__all__ = ["QUESTION_HANDLERS", "QUESTION_TYPES"]
