"""Built-in answer types. Each stores its value in the answer metadata under a declared key."""

from a11ycheck.checks.spec.metadata import ResultMetadata
from a11ycheck.checks.spec.question import Answer
from a11ycheck.checks.spec.question import AnswerType
from a11ycheck.checks.spec.question import Question
from a11ycheck.checks.spec.question import QuestionHandler

KEY_BOOLEAN_ANSWER = "KEY_BOOLEAN_ANSWER"
KEY_STRING_ANSWER = "KEY_STRING_ANSWER"


class BooleanAnswerType(AnswerType):
    """A yes/no answer."""

    @classmethod
    def create_answer(
        cls,
        question: Question,
        question_handler_class: type[QuestionHandler],
        value: bool,
    ) -> Answer:
        metadata = ResultMetadata()
        metadata.put_bool(KEY_BOOLEAN_ANSWER, value)
        return Answer(cls, question_handler_class, question, metadata)

    @staticmethod
    def get_value(answer: Answer) -> bool:
        metadata = answer.get_metadata() or ResultMetadata()
        return metadata.require_bool(KEY_BOOLEAN_ANSWER)


class StringAnswerType(AnswerType):
    """A free-text answer."""

    @classmethod
    def create_answer(
        cls,
        question: Question,
        question_handler_class: type[QuestionHandler],
        value: str,
    ) -> Answer:
        metadata = ResultMetadata()
        metadata.put_string(KEY_STRING_ANSWER, value)
        return Answer(cls, question_handler_class, question, metadata)

    @staticmethod
    def get_value(answer: Answer) -> str:
        metadata = answer.get_metadata() or ResultMetadata()
        return metadata.require_string(KEY_STRING_ANSWER)


ANSWER_TYPES = (BooleanAnswerType, StringAnswerType)
