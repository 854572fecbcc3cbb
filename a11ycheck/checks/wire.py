"""
Wire format for results, questions and answers.

Each value is first mapped to a message (a frozen pydantic model with strict field
types), then serialized to UTF-8 JSON bytes with orjson. Kinds (checks, question
types, answer types and question handlers) are written as fully-qualified names
and resolved through a `KindRegistry` when read back. Non-finite floats have no
JSON form, and orjson only writes integers within the signed or unsigned 64-bit
range; values outside those limits raise `WireFormatError` when encoding.

Optional metadata is only written when present. A missing ``metadata`` field decodes
to ``None``; an empty but present metadata block decodes to an empty
`ResultMetadata`. The two are not equal.

Message layout (JSON objects)::

    Result   {check_class: str, result_type: str, element_id: int, result_id: int, metadata?: Metadata}
    Question {question_id: int, question_type_class: str, answer_type_class: str,
              question_handler_class: str, original_result: Result, metadata?: Metadata}
    Answer   {answer_type_class: str, question_handler_class: str, question: Question, metadata?: Metadata}
    Metadata {entries: [{key: str, value: {string_value | int_value | bool_value | float_value | string_list_value}}]}
"""

import logging
import math
from typing import Any
from typing import TypeVar

import orjson
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import model_validator
from pydantic import StrictBool
from pydantic import StrictFloat
from pydantic import StrictInt
from pydantic import StrictStr
from pydantic import ValidationError

from a11ycheck.checks.registry import get_default_registry
from a11ycheck.checks.registry import kind_name
from a11ycheck.checks.registry import KindRegistry
from a11ycheck.checks.spec.metadata import MetadataValueType
from a11ycheck.checks.spec.metadata import ResultMetadata
from a11ycheck.checks.spec.metadata import value_type_of
from a11ycheck.checks.spec.model import AccessibilityHierarchyCheck
from a11ycheck.checks.spec.question import Answer
from a11ycheck.checks.spec.question import AnswerType
from a11ycheck.checks.spec.question import Question
from a11ycheck.checks.spec.question import QuestionHandler
from a11ycheck.checks.spec.question import QuestionType
from a11ycheck.checks.spec.result import AccessibilityCheckResultType
from a11ycheck.checks.spec.result import AccessibilityHierarchyCheckResult

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class WireFormatError(ValueError):
    """Raised when bytes are not a well-formed message of the expected kind."""

    pass


_VALUE_FIELDS = {
    MetadataValueType.STRING: "string_value",
    MetadataValueType.INTEGER: "int_value",
    MetadataValueType.BOOLEAN: "bool_value",
    MetadataValueType.FLOAT: "float_value",
    MetadataValueType.STRING_LIST: "string_list_value",
}
_VALUE_FIELD_NAMES = tuple(_VALUE_FIELDS.values())


class _Message(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class MetadataValueMessage(_Message):
    """Typed metadata value. Exactly one field is set."""

    string_value: StrictStr | None = None
    int_value: StrictInt | None = None
    bool_value: StrictBool | None = None
    float_value: StrictFloat | None = None
    string_list_value: list[StrictStr] | None = None

    @model_validator(mode="after")
    def _exactly_one_value(self) -> "MetadataValueMessage":
        present = [
            name for name in _VALUE_FIELD_NAMES if getattr(self, name) is not None
        ]
        if len(present) != 1:
            raise ValueError(
                "A metadata value must set exactly one of "
                + ", ".join(_VALUE_FIELD_NAMES)
            )
        return self

    @property
    def value(self) -> Any:
        for name in _VALUE_FIELD_NAMES:
            value = getattr(self, name)
            if value is not None:
                return value
        return None


class MetadataEntryMessage(_Message):
    key: StrictStr
    value: MetadataValueMessage


class MetadataMessage(_Message):
    entries: list[MetadataEntryMessage] = []


class ResultMessage(_Message):
    check_class: StrictStr
    result_type: AccessibilityCheckResultType
    element_id: StrictInt
    result_id: StrictInt
    metadata: MetadataMessage | None = None


class QuestionMessage(_Message):
    question_id: StrictInt
    question_type_class: StrictStr
    answer_type_class: StrictStr
    question_handler_class: StrictStr
    original_result: ResultMessage
    metadata: MetadataMessage | None = None


class AnswerMessage(_Message):
    answer_type_class: StrictStr
    question_handler_class: StrictStr
    question: QuestionMessage
    metadata: MetadataMessage | None = None


# ----------------------------
# Value -> message
# ----------------------------


def metadata_to_message(metadata: ResultMetadata) -> MetadataMessage:
    entries = []
    for key, value in metadata.items():
        if isinstance(value, float) and not math.isfinite(value):
            raise WireFormatError(f"Metadata value for '{key}' is not finite: {value}")
        field_name = _VALUE_FIELDS[value_type_of(value)]
        entries.append(
            MetadataEntryMessage(
                key=key, value=MetadataValueMessage(**{field_name: value})
            )
        )
    return MetadataMessage(entries=entries)


def _optional_metadata_to_message(
    metadata: ResultMetadata | None,
) -> MetadataMessage | None:
    return None if metadata is None else metadata_to_message(metadata)


def result_to_message(result: AccessibilityHierarchyCheckResult) -> ResultMessage:
    return ResultMessage(
        check_class=kind_name(result.check_class),
        result_type=result.type,
        element_id=result.element_id,
        result_id=result.result_id,
        metadata=_optional_metadata_to_message(result.metadata),
    )


def question_to_message(question: Question) -> QuestionMessage:
    return QuestionMessage(
        question_id=question.question_id,
        question_type_class=kind_name(question.question_type_class),
        answer_type_class=kind_name(question.answer_type_class),
        question_handler_class=kind_name(question.question_handler_class),
        original_result=result_to_message(question.original_result),
        metadata=_optional_metadata_to_message(question.metadata),
    )


def answer_to_message(answer: Answer) -> AnswerMessage:
    return AnswerMessage(
        answer_type_class=kind_name(answer.answer_type_class),
        question_handler_class=kind_name(answer.question_handler_class),
        question=question_to_message(answer.question),
        metadata=_optional_metadata_to_message(answer.metadata),
    )


# ----------------------------
# Message -> value
# ----------------------------


def metadata_from_message(message: MetadataMessage) -> ResultMetadata:
    metadata = ResultMetadata()
    for entry in message.entries:
        if entry.key in metadata:
            raise WireFormatError(f"Duplicate metadata key '{entry.key}' in message")
        metadata.put(entry.key, entry.value.value)
    return metadata


def _optional_metadata_from_message(
    message: MetadataMessage | None,
) -> ResultMetadata | None:
    return None if message is None else metadata_from_message(message)


def result_from_message(
    message: ResultMessage, registry: KindRegistry | None = None
) -> AccessibilityHierarchyCheckResult:
    """
    Rebuild a result from its message.

    Raises:
        UnknownKindError: If `check_class` is not a registered check.
    """
    if registry is None:
        registry = get_default_registry()
    return AccessibilityHierarchyCheckResult(
        check_class=registry.require(message.check_class, AccessibilityHierarchyCheck),
        type=message.result_type,
        element_id=message.element_id,
        result_id=message.result_id,
        metadata=_optional_metadata_from_message(message.metadata),
    )


def question_from_message(
    message: QuestionMessage, registry: KindRegistry | None = None
) -> Question:
    if registry is None:
        registry = get_default_registry()
    return Question(
        question_id=message.question_id,
        question_type_class=registry.require(message.question_type_class, QuestionType),
        answer_type_class=registry.require(message.answer_type_class, AnswerType),
        question_handler_class=registry.require(
            message.question_handler_class, QuestionHandler
        ),
        original_result=result_from_message(message.original_result, registry),
        metadata=_optional_metadata_from_message(message.metadata),
    )


def answer_from_message(
    message: AnswerMessage, registry: KindRegistry | None = None
) -> Answer:
    if registry is None:
        registry = get_default_registry()
    return Answer(
        answer_type_class=registry.require(message.answer_type_class, AnswerType),
        question_handler_class=registry.require(
            message.question_handler_class, QuestionHandler
        ),
        question=question_from_message(message.question, registry),
        metadata=_optional_metadata_from_message(message.metadata),
    )


# ----------------------------
# Bytes
# ----------------------------


def _pack(message: BaseModel) -> bytes:
    try:
        return orjson.dumps(message.model_dump(exclude_none=True))
    except orjson.JSONEncodeError as e:
        logger.warning("Could not encode %s: %s", type(message).__name__, e)
        raise WireFormatError(f"Cannot encode {type(message).__name__}: {e}") from e


def _unpack(data: bytes, message_class: type[M]) -> M:
    try:
        payload: Any = orjson.loads(data)
    except orjson.JSONDecodeError as e:
        logger.warning("Could not parse %s: %s", message_class.__name__, e)
        raise WireFormatError(f"Malformed {message_class.__name__}: {e}") from e
    try:
        return message_class.model_validate(payload)
    except ValidationError as e:
        logger.warning("Invalid %s: %s", message_class.__name__, e)
        raise WireFormatError(f"Invalid {message_class.__name__}: {e}") from e


def encode_metadata(metadata: ResultMetadata) -> bytes:
    return _pack(metadata_to_message(metadata))


def decode_metadata(data: bytes) -> ResultMetadata:
    return metadata_from_message(_unpack(data, MetadataMessage))


def encode_result(result: AccessibilityHierarchyCheckResult) -> bytes:
    """
    Encode a result as bytes.

    Raises:
        WireFormatError: If a value has no wire form, e.g. an integer beyond 64 bits.
    """
    return _pack(result_to_message(result))


def decode_result(
    data: bytes, registry: KindRegistry | None = None
) -> AccessibilityHierarchyCheckResult:
    """
    Decode a result written by `encode_result`.

    Raises:
        WireFormatError: If `data` is not a well-formed result message.
        UnknownKindError: If the message names a check that is not registered.
    """
    return result_from_message(_unpack(data, ResultMessage), registry)


def encode_question(question: Question) -> bytes:
    return _pack(question_to_message(question))


def decode_question(data: bytes, registry: KindRegistry | None = None) -> Question:
    return question_from_message(_unpack(data, QuestionMessage), registry)


def encode_answer(answer: Answer) -> bytes:
    return _pack(answer_to_message(answer))


def decode_answer(data: bytes, registry: KindRegistry | None = None) -> Answer:
    return answer_from_message(_unpack(data, AnswerMessage), registry)
