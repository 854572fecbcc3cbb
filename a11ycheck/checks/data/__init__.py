from a11ycheck.checks.data.answers import ANSWER_TYPES
from a11ycheck.checks.data.checks import CHECKS
from a11ycheck.checks.data.questions import QUESTION_HANDLERS
from a11ycheck.checks.data.questions import QUESTION_TYPES

# Every kind shipped with a11ycheck. Wire messages written by this package only reference these.
BUILTIN_KINDS: tuple[type, ...] = (
    *CHECKS.values(),
    *QUESTION_HANDLERS.values(),
    *QUESTION_TYPES,
    *ANSWER_TYPES,
)
