from a11ycheck.checks.spec.question import QuestionType


class UserConfirmationQuestionType(QuestionType):
    """Asks a person who can see the running UI to confirm or reject a finding."""

    pass


QUESTION_TYPES = (UserConfirmationQuestionType,)
