"""Exceptions raised by the intake core."""


class IntakeError(Exception):
    """Base exception for intake errors"""
    pass


class ConfigError(IntakeError):
    """Raised when an environment setting cannot be parsed"""
    pass


class InvalidAnswerError(IntakeError):
    """Raised when a value is not one of the current question's options"""

    def __init__(self, question_id: str, value: str):
        self.question_id = question_id
        self.value = value
        super().__init__(f"{value!r} is not an option of question {question_id!r}")


class SubFieldUnavailableError(IntakeError):
    """Raised when writing a conditional sub-field that is not visible"""
    pass
