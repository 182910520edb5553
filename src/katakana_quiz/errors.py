"""Quiz engine errors. All are recoverable contract violations."""


class QuizError(Exception):
    """Base class for quiz engine errors."""


class InvalidModeError(QuizError):
    """Unknown quiz mode, or an operation not valid for the current mode."""


class SessionAlreadyActiveError(QuizError):
    """start() called while a session is still running."""


class NoActiveSessionError(QuizError):
    """Operation requires a running session."""


class QuestionIndexExhaustedError(QuizError):
    """No question left to answer."""


class SessionNotCompleteError(QuizError):
    """Result requested before the session finished."""


class QuestionAlreadyAnsweredError(QuizError):
    """The current question already has a recorded response."""


class QuestionNotAnsweredError(QuizError):
    """advance() called before the current question was answered."""


class InvalidArgumentError(QuizError):
    """An argument outside its allowed values, e.g. an unknown matching side."""
