from .kandinsky_exceptions import (
    KandinskyError,
    ResolutionError,
    SubmissionError,
    GenerationFailedError,
    StatusCheckError,
    GenerationTimeoutError,
)

__all__ = [
    'KandinskyError',
    'ResolutionError',
    'SubmissionError',
    'GenerationFailedError',
    'StatusCheckError',
    'GenerationTimeoutError',
]
