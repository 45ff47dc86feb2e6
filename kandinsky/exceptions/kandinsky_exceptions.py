"""Custom exceptions for the Fusion Brain (Kandinsky) API"""
from typing import Optional


class KandinskyError(Exception):
    """Base exception for Kandinsky API errors"""
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ResolutionError(KandinskyError):
    """Pipeline listing failed or returned no pipelines"""
    pass


class SubmissionError(KandinskyError):
    """Job submission failed or the service reported itself unavailable"""
    pass


class GenerationFailedError(KandinskyError):
    """The service reported a FAIL status for the job"""
    pass


class StatusCheckError(KandinskyError):
    """A single status check could not be completed"""
    pass


class GenerationTimeoutError(KandinskyError, TimeoutError):
    """The polling attempt budget ran out before a terminal status"""
    pass
