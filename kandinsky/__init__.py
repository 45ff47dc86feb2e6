"""Async client for Kandinsky text-to-image generation on Fusion Brain"""
from kandinsky.clients.async_client import KandinskyClient
from kandinsky.exceptions import (
    KandinskyError,
    ResolutionError,
    SubmissionError,
    GenerationFailedError,
    StatusCheckError,
    GenerationTimeoutError,
)
from kandinsky.models import (
    Credentials,
    GenerationOptions,
    PollOptions,
    ProgressEvent,
    SaveOptions,
)

__all__ = [
    'KandinskyClient',
    'KandinskyError',
    'ResolutionError',
    'SubmissionError',
    'GenerationFailedError',
    'StatusCheckError',
    'GenerationTimeoutError',
    'Credentials',
    'GenerationOptions',
    'PollOptions',
    'ProgressEvent',
    'SaveOptions',
]
