from .generation_models import (
    DEFAULT_API_URL,
    Credentials,
    GenerationOptions,
    PollOptions,
    ProgressEvent,
)
from media.image_saver import SaveOptions

__all__ = [
    'DEFAULT_API_URL',
    'Credentials',
    'GenerationOptions',
    'PollOptions',
    'ProgressEvent',
    'SaveOptions',
]
