from .async_client import KandinskyClient

__all__ = ['KandinskyClient']
