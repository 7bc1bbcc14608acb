from .base import QuoteProvider
from .wise import WiseProvider

__all__ = ['QuoteProvider', 'WiseProvider']
