from .base import RendererFactory
from .state import StateRenderer

__all__ = ['RendererFactory', 'StateRenderer']
