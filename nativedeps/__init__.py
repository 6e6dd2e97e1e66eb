from .core.config import __version__

__all__ = ['__version__']
