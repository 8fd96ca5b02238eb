from .terminal import Terminal

__all__ = ["Terminal"]
