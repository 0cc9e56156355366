from .ferry import Ferry

__all__ = ['Ferry']
