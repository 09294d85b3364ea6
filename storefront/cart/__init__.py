from .store import CartStore

__all__ = ['CartStore']
