from .container import DIContainer

__all__ = ["DIContainer"]
