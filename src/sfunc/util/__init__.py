__all__ = ["warning"]
