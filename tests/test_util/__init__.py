__all__ = ["test_warning"]
