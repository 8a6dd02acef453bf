from .container import Container, build_main_window

__all__ = ["Container", "build_main_window"]
