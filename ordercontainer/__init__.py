"""A container whose contents can be walked in several orders, with an example element type and a demo."""

__version__ = "0.1.0"
__all__ = ["animal", "container", "demo"]