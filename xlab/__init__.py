"""Signal lines, block-type catalogue and drawing geometry for block diagrams."""

__version__ = "1.0.0"
__all__ = ["arrow", "blockregistry", "diagramitem", "line", "linepath"]