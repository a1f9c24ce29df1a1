"""Small programming exercises, one module per exercise."""

__version__ = "0.1.0"