"""A reference-counted scene graph that pools object changes and hands them to a renderer in batches."""

__version__ = "0.1.0"