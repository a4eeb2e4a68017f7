"""Product content generator: listing copy, product images and social posts from one photo."""

__version__ = "0.1.0"
