"""Classic algorithms and data structures: graphs, planar geometry, sorting, union-find, heaps and red-black trees."""

__version__ = "0.1.0"