"""dtsstub: runtime stub generator for type declaration trees"""

__version__ = "0.1.0"
