"""pizzeria — restaurant point-of-sale: menu, pricing, and orders."""

__version__ = "0.3.0"
