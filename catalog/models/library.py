# catalog/models/library.py
from .base import EntityBase

class Library(EntityBase):
    """Named root collection of series"""
    name: str
    root: str
