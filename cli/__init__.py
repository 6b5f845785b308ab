"""CLI package for the media catalog"""
from .main import cli

__all__ = ['cli']
