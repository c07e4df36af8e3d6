"""CLI package for Biblioteca"""
from .main import cli

__all__ = ['cli']
