"""
AI System Module
"""

from .controller import AIController

__all__ = ['AIController']
