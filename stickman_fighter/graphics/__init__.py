"""
Graphics Module
"""

from stickman_fighter.graphics.renderer import Renderer

__all__ = ['Renderer']
