"""Backends for composition tree output (text, DOT)."""

from .dot_generator import DotMode, generate_dot, save_dot_file
from .text_renderer import render

__all__ = ["DotMode", "generate_dot", "save_dot_file", "render"]
