"""Backends for question tree output (text outline, DOT)."""

from .dot_generator import DotMode, generate_dot, save_dot_file
from .outline import render_outline

__all__ = ["DotMode", "generate_dot", "save_dot_file", "render_outline"]
