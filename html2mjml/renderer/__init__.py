"""MJML validation and rendering."""

from .compiler import CompileError, CompileResult, MjmlCompiler, MjmlPythonCompiler
from .renderer_bridge import RendererBridge, RenderOutcome

__all__ = [
    'CompileError',
    'CompileResult',
    'MjmlCompiler',
    'MjmlPythonCompiler',
    'RendererBridge',
    'RenderOutcome',
]
