"""gl3w generator - OpenGL loader generator for glcorearb.h."""

__version__ = "0.1.0"

from .codegen import render_header, render_single, render_source, write_outputs
from .errors import DecodeError, FetchError, GeneratorError
from .fetch import fetch_spec
from .registry import ProcRegistry, extract_symbols
from .types import GeneratorConfig, SeparateTarget, SingleTarget, Symbol

__all__ = [
    "GeneratorConfig",
    "SingleTarget",
    "SeparateTarget",
    "Symbol",
    "GeneratorError",
    "FetchError",
    "DecodeError",
    "ProcRegistry",
    "extract_symbols",
    "fetch_spec",
    "render_header",
    "render_source",
    "render_single",
    "write_outputs",
]
