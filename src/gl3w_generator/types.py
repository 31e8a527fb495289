"""Data types for the gl3w loader generator."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

DEFAULT_URL = "https://www.opengl.org/registry/api/GL/glcorearb.h"
DEFAULT_CACHE_PATH = Path("include/GL/glcorearb.h")
DEFAULT_HEADER_PATH = Path("src/gl3w.h")
DEFAULT_SOURCE_PATH = Path("src/gl3w.c")
DEFAULT_PREFIX = "gl3w"

# Length of the "gl" prefix replaced by the loader prefix
GL_PREFIX_LEN = 2


@dataclass(frozen=True, order=True)
class Symbol:
    """Represents one OpenGL entry point found in glcorearb.h."""

    raw_name: str  # "glClear"
    loader_name: str  # "gl3wClear"
    pointer_type_name: str  # "PFNGLCLEARPROC"

    @classmethod
    def from_raw_name(cls, raw_name: str, prefix: str = DEFAULT_PREFIX) -> "Symbol":
        """Derive the loader and function pointer type names from a GL name."""
        if len(raw_name) < GL_PREFIX_LEN:
            raise ValueError(f"Identifier too short for a GL function: {raw_name!r}")

        return cls(
            raw_name=raw_name,
            loader_name=prefix + raw_name[GL_PREFIX_LEN:],
            pointer_type_name="PFN" + raw_name.upper() + "PROC",
        )


@dataclass(frozen=True)
class SingleTarget:
    """One combined header holding declarations and implementation."""

    path: Path  # "include/GL/gl3w.h"


@dataclass(frozen=True)
class SeparateTarget:
    """A gl3w.h / gl3w.c file pair."""

    header_path: Path
    source_path: Path


OutputTarget = Union[SingleTarget, SeparateTarget]


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings for one generator run."""

    url: str = DEFAULT_URL
    cache_path: Path = DEFAULT_CACHE_PATH
    target: OutputTarget = field(
        default_factory=lambda: SeparateTarget(DEFAULT_HEADER_PATH, DEFAULT_SOURCE_PATH)
    )
    no_cache: bool = False
    prefix: str = DEFAULT_PREFIX
    timeout: Optional[float] = None  # seconds, None blocks indefinitely
