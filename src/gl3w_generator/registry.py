"""Extraction of OpenGL entry points from glcorearb.h."""

import re

from .types import DEFAULT_PREFIX, Symbol

# GLAPI void APIENTRY glClear (GLbitfield mask);
PROC_PATTERN = re.compile(r"GLAPI.*?APIENTRY\s+(\w+)")


class ProcRegistry:
    """Collects the GL functions declared in a glcorearb.h text."""

    def __init__(self, prefix: str = DEFAULT_PREFIX) -> None:
        self.prefix = prefix
        self.procs: list[Symbol] = []
        self.skipped: list[str] = []  # identifiers too short to rename

    def parse_procs(self, text: str) -> None:
        """Parse every GLAPI ... APIENTRY declaration in text."""
        for match in PROC_PATTERN.finditer(text):
            name = match.group(1)
            try:
                self.procs.append(Symbol.from_raw_name(name, self.prefix))
            except ValueError:
                self.skipped.append(name)

    def sorted_procs(self) -> list[Symbol]:
        return sorted(self.procs)


def extract_symbols(text: str, prefix: str = DEFAULT_PREFIX) -> list[Symbol]:
    """Return the sorted symbols declared in text, skipping malformed names."""
    registry = ProcRegistry(prefix)
    registry.parse_procs(text)
    return registry.sorted_procs()
