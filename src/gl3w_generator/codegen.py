"""Code generation of the gl3w loader files."""

from pathlib import Path

from . import templates
from .types import OutputTarget, SeparateTarget, SingleTarget, Symbol

# Column widths used to line up the generated declarations
TYPE_COLUMN = 52
MACRO_COLUMN = 45


def render_header(symbols: list[Symbol]) -> str:
    """Render gl3w.h."""
    content = [templates.PREAMBLE, templates.HEADER_H]

    for sym in symbols:
        content.append(f"extern {sym.pointer_type_name:<{TYPE_COLUMN}} {sym.loader_name};\n")

    content.append("\n")

    # Route calls to the plain GL names through the loaded pointers
    for sym in symbols:
        content.append(f"#define {sym.raw_name:<{MACRO_COLUMN}} {sym.loader_name}\n")

    content.append("\n")
    content.append(templates.FOOTER_H)
    return "".join(content)


def render_source(symbols: list[Symbol]) -> str:
    """Render gl3w.c."""
    content = [templates.PREAMBLE, templates.HEADER_C]

    for sym in symbols:
        content.append(f"{sym.pointer_type_name:<{TYPE_COLUMN}} {sym.loader_name};\n")

    content.append("\n")
    content.append("static void load_procs(void)\n{\n")

    for sym in symbols:
        content.append(
            f'    {sym.loader_name} = ({sym.pointer_type_name}) get_proc("{sym.raw_name}");\n'
        )

    content.append("}\n")
    return "".join(content)


def render_single(symbols: list[Symbol]) -> str:
    """Render a combined gl3w.h, in the style of gl3w-Single-File.

    The implementation part is only compiled where GL3W_IMPLEMENTATION is
    defined before including the header.
    """
    return "".join(
        [
            render_header(symbols),
            templates.SINGLE_BEGIN,
            render_source(symbols),
            templates.SINGLE_END,
        ]
    )


def write_file(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8", newline="\n")


def write_outputs(target: OutputTarget, symbols: list[Symbol]) -> list[Path]:
    """Write the loader files for target and return the written paths."""
    if isinstance(target, SingleTarget):
        print(f"Generating {target.path}...")
        write_file(target.path, render_single(symbols))
        return [target.path]

    if isinstance(target, SeparateTarget):
        print(f"Generating {target.header_path}...")
        write_file(target.header_path, render_header(symbols))
        print(f"Generating {target.source_path}...")
        write_file(target.source_path, render_source(symbols))
        return [target.header_path, target.source_path]

    raise TypeError(f"Unknown output target: {target!r}")
