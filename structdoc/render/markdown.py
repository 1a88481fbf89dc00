"""Markdown renderer for extracted struct declarations."""

from dataclasses import replace
from pathlib import Path
from typing import Union

from structdoc.ast.models import Declaration, DocOptions, Field
from structdoc.configs.logging import get_logger
from structdoc.exceptions import WriteError

logger = get_logger("render.markdown")


def _anchor(name: str) -> str:
    """GitHub-style heading anchor for a declaration name."""
    return name.lower()


def _cell(text: str) -> str:
    """Escape text for use inside a table cell."""
    return text.replace("|", "\\|")


def normalize_declarations(declarations: list[Declaration]) -> list[Declaration]:
    """
    Trim comment whitespace before rendering.

    Returns normalized copies; field comments are folded onto one line so
    they fit a table row.
    """
    normalized = []
    for declaration in declarations:
        fields = [
            replace(f, comment=f.comment.strip().replace("\n", " "))
            for f in declaration.fields
        ]
        normalized.append(replace(declaration, comment=declaration.comment.strip(), fields=fields))
    return normalized


def _type_cell(field: Field, documented: set[str]) -> str:
    """Type column: record types become a bold (linked when documented) reference."""
    if not field.is_struct:
        return _cell(field.type)

    target = field.raw_type
    if target in documented:
        target = f"[{target}](#{_anchor(target)})"
    cell = f"object **{target}**"
    if field.type != field.raw_type:
        cell += f" (`{_cell(field.type)}`)"
    return cell


def render_markdown(declarations: list[Declaration], title: str, show_exported: bool) -> str:
    """
    Render declarations as a Markdown document.

    Args:
        declarations: Normalized declarations, in output order
        title: Top-level heading
        show_exported: Include the Exported column

    Returns:
        Markdown text
    """
    documented = {d.name for d in declarations}
    lines = [f"# {title}", ""]

    for declaration in declarations:
        lines.extend([f"## {declaration.name}", ""])

        if declaration.comment:
            lines.extend([declaration.comment, ""])

        if show_exported:
            lines.append("| Field | Type | Exported | Comment |")
            lines.append("|-------|------|----------|---------|")
        else:
            lines.append("| Field | Type | Comment |")
            lines.append("|-------|------|---------|")

        for field in declaration.fields:
            cells = [_cell(field.name), _type_cell(field, documented)]
            if show_exported:
                cells.append("Yes" if field.exported else "No")
            cells.append(_cell(field.comment))
            lines.append("| " + " | ".join(cells) + " |")

        lines.append("")

    return "\n".join(lines)


def write_markdown(
    declarations: list[Declaration],
    output_path: Union[str, Path],
    options: DocOptions,
) -> Path:
    """
    Normalize, render and write declarations to a Markdown file.

    Returns:
        Path of the written file

    Raises:
        WriteError: If the output file cannot be written
    """
    path = Path(output_path)
    content = render_markdown(
        normalize_declarations(declarations),
        title=options.title,
        show_exported=options.show_exported,
    )

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except (OSError, UnicodeError) as e:
        raise WriteError(f"Failed to write documentation: {e}", str(path)) from e

    logger.debug(f"Wrote {len(content)} characters to {path}")
    return path
