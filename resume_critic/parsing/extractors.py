from __future__ import annotations

from io import BytesIO
from typing import Any

from docx import Document
from docx.table import Table
from pypdf import PdfReader
from pypdf.generic import ContentStream

# Operators that show text: Tj, TJ, ' (next line + show) and " (spacing + show).
_TEXT_SHOWING_OPERATORS = {b"Tj", b"TJ", b"'", b'"'}


def _join_pages(pages: list[list[str]]) -> str:
    return "".join(" ".join(items) + "\n" for items in pages)


def extract_pdf_text(content: bytes) -> str:
    """Extract PDF text page by page, joining each page's text items with spaces.

    Text items are reported by pypdf's layout visitor, which resolves every
    font's encoding and character maps.
    """
    reader = PdfReader(BytesIO(content))
    pages: list[list[str]] = []
    for page in reader.pages:
        items: list[str] = []

        def visit(text: str, *_args: Any) -> None:
            if text and text.strip():
                items.append(text.strip())

        page.extract_text(visitor_text=visit)
        pages.append(items)
    return _join_pages(pages)


def _operand_text(operand: Any) -> str:
    if isinstance(operand, bytes):
        return operand.decode("latin-1")
    if isinstance(operand, str):
        return str(operand)
    return ""


def _text_items_from_operation(operands: list[Any], operator: bytes) -> list[str]:
    if not operands:
        return []
    if operator == b"TJ":
        fragments = [_operand_text(part) for part in operands[0]] if isinstance(operands[0], list) else []
        return ["".join(fragments)]
    # Tj and ' take the string as the only operand, " takes it last.
    return [_operand_text(operands[-1])]


def extract_pdf_text_without_fonts(content: bytes) -> str:
    """Extract PDF text straight from the page content streams.

    Font resources are never loaded: string operands are decoded as Latin-1
    instead of through the font encodings, so pages with broken or missing
    font data still yield their text.
    """
    reader = PdfReader(BytesIO(content))
    pages: list[list[str]] = []
    for page in reader.pages:
        items: list[str] = []
        raw = page.get_contents()
        if raw is not None:
            stream = raw if isinstance(raw, ContentStream) else ContentStream(raw, reader)
            for operands, operator in stream.operations:
                if operator not in _TEXT_SHOWING_OPERATORS:
                    continue
                for text in _text_items_from_operation(operands, operator):
                    if text.strip():
                        items.append(text.strip())
        pages.append(items)
    return _join_pages(pages)


def extract_docx_text(content: bytes) -> str:
    document = Document(BytesIO(content))
    lines: list[str] = []
    for block in document.iter_inner_content():
        if isinstance(block, Table):
            for row in block.rows:
                # A merged cell is returned once per grid column it spans.
                seen = set()
                for cell in row.cells:
                    if cell._tc in seen:
                        continue
                    seen.add(cell._tc)
                    lines.extend(paragraph.text for paragraph in cell.paragraphs if paragraph.text.strip())
        elif block.text.strip():
            lines.append(block.text)
    return "\n".join(lines)


def extract_plain_text(content: bytes) -> str:
    return content.decode("utf-8", errors="replace")
