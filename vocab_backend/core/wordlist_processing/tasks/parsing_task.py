"""
Document parsing task using LangChain document loaders.

Converts PDF, Word, Excel and plain-text documents into a single text
string. Word and Excel files are read with python-docx and openpyxl and
wrapped in LangChain documents so every format goes through the same path.

Dependencies: langchain_community.document_loaders, docx, openpyxl
System role: First stage of wordlist processing
"""

from pathlib import Path

from docx import Document as DocxDocument
from langchain_community.document_loaders import PyPDFLoader, TextLoader
from langchain_core.documents import Document
from openpyxl import load_workbook

from vocab_backend.core.exceptions import ParsingError

SUPPORTED_SUFFIXES = {
    ".pdf": "pdf",
    ".docx": "docx",
    ".xlsx": "xlsx",
    ".txt": "txt",
    ".md": "txt",
}


def document_type_for(file_path: str) -> str:
    """
    Map a file path to the document type used by the cleaning stage.

    Args:
        file_path: Path to document

    Returns:
        str: pdf, docx, xlsx or txt

    Raises:
        ParsingError: When the suffix is not supported
    """
    suffix = Path(file_path).suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ParsingError(
            f"Unsupported file format: {suffix or '<none>'}. "
            f"Supported: {', '.join(sorted(SUPPORTED_SUFFIXES))}",
            file_type=suffix,
        )
    return SUPPORTED_SUFFIXES[suffix]


def load_docx_document(file_path: str) -> list[Document]:
    """
    Read a Word document's paragraphs and table cells, in that order.

    Args:
        file_path: Path to .docx file

    Returns:
        list[Document]: A single document holding one line per paragraph
    """
    doc = DocxDocument(file_path)

    parts = [p.text.strip() for p in doc.paragraphs if p.text and p.text.strip()]
    for table in doc.tables:
        for row in table.rows:
            for cell in row.cells:
                parts.extend(p.text.strip() for p in cell.paragraphs if p.text and p.text.strip())

    return [Document(page_content="\n".join(parts), metadata={"source": file_path})]


def load_xlsx_document(file_path: str) -> list[Document]:
    """
    Read every non-empty cell of a workbook, one document per sheet.

    Cell values are read with ``data_only`` so formulas yield their cached
    results. Cells are joined by spaces in row order.

    Args:
        file_path: Path to .xlsx file

    Returns:
        list[Document]: One document per worksheet
    """
    workbook = load_workbook(file_path, read_only=True, data_only=True)
    try:
        documents = []
        for sheet in workbook.worksheets:
            cells = [
                str(value).strip()
                for row in sheet.iter_rows(values_only=True)
                for value in row
                if value is not None and str(value).strip()
            ]
            documents.append(
                Document(
                    page_content=" ".join(cells),
                    metadata={"source": file_path, "sheet": sheet.title, "cells": len(cells)},
                )
            )
        return documents
    finally:
        workbook.close()


class ParsingTask:
    """Parse PDF, Word, Excel and text documents into plain text."""

    def load(self, file_path: str) -> list[Document]:
        """
        Load document pages with the matching loader.

        Args:
            file_path: Path to document

        Returns:
            list[Document]: One document per page (PDF), per sheet (Excel)
                or per file (Word, text)

        Raises:
            ParsingError: When the file is missing, unsupported or unreadable
        """
        path = Path(file_path)
        if not path.exists():
            raise ParsingError(f"File not found: {file_path}")

        document_type = document_type_for(file_path)

        try:
            if document_type == "pdf":
                return PyPDFLoader(file_path).load()
            if document_type == "docx":
                return load_docx_document(file_path)
            if document_type == "xlsx":
                return load_xlsx_document(file_path)
            return TextLoader(file_path, encoding="utf-8").load()
        except Exception as e:
            raise ParsingError(f"Failed to parse {document_type}: {e}", file_type=document_type) from e

    def parse(self, file_path: str) -> str:
        """
        Parse document into text.

        Args:
            file_path: Path to document

        Returns:
            str: Page texts joined by blank lines

        Raises:
            ParsingError: When parsing fails or no text can be extracted
        """
        documents = self.load(file_path)
        text = "\n\n".join(doc.page_content for doc in documents if doc.page_content)

        if not text.strip():
            raise ParsingError(
                "Document contains no extractable text",
                file_type=document_type_for(file_path),
            )

        return text
