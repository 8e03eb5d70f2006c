"""Turn an uploaded resume file or pasted text into one text blob.

PDFs go through pdftotext when it is installed, else pypdf. DOCX is read
with stdlib zipfile. Any other suffix is decoded as UTF-8 text.
"""
from __future__ import annotations

import re
import shutil
import subprocess
import zipfile
from pathlib import Path
from typing import Callable
from xml.etree import ElementTree

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from resume_insight.errors import InputMissingError, UnreadableResumeError
from resume_insight.log import get_logger

log = get_logger(__name__)

_WORD_NS = "{http://schemas.openxmlformats.org/wordprocessingml/2006/main}"

# Boundaries where pypdf tends to drop the space between two words.
_MERGED_WORD_RES: list[re.Pattern[str]] = [
    re.compile(r"(?<=[a-z])(?=[A-Z])"),
    re.compile(r"(?<=[a-zA-Z])(?=\d)"),
    re.compile(r"(?<=\d)(?=[a-zA-Z])"),
    re.compile(r"(?<=[.!?,;:])(?=[A-Za-z])"),
]


def _split_merged_words(text: str) -> str:
    """Insert spaces into pypdf output whose space ratio is under 8%."""
    if len(text) < 50 or text.count(" ") / len(text) > 0.08:
        return text
    log.debug("PDF text looks merged (%d chars, few spaces); splitting words", len(text))
    for pattern in _MERGED_WORD_RES:
        text = pattern.sub(" ", text)
    return text


def _pdftotext(path: Path) -> str | None:
    if not shutil.which("pdftotext"):
        return None
    try:
        result = subprocess.run(
            ["pdftotext", "-layout", str(path), "-"],
            capture_output=True,
            text=True,
            timeout=30,
        )
    except subprocess.TimeoutExpired:
        log.warning("pdftotext timed out on %s, trying pypdf", path.name)
        return None
    if result.returncode != 0 or not result.stdout.strip():
        return None
    return result.stdout


def _read_pdf(path: Path) -> str:
    text = _pdftotext(path)
    if text is not None:
        return text
    try:
        reader = PdfReader(str(path))
        return "\n".join(_split_merged_words(page.extract_text() or "") for page in reader.pages)
    except (PyPdfError, ValueError) as exc:
        raise UnreadableResumeError(f"Could not read PDF: {exc}") from exc


def _read_docx(path: Path) -> str:
    try:
        with zipfile.ZipFile(path) as zf, zf.open("word/document.xml") as f:
            tree = ElementTree.parse(f)
    except (zipfile.BadZipFile, KeyError, ElementTree.ParseError) as exc:
        raise UnreadableResumeError(f"Could not read DOCX: {exc}") from exc

    paragraphs = (
        "".join(node.text for node in para.iter(f"{_WORD_NS}t") if node.text)
        for para in tree.iter(f"{_WORD_NS}p")
    )
    return "\n".join(p for p in paragraphs if p)


def _read_plain(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="ignore")


_READERS: dict[str, Callable[[Path], str]] = {
    ".pdf": _read_pdf,
    ".docx": _read_docx,
}


def extract_text(path: Path, filename: str | None = None) -> str:
    """Return plain text from a PDF, DOCX, or text file.

    *filename* is the name the user uploaded; its suffix picks the reader
    when *path* is a temporary file without one. Corrupt files raise
    UnreadableResumeError.
    """
    suffix = Path(filename or path.name).suffix.lower()
    reader = _READERS.get(suffix, _read_plain)
    return reader(path)


def resolve_resume_text(
    upload: Path | None = None,
    filename: str | None = None,
    text: str | None = None,
) -> str:
    """Pick the resume text for a request; an uploaded file beats the text field."""
    if upload is not None:
        name = filename or upload.name
        log.info("Extracting text from upload %s", name)
        content = extract_text(upload, filename)
        if not content.strip():
            raise InputMissingError(f"Could not extract any text from {name}")
        return content

    if text and text.strip():
        return text

    raise InputMissingError("Upload a resume file or paste its text")
