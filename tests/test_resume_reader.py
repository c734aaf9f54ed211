"""Tests for ResumeReader."""

from unittest import mock

import pytest
from docx import Document

from career_assistant.core import ResumeReader, resume_reader


def test_reads_plain_text_and_collapses_blank_lines(tmp_path):
    path = tmp_path / "resume.txt"
    path.write_text("Jane Doe   \n\n\n\nPython developer\n", encoding="utf-8")

    assert ResumeReader().read(str(path)) == "Jane Doe\n\nPython developer"


def test_reads_markdown(tmp_path):
    path = tmp_path / "resume.md"
    path.write_text("# Jane Doe\n- Python", encoding="utf-8")

    assert ResumeReader().read(str(path)) == "# Jane Doe\n- Python"


def test_reads_docx(tmp_path):
    document = Document()
    document.add_paragraph("Jane Doe")
    document.add_paragraph("Data Engineer")
    path = tmp_path / "resume.docx"
    document.save(str(path))

    assert ResumeReader().read(str(path)) == "Jane Doe\nData Engineer"


def test_unsupported_extension(tmp_path):
    path = tmp_path / "resume.rtf"
    path.write_text("{\\rtf1}", encoding="utf-8")

    with pytest.raises(ValueError, match="Unsupported file format"):
        ResumeReader().read(str(path))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ResumeReader().read(str(tmp_path / "nope.pdf"))


def write_pdf(path, lines):
    """Write a one-page PDF showing ``lines`` in Helvetica."""
    text = " ".join(f"({line}) Tj T*" for line in lines)
    stream = f"BT /F1 12 Tf 14 TL 72 720 Td {text} ET"
    objects = [
        "<< /Type /Catalog /Pages 2 0 R >>",
        "<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        "/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        f"<< /Length {len(stream)} >>\nstream\n{stream}\nendstream",
        "<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    data = b"%PDF-1.4\n"
    offsets = []
    for number, body in enumerate(objects, 1):
        offsets.append(len(data))
        data += f"{number} 0 obj\n{body}\nendobj\n".encode("latin-1")

    xref_at = len(data)
    data += f"xref\n0 {len(objects) + 1}\n0000000000 65535 f \n".encode("latin-1")
    for offset in offsets:
        data += f"{offset:010d} 00000 n \n".encode("latin-1")
    data += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_at}\n%%EOF\n"
    ).encode("latin-1")
    path.write_bytes(data)


def fake_pdfplumber_open(page_text):
    page = mock.Mock()
    page.extract_text.return_value = page_text
    pdf = mock.MagicMock()
    pdf.__enter__.return_value.pages = [page]
    return mock.Mock(return_value=pdf)


def test_reads_pdf(tmp_path):
    path = tmp_path / "resume.pdf"
    write_pdf(path, ["Jane Doe", "Data Engineer"])

    text = ResumeReader().read(str(path))

    assert "Jane Doe" in text
    assert "Data Engineer" in text


def test_pdf_glyph_placeholders_removed(tmp_path, monkeypatch):
    path = tmp_path / "resume.pdf"
    write_pdf(path, ["Jane Doe"])
    monkeypatch.setattr(resume_reader.pdfplumber, "open", fake_pdfplumber_open("Jane(cid:3) Doe(cid:17)"))

    assert ResumeReader().read(str(path)) == "Jane Doe"


def test_pdf_falls_back_to_pypdf2_when_no_text(tmp_path, monkeypatch):
    path = tmp_path / "resume.pdf"
    write_pdf(path, ["Jane Doe", "Data Engineer"])
    monkeypatch.setattr(resume_reader.pdfplumber, "open", fake_pdfplumber_open(None))
    reader = mock.Mock(wraps=resume_reader.PdfReader)
    monkeypatch.setattr(resume_reader, "PdfReader", reader)

    text = ResumeReader().read(str(path))

    reader.assert_called_once_with(str(path))
    assert "Jane Doe" in text
    assert "Data Engineer" in text
