import sys
import tempfile
import unittest
from pathlib import Path

from docx import Document

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.parsing import ExtractedDocument, parse_document  # noqa: E402


class ParsingFacadeTests(unittest.TestCase):
    def setUp(self):
        self._workdir = tempfile.TemporaryDirectory()
        self.workdir = Path(self._workdir.name)

    def tearDown(self):
        self._workdir.cleanup()

    def test_parse_txt_returns_normalized_text(self):
        path = self.workdir / "resume.txt"
        path.write_text("Jane   Doe\r\n\r\n\r\n\r\nSkills\r\nPython", encoding="utf-8")

        parsed = parse_document(str(path))
        self.assertEqual(parsed.source_type, "txt")
        self.assertEqual(parsed.text, "Jane Doe\n\nSkills\nPython")
        self.assertEqual(len(parsed.doc_id), 16)
        self.assertEqual(parsed.warnings, [])

    def test_doc_id_is_stable(self):
        path = self.workdir / "resume.txt"
        path.write_text("Same content", encoding="utf-8")
        self.assertEqual(parse_document(path).doc_id, parse_document(path).doc_id)

    def test_parse_docx_paragraphs(self):
        path = self.workdir / "resume.docx"
        document = Document()
        document.add_paragraph("Jane Doe")
        document.add_paragraph("")
        document.add_paragraph("Experience")
        document.core_properties.title = "Resume"
        document.save(str(path))

        parsed = parse_document(path)
        self.assertEqual(parsed.source_type, "docx")
        self.assertEqual(parsed.text, "Jane Doe\nExperience")
        self.assertEqual(parsed.metadata.get("title"), "Resume")

    def test_broken_pdf_degrades_to_warning(self):
        path = self.workdir / "resume.pdf"
        path.write_bytes(b"definitely not a pdf")

        parsed = parse_document(path)
        self.assertEqual(parsed.source_type, "pdf")
        self.assertEqual(parsed.text, "")
        self.assertTrue(parsed.warnings)

    def test_unsupported_extension_raises(self):
        path = self.workdir / "resume.doc"
        path.write_text("legacy", encoding="utf-8")
        with self.assertRaises(NotImplementedError):
            parse_document(path)

    def test_missing_file_raises(self):
        with self.assertRaises(FileNotFoundError):
            parse_document(self.workdir / "absent.txt")

    def test_source_type_is_validated(self):
        with self.assertRaises(ValueError):
            ExtractedDocument(doc_id="x", source_type="rtf", text="")


if __name__ == "__main__":
    unittest.main()
