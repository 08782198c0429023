import unittest
from io import BytesIO

from docx import Document

from resume_critic.schemas import RewrittenResume
from resume_critic.services.renderer import render_docx, render_plain_text

SECTION_HEADINGS = [
    "PROFESSIONAL SUMMARY",
    "EXPERIENCE",
    "EDUCATION",
    "SKILLS",
    "CERTIFICATIONS",
    "REFERENCES",
]


def _resume(**overrides) -> RewrittenResume:
    data = {
        "name": "John Doe",
        "email": "john@example.com",
        "phone": "+1 555 222 1111",
        "location": "Austin, TX",
        "summary": "Backend engineer focused on reliable APIs.",
        "experience": [
            {
                "title": "Senior Engineer",
                "company": "Acme",
                "duration": "2021 - 2024",
                "bullets": ["Led payments migration", "Cut latency by 30%"],
            },
            {
                "title": "Engineer",
                "company": "Globex",
                "duration": "2018 - 2021",
                "bullets": ["Built internal tooling"],
            },
        ],
        "education": [{"degree": "BSc Computer Science", "institution": "State University", "duration": "2014 - 2018"}],
        "skills": ["Python", "SQL", "Docker"],
        "certifications": ["AWS Solutions Architect"],
        "references": ["Available upon request"],
    }
    data.update(overrides)
    return RewrittenResume.model_validate(data)


def _docx_paragraphs(content: bytes):
    return Document(BytesIO(content)).paragraphs


class PlainTextRendererTests(unittest.TestCase):
    def test_layout(self):
        text = render_plain_text(_resume())
        lines = text.splitlines()
        self.assertEqual(lines[0], "John Doe")
        self.assertEqual(lines[1], "john@example.com | +1 555 222 1111 | Austin, TX")
        self.assertIn("Senior Engineer — Acme (2021 - 2024)\n• Led payments migration\n• Cut latency by 30%", text)
        self.assertIn("EDUCATION\nBSc Computer Science — State University (2014 - 2018)", text)
        self.assertIn("SKILLS\nPython, SQL, Docker", text)
        self.assertIn("CERTIFICATIONS\nAWS Solutions Architect", text)
        self.assertEqual(text, text.strip())

    def test_section_order(self):
        text = render_plain_text(_resume())
        positions = [text.index(f"\n{heading}\n") for heading in SECTION_HEADINGS]
        self.assertEqual(positions, sorted(positions))

    def test_withheld_references_phrase_is_rendered_verbatim(self):
        text = render_plain_text(_resume())
        self.assertTrue(text.endswith("REFERENCES\nAvailable upon request"))

    def test_referee_objects(self):
        resume = _resume(
            references=[
                {"name": "Sam Lee", "title": "CTO", "company": "Acme", "phone": "555-0100", "email": "sam@acme.io"}
            ]
        )
        self.assertIn("Sam Lee — CTO, Acme | 555-0100 | sam@acme.io", render_plain_text(resume))

    def test_empty_certifications_keep_heading_only(self):
        text = render_plain_text(_resume(certifications=[], references=[]))
        self.assertTrue(text.endswith("CERTIFICATIONS"))
        self.assertNotIn("REFERENCES", text)


class DocxRendererTests(unittest.TestCase):
    def test_title_contact_and_bold_experience_lines(self):
        paragraphs = _docx_paragraphs(render_docx(_resume()))
        self.assertEqual(paragraphs[0].text, "John Doe")
        self.assertEqual(paragraphs[0].style.name, "Title")
        self.assertEqual(paragraphs[1].text, "john@example.com | +1 555 222 1111 | Austin, TX")
        bold = [p for p in paragraphs if p.runs and all(run.bold for run in p.runs)]
        self.assertEqual([p.text for p in bold], ["Senior Engineer — Acme", "Engineer — Globex"])

    def test_sections_and_content_match_plain_text(self):
        resume = _resume()
        paragraphs = _docx_paragraphs(render_docx(resume))
        headings = [p.text for p in paragraphs if p.style.name == "Heading 1"]
        self.assertEqual(headings, SECTION_HEADINGS)

        docx_lines = [p.text for p in paragraphs if p.text]
        plain_lines = [line for line in render_plain_text(resume).splitlines() if line]
        for line in plain_lines:
            if line.startswith(("Senior Engineer — ", "Engineer — ")):
                continue
            self.assertIn(line, docx_lines)

        plain_order = [line for line in plain_lines if line in docx_lines]
        docx_order = [line for line in docx_lines if line in plain_order]
        self.assertEqual(plain_order, docx_order)

    def test_same_input_same_document_text(self):
        resume = _resume()
        first = [p.text for p in _docx_paragraphs(render_docx(resume))]
        second = [p.text for p in _docx_paragraphs(render_docx(resume))]
        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
