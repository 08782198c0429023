from __future__ import annotations

from io import BytesIO

from docx import Document

from resume_critic.schemas import EducationEntry, ExperienceEntry, Referee, RewrittenResume

SUMMARY_HEADING = "PROFESSIONAL SUMMARY"
EXPERIENCE_HEADING = "EXPERIENCE"
EDUCATION_HEADING = "EDUCATION"
SKILLS_HEADING = "SKILLS"
CERTIFICATIONS_HEADING = "CERTIFICATIONS"
REFERENCES_HEADING = "REFERENCES"

BULLET = "• "


def contact_line(resume: RewrittenResume) -> str:
    return " | ".join([resume.email, resume.phone, resume.location])


def experience_heading(entry: ExperienceEntry) -> str:
    return f"{entry.title} — {entry.company}"


def education_line(entry: EducationEntry) -> str:
    return f"{entry.degree} — {entry.institution} ({entry.duration})"


def _referee_line(referee: Referee) -> str:
    role = ", ".join(part for part in (referee.title, referee.company) if part)
    head = " — ".join(part for part in (referee.name, role) if part)
    return " | ".join(part for part in (head, referee.phone, referee.email) if part)


def reference_lines(resume: RewrittenResume) -> list[str]:
    lines: list[str] = []
    for reference in resume.references:
        lines.append(reference if isinstance(reference, str) else _referee_line(reference))
    return lines


def _experience_block(entry: ExperienceEntry) -> str:
    lines = [f"{experience_heading(entry)} ({entry.duration})"]
    lines.extend(f"{BULLET}{bullet}" for bullet in entry.bullets)
    return "\n".join(lines)


def render_plain_text(resume: RewrittenResume) -> str:
    blocks = [
        f"{resume.name}\n{contact_line(resume)}",
        f"{SUMMARY_HEADING}\n{resume.summary}",
        EXPERIENCE_HEADING + "\n" + "\n\n".join(_experience_block(entry) for entry in resume.experience),
        EDUCATION_HEADING + "\n" + "\n".join(education_line(entry) for entry in resume.education),
        f"{SKILLS_HEADING}\n{', '.join(resume.skills)}",
        CERTIFICATIONS_HEADING + "\n" + "\n".join(resume.certifications),
    ]
    references = reference_lines(resume)
    if references:
        blocks.append(REFERENCES_HEADING + "\n" + "\n".join(references))
    return "\n\n".join(block.rstrip() for block in blocks).strip()


def render_docx(resume: RewrittenResume) -> bytes:
    """Build a .docx with the same sections, in the same order, as the plain text."""
    document = Document()
    document.add_heading(resume.name, level=0)
    document.add_paragraph(contact_line(resume))
    document.add_paragraph("")

    document.add_heading(SUMMARY_HEADING, level=1)
    document.add_paragraph(resume.summary)
    document.add_paragraph("")

    document.add_heading(EXPERIENCE_HEADING, level=1)
    for entry in resume.experience:
        heading = document.add_paragraph()
        heading.add_run(experience_heading(entry)).bold = True
        document.add_paragraph(entry.duration)
        for bullet in entry.bullets:
            document.add_paragraph(f"{BULLET}{bullet}")
        document.add_paragraph("")

    document.add_heading(EDUCATION_HEADING, level=1)
    for entry in resume.education:
        document.add_paragraph(education_line(entry))
    document.add_paragraph("")

    document.add_heading(SKILLS_HEADING, level=1)
    document.add_paragraph(", ".join(resume.skills))
    document.add_paragraph("")

    document.add_heading(CERTIFICATIONS_HEADING, level=1)
    for certification in resume.certifications:
        document.add_paragraph(certification)

    references = reference_lines(resume)
    if references:
        document.add_paragraph("")
        document.add_heading(REFERENCES_HEADING, level=1)
        for line in references:
            document.add_paragraph(line)

    buffer = BytesIO()
    document.save(buffer)
    return buffer.getvalue()
