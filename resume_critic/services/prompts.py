from __future__ import annotations

from datetime import date

from resume_critic.schemas import Critique

CRITIQUE_JSON_SHAPE = """{
  "strengths": "...",
  "weaknesses": "...",
  "suggestions": "...",
  "overall": "Score /10"
}"""

REWRITE_RULES = (
    "DO NOT change the person's name, email, phone number, or location",
    "DO NOT change any company names, job titles, or employment dates",
    "DO NOT change any school names, degree names, or graduation dates",
    "DO NOT add jobs, education, or certifications that are not in the original",
    "DO NOT remove any jobs, education, or certifications from the original",
    "DO NOT invent or fabricate any facts, numbers, or achievements",
    "ONLY improve the wording, grammar, and structure of what already exists",
    "ONLY add a professional summary if one does not already exist, based strictly on the existing information",
    "Bullet points should be rewritten using strong action verbs but must reflect only what is stated in the original",
    "If the original resume contains a references section, you MUST include it exactly as-is "
    "- do not omit, alter, or summarize it",
    "If the original says \"References available upon request\" or similar, preserve that exact phrase",
    "Include ALL sections from the original resume - do not skip any section regardless of which page it was on",
)

REWRITE_JSON_SHAPE = """{
  "name": "exact name from original",
  "email": "exact email from original",
  "phone": "exact phone from original",
  "location": "exact location from original",
  "summary": "improved or newly written summary based only on existing info",
  "experience": [
    {
      "title": "exact title from original",
      "company": "exact company from original",
      "duration": "exact duration from original",
      "bullets": ["improved wording of original bullet", "..."]
    }
  ],
  "education": [
    {
      "degree": "exact degree from original",
      "institution": "exact institution from original",
      "duration": "exact duration from original"
    }
  ],
  "skills": ["exact skills from original, no additions"],
  "certifications": ["exact certifications from original, no additions"],
  "references": [
    {
      "name": "exact referee name",
      "title": "exact referee title",
      "company": "exact referee company",
      "phone": "exact referee phone",
      "email": "exact referee email if present"
    }
  ]
}"""

WITHHELD_REFERENCES = "Available upon request"


def format_prompt_date(day: date) -> str:
    """Render ``day`` the way the prompts state it, e.g. ``January 5, 2025``."""
    return f"{day:%B} {day.day}, {day.year}"


def build_critique_prompt(resume_text: str, *, today: date) -> str:
    current_date = format_prompt_date(today)
    return (
        f"You are an expert resume critic. Today's date is {current_date}.\n"
        "Use this date as context when evaluating timelines, employment gaps, "
        "graduation dates, and experience durations. Do not assume any dates "
        "are in the future if they have already passed based on today's date.\n\n"
        "Return ONLY a valid JSON object.\n"
        'Do not include markdown formatting, backticks, or the word "json".\n\n'
        f"{CRITIQUE_JSON_SHAPE}\n\n"
        "Resume content:\n"
        f"{resume_text}"
    )


def build_rewrite_prompt(resume_text: str, critique: Critique, *, today: date) -> str:
    current_date = format_prompt_date(today)
    rules = "\n".join(f"{index}. {rule}" for index, rule in enumerate(REWRITE_RULES, start=1))
    return (
        f"You are a professional resume editor. Today's date is {current_date}.\n\n"
        "Your job is to IMPROVE the resume's presentation, NOT to invent or change any factual details.\n\n"
        "STRICT RULES - you must follow these without exception:\n"
        f"{rules}\n\n"
        "Return ONLY a valid JSON object in this exact format, no markdown, no backticks:\n"
        f"{REWRITE_JSON_SHAPE}\n\n"
        'Note on references: If the CV just says something like "References available upon request", '
        f'set references to ["{WITHHELD_REFERENCES}"] instead of the array of objects above.\n\n'
        "Original Resume (treat every detail in here as ground truth - this includes ALL pages):\n"
        f"{resume_text}\n\n"
        "Critique to address (use this ONLY to improve wording and structure, not to change facts):\n"
        f"Strengths: {critique.strengths}\n"
        f"Weaknesses: {critique.weaknesses}\n"
        f"Suggestions: {critique.suggestions}"
    )
