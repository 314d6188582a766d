import sys
import unittest
from pathlib import Path

from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.parsing import parse_job_description  # noqa: E402
from resume_ats.parsing.jd_parser import (  # noqa: E402
    extract_education_requirement,
    extract_experience_years,
    extract_job_title,
    extract_responsibilities,
)
from resume_ats.schemas import UNKNOWN_POSITION, ExperienceYears  # noqa: E402

SAMPLE_JOB = """Senior Backend Engineer
Acme Corp
Location: Austin, TX
Full time

We are hiring an engineer with 3 to 5 years building Python platforms.

Responsibilities
- Design Python microservices on AWS
- Collaborate with product teams
Requirements
- Experience with Docker and Kubernetes
- Strong communication skills
- Familiarity with Jira
- PMP certification is a plus
"""


class JobDescriptionParserTests(unittest.TestCase):
    def setUp(self):
        self.parsed = parse_job_description(SAMPLE_JOB)

    def test_header_fields(self):
        self.assertEqual(self.parsed.title, "Senior Backend Engineer")
        self.assertIsNone(self.parsed.company)
        self.assertEqual(self.parsed.location, "Austin, TX")
        self.assertEqual(self.parsed.employment_type, "full-time")

    def test_experience_range(self):
        self.assertEqual(self.parsed.experience_years, ExperienceYears(min=3, max=5))

    def test_vocabulary_hits_follow_vocabulary_order(self):
        self.assertEqual(
            self.parsed.required_skills,
            ["python", "aws", "docker", "kubernetes", "microservices"],
        )
        self.assertEqual(self.parsed.tools, ["jira", "teams"])
        self.assertEqual(self.parsed.soft_skills, ["communication"])
        self.assertEqual(self.parsed.preferred_skills, [])
        self.assertEqual(self.parsed.certifications, ["pmp"])
        self.assertIsNone(self.parsed.education)

    def test_keywords_ranked_by_frequency(self):
        keywords = self.parsed.keywords
        self.assertEqual(keywords[0].term, "python")
        self.assertEqual(keywords[0].frequency, 2)
        self.assertEqual(keywords[0].category, "technical")
        self.assertEqual([keyword.term for keyword in keywords[1:3]], ["aws", "docker"])
        categories = {keyword.term: keyword.category for keyword in keywords}
        self.assertEqual(categories["jira"], "tool")
        self.assertEqual(categories["communication"], "soft")

    def test_responsibilities_stop_at_requirements(self):
        self.assertEqual(
            self.parsed.responsibilities,
            ["Design Python microservices on AWS", "Collaborate with product teams"],
        )

    def test_metadata_overrides_extracted_title(self):
        parsed = parse_job_description(SAMPLE_JOB, {"title": "Staff Engineer", "company": "Initech"})
        self.assertEqual(parsed.title, "Staff Engineer")
        self.assertEqual(parsed.company, "Initech")

    def test_short_posting(self):
        parsed = parse_job_description(
            "5+ years of experience in Python and AWS required. Bachelor's degree preferred."
        )
        self.assertEqual(parsed.experience_years.min, 5)
        self.assertIsNone(parsed.experience_years.max)
        self.assertIn("python", parsed.required_skills)
        self.assertIn("aws", parsed.required_skills)
        self.assertEqual(parsed.education, "Bachelor's degree")

    def test_empty_posting(self):
        parsed = parse_job_description("")
        self.assertEqual(parsed.title, UNKNOWN_POSITION)
        self.assertEqual(parsed.experience_years, ExperienceYears())
        self.assertEqual(parsed.keywords, [])
        self.assertIsNone(parsed.location)


class ExtractorTests(unittest.TestCase):
    def test_experience_year_families(self):
        self.assertEqual(extract_experience_years("7+ years of experience").min, 7)
        self.assertEqual(extract_experience_years("At least 4 years working with Go").min, 4)
        self.assertEqual(extract_experience_years("Looking for 5 to 3 years in support"), ExperienceYears(min=3, max=5))
        self.assertEqual(extract_experience_years("No requirement"), ExperienceYears())

    def test_title_skips_short_and_email_lines(self):
        self.assertEqual(extract_job_title("Hi\njobs@acme.com\nData Engineer"), "Data Engineer")
        self.assertEqual(extract_job_title("a\nb\nc\nd\ne\nData Engineer"), UNKNOWN_POSITION)

    def test_responsibilities_end_at_first_requirements_header(self):
        text = (
            "Responsibilities:\n"
            "- Build APIs\n"
            "Requirements:\n"
            "- Comfortable with on-call duties\n"
            "- 5 years of Python"
        )
        self.assertEqual(extract_responsibilities(text), ["Build APIs"])

    def test_short_language_names_are_vocabulary_hits(self):
        parsed = parse_job_description("We build REST services in Go and Python.")
        self.assertEqual(parsed.required_skills, ["python", "go", "rest"])

    def test_associate_requirement_without_degree_word(self):
        self.assertEqual(extract_education_requirement("Associate's in Accounting"), "Associate's")
        self.assertEqual(extract_education_requirement("An associate degree is required"), "associate degree")

    def test_experience_years_rejects_inverted_range(self):
        with self.assertRaises(ValidationError):
            ExperienceYears(min=5, max=3)


if __name__ == "__main__":
    unittest.main()
