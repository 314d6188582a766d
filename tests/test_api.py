import os
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

os.environ.setdefault("RATE_LIMIT_ENABLED", "0")
os.environ.setdefault("AI_ENABLED", "0")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from resume_ats.ai import AICompletionError  # noqa: E402
from resume_ats.main import app  # noqa: E402
from resume_ats.parsing import parse_document  # noqa: E402

RESUME_TEXT = """Jane Doe
jane.doe@example.com | (555) 123-4567

Experience
Backend Engineer
Acme Corp
Jan 2019 - Present
- Built Python services on AWS handling 2M requests per day

Skills
Python, Docker, AWS, PostgreSQL, Linux
"""

JOB_TEXT = (
    "Backend Engineer\n"
    "We need 3+ years of experience with Python, Docker and Kubernetes. "
    "Strong communication is a must."
)


class ApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "healthy")
        self.assertIn("ai_enabled", response.json())

    def test_parse_resume(self):
        response = self.client.post("/v1/resumes/parse", json={"text": RESUME_TEXT})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["content"]["contact_info"]["full_name"], "Jane Doe")
        self.assertEqual(body["content"]["experience"][0]["title"], "Backend Engineer")
        self.assertGreater(body["confidence"], 0)

    def test_parse_resume_rejects_empty_text(self):
        response = self.client.post("/v1/resumes/parse", json={"text": ""})
        self.assertEqual(response.status_code, 422)

    def test_parse_job(self):
        response = self.client.post("/v1/jobs/parse", json={"text": JOB_TEXT, "company": "Acme"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["title"], "Backend Engineer")
        self.assertEqual(body["company"], "Acme")
        self.assertEqual(body["experience_years"]["min"], 3)
        self.assertIn("kubernetes", body["required_skills"])

    def test_parse_job_rejects_short_text(self):
        response = self.client.post("/v1/jobs/parse", json={"text": "Too short"})
        self.assertEqual(response.status_code, 422)

    def test_score_structured_input(self):
        payload = {
            "resume": {"skills": ["Python", "k8s"]},
            "job": {"title": "Engineer", "required_skills": ["python", "kubernetes"]},
        }
        response = self.client.post("/v1/ats/score", json=payload)
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["matched_keywords"], ["python"])
        self.assertEqual(body["breakdown"]["keyword_score"]["score"], 85)
        self.assertIn(body["classification"], {"excellent", "good", "fair", "poor", "critical"})

    def test_analyze_round_trip(self):
        response = self.client.post(
            "/v1/ats/analyze",
            json={"resume_text": RESUME_TEXT, "job_description": JOB_TEXT},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["resume"]["content"]["contact_info"]["email"], "jane.doe@example.com")
        self.assertIn("kubernetes", body["score"]["missing_keywords"])
        self.assertIn("python", body["score"]["matched_keywords"])
        self.assertGreaterEqual(body["score"]["overall_score"], 0)
        self.assertLessEqual(body["score"]["overall_score"], 100)

    def test_extract_txt_upload(self):
        response = self.client.post(
            "/v1/resumes/extract",
            files={"file": ("resume.txt", RESUME_TEXT.encode("utf-8"), "text/plain")},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["document"]["source_type"], "txt")
        self.assertEqual(body["parsed"]["content"]["contact_info"]["full_name"], "Jane Doe")

    def test_extract_parses_document_off_the_event_loop(self):
        offloaded = []

        async def fake_run_in_threadpool(func, *args, **kwargs):
            offloaded.append(func)
            return func(*args, **kwargs)

        with patch("resume_ats.api.v1.ats.run_in_threadpool", new=fake_run_in_threadpool):
            response = self.client.post(
                "/v1/resumes/extract",
                files={"file": ("resume.txt", RESUME_TEXT.encode("utf-8"), "text/plain")},
            )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(offloaded, [parse_document])

    def test_extract_rejects_unknown_extension(self):
        response = self.client.post(
            "/v1/resumes/extract",
            files={"file": ("resume.exe", b"MZ", "application/octet-stream")},
        )
        self.assertEqual(response.status_code, 400)

    def test_enhance_without_missing_keywords_skips_ai(self):
        payload = {"resume": {"skills": ["Python"]}, "job": {"required_skills": ["python"]}}
        with patch("resume_ats.api.v1.ats.get_completion_client") as factory:
            response = self.client.post("/v1/ats/enhance", json=payload)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["suggestions"], [])
        factory.assert_not_called()

    def test_enhance_reports_disabled_ai(self):
        payload = {"resume": {"skills": ["Python"]}, "job": {"required_skills": ["rust"]}}
        error = AICompletionError("AI enhancement is disabled.", code="ai_disabled")
        with patch("resume_ats.api.v1.ats.get_completion_client", side_effect=error):
            response = self.client.post("/v1/ats/enhance", json=payload)
        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()["detail"]["code"], "ai_disabled")

    def test_enhance_returns_suggestions(self):
        class StubClient:
            def complete(self, system_prompt, user_prompt):
                return (
                    '{"suggestions": [{"keyword": "rust", "context": "Rewrote a parser in Rust",'
                    ' "priority": "medium", "whereToAdd": "experience"}]}'
                )

        payload = {"resume": {"skills": ["Python"]}, "job": {"required_skills": ["rust"]}}
        with patch("resume_ats.api.v1.ats.get_completion_client", return_value=StubClient()):
            response = self.client.post("/v1/ats/enhance", json=payload)
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["missing_keywords"], ["rust"])
        self.assertEqual(body["suggestions"][0]["priority"], "medium")


if __name__ == "__main__":
    unittest.main()
