import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.schemas import JobKeyword, JobRequirements, ResumeContent  # noqa: E402
from resume_ats.scoring import match_keywords  # noqa: E402
from resume_ats.scoring.keyword_matcher import build_resume_text, collect_job_keywords  # noqa: E402


class KeywordMatcherTests(unittest.TestCase):
    def test_job_without_keywords_scores_full(self):
        result = match_keywords(ResumeContent(), JobRequirements())
        self.assertEqual(result.score, 100)
        self.assertEqual(result.matched, [])
        self.assertEqual(result.missing, [])
        self.assertEqual(result.partial, [])

    def test_abbreviation_counts_as_partial(self):
        resume = ResumeContent(skills=["k8s"])
        job = JobRequirements(required_skills=["kubernetes"])
        result = match_keywords(resume, job)
        self.assertEqual(result.matched, [])
        self.assertEqual(result.missing, [])
        (partial,) = result.partial
        self.assertEqual(partial.keyword, "kubernetes")
        self.assertEqual(partial.found, "k8s")
        self.assertAlmostEqual(partial.similarity, 0.7)
        self.assertEqual(result.score, 70)

    def test_full_form_matches_abbreviated_keyword(self):
        resume = ResumeContent(skills=["Kubernetes"])
        job = JobRequirements(required_skills=["k8s"])
        (partial,) = match_keywords(resume, job).partial
        self.assertEqual(partial.found, "kubernetes")

    def test_multi_word_keyword_partial(self):
        resume = ResumeContent(summary="Built machine vision tools")
        job = JobRequirements(required_skills=["machine learning"])
        result = match_keywords(resume, job)
        (partial,) = result.partial
        self.assertEqual(partial.found, "machine")
        self.assertAlmostEqual(partial.similarity, 0.5)
        self.assertEqual(result.score, 50)

    def test_mixed_result_score(self):
        resume = ResumeContent(skills=["Python", "k8s"])
        job = JobRequirements(required_skills=["python", "java", "kubernetes"])
        result = match_keywords(resume, job)
        self.assertEqual(result.matched, ["python"])
        self.assertEqual(result.missing, ["java"])
        self.assertEqual([item.keyword for item in result.partial], ["kubernetes"])
        self.assertEqual(result.score, 57)

    def test_every_keyword_lands_in_exactly_one_bucket(self):
        resume = ResumeContent(skills=["Python", "k8s"], summary="Led agile teams")
        job = JobRequirements(
            required_skills=["python", "rust", "kubernetes"],
            tools=["jira", "python"],
            soft_skills=["leadership"],
        )
        result = match_keywords(resume, job)
        buckets = result.matched + result.missing + [item.keyword for item in result.partial]
        self.assertEqual(sorted(buckets), sorted(collect_job_keywords(job)))

    def test_keywords_are_deduplicated_across_sources(self):
        job = JobRequirements(
            required_skills=["python"],
            tools=["python"],
            keywords=[JobKeyword(term="python", frequency=2, category="technical")],
        )
        self.assertEqual(collect_job_keywords(job), ["python"])

    def test_resume_text_is_lowercased(self):
        text = build_resume_text(ResumeContent(skills=["PostgreSQL"], raw_text="Extra CONTEXT"))
        self.assertIn("postgresql", text)
        self.assertIn("extra context", text)


if __name__ == "__main__":
    unittest.main()
