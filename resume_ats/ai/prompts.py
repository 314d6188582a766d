"""Versioned prompt templates for the optional AI enhancement layer."""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, Mapping, Sequence

_PLACEHOLDER_RE = re.compile(r"\{\{(\w+)\}\}")


@dataclass(frozen=True)
class PromptTemplate:
    name: str
    version: Literal["v1", "v2"]
    system: str
    user: str
    response_format: Literal["json", "text"] = "json"

    @property
    def variables(self) -> tuple[str, ...]:
        return tuple(dict.fromkeys(_PLACEHOLDER_RE.findall(self.user)))


@dataclass(frozen=True)
class RenderedPrompt:
    system: str
    user: str


RESUME_REWRITE_PROMPT = PromptTemplate(
    name="resume_rewrite",
    version="v1",
    system="""You are an expert ATS resume optimizer. Your task is to rewrite resume bullet points to be more impactful and ATS-friendly.

CRITICAL RULES:
1. NEVER fabricate information - only enhance what the user provided
2. Preserve all factual claims - do not add fake metrics or achievements
3. Use strong action verbs at the start of each bullet
4. Quantify achievements ONLY if the original contains numbers
5. Integrate relevant keywords naturally
6. Keep bullets concise (under 100 characters preferred)

OUTPUT FORMAT (JSON):
{
  "bullets": [
    {
      "original": "string",
      "rewritten": "string",
      "improvements": ["string"]
    }
  ]
}""",
    user="""Rewrite the following resume bullets for a {{targetRole}} position.

TARGET KEYWORDS: {{keywords}}

ORIGINAL BULLETS:
{{bullets}}

Return only valid JSON matching the specified format.""",
)

KEYWORD_INTEGRATION_PROMPT = PromptTemplate(
    name="keyword_integration",
    version="v1",
    system="""You are an ATS keyword optimization specialist. Your task is to suggest how to naturally integrate missing keywords into a resume.

CRITICAL RULES:
1. Only suggest keywords the candidate might realistically have
2. Suggest specific locations in the resume for each keyword
3. Provide natural-sounding context phrases
4. Do NOT suggest fabricating experience

OUTPUT FORMAT (JSON):
{
  "suggestions": [
    {
      "keyword": "string",
      "context": "string",
      "priority": "high|medium|low",
      "whereToAdd": "string"
    }
  ]
}""",
    user="""Suggest how to integrate these missing keywords into the resume:

MISSING KEYWORDS: {{missingKeywords}}

CURRENT RESUME SKILLS: {{currentSkills}}

RESUME EXPERIENCE SUMMARY: {{experienceSummary}}

Return only valid JSON matching the specified format.""",
)

SUMMARY_ENHANCEMENT_PROMPT = PromptTemplate(
    name="summary_enhancement",
    version="v1",
    system="""You are a professional resume writer specializing in executive summaries. Create compelling professional summaries that are ATS-optimized.

CRITICAL RULES:
1. Keep summary to 2-3 sentences maximum
2. Lead with years of experience and primary expertise
3. Include 3-5 relevant keywords naturally
4. End with unique value proposition
5. Do NOT include personal pronouns (I, my, etc.)

OUTPUT FORMAT (JSON):
{
  "enhanced": "string",
  "keywordsIntegrated": ["string"]
}""",
    user="""Create an enhanced professional summary for a {{targetRole}} position.

CURRENT SUMMARY: {{currentSummary}}

YEARS OF EXPERIENCE: {{yearsExperience}}

TOP SKILLS: {{topSkills}}

TARGET KEYWORDS: {{targetKeywords}}

Return only valid JSON matching the specified format.""",
)

SEMANTIC_MATCHING_PROMPT = PromptTemplate(
    name="semantic_matching",
    version="v1",
    system="""You are an expert at matching resume content to job requirements. Analyze semantic similarity between resume sections and job requirements.

OUTPUT FORMAT (JSON):
{
  "matches": [
    {
      "resumeSection": "string",
      "jobRequirement": "string",
      "similarity": 0-100,
      "explanation": "string"
    }
  ],
  "overallSemanticScore": 0-100
}""",
    user="""Analyze the semantic match between this resume and job description.

RESUME CONTENT:
{{resumeContent}}

JOB REQUIREMENTS:
{{jobRequirements}}

Return only valid JSON matching the specified format.""",
)

PROMPT_REGISTRY: Mapping[str, PromptTemplate] = MappingProxyType(
    {
        template.name: template
        for template in (
            RESUME_REWRITE_PROMPT,
            KEYWORD_INTEGRATION_PROMPT,
            SUMMARY_ENHANCEMENT_PROMPT,
            SEMANTIC_MATCHING_PROMPT,
        )
    }
)


def render_prompt(template: PromptTemplate, variables: Mapping[str, str | Sequence[str]]) -> RenderedPrompt:
    """Substitute ``{{name}}`` placeholders; list values are joined with ", ".

    Placeholders without a supplied value are left in place.
    """

    def _replace(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in variables:
            return match.group(0)
        value = variables[key]
        return value if isinstance(value, str) else ", ".join(str(item) for item in value)

    return RenderedPrompt(system=template.system, user=_PLACEHOLDER_RE.sub(_replace, template.user))


def get_prompt(name: str) -> PromptTemplate | None:
    return PROMPT_REGISTRY.get(name)


def list_prompts() -> list[str]:
    return list(PROMPT_REGISTRY)
