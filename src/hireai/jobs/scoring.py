"""
候选人 vs 职位 LLM 打分：输入职位描述 + 完整简历画像，输出 CandidateScore。

单个候选人的调用或解码失败不会抛出：返回各项 50 分、带「无法分析」标记的默认分，
保证整批排行榜照常产出。所有分数在此钳制到 0–100。
"""
from __future__ import annotations

from typing import Any

from hireai.agents.schemas import ParsedResumeData
from hireai.ai.structured import as_string_list, decode_json_object
from hireai.core.errors import ExternalServiceError
from hireai.core.llm import LLMClient
from hireai.core.logging import get_logger
from hireai.core.numbers import clamp_score
from hireai.jobs.schemas import CandidateScore, MatchBreakdown

logger = get_logger(__name__)

FALLBACK_SCORE = 50
FALLBACK_STRENGTHS = ["Unable to analyze"]
FALLBACK_WEAKNESSES = ["Analysis failed"]
FALLBACK_RECOMMENDATION = "Manual review recommended - automated analysis failed"
INCOMPLETE_RECOMMENDATION = "Analysis incomplete"


def format_experience(resume: ParsedResumeData) -> str:
    return "\n".join(
        f"{exp.job_title} at {exp.company} ({exp.start_date} - {exp.end_date}): {exp.description}"
        for exp in resume.experience
    )


def format_education(resume: ParsedResumeData) -> str:
    return "\n".join(
        f"{edu.degree} in {edu.field_of_study} from {edu.institution} ({edu.graduation_date})"
        for edu in resume.education
    )


def build_match_prompt(job_description: str, resume: ParsedResumeData) -> str:
    return f"""
You are an expert recruiter analyzing candidate fit for a job position.

JOB DESCRIPTION:
{job_description}

CANDIDATE PROFILE:
Name: {resume.name}
Email: {resume.email}
Summary: {resume.summary}

Skills: {", ".join(resume.skills)}

Experience:
{format_experience(resume)}

Education:
{format_education(resume)}

ANALYSIS REQUIRED:
Provide a comprehensive analysis in JSON format with the following structure:

{{
  "score": 85,
  "matchBreakdown": {{
    "skillsMatch": 90,
    "experienceMatch": 80,
    "educationMatch": 85,
    "overallFit": 85
  }},
  "strengths": [
    "Strong technical skills matching job requirements",
    "Relevant industry experience",
    "Educational background aligns well"
  ],
  "weaknesses": [
    "Missing experience with specific technology X",
    "Could benefit from more senior-level experience"
  ],
  "recommendation": "Strong candidate - recommended for interview. Has excellent technical foundation and relevant experience, though may need some training in specific areas."
}}

SCORING CRITERIA:
- Overall Score (0-100): Comprehensive fit for the role
- Skills Match (0-100): How well candidate's skills align with job requirements
- Experience Match (0-100): Relevance and depth of work experience
- Education Match (0-100): Educational background relevance
- Overall Fit (0-100): Cultural and role fit assessment

- Strengths: List 3-5 key strengths that make this candidate attractive
- Weaknesses: List 2-4 areas where candidate might be lacking
- Recommendation: Provide hiring recommendation and next steps

Be thorough but concise. Focus on job-relevant factors.
"""


def fallback_score(candidate_id: str, resume: ParsedResumeData) -> CandidateScore:
    return CandidateScore(
        candidate_id=candidate_id,
        name=resume.name,
        email=resume.email,
        score=FALLBACK_SCORE,
        match_breakdown=MatchBreakdown(
            skills_match=FALLBACK_SCORE,
            experience_match=FALLBACK_SCORE,
            education_match=FALLBACK_SCORE,
            overall_fit=FALLBACK_SCORE,
        ),
        strengths=list(FALLBACK_STRENGTHS),
        weaknesses=list(FALLBACK_WEAKNESSES),
        recommendation=FALLBACK_RECOMMENDATION,
    )


def to_candidate_score(analysis: dict[str, Any], candidate_id: str, resume: ParsedResumeData) -> CandidateScore:
    """模型 JSON → CandidateScore：分数钳制，数组兜底，缺建议记 Analysis incomplete。"""
    breakdown = analysis.get("matchBreakdown")
    if not isinstance(breakdown, dict):
        breakdown = {}
    recommendation = analysis.get("recommendation")
    return CandidateScore(
        candidate_id=candidate_id,
        name=resume.name,
        email=resume.email,
        score=clamp_score(analysis.get("score")),
        match_breakdown=MatchBreakdown(
            skills_match=clamp_score(breakdown.get("skillsMatch")),
            experience_match=clamp_score(breakdown.get("experienceMatch")),
            education_match=clamp_score(breakdown.get("educationMatch")),
            overall_fit=clamp_score(breakdown.get("overallFit")),
        ),
        strengths=as_string_list(analysis.get("strengths")),
        weaknesses=as_string_list(analysis.get("weaknesses")),
        recommendation=recommendation if isinstance(recommendation, str) and recommendation else INCOMPLETE_RECOMMENDATION,
    )


async def score_candidate(
    client: LLMClient,
    candidate_id: str,
    resume: ParsedResumeData,
    job_description: str,
) -> CandidateScore:
    """对单个候选人打分；任何失败都返回默认分，不抛异常。"""
    try:
        raw = await client.acomplete(build_match_prompt(job_description, resume))
        analysis = decode_json_object(raw)
    except (ExternalServiceError, ValueError) as e:
        logger.warning("Error analyzing candidate %s: %s", resume.name or candidate_id, e)
        return fallback_score(candidate_id, resume)
    if not isinstance(analysis, dict):
        logger.warning("Analysis for candidate %s is not a JSON object", resume.name or candidate_id)
        return fallback_score(candidate_id, resume)
    return to_candidate_score(analysis, candidate_id, resume)
