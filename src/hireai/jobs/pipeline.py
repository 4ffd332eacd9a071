"""
职位匹配流水线：校验入参 → 并发逐人打分 → 稳定排序定名次 → 均分 → 候选人池洞察。
"""
from __future__ import annotations

import asyncio
from typing import Sequence

from hireai.ai.structured import as_string_list, decode_json_object
from hireai.core.errors import ExternalServiceError, ValidationError
from hireai.core.llm import LLMClient
from hireai.core.logging import get_logger
from hireai.core.numbers import round_half_up
from hireai.ingest.schemas import ProcessingResult
from hireai.jobs.schemas import (
    DEFAULT_JOB_TITLE,
    TOP_CANDIDATES,
    CandidateScore,
    JobMatchResult,
    MatchInsights,
)
from hireai.jobs.scoring import score_candidate

logger = get_logger(__name__)

FALLBACK_ACTIONS = ["Manual review recommended"]


def scorable_candidates(candidates: Sequence[ProcessingResult]) -> list[ProcessingResult]:
    """只有已完成且带解析结果的候选人参与打分。"""
    return [c for c in candidates if c.status == "completed" and c.extracted_data is not None]


def rank_candidates(scores: Sequence[CandidateScore]) -> list[CandidateScore]:
    """按综合分降序，名次为排序后位置（1 起）；同分保持原顺序。"""
    ordered = sorted(scores, key=lambda s: s.score, reverse=True)
    return [s.model_copy(update={"rank": i}) for i, s in enumerate(ordered, 1)]


def build_insights_prompt(leaderboard: Sequence[CandidateScore], job_description: str) -> str:
    summary = "\n".join(
        f"{c.name}: Score {c.score}, Strengths: {', '.join(c.strengths)}, Weaknesses: {', '.join(c.weaknesses)}"
        for c in leaderboard
    )
    return f"""
Based on the job analysis results for {len(leaderboard)} candidates:

JOB DESCRIPTION:
{job_description}

CANDIDATE ANALYSIS SUMMARY:
{summary}

Provide strategic insights in JSON format:

{{
  "bestSkillMatches": [
    "List of 3-5 skills that candidates excel in for this role"
  ],
  "commonGaps": [
    "List of 3-5 skills/areas where most candidates are lacking"
  ],
  "recommendedActions": [
    "List of 3-5 actionable recommendations for hiring/recruiting strategy"
  ]
}}

Focus on actionable insights for improving the candidate pool and hiring strategy.
"""


async def generate_match_insights(
    client: LLMClient,
    leaderboard: Sequence[CandidateScore],
    job_description: str,
) -> MatchInsights:
    """候选人池洞察；失败时返回空列表 + 一条人工复核建议，不影响排行榜。"""
    try:
        raw = await client.acomplete(build_insights_prompt(leaderboard, job_description))
        data = decode_json_object(raw)
    except (ExternalServiceError, ValueError) as e:
        logger.warning("Error generating job match insights: %s", e)
        return MatchInsights(recommended_actions=list(FALLBACK_ACTIONS))
    if not isinstance(data, dict):
        return MatchInsights(recommended_actions=list(FALLBACK_ACTIONS))
    return MatchInsights(
        best_skill_matches=as_string_list(data.get("bestSkillMatches")),
        common_gaps=as_string_list(data.get("commonGaps")),
        recommended_actions=as_string_list(data.get("recommendedActions")),
    )


async def run_job_match_pipeline(
    client: LLMClient,
    candidates: Sequence[ProcessingResult],
    job_description: str | None,
    job_title: str | None = None,
) -> JobMatchResult:
    """
    执行一次职位匹配。职位描述为空或没有可打分的候选人时抛 ValidationError，且不发起任何模型调用。
    逐人打分并发执行（asyncio.gather），单人失败以默认分计入。
    """
    jd = (job_description or "").strip() if isinstance(job_description, str) else ""
    if not jd:
        raise ValidationError("Job description is required")
    pool = scorable_candidates(candidates)
    if not pool:
        raise ValidationError("No candidates provided")

    logger.info("Analyzing %d candidates against job: %s", len(pool), job_title or "Untitled Position")
    scores = await asyncio.gather(
        *[score_candidate(client, c.id, c.extracted_data, jd) for c in pool]
    )
    leaderboard = rank_candidates(scores)
    average = round_half_up(sum(c.score for c in leaderboard) / len(leaderboard))
    insights = await generate_match_insights(client, leaderboard, jd)

    return JobMatchResult(
        job_title=job_title or DEFAULT_JOB_TITLE,
        total_candidates=len(leaderboard),
        average_score=average,
        top_candidates=leaderboard[:TOP_CANDIDATES],
        leaderboard=leaderboard,
        match_insights=insights,
    )
