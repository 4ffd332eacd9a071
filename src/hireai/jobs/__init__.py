"""
职位匹配流水线：候选人简历 vs 职位描述 LLM 并发打分 → 排行榜 + 候选人池洞察。
"""
from .schemas import (
    CandidateScore,
    JobMatchRequest,
    JobMatchResponse,
    JobMatchResult,
    MatchBreakdown,
    MatchInsights,
)
from .pipeline import rank_candidates, run_job_match_pipeline
from .scoring import score_candidate

__all__ = [
    "CandidateScore",
    "JobMatchRequest",
    "JobMatchResponse",
    "JobMatchResult",
    "MatchBreakdown",
    "MatchInsights",
    "rank_candidates",
    "run_job_match_pipeline",
    "score_candidate",
]
