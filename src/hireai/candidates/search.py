"""
候选人自然语言搜索：模型理解查询意图并对目录档案打相关度分。

- 查询为空：直接返回目录前 limit 条（default）
- 模型返回可解码的数组：过滤掉缺 name / linkedin_profile_url 的条目（nlp）
- 模型输出无法解码：退回关键词包含匹配，固定 70 分（fallback）
- 模型调用失败：返回目录前 limit 条并附错误提示（error_fallback）
"""
from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from hireai.ai.structured import decode_json_array
from hireai.candidates.schemas import CandidateMatch, CandidateProfile, CandidateSearchResponse
from hireai.candidates.sources.base import CandidateSource
from hireai.candidates.sources.registry import get_candidate_source
from hireai.core.errors import ExternalServiceError
from hireai.core.llm import LLMClient
from hireai.core.logging import get_logger
from hireai.core.numbers import clamp_score

logger = get_logger(__name__)

# 一次 prompt 最多带入的档案数（控制上下文长度）
MAX_PROFILES_IN_PROMPT = 30
# 目录全量读取上限
DIRECTORY_LIMIT = 500
FALLBACK_NLP_SCORE = 70
FALLBACK_REASON = "Keyword match (fallback)"
UNAVAILABLE_MESSAGE = "NLP search temporarily unavailable"


def build_search_prompt(query: str, profiles: list[CandidateProfile], limit: int) -> str:
    directory = json.dumps([p.model_dump() for p in profiles[:MAX_PROFILES_IN_PROMPT]], indent=2, ensure_ascii=False)
    return f"""You are an AI-powered recruitment assistant. Analyze the following search query and match it against candidate profiles.

Search Query: "{query}"

Candidate Database (JSON format):
{directory}

Instructions:
1. Understand the intent behind the search query (skills, experience, location, role type, etc.)
2. Score each candidate from 0-100 based on relevance to the query
3. Consider semantic matching, not just keyword matching
4. Look at all aspects: headline, summary, skills, experience, education, location
5. Return ONLY a JSON array of candidate objects with added "nlpScore" field
6. Sort by relevance score (highest first)
7. Include top {limit} most relevant candidates

Response format:
[
  {{
    "linkedin_profile_url": "...",
    "name": "...",
    "headline": "...",
    "location": "...",
    "summary": "...",
    "skills": [...],
    "nlpScore": 85,
    "matchReason": "Strong match for [specific reasons why this candidate matches]"
  }}
]

Important: Return ONLY the JSON array, no additional text or explanation."""


def _to_match(item: Any) -> CandidateMatch | None:
    if not isinstance(item, dict) or not item.get("name") or not item.get("linkedin_profile_url"):
        return None
    data = dict(item)
    if data.get("nlpScore") is not None:
        data["nlpScore"] = clamp_score(data["nlpScore"])
    try:
        return CandidateMatch.model_validate(data)
    except PydanticValidationError:
        return None


def keyword_search(query: str, profiles: list[CandidateProfile], limit: int) -> list[CandidateMatch]:
    """大小写不敏感的子串匹配。"""
    needle = query.lower()
    matches = [
        CandidateMatch(**p.model_dump(), nlpScore=FALLBACK_NLP_SCORE, matchReason=FALLBACK_REASON)
        for p in profiles
        if needle in p.search_text()
    ]
    return matches[:limit]


def _as_matches(profiles: list[CandidateProfile]) -> list[CandidateMatch]:
    return [CandidateMatch(**p.model_dump()) for p in profiles]


async def search_candidates(
    client: LLMClient,
    query: str | None,
    limit: int = 20,
    source: CandidateSource | None = None,
) -> CandidateSearchResponse:
    source = source or get_candidate_source()
    profiles = source.list_candidates(limit=DIRECTORY_LIMIT)
    q = (query or "").strip()

    if not q:
        picked = _as_matches(profiles[:limit])
        return CandidateSearchResponse(candidates=picked, search_type="default", total_results=len(picked))

    try:
        raw = await client.acomplete(build_search_prompt(q, profiles, limit))
    except ExternalServiceError as e:
        logger.warning("NLP search error: %s", e)
        picked = _as_matches(profiles[:limit])
        return CandidateSearchResponse(
            candidates=picked,
            search_type="error_fallback",
            error=UNAVAILABLE_MESSAGE,
            total_results=len(picked),
        )

    try:
        items = decode_json_array(raw)
    except ValueError as e:
        logger.warning("Error parsing NLP search response, using keyword fallback: %s", e)
        picked = keyword_search(q, profiles, limit)
        return CandidateSearchResponse(candidates=picked, search_type="fallback", query=q, total_results=len(picked))

    picked = [m for m in (_to_match(item) for item in items) if m is not None][:limit]
    return CandidateSearchResponse(candidates=picked, search_type="nlp", query=q, total_results=len(picked))
