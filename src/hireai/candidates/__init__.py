# 候选人目录 + 自然语言搜索（模型打分，关键词回退）

from .schemas import CandidateMatch, CandidateProfile, CandidateSearchRequest, CandidateSearchResponse
from .search import keyword_search, search_candidates

__all__ = [
    "CandidateMatch",
    "CandidateProfile",
    "CandidateSearchRequest",
    "CandidateSearchResponse",
    "keyword_search",
    "search_candidates",
]
