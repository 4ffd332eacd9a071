"""
候选人目录：提供可检索的档案列表。
- sample：内置几条示例档案，无需外部数据，用于最小闭环与测试。
- json：读取 HIREAI_CANDIDATES_FILE 指向的档案快照。
"""
from .base import CandidateSource
from .sample import SampleCandidateSource
from .registry import get_candidate_source

__all__ = ["CandidateSource", "SampleCandidateSource", "get_candidate_source"]
