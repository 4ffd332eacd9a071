"""候选人目录抽象：列出可供检索的档案。"""
from abc import ABC, abstractmethod

from hireai.candidates.schemas import CandidateProfile


class CandidateSource(ABC):
    """候选人目录接口：返回档案列表，顺序即默认展示顺序。"""

    @abstractmethod
    def list_candidates(self, limit: int = 100) -> list[CandidateProfile]:
        """拉取档案，最多返回 limit 条。"""
        ...
