"""
候选人目录与自然语言搜索的数据模型。
目录条目沿用外部数据的 snake_case 字段；搜索附加的 nlpScore / matchReason 与响应外层为 camelCase。
"""
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from hireai.core.models import CamelModel

SearchType = Literal["default", "nlp", "fallback", "error_fallback"]


class CandidateProfile(BaseModel):
    """候选人目录中的一条档案（LinkedIn 风格）。"""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    linkedin_profile_url: str = ""
    name: str = ""
    headline: str = ""
    location: str = ""
    summary: str = ""
    age: Optional[int] = None
    profile_image_url: str = ""
    field_category: str = ""
    work_experience: list[dict[str, Any]] = Field(default_factory=list)
    education_experience: list[dict[str, Any]] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    languages: list[Any] = Field(default_factory=list)
    certifications: list[Any] = Field(default_factory=list)
    connections_count: str = ""

    def search_text(self) -> str:
        """关键词回退检索用的拼接文本（小写）。"""
        return f"{self.name} {self.headline} {self.summary} {' '.join(self.skills)} {self.location}".lower()


class CandidateMatch(CandidateProfile):
    nlp_score: Optional[int] = Field(None, alias="nlpScore", description="与查询的相关度 0–100")
    match_reason: Optional[str] = Field(None, alias="matchReason", description="匹配理由")


class CandidateSearchRequest(CamelModel):
    """POST /v1/candidates/search 请求。"""
    query: str = Field("", description="自然语言查询，如「会 React 的远程前端」")
    limit: int = Field(20, ge=1, le=100, description="返回条数上限")


class CandidateSearchResponse(CamelModel):
    candidates: list[CandidateMatch] = Field(default_factory=list)
    search_type: SearchType = "default"
    query: Optional[str] = None
    total_results: int = 0
    error: Optional[str] = None
