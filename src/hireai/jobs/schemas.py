"""
职位匹配的数据模型（对外 camelCase）。
打分维度：综合分 + 技能 / 经历 / 教育 / 整体契合四项子分，均为 0–100。
"""
from pydantic import Field
from typing import Optional

from hireai.core.models import CamelModel
from hireai.ingest.schemas import ProcessingResult

DEFAULT_JOB_TITLE = "Position Analysis"
TOP_CANDIDATES = 5


class MatchBreakdown(CamelModel):
    """四项子分，均已钳制到 0–100。"""
    skills_match: int = Field(0, ge=0, le=100, description="技能匹配")
    experience_match: int = Field(0, ge=0, le=100, description="经历相关性")
    education_match: int = Field(0, ge=0, le=100, description="教育背景")
    overall_fit: int = Field(0, ge=0, le=100, description="整体契合")


class CandidateScore(CamelModel):
    """单个候选人对职位的打分；rank 在排序后写入（1 起）。"""
    candidate_id: str = Field(..., description="候选人（ProcessingResult）ID")
    name: str = Field("", description="姓名（冗余）")
    email: str = Field("", description="邮箱（冗余）")
    score: int = Field(..., ge=0, le=100, description="综合分 0–100")
    rank: int = Field(0, ge=0, description="排名，1 起；0 表示尚未排序")
    match_breakdown: MatchBreakdown = Field(default_factory=MatchBreakdown)
    strengths: list[str] = Field(default_factory=list, description="3–5 条优势")
    weaknesses: list[str] = Field(default_factory=list, description="2–4 条不足")
    recommendation: str = Field("", description="录用建议与下一步")


class MatchInsights(CamelModel):
    """候选人池层面的定性洞察。"""
    best_skill_matches: list[str] = Field(default_factory=list)
    common_gaps: list[str] = Field(default_factory=list)
    recommended_actions: list[str] = Field(default_factory=list)


class JobMatchResult(CamelModel):
    job_title: str = Field(DEFAULT_JOB_TITLE, description="职位名称")
    total_candidates: int = Field(0, description="参与打分的候选人数")
    average_score: int = Field(0, description="综合分均值（四舍五入）")
    top_candidates: list[CandidateScore] = Field(default_factory=list, description="排行榜前 5")
    leaderboard: list[CandidateScore] = Field(default_factory=list, description="按综合分降序的完整排行榜")
    match_insights: MatchInsights = Field(default_factory=MatchInsights)


class JobMatchRequest(CamelModel):
    """POST /v1/resumes/job-match 请求。"""
    candidates: list[ProcessingResult] = Field(default_factory=list, description="上传流水线返回的处理结果")
    job_description: Optional[str] = Field(None, description="职位描述全文，必填")
    job_title: Optional[str] = Field(None, description="职位名称，可选")


class JobMatchResponse(CamelModel):
    success: bool = True
    result: JobMatchResult
