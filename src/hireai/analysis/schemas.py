"""
候选人池批量分析的数据模型（对外 camelCase）。
"""
from pydantic import Field

from hireai.agents.schemas import ParsedResumeData
from hireai.core.models import CamelModel

SALARY_UNAVAILABLE = "Analysis unavailable"
SALARY_UNDETERMINED = "Unable to determine"


class PoolSummary(CamelModel):
    total_candidates: int
    average_skills_per_candidate: int
    average_experience_years: int = Field(..., description="按经历条数估算的平均值")
    unique_companies: int
    unique_skills: int


class SkillCount(CamelModel):
    skill: str
    count: int
    percentage: int


class CompanyCount(CamelModel):
    company: str
    count: int


class TitleCount(CamelModel):
    title: str
    count: int


class UniversityCount(CamelModel):
    university: str
    count: int


class SkillsAnalysis(CamelModel):
    top_skills: list[SkillCount] = Field(default_factory=list)
    emerging_skills: list[str] = Field(default_factory=list)
    skill_gaps: list[str] = Field(default_factory=list)


class ExperienceAnalysis(CamelModel):
    seniority_distribution: dict[str, int] = Field(default_factory=dict, description="Entry / Mid / Senior 人数")
    top_companies: list[CompanyCount] = Field(default_factory=list)
    common_job_titles: list[TitleCount] = Field(default_factory=list)


class EducationAnalysis(CamelModel):
    top_universities: list[UniversityCount] = Field(default_factory=list)
    degree_distribution: dict[str, int] = Field(default_factory=dict)
    field_distribution: dict[str, int] = Field(default_factory=dict)


class MarketInsights(CamelModel):
    recommended_salary_range: str = SALARY_UNAVAILABLE
    competitive_skills: list[str] = Field(default_factory=list)
    improvement_areas: list[str] = Field(default_factory=list)


class BatchAnalysisResult(CamelModel):
    summary: PoolSummary
    skills_analysis: SkillsAnalysis
    experience_analysis: ExperienceAnalysis
    education_analysis: EducationAnalysis
    market_insights: MarketInsights


class BatchAnalysisRequest(CamelModel):
    """POST /v1/resumes/batch-analysis 请求。"""
    resumes_data: list[ParsedResumeData] = Field(default_factory=list, description="已解析的简历列表")


class BatchAnalysisResponse(CamelModel):
    success: bool = True
    analysis: BatchAnalysisResult
