"""
候选人池批量分析：先算确定性统计（计数、占比、Top-K、资历分桶），
再用一次模型调用补充市场洞察。洞察调用失败不影响统计结果。
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from hireai.agents.schemas import ParsedResumeData
from hireai.ai.structured import as_string_list, decode_json_object
from hireai.analysis.schemas import (
    SALARY_UNAVAILABLE,
    SALARY_UNDETERMINED,
    BatchAnalysisResult,
    CompanyCount,
    EducationAnalysis,
    ExperienceAnalysis,
    MarketInsights,
    PoolSummary,
    SkillCount,
    SkillsAnalysis,
    TitleCount,
    UniversityCount,
)
from hireai.core.errors import ExternalServiceError, ValidationError
from hireai.core.llm import LLMClient
from hireai.core.logging import get_logger
from hireai.core.numbers import round_half_up

logger = get_logger(__name__)

TOP_SKILLS = 10
TOP_OTHERS = 5

# 资历分桶阈值：按经历条数，固定不可配
ENTRY_MAX_POSITIONS = 2
MID_MAX_POSITIONS = 4


def seniority_bucket(experience_count: int) -> str:
    if experience_count <= ENTRY_MAX_POSITIONS:
        return "Entry"
    if experience_count <= MID_MAX_POSITIONS:
        return "Mid"
    return "Senior"


def count_values(values: Iterable[str]) -> Counter:
    """按首次出现顺序计数，跳过空白值。"""
    counts: Counter = Counter()
    for value in values:
        if value and value.strip():
            counts[value] += 1
    return counts


def top_counts(counts: Counter, limit: int) -> list[tuple[str, int]]:
    """按次数降序取前 limit 个；次数相同保持首次出现顺序（sorted 稳定）。"""
    return sorted(counts.items(), key=lambda kv: kv[1], reverse=True)[:limit]


@dataclass
class PoolInsights:
    """模型给出的定性洞察；失败时保持默认值。"""
    recommended_salary_range: str = SALARY_UNAVAILABLE
    competitive_skills: list[str] = field(default_factory=list)
    improvement_areas: list[str] = field(default_factory=list)
    emerging_skills: list[str] = field(default_factory=list)
    skill_gaps: list[str] = field(default_factory=list)


@dataclass
class PoolStatistics:
    """确定性统计部分，不依赖任何外部调用。"""
    summary: PoolSummary
    skills: list[SkillCount]
    experience: ExperienceAnalysis
    education: EducationAnalysis


def compute_pool_statistics(resumes: Sequence[ParsedResumeData]) -> PoolStatistics:
    total = len(resumes)
    if total == 0:
        raise ValidationError("No resume data provided")

    skill_counts = count_values(skill for r in resumes for skill in r.skills)
    company_counts = count_values(exp.company for r in resumes for exp in r.experience)
    title_counts = count_values(exp.job_title for r in resumes for exp in r.experience)
    university_counts = count_values(edu.institution for r in resumes for edu in r.education)
    degree_counts = count_values(edu.degree for r in resumes for edu in r.education)
    field_counts = count_values(edu.field_of_study for r in resumes for edu in r.education)

    seniority = {"Entry": 0, "Mid": 0, "Senior": 0}
    for r in resumes:
        seniority[seniority_bucket(len(r.experience))] += 1

    total_skills = sum(len(r.skills) for r in resumes)
    total_positions = sum(len(r.experience) for r in resumes)

    summary = PoolSummary(
        total_candidates=total,
        average_skills_per_candidate=round_half_up(total_skills / total),
        average_experience_years=round_half_up(total_positions / total),
        unique_companies=len(company_counts),
        unique_skills=len(skill_counts),
    )
    skills = [
        SkillCount(skill=skill, count=count, percentage=round_half_up(count / total * 100))
        for skill, count in top_counts(skill_counts, TOP_SKILLS)
    ]
    experience = ExperienceAnalysis(
        seniority_distribution=seniority,
        top_companies=[CompanyCount(company=c, count=n) for c, n in top_counts(company_counts, TOP_OTHERS)],
        common_job_titles=[TitleCount(title=t, count=n) for t, n in top_counts(title_counts, TOP_OTHERS)],
    )
    education = EducationAnalysis(
        top_universities=[
            UniversityCount(university=u, count=n) for u, n in top_counts(university_counts, TOP_OTHERS)
        ],
        degree_distribution=dict(degree_counts),
        field_distribution=dict(field_counts),
    )
    return PoolStatistics(summary=summary, skills=skills, experience=experience, education=education)


def build_insights_prompt(stats: PoolStatistics) -> str:
    skills_list = ", ".join(s.skill for s in stats.skills)
    companies_list = ", ".join(c.company for c in stats.experience.top_companies)
    seniority = stats.experience.seniority_distribution
    return f"""
Based on this candidate pool analysis:
- {stats.summary.total_candidates} candidates analyzed
- Top skills: {skills_list}
- Companies represented: {companies_list}
- Seniority: {seniority["Entry"]} entry, {seniority["Mid"]} mid, {seniority["Senior"]} senior level

Provide market insights in JSON format:
{{
  "recommendedSalaryRange": "Brief salary range estimate for this talent pool",
  "competitiveSkills": ["List of 3-5 most valuable/competitive skills from this pool"],
  "improvementAreas": ["List of 3-5 skill gaps or areas where candidates could improve"],
  "emergingSkills": ["List of 3-5 emerging/trending skills found in this pool"],
  "skillGaps": ["List of 3-5 important skills missing from most candidates"]
}}

Focus on actionable insights for recruiting and talent development.
"""


async def generate_pool_insights(client: LLMClient, stats: PoolStatistics) -> PoolInsights:
    """模型调用或解码失败时返回默认 PoolInsights（空列表 + Analysis unavailable）。"""
    try:
        raw = await client.acomplete(build_insights_prompt(stats))
        data = decode_json_object(raw)
    except (ExternalServiceError, ValueError) as e:
        logger.warning("Error generating AI insights: %s", e)
        return PoolInsights()
    if not isinstance(data, dict):
        logger.warning("AI insights response is not a JSON object")
        return PoolInsights()
    salary = data.get("recommendedSalaryRange")
    return PoolInsights(
        recommended_salary_range=salary if isinstance(salary, str) and salary else SALARY_UNDETERMINED,
        competitive_skills=as_string_list(data.get("competitiveSkills")),
        improvement_areas=as_string_list(data.get("improvementAreas")),
        emerging_skills=as_string_list(data.get("emergingSkills")),
        skill_gaps=as_string_list(data.get("skillGaps")),
    )


async def analyze_batch(client: LLMClient, resumes: Sequence[ParsedResumeData]) -> BatchAnalysisResult:
    """批量分析入口：空列表抛 ValidationError，其余情况总能返回完整结果。"""
    stats = compute_pool_statistics(resumes)
    logger.info("Analyzing batch of %d resumes", stats.summary.total_candidates)
    insights = await generate_pool_insights(client, stats)
    return BatchAnalysisResult(
        summary=stats.summary,
        skills_analysis=SkillsAnalysis(
            top_skills=stats.skills,
            emerging_skills=insights.emerging_skills,
            skill_gaps=insights.skill_gaps,
        ),
        experience_analysis=stats.experience,
        education_analysis=stats.education,
        market_insights=MarketInsights(
            recommended_salary_range=insights.recommended_salary_range,
            competitive_skills=insights.competitive_skills,
            improvement_areas=insights.improvement_areas,
        ),
    )
