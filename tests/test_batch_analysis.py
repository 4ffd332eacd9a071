"""
候选人池批量分析：确定性统计 + 市场洞察降级。
"""
import asyncio
import json

import pytest

from conftest import FakeLLMClient
from hireai.agents import ParsedResumeData
from hireai.analysis import analyze_batch, compute_pool_statistics, seniority_bucket
from hireai.analysis.schemas import SALARY_UNAVAILABLE, SALARY_UNDETERMINED
from hireai.core.errors import ExternalServiceError, ValidationError


def _resume(name, skills, companies=(), education=()):
    return ParsedResumeData.model_validate({
        "name": name,
        "skills": list(skills),
        "experience": [{"company": c, "job_title": "Engineer"} for c in companies],
        "education": [
            {"institution": inst, "degree": deg, "field_of_study": fld} for inst, deg, fld in education
        ],
    })


@pytest.fixture
def pool():
    return [
        _resume("A", ["Python", "SQL"], ["Acme"], [("MIT", "BSc", "CS")]),
        _resume("B", ["Python", "Go"], ["Acme", "Globex", "Initech"], [("MIT", "MSc", "CS")]),
        _resume("C", ["Python"], ["Globex", "Acme", "Initech", "Hooli", "Umbrella"], [("Stanford", "BSc", "Math")]),
        _resume("D", ["Java"], [], []),
    ]


@pytest.mark.parametrize("count,bucket", [(0, "Entry"), (2, "Entry"), (3, "Mid"), (4, "Mid"), (5, "Senior")])
def test_seniority_bucket(count, bucket):
    assert seniority_bucket(count) == bucket


def test_python_in_three_of_four(pool):
    stats = compute_pool_statistics(pool)
    top = stats.skills[0]
    assert (top.skill, top.count, top.percentage) == ("Python", 3, 75)


def test_summary_and_distributions(pool):
    stats = compute_pool_statistics(pool)
    s = stats.summary
    assert s.total_candidates == 4
    assert s.average_skills_per_candidate == 2  # 6 / 4 = 1.5 → 2
    assert s.average_experience_years == 2  # 9 / 4 = 2.25 → 2
    assert s.unique_companies == 5
    assert s.unique_skills == 4
    assert stats.experience.seniority_distribution == {"Entry": 2, "Mid": 1, "Senior": 1}
    assert stats.experience.top_companies[0].company == "Acme"
    assert stats.experience.top_companies[0].count == 3
    assert stats.education.top_universities[0].university == "MIT"
    assert stats.education.degree_distribution == {"BSc": 2, "MSc": 1}
    assert stats.education.field_distribution == {"CS": 2, "Math": 1}


def test_ties_keep_first_seen_order():
    stats = compute_pool_statistics([_resume("A", ["Rust", "Go", "C"])])
    assert [s.skill for s in stats.skills] == ["Rust", "Go", "C"]


def test_top_limits():
    skills = [f"skill-{i}" for i in range(15)]
    companies = [f"co-{i}" for i in range(8)]
    stats = compute_pool_statistics([_resume("A", skills, companies)])
    assert len(stats.skills) == 10
    assert len(stats.experience.top_companies) == 5


def test_blank_values_not_counted():
    stats = compute_pool_statistics([_resume("A", ["", "  ", "Go"], ["", "Acme"])])
    assert [s.skill for s in stats.skills] == ["Go"]
    assert stats.summary.unique_companies == 1


def test_empty_pool_rejected():
    with pytest.raises(ValidationError, match="No resume data provided"):
        compute_pool_statistics([])


def test_analyze_batch_with_insights(pool):
    fake = FakeLLMClient([json.dumps({
        "recommendedSalaryRange": "$120k - $160k",
        "competitiveSkills": ["Python"],
        "improvementAreas": ["Cloud"],
        "emergingSkills": ["Go"],
        "skillGaps": ["Kubernetes", 42],
    })])
    result = asyncio.run(analyze_batch(fake, pool))
    assert result.market_insights.recommended_salary_range == "$120k - $160k"
    assert result.market_insights.competitive_skills == ["Python"]
    assert result.skills_analysis.emerging_skills == ["Go"]
    assert result.skills_analysis.skill_gaps == ["Kubernetes"]
    assert "4 candidates analyzed" in fake.calls[0]["prompt"]


def test_analyze_batch_insights_failure_keeps_statistics(pool):
    fake = FakeLLMClient([ExternalServiceError("rate limited")])
    result = asyncio.run(analyze_batch(fake, pool))
    assert result.summary.total_candidates == 4
    assert result.skills_analysis.top_skills[0].percentage == 75
    assert result.market_insights.recommended_salary_range == SALARY_UNAVAILABLE
    assert result.market_insights.competitive_skills == []
    assert result.skills_analysis.emerging_skills == []
    assert result.skills_analysis.skill_gaps == []


def test_analyze_batch_missing_salary(pool):
    fake = FakeLLMClient(['{"competitiveSkills": ["SQL"]}'])
    result = asyncio.run(analyze_batch(fake, pool))
    assert result.market_insights.recommended_salary_range == SALARY_UNDETERMINED
    assert result.market_insights.competitive_skills == ["SQL"]


def test_camel_case_output(pool):
    fake = FakeLLMClient(["not json"])
    dumped = asyncio.run(analyze_batch(fake, pool)).model_dump(by_alias=True)
    assert "skillsAnalysis" in dumped
    assert dumped["summary"]["averageSkillsPerCandidate"] == 2
    assert dumped["experienceAnalysis"]["seniorityDistribution"]["Entry"] == 2
