"""
Pydantic Evals 回归测试数据集：简历解析与职位匹配。

通过预设 Case 验证模型表现，改提示词或换模型后跑一遍即可发现退化。
"""
from __future__ import annotations

from pydantic_evals import Case, Dataset


def resume_parse_dataset() -> Dataset:
    """简历解析回归用例：输入简历正文，期望提取出姓名。"""
    return Dataset(
        name="resume_parse",
        cases=[
            Case(
                inputs=(
                    "Jane Doe\njane.doe@example.com | +1 555 0100\n"
                    "Senior Software Engineer with 6 years of Python and FastAPI experience.\n"
                    "Experience: Acme Corp, Backend Engineer, 2019 - Present\n"
                    "Education: BSc Computer Science, MIT, 2017"
                ),
                expected_output="Jane Doe",
                name="resume_name_en",
            ),
            Case(
                inputs="张三，本科北京大学计算机系，擅长 Python 与数据分析，有 3 年互联网产品经验。邮箱 zhangsan@example.com",
                expected_output="张三",
                name="resume_name_zh",
            ),
        ],
    )


def job_match_dataset() -> Dataset:
    """职位匹配回归用例：明显匹配的候选人综合分应不低于 60，明显不匹配的应低于 60。"""
    return Dataset(
        name="job_match",
        cases=[
            Case(
                inputs={
                    "job_description": "Backend engineer, 5+ years Python, FastAPI, PostgreSQL.",
                    "resume": {
                        "name": "Jane Doe",
                        "skills": ["Python", "FastAPI", "PostgreSQL"],
                        "experience": [{"job_title": "Backend Engineer", "company": "Acme", "start_date": "2017", "end_date": "Present"}],
                    },
                },
                expected_output=True,
                name="strong_fit",
            ),
            Case(
                inputs={
                    "job_description": "Backend engineer, 5+ years Python, FastAPI, PostgreSQL.",
                    "resume": {
                        "name": "John Roe",
                        "skills": ["Watercolor", "Calligraphy"],
                        "experience": [{"job_title": "Illustrator", "company": "Studio", "start_date": "2021", "end_date": "Present"}],
                    },
                },
                expected_output=False,
                name="weak_fit",
            ),
        ],
    )
