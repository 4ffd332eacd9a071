"""示例候选人目录：内置几条档案，无需外部数据库，用于演示与测试。"""
from hireai.candidates.schemas import CandidateProfile
from .base import CandidateSource


class SampleCandidateSource(CandidateSource):
    """内置 5 条示例档案，便于端到端跑通搜索。"""

    def list_candidates(self, limit: int = 100) -> list[CandidateProfile]:
        candidates = [
            CandidateProfile(
                linkedin_profile_url="https://www.linkedin.com/in/example-priya-sharma",
                name="Priya Sharma",
                headline="Senior Backend Engineer | Python, FastAPI, PostgreSQL",
                location="Bangalore, India",
                summary="Backend engineer with 7 years building APIs and data pipelines; led migration to async services.",
                age=31,
                field_category="Software Engineering",
                work_experience=[{"title": "Senior Backend Engineer", "company": "Flipkart", "duration": "2020 - Present"}],
                education_experience=[{"school": "IIT Delhi", "degree": "B.Tech", "field": "Computer Science"}],
                skills=["Python", "FastAPI", "PostgreSQL", "Kafka", "Docker"],
                languages=["English", "Hindi"],
                connections_count="500+",
            ),
            CandidateProfile(
                linkedin_profile_url="https://www.linkedin.com/in/example-marcus-lee",
                name="Marcus Lee",
                headline="Frontend Developer | React, TypeScript",
                location="Remote",
                summary="Frontend developer focused on accessible design systems and performance.",
                age=27,
                field_category="Software Engineering",
                work_experience=[{"title": "Frontend Developer", "company": "Shopify", "duration": "2021 - Present"}],
                education_experience=[{"school": "University of Toronto", "degree": "BSc", "field": "Computer Science"}],
                skills=["React", "TypeScript", "Next.js", "CSS", "Jest"],
                languages=["English"],
                connections_count="320",
            ),
            CandidateProfile(
                linkedin_profile_url="https://www.linkedin.com/in/example-sofia-garcia",
                name="Sofia Garcia",
                headline="Machine Learning Engineer | NLP, PyTorch",
                location="Madrid, Spain",
                summary="ML engineer shipping NLP models to production; experience with resume parsing and ranking.",
                age=29,
                field_category="Data Science",
                work_experience=[{"title": "ML Engineer", "company": "Cabify", "duration": "2019 - Present"}],
                education_experience=[{"school": "Universidad Politécnica de Madrid", "degree": "MSc", "field": "Artificial Intelligence"}],
                skills=["Python", "PyTorch", "NLP", "Transformers", "MLOps"],
                languages=["Spanish", "English"],
                connections_count="500+",
            ),
            CandidateProfile(
                linkedin_profile_url="https://www.linkedin.com/in/example-david-okafor",
                name="David Okafor",
                headline="Data Engineer | Spark, Airflow, AWS",
                location="Lagos, Nigeria",
                summary="Data engineer building batch and streaming pipelines on AWS.",
                age=33,
                field_category="Data Engineering",
                work_experience=[{"title": "Data Engineer", "company": "Paystack", "duration": "2018 - Present"}],
                education_experience=[{"school": "University of Lagos", "degree": "BSc", "field": "Computer Engineering"}],
                skills=["Spark", "Airflow", "AWS", "SQL", "Python"],
                languages=["English"],
                connections_count="410",
            ),
            CandidateProfile(
                linkedin_profile_url="https://www.linkedin.com/in/example-emma-novak",
                name="Emma Novak",
                headline="Technical Recruiter | Engineering Hiring",
                location="Berlin, Germany",
                summary="Recruiter partnering with engineering teams on full-cycle hiring across Europe.",
                age=35,
                field_category="Human Resources",
                work_experience=[{"title": "Technical Recruiter", "company": "Zalando", "duration": "2017 - Present"}],
                education_experience=[{"school": "Humboldt University", "degree": "BA", "field": "Psychology"}],
                skills=["Sourcing", "Interviewing", "ATS", "Employer Branding"],
                languages=["German", "English"],
                connections_count="500+",
            ),
        ]
        return candidates[: min(limit, len(candidates))]
