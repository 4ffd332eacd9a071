"""根据配置返回当前使用的候选人目录。"""
from hireai.candidates.sources.base import CandidateSource
from hireai.candidates.sources.sample import SampleCandidateSource
from hireai.core.config import candidate_source_id


def get_candidate_source(source_id: str | None = None) -> CandidateSource:
    """
    返回候选人目录实例。
    source_id 可选：sample（默认）、json。
    不传则从环境变量 HIREAI_CANDIDATE_SOURCE 读取。
    """
    sid = (source_id or candidate_source_id()).strip().lower()
    if sid == "json":
        from hireai.candidates.sources.json_file import JsonFileCandidateSource
        return JsonFileCandidateSource()
    return SampleCandidateSource()
