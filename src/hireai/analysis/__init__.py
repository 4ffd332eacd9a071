# 候选人池批量分析：Top 技能/公司/院校、资历分布 + 模型市场洞察

from .schemas import BatchAnalysisRequest, BatchAnalysisResponse, BatchAnalysisResult
from .batch import analyze_batch, compute_pool_statistics, seniority_bucket

__all__ = [
    "BatchAnalysisRequest",
    "BatchAnalysisResponse",
    "BatchAnalysisResult",
    "analyze_batch",
    "compute_pool_statistics",
    "seniority_bucket",
]
