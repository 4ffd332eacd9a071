"""
依赖项：外部模型句柄按请求构造并注入端点；测试通过 app.dependency_overrides 替换为假客户端。
"""
from hireai.core.llm import LLMClient


def get_llm_client() -> LLMClient:
    return LLMClient()
