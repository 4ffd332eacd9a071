"""
错误分类：单元级错误（单个文件 / 单个候选人）在批次内隔离上报，
只有结构性非法请求才让整个请求失败。
"""


class HireAIError(Exception):
    """所有业务错误的基类。"""


class ValidationError(HireAIError):
    """文件类型/大小不合法或缺少必填字段，用户可自行修正，对外返回 400。"""


class ExtractionError(HireAIError):
    """文本提取（本地库或 OCR）失败，按文件上报，不中断批次。"""


class ParseError(HireAIError):
    """模型输出无法解析为结构化数据，按文件上报，不中断批次。"""


class ExternalServiceError(HireAIError):
    """外部模型调用失败（网络、鉴权、超时等），由调用方转为降级结果。"""
