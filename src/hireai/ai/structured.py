"""
从模型自由文本中尽力解码结构化 JSON。

模型常把 JSON 包在 ```json 代码块里，或前后带「好的，这是结果」之类的说明。
清洗流程（与线上模型输出兼容，顺序不可改）：
1. 去掉 ```json / ``` 标记（连同紧随的换行）并 strip；
2. 取第一个 `{` 到最后一个 `}` 的子串（两者都存在且 `}` 在后）；否则整串交给 json.loads。

已知歧义：若模型在 JSON 之外又输出了不相关的花括号，截取会越界导致解析失败或取错，这里保持原样不做猜测。
"""
from __future__ import annotations

import json
import re
from typing import Any

_FENCE_JSON = re.compile(r"```json\n?")
_FENCE = re.compile(r"```\n?")


def strip_code_fences(text: str) -> str:
    cleaned = _FENCE_JSON.sub("", text or "")
    return _FENCE.sub("", cleaned).strip()


def _outer_span(text: str, open_ch: str, close_ch: str) -> str:
    start = text.find(open_ch)
    end = text.rfind(close_ch)
    if start != -1 and end != -1 and end > start:
        return text[start : end + 1]
    return text


def decode_json_object(text: str) -> Any:
    """
    清洗后按 `{...}` 外层截取并解析。
    失败抛 ValueError（json.JSONDecodeError 是其子类）；返回值未必是 dict，由调用方校验。
    """
    return json.loads(_outer_span(strip_code_fences(text), "{", "}"))


def decode_json_array(text: str) -> list[Any]:
    """按 `[...]` 外层截取并解析为列表；找不到数组或结果不是列表时抛 ValueError。"""
    cleaned = strip_code_fences(text)
    start = cleaned.find("[")
    end = cleaned.rfind("]")
    if start == -1 or end <= start:
        raise ValueError("No valid JSON array found in response")
    data = json.loads(cleaned[start : end + 1])
    if not isinstance(data, list):
        raise ValueError("Response is not an array")
    return data


def as_string_list(value: Any) -> list[str]:
    """模型字段应为字符串数组：不是 list 时返回 []，元素只保留字符串。"""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]
