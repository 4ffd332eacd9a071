# 模型输出的尽力结构化解码

from .structured import as_string_list, decode_json_array, decode_json_object, strip_code_fences

__all__ = ["as_string_list", "decode_json_array", "decode_json_object", "strip_code_fences"]
