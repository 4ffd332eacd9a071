"""对外 JSON 统一 camelCase，Python 侧仍用 snake_case 字段名；入参两种写法都接受。"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
