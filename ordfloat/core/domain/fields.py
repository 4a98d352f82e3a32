"""
Pydantic-поля для обёрток с фиксированным форматом.

OrderedFloat и NotNan сами по себе являются валидными типами полей
(binary64). Для binary32 формат задаётся аннотацией WithFormat.

Examples:
    >>> class Sample(BaseModel):
    ...     score: NotNan32
    ...     model_config = {"frozen": True}
"""

from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from ordfloat.core.domain.not_nan import NotNan
from ordfloat.core.domain.ordered_float import OrderedFloat
from ordfloat.core.math.canonical import FLOAT32, FLOAT64, FloatFormat


@dataclass(frozen=True)
class WithFormat:
    """Аннотация, привязывающая поле-обёртку к формату IEEE-754."""

    fmt: FloatFormat

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return source_type.pydantic_core_schema(self.fmt)


OrderedFloat32 = Annotated[OrderedFloat, WithFormat(FLOAT32)]
OrderedFloat64 = Annotated[OrderedFloat, WithFormat(FLOAT64)]
NotNan32 = Annotated[NotNan, WithFormat(FLOAT32)]
NotNan64 = Annotated[NotNan, WithFormat(FLOAT64)]
