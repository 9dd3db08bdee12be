from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, Field


class FrameType(str, Enum):
    NATIVE = "native"
    PATH = "path"
    UNKNOWN = "unknown"


class NativeFrame(BaseModel):
    """런타임 내부 코드 프레임 (소스 위치 없음)"""

    type: Literal["native"] = "native"
    callee: str

    model_config = {"frozen": True}


class LocatedFrame(BaseModel):
    """소스 위치가 있는 프레임"""

    type: Literal["path"] = "path"
    callee: str | None = None  # `path:line` 형태, 파싱 에러 프레임은 None
    path: str
    line: int
    column: int | None = None

    model_config = {"frozen": True}


class UnknownFrame(BaseModel):
    """어떤 규칙에도 매칭되지 않은 라인"""

    type: Literal["unknown"] = "unknown"
    raw: str  # 원본 라인 그대로

    model_config = {"frozen": True}

    @property
    def callee(self) -> str:
        return self.raw


Frame = Annotated[NativeFrame | LocatedFrame | UnknownFrame, Field(discriminator="type")]


class ErrorReport(BaseModel):
    """디코딩된 에러 (메시지 + 프레임 목록)"""

    message: str = Field(min_length=1)

    # None: 스택 자체가 없음 / []: 스택은 있었지만 전부 필터링됨
    frames: list[Frame] | None = None

    model_config = {"frozen": True}
