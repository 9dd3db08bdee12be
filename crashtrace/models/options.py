import re
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, Field, field_validator

from crashtrace.core.styles import COLOR_ROLES, DEFAULT_COLORS, StyleFn
from crashtrace.services.parsers import DEFAULT_RULES
from crashtrace.services.parsers.base import FrameRule

Sink = Callable[[str], object]


def _print_sink(line: str) -> None:
    # 호출 시점의 sys.stdout 사용
    print(line)


class TreeText(BaseModel):
    """트리 출력에 쓰이는 고정 텍스트"""

    prefix_separator: str = ":"
    tree: str = "├"
    tree_first: str = "├"
    tree_last: str = "└"
    separator: str = " @ "

    model_config = {"frozen": True, "extra": "forbid"}


class TraceOptions(BaseModel):
    """decode / render 옵션 (불변). 일부만 바꿀 때는 merge() 사용"""

    # 출력
    sink: Sink = _print_sink
    prefix: str | None = "ERROR"
    colors: Mapping[str, StyleFn] = Field(default=DEFAULT_COLORS, validate_default=True)
    text: TreeText = TreeText()
    output: bool = True

    # 디코딩
    rules: tuple[FrameRule, ...] = DEFAULT_RULES
    ignore_paths: tuple[re.Pattern[str], ...] = (re.compile(r"^internal/modules/cjs"),)
    filter_unknown: bool = True
    support_alternate_format: bool = True

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("ignore_paths", mode="before")
    @classmethod
    def _compile_ignore_paths(cls, value: Any) -> Any:
        if isinstance(value, (str, re.Pattern)):
            value = [value]
        return tuple(re.compile(p) for p in value)

    @field_validator("colors")
    @classmethod
    def _check_color_roles(cls, value: Mapping[str, StyleFn]) -> Mapping[str, StyleFn]:
        missing = [role for role in COLOR_ROLES if role not in value]
        if missing:
            raise ValueError(f"Missing color roles: {', '.join(missing)}")
        # 읽기 전용 사본 (기본 테이블 공유 방지)
        return MappingProxyType(dict(value))

    def merge(self, overrides: Mapping[str, Any] | None = None, **kwargs: Any) -> "TraceOptions":
        """
        일부 옵션만 덮어쓴 새 TraceOptions 반환

        colors / text 는 키 단위로 병합, 나머지 필드는 통째로 교체.

        Raises:
            ValueError: 알 수 없는 옵션 키
        """
        updates = {**(overrides or {}), **kwargs}
        unknown = set(updates) - set(type(self).model_fields)
        if unknown:
            raise ValueError(f"Unknown trace options: {', '.join(sorted(unknown))}")

        if "colors" in updates:
            updates["colors"] = {**self.colors, **updates["colors"]}
        if "text" in updates:
            text = updates["text"]
            if isinstance(text, TreeText):
                text = text.model_dump(exclude_unset=True)
            updates["text"] = TreeText.model_validate({**self.text.model_dump(), **text})

        # model_copy 는 검증을 건너뛰므로 다시 검증
        return type(self).model_validate({**dict(self), **updates})


DEFAULT_OPTIONS = TraceOptions()


def resolve_options(
    options: TraceOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> TraceOptions:
    """옵션 인자 정규화: None → DEFAULT_OPTIONS, dict → 기본값 위에 병합"""
    if options is None:
        base, extra = DEFAULT_OPTIONS, {}
    elif isinstance(options, TraceOptions):
        base, extra = options, {}
    else:
        base, extra = DEFAULT_OPTIONS, dict(options)

    if not extra and not overrides:
        return base
    return base.merge(extra, **overrides)
