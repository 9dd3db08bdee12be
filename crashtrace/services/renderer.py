"""ErrorReport → 트리 형태 텍스트 출력"""

import logging
import sys
from collections.abc import Mapping
from typing import Any, NoReturn

from crashtrace.models.frame import Frame, NativeFrame, UnknownFrame
from crashtrace.models.options import TraceOptions, TreeText, resolve_options
from crashtrace.services.decoder import decode

logger = logging.getLogger(__name__)

# callee 가 없는 프레임 (파싱 에러 등) 표시용
SYNTAX_CALLEE = "SYNTAX"


class BufferSink:
    """출력하지 않고 라인을 모아두는 sink"""

    def __init__(self):
        self.lines: list[str] = []

    def __call__(self, line: str) -> None:
        self.lines.append(line)

    def getvalue(self) -> str:
        return "\n".join(self.lines)


def tree_glyph(index: int, total: int, text: TreeText) -> str:
    # 프레임이 하나뿐이면 첫 글리프가 아니라 마지막 글리프
    if index == 0 and total > 1:
        return text.tree_first
    if index == total - 1:
        return text.tree_last
    return text.tree


def format_header(message: str, options: TraceOptions) -> str:
    styled = options.colors["message"](message)
    if not options.prefix:
        return styled
    prefix = options.colors["prefix"](options.prefix + options.text.prefix_separator)
    return f"{prefix} {styled}"


def format_frame(frame: Frame, glyph: str, options: TraceOptions) -> str:
    colors = options.colors
    head = f" {colors['tree'](glyph)} "

    if isinstance(frame, UnknownFrame):
        return head + colors["function"](frame.raw)

    head += colors["function"](frame.callee or SYNTAX_CALLEE)
    head += colors["separator"](options.text.separator)

    if isinstance(frame, NativeFrame):
        return head + colors["native"]("native")

    location = f"{colors['path'](frame.path)} {colors['line_prefix']('+')}{colors['line'](str(frame.line))}"
    if frame.column is not None:
        location += ":" + colors["column"](str(frame.column))
    return head + location


def render(
    error: Any,
    options: TraceOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str | None:
    """
    에러를 디코딩해서 헤더 + 프레임 트리를 출력

    Args:
        error: decode() 와 동일
        options: TraceOptions 또는 덮어쓸 옵션 dict

    Returns:
        output=False 이면 출력 텍스트, 아니면 None (sink 로 이미 출력됨)
    """
    opts = resolve_options(options, **overrides)

    buffer: BufferSink | None = None
    sink = opts.sink
    if not opts.output:
        buffer = BufferSink()
        sink = buffer

    report = decode(error, opts)

    sink(format_header(report.message, opts))
    frames = report.frames or []
    for index, frame in enumerate(frames):
        sink(format_frame(frame, tree_glyph(index, len(frames), opts.text), opts))

    return buffer.getvalue() if buffer is not None else None


def generate(
    error: Any,
    options: TraceOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """render() 결과를 출력 없이 문자열로 반환"""
    return render(error, options, **{**overrides, "output": False})


def stop(
    error: Any,
    options: TraceOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> NoReturn:
    """에러 출력 후 프로세스 종료 (exit status 1). output 옵션은 무시"""
    render(error, options, **{**overrides, "output": True})
    logger.critical("Terminating process after error report")
    sys.exit(1)
