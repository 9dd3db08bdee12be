"""에러 객체 → ErrorReport 디코더"""

import logging
from collections.abc import Mapping
from typing import Any

from crashtrace.models.frame import ErrorReport, Frame, NativeFrame, UnknownFrame
from crashtrace.models.options import TraceOptions, resolve_options
from crashtrace.services.parsers import classify
from crashtrace.services.parsers.syntax import decode_parse_error, is_parse_error

logger = logging.getLogger(__name__)

UNKNOWN_MESSAGE = "Unknown error"


def _field(error: Any, name: str) -> Any:
    """error.<name> 또는 error[name] (dict payload)"""
    if isinstance(error, Mapping):
        return error.get(name)
    return getattr(error, name, None)


def resolve_message(error: Any) -> str:
    """message 필드 → str(error) → repr(error) → "Unknown error" 순으로 결정"""
    if not error:
        return UNKNOWN_MESSAGE

    message = _field(error, "message")
    text = str(message) if message is not None else ""
    if text:
        return text

    text = str(error)
    if text:
        return text

    # truthy 인데 문자열 변환이 비어 있는 경우 (Exception() 등)
    return repr(error) or UNKNOWN_MESSAGE


def keep_frame(frame: Frame, options: TraceOptions) -> bool:
    if isinstance(frame, NativeFrame):
        return True
    if isinstance(frame, UnknownFrame):
        return not options.filter_unknown

    # 모든 ignore 패턴에 매칭될 때만 제외 (하나만 매칭되면 유지)
    return not all(pattern.search(frame.path) for pattern in options.ignore_paths)


def decode(
    error: Any,
    options: TraceOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> ErrorReport:
    """
    에러 객체의 스택 문자열을 프레임 목록으로 디코딩

    Args:
        error: message/stack/code 를 가진 객체 또는 dict, 문자열, 기타 값
        options: TraceOptions 또는 덮어쓸 옵션 dict

    Returns:
        ErrorReport: 스택이 없으면 frames=None

    Raises:
        MalformedParseError: 파싱 에러 코드인데 메시지 형식이 다를 때
    """
    opts = resolve_options(options, **overrides)

    if opts.support_alternate_format and is_parse_error(_field(error, "code")):
        logger.debug("Decoding structured parse error")
        return decode_parse_error(resolve_message(error))

    message = resolve_message(error)
    stack = _field(error, "stack")
    if not stack:
        return ErrorReport(message=message)

    classified = [classify(line, opts.rules) for line in str(stack).splitlines()]
    frames = [frame for frame in classified if keep_frame(frame, opts)]
    logger.debug("Decoded %d stack lines, kept %d frames", len(classified), len(frames))

    return ErrorReport(message=message, frames=frames)
