from collections.abc import Sequence

from crashtrace.models.frame import Frame, UnknownFrame
from crashtrace.services.parsers.base import FrameRule
from crashtrace.services.parsers.rules import LocatedRule, NativeRule

# 라인 분류 규칙 (순서 = 우선순위, 먼저 매칭된 규칙이 이김)
DEFAULT_RULES: tuple[FrameRule, ...] = (
    # /a/b.js:42 (에러 발생 위치 헤더)
    LocatedRule(r"^(?P<path>.+?):(?P<line>[0-9]+)$"),
    LocatedRule(r"^\s+at (?P<callee>.+?) \((?P<path>.+?):(?P<line>[0-9]+):(?P<column>[0-9]+)\)$"),
    NativeRule(r"^\s*at (?P<callee>.+?) \(<anonymous>\)$"),
    # 앞 공백이 없는 형태까지 허용
    LocatedRule(r"^\s*at (?P<callee>.+?) \((?P<path>.+?):(?P<line>[0-9]+):(?P<column>[0-9]+)\)$"),
)


def classify(line: str, rules: Sequence[FrameRule] = DEFAULT_RULES) -> Frame:
    """스택 라인 한 줄 → Frame (매칭 실패 시 UnknownFrame)"""
    for rule in rules:
        frame = rule.match(line)
        if frame is not None:
            return frame
    return UnknownFrame(raw=line)
