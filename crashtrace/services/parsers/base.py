import re
from abc import ABC, abstractmethod

from crashtrace.models.frame import Frame, FrameType


class FrameRule(ABC):
    """스택 라인 분류 규칙 추상 클래스 (패턴 + 프레임 빌더)"""

    def __init__(self, pattern: str | re.Pattern[str]):
        self.pattern = re.compile(pattern)

    @property
    @abstractmethod
    def type(self) -> FrameType:
        """규칙이 만드는 프레임 타입"""
        pass

    @abstractmethod
    def build(self, groups: dict[str, str | None]) -> Frame:
        """
        캡처 그룹 → Frame 변환

        Args:
            groups: 패턴의 named group (매칭 안 된 그룹은 None)

        Returns:
            Frame: 규칙 타입에 맞는 프레임
        """
        pass

    def match(self, line: str) -> Frame | None:
        """라인 전체가 패턴에 매칭되면 Frame, 아니면 None"""
        extracted = self.pattern.fullmatch(line)
        if not extracted:
            return None
        return self.build(extracted.groupdict())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.pattern.pattern!r})"
