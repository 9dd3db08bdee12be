from crashtrace.models.frame import FrameType, LocatedFrame, NativeFrame
from crashtrace.services.parsers.base import FrameRule


def _to_int(value: str | None) -> int | None:
    return int(value) if value is not None else None


class LocatedRule(FrameRule):
    """`path`, `line` (+ 선택: `callee`, `column`) 그룹 → LocatedFrame"""

    @property
    def type(self) -> FrameType:
        return FrameType.PATH

    def build(self, groups: dict[str, str | None]) -> LocatedFrame:
        return LocatedFrame(
            callee=groups.get("callee"),
            path=groups["path"],
            line=int(groups["line"]),
            column=_to_int(groups.get("column")),
        )


class NativeRule(FrameRule):
    """`callee` 그룹 → NativeFrame"""

    @property
    def type(self) -> FrameType:
        return FrameType.NATIVE

    def build(self, groups: dict[str, str | None]) -> NativeFrame:
        return NativeFrame(callee=groups["callee"])
