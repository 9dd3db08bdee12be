"""역할별 텍스트 스타일 (ANSI) 함수 테이블"""

from collections.abc import Callable

from rich.style import Style

StyleFn = Callable[[str], str]

COLOR_ROLES = (
    "message",
    "prefix",
    "tree",
    "function",
    "separator",
    "native",
    "path",
    "line_prefix",
    "line",
    "column",
)


def style(definition: str) -> StyleFn:
    """rich 스타일 정의 ("bold on red" 등) → ANSI 문자열 변환 함수"""
    parsed = Style.parse(definition)

    def apply(text: str) -> str:
        return parsed.render(text)

    return apply


def plain(text: str) -> str:
    return text


DEFAULT_COLORS: dict[str, StyleFn] = {
    "message": plain,
    "prefix": style("bold on red"),
    "tree": style("red"),
    "function": style("bright_yellow"),
    "separator": style("grey50"),
    "native": style("grey50"),
    "path": style("cyan"),
    "line_prefix": style("grey50"),
    "line": style("cyan"),
    "column": style("cyan"),
}

PLAIN_COLORS: dict[str, StyleFn] = {role: plain for role in COLOR_ROLES}
