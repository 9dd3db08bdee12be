import pytest

from crashtrace.core.styles import PLAIN_COLORS
from crashtrace.models.options import TraceOptions


class FakeError:
    """Node.js Error 와 같은 형태 (message / stack / code)"""

    def __init__(self, message: str | None = None, stack: str | None = None, code: str | None = None):
        self.message = message
        self.stack = stack
        self.code = code


@pytest.fixture
def node_stack() -> str:
    """Node.js 스택트레이스 (헤더 + native + 내부 모듈 프레임 포함)"""
    return "\n".join([
        "TypeError: Cannot read properties of undefined (reading 'id')",
        "    at getUser (/app/src/users.js:12:19)",
        "    at Array.map (<anonymous>)",
        "    at listUsers (/app/src/users.js:30:15)",
        "    at Module._compile (internal/modules/cjs/loader.js:1085:14)",
    ])


@pytest.fixture
def node_error(node_stack) -> FakeError:
    return FakeError(
        message="Cannot read properties of undefined (reading 'id')",
        stack=node_stack,
    )


@pytest.fixture
def parse_error() -> dict:
    """Babel 파싱 에러 payload (메시지 뒤에 코드 프레임이 붙음)"""
    return {
        "code": "BABEL_PARSE_ERROR",
        "message": "/app/src/index.js: Unexpected token (3:7)\n\n  1 | import x from 'y';\n> 3 | const = 1;",
    }


@pytest.fixture
def plain_options() -> TraceOptions:
    """ANSI 스타일 없는 옵션 (출력 비교용)"""
    return TraceOptions(colors=PLAIN_COLORS)


@pytest.fixture
def lines() -> list[str]:
    """sink 로 넘길 출력 수집용 리스트"""
    return []


@pytest.fixture
def make_error():
    """FakeError 생성 팩토리"""
    return FakeError
