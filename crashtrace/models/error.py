import re

from pydantic import BaseModel

# "TypeError: ..." 의 에러 이름 부분
_ERROR_NAME = re.compile(r"^\w*(?:Error|Exception):\s*")


class TraceInput(BaseModel):
    """텍스트로 받은 에러 (message/stack/code 를 가진 error-like 객체)"""

    message: str | None = None
    stack: str | None = None
    code: str | None = None

    @classmethod
    def from_text(cls, text: str, message: str | None = None, code: str | None = None) -> "TraceInput":
        """
        스택 텍스트 → TraceInput

        message 가 없으면 첫 줄에서 에러 이름을 뗀 값을 사용.
        이름만 있는 헤더 ("Error: ") 는 첫 줄 그대로.
        """
        lines = text.strip("\n").splitlines()
        if message is None and lines:
            header = lines[0].strip()
            message = _ERROR_NAME.sub("", header, count=1) or header or None
        return cls(message=message, stack="\n".join(lines), code=code)

    def __str__(self) -> str:
        # 메시지가 없으면 스택의 첫 번째 비어 있지 않은 줄
        if self.message:
            return self.message
        stack_lines = [line.strip() for line in (self.stack or "").splitlines()]
        return next((line for line in stack_lines if line), "")
