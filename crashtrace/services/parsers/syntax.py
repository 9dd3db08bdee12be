"""구조화된 파싱 에러 (`<path>: <message> (<line>:<column>)`) 디코더"""

import re

from crashtrace.models.frame import ErrorReport, LocatedFrame

PARSE_ERROR_CODE = "BABEL_PARSE_ERROR"

PARSE_ERROR_PATTERN = re.compile(
    r"(?P<path>.+?): (?P<message>.+) \((?P<line>[0-9]+):(?P<column>[0-9]+)\)"
)


class MalformedParseError(ValueError):
    """파싱 에러 코드가 붙었는데 메시지 형식이 맞지 않음"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Malformed parse error message: {message!r}")


def is_parse_error(code: object) -> bool:
    return code == PARSE_ERROR_CODE


def decode_parse_error(message: str) -> ErrorReport:
    """
    파싱 에러 메시지 → 단일 프레임 ErrorReport

    코드 프레임이 뒤에 붙는 경우가 있어서 첫 줄만 매칭한다.

    Raises:
        MalformedParseError: 첫 줄이 패턴과 맞지 않을 때
    """
    first_line = message.splitlines()[0] if message else ""
    extracted = PARSE_ERROR_PATTERN.fullmatch(first_line)
    if not extracted:
        raise MalformedParseError(message)

    return ErrorReport(
        message=extracted["message"],
        frames=[
            LocatedFrame(
                path=extracted["path"],
                line=int(extracted["line"]),
                column=int(extracted["column"]),
            )
        ],
    )
