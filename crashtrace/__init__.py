"""Stack trace decoder and tree renderer"""

from crashtrace.core.styles import DEFAULT_COLORS, PLAIN_COLORS, style
from crashtrace.models.frame import ErrorReport, FrameType, LocatedFrame, NativeFrame, UnknownFrame
from crashtrace.models.options import DEFAULT_OPTIONS, TraceOptions, TreeText
from crashtrace.services.decoder import decode
from crashtrace.services.parsers import DEFAULT_RULES, classify
from crashtrace.services.parsers.base import FrameRule
from crashtrace.services.parsers.rules import LocatedRule, NativeRule
from crashtrace.services.parsers.syntax import MalformedParseError
from crashtrace.services.renderer import BufferSink, generate, render, stop

__all__ = [
    "BufferSink",
    "DEFAULT_COLORS",
    "DEFAULT_OPTIONS",
    "DEFAULT_RULES",
    "ErrorReport",
    "FrameRule",
    "FrameType",
    "LocatedFrame",
    "LocatedRule",
    "MalformedParseError",
    "NativeFrame",
    "NativeRule",
    "PLAIN_COLORS",
    "TraceOptions",
    "TreeText",
    "UnknownFrame",
    "classify",
    "decode",
    "generate",
    "render",
    "stop",
    "style",
]
