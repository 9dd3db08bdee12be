import pytest

from crashtrace.core.styles import DEFAULT_COLORS
from crashtrace.models.options import TreeText
from crashtrace.services.renderer import BufferSink, generate, render, stop, tree_glyph


class TestTreeGlyph:
    """프레임 위치별 트리 글리프"""

    def test_single_frame_uses_last_glyph(self):
        assert tree_glyph(0, 1, TreeText()) == "└"

    def test_positions(self):
        text = TreeText(tree="│", tree_first="┌", tree_last="└")

        assert [tree_glyph(i, 3, text) for i in range(3)] == ["┌", "│", "└"]


class TestRender:
    """render() 출력 테스트"""

    def test_render_writes_to_sink(self, node_error, plain_options, lines):
        result = render(node_error, plain_options, sink=lines.append)

        assert result is None
        assert lines == [
            "ERROR: Cannot read properties of undefined (reading 'id')",
            " ├ getUser @ /app/src/users.js +12:19",
            " ├ Array.map @ native",
            " └ listUsers @ /app/src/users.js +30:15",
        ]

    def test_single_frame(self, make_error, plain_options, lines):
        """프레임 하나면 종료 글리프"""
        error = make_error(message="boom", stack="Error: boom\n    at f (/x.js:1:2)")

        render(error, plain_options, sink=lines.append)

        assert lines == ["ERROR: boom", " └ f @ /x.js +1:2"]

    def test_middle_glyph(self, make_error, plain_options, lines):
        stack = "    at a (/a.js:1:1)\n    at b (/b.js:2:2)\n    at c (/c.js:3:3)"

        render(make_error(message="x", stack=stack), plain_options, sink=lines.append, text={"tree": "│"})

        assert [line[:3] for line in lines[1:]] == [" ├ ", " │ ", " └ "]

    def test_no_stack_prints_header_only(self, plain_options, lines):
        render("This is a string error", plain_options, sink=lines.append)

        assert lines == ["ERROR: This is a string error"]

    @pytest.mark.parametrize("prefix", [None, ""])
    def test_without_prefix(self, plain_options, lines, prefix):
        render("boom", plain_options, sink=lines.append, prefix=prefix)

        assert lines == ["boom"]

    def test_custom_prefix_separator(self, plain_options, lines):
        render("boom", plain_options, sink=lines.append, prefix="FATAL", text={"prefix_separator": " !"})

        assert lines == ["FATAL ! boom"]

    def test_bare_location_without_column(self, make_error, plain_options, lines):
        """callee 가 없는 프레임은 SYNTAX 로 표시, column 없으면 생략"""
        render(make_error(message="x", stack="/app/main.js:42"), plain_options, sink=lines.append)

        assert lines[1] == " └ SYNTAX @ /app/main.js +42"

    def test_parse_error(self, parse_error, plain_options, lines):
        render(parse_error, plain_options, sink=lines.append)

        assert lines == ["ERROR: Unexpected token", " └ SYNTAX @ /app/src/index.js +3:7"]

    def test_unknown_frames(self, make_error, plain_options, lines):
        """filter_unknown=False 면 원본 라인을 그대로 표시"""
        error = make_error(message="boom", stack="Error: boom\n    at f (/x.js:1:2)")

        render(error, plain_options, sink=lines.append, filter_unknown=False)

        assert lines == ["ERROR: boom", " ├ Error: boom", " └ f @ /x.js +1:2"]

    def test_custom_color_keeps_other_roles(self, make_error, plain_options, lines):
        error = make_error(message="boom", stack="    at f (/x.js:1:2)")

        render(error, plain_options, sink=lines.append, colors={"path": lambda text: f"<{text}>"})

        assert lines[1] == " └ f @ </x.js> +1:2"

    def test_default_colors_emit_ansi(self, node_error, lines):
        render(node_error, sink=lines.append)

        assert "\x1b[" in lines[0]
        assert "ERROR:" in lines[0]
        assert lines[1].startswith(" ")

    def test_default_sink_prints(self, capsys, plain_options):
        render("boom", plain_options)

        assert capsys.readouterr().out == "ERROR: boom\n"

    def test_output_false_returns_text(self, node_error, plain_options, lines):
        text = render(node_error, plain_options, sink=lines.append, output=False)

        assert lines == []
        assert text.splitlines()[0] == "ERROR: Cannot read properties of undefined (reading 'id')"
        assert not text.endswith("\n")


class TestGenerate:
    """generate() 테스트"""

    def test_generate_matches_render(self, node_error, plain_options, lines):
        render(node_error, plain_options, sink=lines.append)

        assert generate(node_error, plain_options) == "\n".join(lines)

    def test_generate_never_writes(self, node_error, plain_options, lines, capsys):
        generate(node_error, plain_options, sink=lines.append, output=True)

        assert lines == []
        assert capsys.readouterr().out == ""

    def test_generate_with_dict_options(self, make_error):
        error = make_error(message="boom", stack="    at f (<anonymous>)")

        text = generate(error, {"prefix": None, "colors": {"tree": str, "function": str, "separator": str, "native": str}})

        assert text == "boom\n └ f @ native"

    def test_default_colors_match_role_table(self, make_error):
        error = make_error(message="boom", stack="    at f (<anonymous>)")

        text = generate(error)

        assert DEFAULT_COLORS["native"]("native") in text


class TestBufferSink:
    def test_collects_lines(self):
        sink = BufferSink()
        sink("a")
        sink("b")

        assert sink.lines == ["a", "b"]
        assert sink.getvalue() == "a\nb"

    def test_empty(self):
        assert BufferSink().getvalue() == ""


class TestStop:
    """stop() 테스트"""

    def test_stop_prints_then_exits(self, node_error, plain_options, lines):
        with pytest.raises(SystemExit) as exc_info:
            stop(node_error, plain_options, sink=lines.append)

        assert exc_info.value.code == 1
        assert lines[0].startswith("ERROR:")

    def test_stop_ignores_output_option(self, plain_options, lines):
        with pytest.raises(SystemExit):
            stop("boom", plain_options, sink=lines.append, output=False)

        assert lines == ["ERROR: boom"]
