"""
Tests for JavaScript minification.

Tests:
- Whitespace and comment removal
- Literals (strings, templates, regexes) survive verbatim
- Token separation (a + +b, typeof x, 1 .toString())
- Newlines kept where automatic semicolon insertion needs them
- Broken scripts raise ScriptError with a line number
"""

from __future__ import annotations

import pytest

from canvascomponents.components.script import minify_js
from canvascomponents.errors import ComponentError, ScriptError


class TestMinifyBasics:
    """Whitespace and comments"""

    def test_statements(self):
        assert minify_js("var a = 1;\nvar b = a + 2;\n") == "var a=1;var b=a+2;"

    def test_comments_removed(self):
        source = "// head\nfunction f(x) { /* body */ return x; }"
        assert minify_js(source) == "function f(x){return x;}"

    def test_empty_script(self):
        assert minify_js("") == ""
        assert minify_js("  \n\t ") == ""

    def test_only_comments(self):
        assert minify_js("// nothing here\n/* or here */") == ""


class TestLiterals:
    """String, template and regex literals are copied as written"""

    def test_string_contents_untouched(self):
        assert minify_js('const s = "a  //  b";') == 'const s="a  //  b";'

    def test_single_quotes_and_escapes(self):
        assert minify_js("x = 'it\\'s  here';") == "x='it\\'s  here';"

    def test_template_with_nested_template(self):
        source = "const t = `x ${ a + `y` } z`;"
        assert minify_js(source) == "const t=`x ${ a + `y` } z`;"

    def test_multiline_template(self):
        source = "const t = `line one\n   line two`;\nrun(t);"
        assert minify_js(source) == "const t=`line one\n   line two`;run(t);"

    def test_regex_literal(self):
        source = "var r = /ab+c\\/d/gi.test(s);"
        assert minify_js(source) == "var r=/ab+c\\/d/gi.test(s);"

    def test_regex_with_slash_in_class(self):
        assert minify_js("s.split( /[/]/ );") == "s.split(/[/]/);"

    def test_division_is_not_a_regex(self):
        assert minify_js("var x = a / b / c;") == "var x=a/b/c;"

    def test_regex_after_return(self):
        assert minify_js("return /x/.test(y);") == "return/x/.test(y);"

    def test_regex_after_if_header(self):
        source = "if (x) /[ ']/.test(s) && go();"
        assert minify_js(source) == "if(x)/[ ']/.test(s)&&go();"

    def test_division_after_call_parens(self):
        assert minify_js("var r = f(a) / g(b) / 2;") == "var r=f(a)/g(b)/2;"

    def test_line_separators_inside_strings(self):
        source = 'var s = "a\u2028b\u2029c";'
        assert minify_js(source) == 'var s="a\u2028b\u2029c";'


class TestTokenSeparation:
    """Whitespace that separates tokens is kept"""

    def test_unary_plus_after_binary_plus(self):
        assert minify_js("a + +b") == "a+ +b"

    def test_unary_minus_after_binary_minus(self):
        assert minify_js("a - -b") == "a- -b"

    def test_keywords(self):
        assert minify_js("typeof x === 'string'") == "typeof x==='string'"

    def test_number_member_access(self):
        assert minify_js("1 .toString()") == "1 .toString()"

    def test_arrow_function(self):
        assert minify_js("list.map( (x) => x * 2 );") == "list.map((x)=>x*2);"


class TestNewlines:
    """Newlines that automatic semicolon insertion depends on"""

    def test_return_keeps_newline(self):
        assert minify_js("return\nvalue") == "return\nvalue"

    def test_statement_without_semicolon(self):
        assert minify_js("a = b\nc = d") == "a=b\nc=d"

    def test_postfix_increment(self):
        assert minify_js("i++\nj++") == "i++\nj++"

    def test_newline_inside_array_dropped(self):
        assert minify_js("x = [1,\n 2]") == "x=[1,2]"

    def test_newline_before_member_access_dropped(self):
        assert minify_js("foo()\n  .bar()") == "foo().bar()"


class TestScriptErrors:
    """Malformed scripts"""

    def test_unterminated_string(self):
        with pytest.raises(ScriptError, match="Unterminated string literal") as exc_info:
            minify_js("var s = 'abc;", "widget.html")
        assert exc_info.value.line == 1
        assert exc_info.value.filename == "widget.html"

    def test_unclosed_brace_reports_opening_line(self):
        with pytest.raises(ScriptError, match="Unclosed '\\{'") as exc_info:
            minify_js("function f() {\n  return 1;\n")
        assert exc_info.value.line == 1

    def test_mismatched_bracket(self):
        with pytest.raises(ScriptError, match="Unexpected '\\]'"):
            minify_js("a = (1]")

    def test_unterminated_comment(self):
        with pytest.raises(ScriptError, match="Unterminated comment"):
            minify_js("a();\n/* never closed")

    def test_unterminated_regex(self):
        with pytest.raises(ScriptError, match="Unterminated regular expression") as exc_info:
            minify_js("a();\nvar r = /abc\nfoo();")
        assert exc_info.value.line == 2

    def test_unterminated_template(self):
        with pytest.raises(ScriptError, match="Unterminated template literal"):
            minify_js("const t = `open ${x}")

    def test_error_line_counts_newlines(self):
        with pytest.raises(ScriptError) as exc_info:
            minify_js("a();\nb();\nc(;]")
        assert exc_info.value.line == 3
        assert "(line 3)" in str(exc_info.value)

    def test_script_error_is_component_error(self):
        with pytest.raises(ComponentError):
            minify_js("}")
