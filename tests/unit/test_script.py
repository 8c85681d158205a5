"""
Unit tests for cyshell.core.script (whole-script and streaming helpers).
"""

import io

import pytest

from cyshell.core.script import iter_statements, split_script
from cyshell.domain.errors import IncompleteStatementError


class TestSplitScript:
    """Tests for split_script."""

    def test_empty_string_returns_no_statements(self) -> None:
        assert split_script("").statements == []
        result = split_script("   \n\n  ")
        assert result.statements == []
        assert result.complete

    def test_single_statement(self) -> None:
        result = split_script("CREATE (n);")
        assert result.statements == ["CREATE (n);"]
        assert result.remainder == ""

    def test_statement_without_semicolon_is_remainder(self) -> None:
        result = split_script("RETURN 1;\nMATCH (n)")
        assert result.statements == ["RETURN 1;"]
        assert result.remainder == "\nMATCH (n)"
        assert not result.complete

    def test_sample_script(self, sample_script: str) -> None:
        result = split_script(sample_script)

        assert result.statements == [
            ":begin\n",
            "CREATE (n:Person {name: 'Ann; Lee'});",
            "\n MATCH (n)\nRETURN n;",
            ":commit\n",
        ]
        assert result.complete

    def test_windows_line_endings(self) -> None:
        result = split_script(":begin\r\nRETURN 1;\r\n")
        assert result.statements == [":begin\r\n", "RETURN 1;"]

    def test_trailing_whitespace_is_not_remainder(self) -> None:
        result = split_script("RETURN 1;\n\n")
        assert result.remainder == ""

    def test_strict_raises_on_missing_semicolon(self) -> None:
        with pytest.raises(IncompleteStatementError) as exc_info:
            split_script("RETURN 1;\nRETURN 2", strict=True)

        error = exc_info.value
        assert error.code == "incomplete_statement"
        assert "not terminated with ';'" in error.message
        assert error.statements == ["RETURN 1;"]
        assert error.remainder == "\nRETURN 2"

    @pytest.mark.parametrize(
        ("script", "expected"),
        [
            ("RETURN 'abc;\n", "quote is not closed with '"),
            ("RETURN 1 /* open;\n", "block comment is not closed"),
            ("RETURN 1 // trailing", "line comment is not terminated"),
        ],
    )
    def test_strict_names_open_delimiter(self, script: str, expected: str) -> None:
        with pytest.raises(IncompleteStatementError, match=expected):
            split_script(script, strict=True)

    def test_strict_passes_complete_script(self, sample_script: str) -> None:
        assert len(split_script(sample_script, strict=True).statements) == 4


class TestIterStatements:
    """Tests for iter_statements."""

    def test_yields_from_file_object(self, sample_script: str) -> None:
        statements = list(iter_statements(io.StringIO(sample_script)))
        assert statements == split_script(sample_script).statements

    def test_yields_as_soon_as_complete(self) -> None:
        fed: list[str] = []

        def _lines():
            for line in ("RETURN 1;\n", "RETURN\n", "2;\n"):
                fed.append(line)
                yield line

        statements = iter_statements(_lines())

        assert next(statements) == "RETURN 1;"
        assert fed == ["RETURN 1;\n"]
        assert next(statements) == "\nRETURN\n2;"
        assert list(statements) == []

    def test_open_text_is_not_yielded(self) -> None:
        assert list(iter_statements(["RETURN 'x;\n"])) == []


class TestLineBoundaries:
    """Scripts are fed to the parser in lines ending at newline only."""

    @pytest.mark.parametrize("separator", ["\x1c", "\x0b", "\x0c", "\x85", "\u2028"])
    def test_unicode_line_breaks_do_not_start_meta_commands(self, separator: str) -> None:
        text = f"RETURN 1;{separator}:x{separator}MATCH (n);\n"

        result = split_script(text)

        assert result.statements == ["RETURN 1;", f"{separator}:x{separator}MATCH (n);"]
        assert result.kinds == ["script", "script"]
        assert result.statements == list(iter_statements(io.StringIO(text)))

    def test_carriage_return_alone_does_not_split_lines(self) -> None:
        result = split_script(":begin\rRETURN 1;\n")
        assert result.statements == [":begin\rRETURN 1;"]


class TestStatementKinds:
    """Kinds follow how each statement was recognized."""

    def test_sample_script_kinds(self, sample_script: str) -> None:
        assert split_script(sample_script).kinds == ["meta", "script", "script", "meta"]

    def test_meta_shaped_statement_after_comment_is_script(self) -> None:
        result = split_script("/* x */:help;\n")

        assert result.statements == [":help;"]
        assert result.kinds == ["script"]

    def test_meta_command_with_semicolon_is_meta(self) -> None:
        result = split_script(":help;\n")

        assert result.statements == [":help;\n"]
        assert result.kinds == ["meta"]

    def test_strict_failure_carries_kinds(self) -> None:
        with pytest.raises(IncompleteStatementError) as exc_info:
            split_script(":begin\nRETURN 1;\nRETURN 2\n", strict=True)

        assert exc_info.value.kinds == ["meta", "script"]
