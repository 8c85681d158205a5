from pathlib import Path

import pytest

from cyshell.core.statement_parser import ShellStatementParser


@pytest.fixture
def parser() -> ShellStatementParser:
    """Fresh statement parser"""
    return ShellStatementParser()


@pytest.fixture
def temp_workspace(tmp_path: Path) -> Path:
    """Create a temporary workspace directory"""
    workspace = tmp_path / "workspace"
    workspace.mkdir()
    return workspace


@pytest.fixture
def sample_script() -> str:
    """Script mixing meta-commands, comments, quotes and statements"""
    return (
        "// setup\n"
        ":begin\n"
        "CREATE (n:Person {name: 'Ann; Lee'});\n"
        "/* multi\n"
        "   line */ MATCH (n)\n"
        "RETURN n;\n"
        ":commit\n"
    )


@pytest.fixture
def script_file(temp_workspace: Path, sample_script: str) -> Path:
    """Sample script written to disk"""
    path = temp_workspace / "queries.cypher"
    path.write_text(sample_script, encoding="utf-8")
    return path
