from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


def test_mcp_pinned_below_2():
    # McpError lives in mcp.shared.exceptions only in the 1.x line.
    project = tomllib.loads(PYPROJECT.read_text())["project"]
    mcp_requirement = next(dep for dep in project["dependencies"] if dep.startswith("mcp"))
    assert "<2" in mcp_requirement
