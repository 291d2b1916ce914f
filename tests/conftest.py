"""Pytest configuration for the spiderman test suite."""

import sys
from pathlib import Path

# Add src directory to path for package imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

TESTS_DIR = Path(__file__).parent


def parse_tests_file(path: Path) -> list[tuple[str, str, str]]:
    """Parse .tests file into (name, input, expected) tuples."""
    lines = path.read_text().split("\n")
    result: list[tuple[str, str, str]] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        if line.startswith("=== "):
            test_name = line[4:].strip()
            i += 1
            input_lines: list[str] = []
            while i < len(lines) and not lines[i].startswith("---"):
                input_lines.append(lines[i])
                i += 1
            if i < len(lines) and lines[i] == "---":
                i += 1
            expected_lines: list[str] = []
            while i < len(lines) and not lines[i].startswith("---"):
                expected_lines.append(lines[i])
                i += 1
            if i < len(lines) and lines[i] == "---":
                i += 1
            test_input = "\n".join(input_lines)
            expected = "\n".join(expected_lines).strip()
            result.append((test_name, test_input, expected))
        else:
            i += 1
    return result


def discover_tests(subdir: str) -> list[tuple[str, str, str]]:
    """Find all cases under tests/<subdir>, returns (test_id, input, expected)."""
    results = []
    for test_file in sorted((TESTS_DIR / subdir).glob("*.tests")):
        for name, test_input, expected in parse_tests_file(test_file):
            results.append((f"{test_file.stem}/{name}", test_input, expected))
    return results
