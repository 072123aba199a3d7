from __future__ import annotations

from pathlib import Path

from junitparser import Failure, JUnitXml, TestCase, TestSuite

from multiassert.assertions.base import AssertionResult


def write_junit(
    path: Path,
    results: list[AssertionResult],
    suite_name: str,
    elapsed_seconds: float = 0.0,
) -> Path:
    """Write junit.xml with one test case per check result, return path."""
    xml = JUnitXml()
    suite = TestSuite(suite_name)
    suite.add_property("checks", str(len(results)))

    for result in results:
        case = TestCase(result.name)
        case.classname = result.kind.key
        if not result.passed:
            case.result = Failure(result.message)
        suite.add_testcase(case)

    # Set time after add_testcase (add_testcase resets it via update_statistics)
    suite.time = float(elapsed_seconds)

    # Use append (not +=) to preserve properties and time
    xml.append(suite)

    path.parent.mkdir(parents=True, exist_ok=True)
    xml.write(str(path), pretty=True)
    return path
