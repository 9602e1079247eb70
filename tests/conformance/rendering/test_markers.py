"""
Conformance: marker placement in rendered output
"""
import pytest


# (description, schema_source, expected output lines)
CASES = [
    (
        "same_line_markers",
        "scalar x; table A { x; }; table A { x; };",
        [
            "1 | scalar x; table A { x; }; table A { x; };",
            "  |                 ^ duplicate table: first definition here",
            "  |                                 ^ duplicate table: redefined here",
        ],
    ),
    (
        "markers_on_separate_lines",
        "table A { x; }\n\n\ntable A { y; }",
        [
            "1 | table A { x; }",
            "  |       ^ duplicate table: first definition here",
            ". |",
            "4 | table A { y; }",
            "  |       ^ duplicate table: redefined here",
        ],
    ),
    (
        "warning_underline",
        "table E {}",
        [
            "1 | table E {}",
            "  |         -- empty table: table E has no columns",
        ],
    ),
    (
        "unterminated_string_at_end_of_input",
        'scalar s = "abc',
        [
            '1 | scalar s = "abc',
            "  |            ^ unterminated string literal: string starts here",
            '  |                ^ unterminated string literal: expected closing `"`',
        ],
    ),
]


@pytest.mark.parametrize("description,source,expected", CASES, ids=[c[0] for c in CASES])
def test_markers(runner, description, source, expected):
    """Every backend places markers at the same columns."""
    lines = runner.check(source).output.splitlines()
    for line in expected:
        assert line in lines, f"Missing {line!r} in output:\n" + "\n".join(lines)
