import pytest

from advising.files import resolve_filename

EXPECTED = "CS 300 ABCU_Advising_Program_Input.csv"


@pytest.mark.parametrize("typed", [
    "CS 300 ABCU_Advising_Program_Input",
    "cs 300 abcu_advising_program_input",
    "CS 300 ABCU_ADVISING_PROGRAM_INPUT.CSV",
    "  cs 300 abcu_advising_program_input.csv ",
])
def test_accepts_any_case_with_or_without_suffix(typed):
    assert resolve_filename(typed) == EXPECTED


@pytest.mark.parametrize("typed", ["", "courses.csv", "CS300 ABCU_Advising_Program_Input", ".csv"])
def test_rejects_other_names(typed):
    assert resolve_filename(typed) is None


def test_custom_base():
    assert resolve_filename("catalog.CSV", base="Catalog") == "Catalog.csv"
