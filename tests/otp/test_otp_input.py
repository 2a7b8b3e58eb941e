from typing import List

import pytest

from guest_signup.otp import OTPDigitInput, empty_code, is_complete


@pytest.mark.parametrize(
    "code, expected",
    [
        (["1", "2", "3", "4"], True),
        (["1", "2", "", "4"], False),
        (["", "", "", ""], False),
        (["1", "2", "3"], False),
        (["12", "3", "4", "5"], False),
    ],
)
def test_is_complete(code: List[str], expected: bool) -> None:
    assert is_complete(code) is expected


def test_mount_focuses_first_cell() -> None:
    field = OTPDigitInput()
    field.mount()
    assert field.focused_index == 0


def test_mount_when_disabled_leaves_focus() -> None:
    field = OTPDigitInput(disabled=True)
    field.mount()
    assert field.focused_index is None


def test_typing_advances_focus() -> None:
    changes: List[List[str]] = []
    field = OTPDigitInput(on_change=changes.append)
    field.mount()

    field.input(0, "7")

    assert field.value == ["7", "", "", ""]
    assert changes == [["7", "", "", ""]]
    assert field.focused_index == 1


def test_typing_in_last_cell_keeps_focus() -> None:
    field = OTPDigitInput(value=["1", "2", "3", ""])
    field.focus(3)
    field.input(3, "4")
    assert field.focused_index == 3
    assert field.complete
    assert field.code == "1234"


def test_multi_character_input_is_ignored() -> None:
    changes: List[List[str]] = []
    field = OTPDigitInput(on_change=changes.append)
    field.input(0, "12")
    assert field.value == empty_code()
    assert changes == []


def test_clearing_a_cell_does_not_move_focus() -> None:
    field = OTPDigitInput(value=["1", "2", "", ""])
    field.focus(1)
    field.input(1, "")
    assert field.value == ["1", "", "", ""]
    assert field.focused_index == 1


def test_backspace_on_empty_cell_retreats() -> None:
    field = OTPDigitInput(value=["1", "", "", ""])
    field.focus(1)
    field.key_down(1, "Backspace")
    assert field.focused_index == 0
    assert field.value == ["1", "", "", ""]


def test_backspace_on_filled_cell_stays() -> None:
    field = OTPDigitInput(value=["1", "2", "", ""])
    field.focus(1)
    field.key_down(1, "Backspace")
    assert field.focused_index == 1


def test_backspace_on_first_cell_stays() -> None:
    field = OTPDigitInput()
    field.mount()
    field.key_down(0, "Backspace")
    assert field.focused_index == 0


@pytest.mark.parametrize(
    "text, expected, focus",
    [
        ("1234", ["1", "2", "3", "4"], 3),
        ("12", ["1", "2", "", ""], 2),
        ("1a2b3c4d", ["1", "2", "3", "4"], 3),
        ("987654", ["9", "8", "7", "6"], 3),
        ("abc", ["", "", "", ""], 0),
    ],
)
def test_paste_into_first_cell(text: str, expected: List[str], focus: int) -> None:
    changes: List[List[str]] = []
    field = OTPDigitInput(value=["5", "5", "5", "5"], on_change=changes.append)

    field.paste(0, text)

    assert field.value == expected
    assert changes == [expected]
    assert field.focused_index == focus


def test_paste_into_other_cells_is_ignored() -> None:
    changes: List[List[str]] = []
    field = OTPDigitInput(on_change=changes.append)
    field.paste(2, "1234")
    assert field.value == empty_code()
    assert changes == []


def test_clear_resets_all_cells() -> None:
    field = OTPDigitInput(value=["1", "2", "3", "4"])
    field.clear()
    assert field.value == ["", "", "", ""]


def test_disabled_ignores_typing_paste_and_backspace() -> None:
    changes: List[List[str]] = []
    field = OTPDigitInput(
        value=["1", "", "", ""],
        on_change=changes.append,
        disabled=True,
    )

    field.input(1, "2")
    field.paste(0, "1234")
    field.key_down(1, "Backspace")

    assert field.value == ["1", "", "", ""]
    assert changes == []
    assert field.focused_index is None


def test_disabling_drops_focus_and_enabling_refocuses_first_cell() -> None:
    field = OTPDigitInput()
    field.mount()
    field.paste(0, "1234")
    assert field.focused_index == 3

    field.disabled = True
    assert field.focused_index is None
    field.clear()
    field.disabled = False

    assert field.focused_index == 0
    assert field.value == empty_code()


def test_enabling_an_enabled_field_keeps_focus() -> None:
    field = OTPDigitInput()
    field.mount()
    field.focus(2)
    field.disabled = False
    assert field.focused_index == 2
