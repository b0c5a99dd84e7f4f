import io

import pytest
from unittest.mock import patch
from rich.console import Console
from mediafinder.app.prompt import prompt_selection


def make_console():
    output = io.StringIO()
    return Console(file=output, width=200, color_system=None), output


@patch('mediafinder.app.prompt.IntPrompt.ask')
def test_prompt_selection_returns_zero_based_index(mock_ask):
    mock_ask.return_value = 2
    console, output = make_console()

    index = prompt_selection(["First - movie - released: ", "Second - person"], console)

    assert index == 1
    text = output.getvalue()
    assert "Found results:" in text
    assert "1  First - movie - released:" in text
    assert "2  Second - person" in text


@patch('mediafinder.app.prompt.IntPrompt.ask')
def test_prompt_selection_asks_again_when_out_of_range(mock_ask):
    mock_ask.side_effect = [0, 4, 1]
    console, output = make_console()

    index = prompt_selection(["Only - tv - released: 2019-05-05"], console)

    assert index == 0
    assert mock_ask.call_count == 3
    assert "between 1 and 1" in output.getvalue()


def test_prompt_selection_requires_labels():
    console, _ = make_console()

    with pytest.raises(ValueError):
        prompt_selection([], console)
