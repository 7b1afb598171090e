import pytest

from archnotes.note_parse import parse_note


def test_parse_note_with_body():
	note = parse_note("Architecture Note #1.2: Title\n\nBody text.")
	assert note is not None
	assert note.id == (1, 2)
	assert note.title == "Title"
	assert note.body == "Body text."


@pytest.mark.parametrize(
	"text",
	[
		"just a note",
		"",
		"Architecture Note 1: Missing hash",
		"Architecture Note #: No number",
		"Architecture Note #1 Missing colon",
		"Architecture Note #1.: Trailing dot",
		"Architecture Note #.1: Leading dot",
		"Architecture Note #1.2.3.4.5.6.7.8.9: Too deep",
		"See Architecture Note #1: not at the start",
	],
)
def test_non_matching_comments(text):
	assert parse_note(text) is None


def test_leading_whitespace_and_title_trimming():
	note = parse_note("\n   Architecture Note #3:   Spaced title   \n  body  \n")
	assert note is not None
	assert note.id == (3,)
	assert note.title == "Spaced title"
	assert note.body == "body"


def test_eight_levels_and_large_components():
	note = parse_note("Architecture Note #1.2.3.4.5.6.7.10: Deep")
	assert note is not None
	assert note.id == (1, 2, 3, 4, 5, 6, 7, 10)
	assert note.body == ""


def test_title_stops_at_carriage_return():
	note = parse_note("Architecture Note #4: Windows\r\nBody")
	assert note is not None
	assert note.title == "Windows"
	assert note.body == "Body"
