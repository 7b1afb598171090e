import random

from archnotes.model import Note, SourceRange
from archnotes.order import compare_notes, sort_notes


def make_note(number: str, title: str = "", path: str = "/repo/a.py") -> Note:
	return Note(
		id=tuple(int(p) for p in number.split(".")),
		title=title or number,
		body="",
		source_path=path,
		source_range=SourceRange(start_line=1, end_line=1),
	)


def test_outline_order_is_numeric():
	numbers = ["1", "1.1", "1.2", "2", "10"]
	for seed in range(10):
		shuffled = [make_note(n) for n in numbers]
		random.Random(seed).shuffle(shuffled)
		assert [n.number for n in sort_notes(shuffled)] == numbers


def test_ancestor_sorts_before_descendant():
	assert compare_notes(make_note("1"), make_note("1.1")) == -1
	assert compare_notes(make_note("1.1"), make_note("1")) == 1


def test_compare_components():
	assert compare_notes(make_note("2"), make_note("10")) == -1
	assert compare_notes(make_note("1.10"), make_note("1.9")) == 1
	assert compare_notes(make_note("1.2.3"), make_note("1.2.3")) == 0


def test_duplicates_keep_discovery_order():
	first = make_note("1.1", title="first", path="/repo/b.py")
	second = make_note("1.1", title="second", path="/repo/a.py")
	ordered = sort_notes([make_note("2"), first, make_note("1"), second])
	assert [n.title for n in ordered] == ["1", "first", "second", "2"]
