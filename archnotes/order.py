from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, List

from .model import Note

# Architecture Note #1.2: Ordering
#
# Notes are sorted like an outline: 1, 1.1, 1.2, 2, 10. Numbers are
# compared per component as integers, gaps and duplicates are allowed.


def compare_notes(a: Note, b: Note) -> int:
	"""Return -1, 0 or 1. A note sorts right before its descendants."""
	for index, level in enumerate(a.id):
		if index >= len(b.id):
			return 1
		if level > b.id[index]:
			return 1
		if level < b.id[index]:
			return -1
	# a.id is a prefix of b.id here
	if len(a.id) < len(b.id):
		return -1
	return 0


def sort_notes(notes: Iterable[Note]) -> List[Note]:
	# sorted() is stable, duplicates keep their discovery order
	return sorted(notes, key=cmp_to_key(compare_notes))
