"""Reconciliation of the edited listing with the snapshot."""

from __future__ import annotations

import io
import unittest

from core import (
    ActionKind,
    Entry,
    ValidationError,
    parse_listing,
    resolve_actions,
    validate_actions,
    write_listing,
)
from core.listing import ListingRecord


def _entries(*names: str) -> list[Entry]:
    return [Entry(index=i, name=name) for i, name in enumerate(names)]


def _resolve(names: tuple[str, ...], listing: str) -> list[Entry]:
    entries = _entries(*names)
    return resolve_actions(entries, parse_listing(io.StringIO(listing), len(entries)))


class ResolveActionsTests(unittest.TestCase):
    def test_example_rename_delete_keep(self) -> None:
        entries = _resolve(("a.txt", "b.txt", "c.txt"), "0000    z.txt\n0002    c.txt\n")

        self.assertIs(entries[0].action.kind, ActionKind.RENAME)
        self.assertEqual(entries[0].action.new_name, "z.txt")
        self.assertIs(entries[1].action.kind, ActionKind.DELETE)
        self.assertIs(entries[2].action.kind, ActionKind.KEEP)

    def test_unchanged_listing_keeps_everything(self) -> None:
        entries = _entries("a", "b", "c", "d")
        out = io.StringIO()
        write_listing(entries, out)

        resolve_actions(entries, parse_listing(io.StringIO(out.getvalue()), len(entries)))

        self.assertTrue(all(e.is_keep for e in entries))

    def test_omitted_line_is_deleted(self) -> None:
        entries = _resolve(("a", "b", "c"), "0000    a\n0002    c\n")

        self.assertEqual([e.action.kind for e in entries],
                         [ActionKind.KEEP, ActionKind.DELETE, ActionKind.KEEP])

    def test_reordered_lines_resolve_by_index(self) -> None:
        entries = _resolve(("a", "b"), "0001    b\n0000    x\n")

        self.assertEqual(entries[0].action.new_name, "x")
        self.assertTrue(entries[1].is_keep)

    def test_duplicate_record_reports_line(self) -> None:
        entries = _entries("a", "b")
        records = [ListingRecord(0, "a", 1), ListingRecord(0, "x", 7)]

        with self.assertRaises(ValidationError) as ctx:
            resolve_actions(entries, records)
        self.assertEqual(ctx.exception.line_no, 7)
        self.assertIn("duplicate index 0", str(ctx.exception))


class ValidateActionsTests(unittest.TestCase):
    def test_two_entries_renamed_to_same_name(self) -> None:
        entries = _resolve(("a", "b"), "0000    z\n0001    z\n")

        with self.assertRaises(ValidationError) as ctx:
            validate_actions(entries)
        self.assertIn("duplicate target z", str(ctx.exception))

    def test_rename_onto_kept_entry(self) -> None:
        entries = _resolve(("a", "b"), "0000    b\n0001    b\n")

        with self.assertRaises(ValidationError) as ctx:
            validate_actions(entries)
        self.assertIn("target is kept", str(ctx.exception))

    def test_rename_onto_deleted_or_renamed_entry_is_allowed(self) -> None:
        swap = _resolve(("a", "b"), "0000    b\n0001    a\n")
        replace = _resolve(("a", "b"), "0000    b\n")

        validate_actions(swap)
        validate_actions(replace)

    def test_rename_with_separator_is_rejected(self) -> None:
        for new_name in ("sub/a", "..", "."):
            with self.subTest(new_name=new_name):
                entries = _resolve(("a",), f"0000    {new_name}\n")
                with self.assertRaises(ValidationError) as ctx:
                    validate_actions(entries)
                self.assertIn("invalid name for index 0", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
