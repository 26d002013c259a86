#!/usr/bin/env python3
"""
Convert the OpenBible.info cross-reference TSV into the JSON datasets.

Source: https://www.openbible.info/labs/cross-references/
(based on the Treasury of Scripture Knowledge, public domain)

Input lines are "from<TAB>to<TAB>votes" with OSIS-style references
("Gen.1.1", "Ps.89.11-Ps.89.12"). Output maps lookup keys ("gen_1_1") to the
top-voted display references ("Psalms 33:6", ...):

    {GOSPELPATH_DATA_PATH}/cross-references.json          (all verses, minified)
    {GOSPELPATH_DATA_PATH}/cross-references-popular.json  (popular verses, indented)

Run from the api directory.

Usage:
    python -m scripts.convert_cross_references cross-references.txt
    python -m scripts.convert_cross_references cross-references.txt --out data --top 8

Download:
    https://a.openbible.info/data/cross-references.zip
"""

import argparse
import json
import os
import sys
from collections import defaultdict
from typing import Optional

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core import config
from services.references.book_catalog import BookNotFoundError, resolve
from services.references.reference_parser import VerseRef, build_lookup_key, display_form

DEFAULT_TOP = 8

# Verses people commonly look up; written to the popular file when present
POPULAR_VERSE_KEYS = [
    "gen_1_1", "gen_1_27", "gen_3_15",
    "ps_23_1", "ps_23_4", "ps_46_1", "ps_91_1", "ps_119_105",
    "prov_3_5", "prov_3_6", "prov_22_6",
    "isa_40_31", "isa_41_10", "isa_53_5", "isa_53_6",
    "jer_29_11",
    "matt_5_3", "matt_5_44", "matt_6_33", "matt_11_28", "matt_28_19", "matt_28_20",
    "mark_16_15",
    "luke_6_31",
    "john_1_1", "john_1_14", "john_3_16", "john_3_17", "john_3_36", "john_10_10",
    "john_11_25", "john_14_6", "john_14_27", "john_15_13",
    "acts_1_8", "acts_2_38", "acts_4_12",
    "rom_3_23", "rom_5_8", "rom_6_23", "rom_8_1", "rom_8_28", "rom_8_38",
    "rom_10_9", "rom_10_13", "rom_12_1", "rom_12_2",
    "1cor_10_13", "1cor_13_4", "1cor_13_13",
    "2cor_5_17", "2cor_5_21", "2cor_12_9",
    "gal_2_20", "gal_5_22",
    "eph_2_8", "eph_2_9", "eph_4_32", "eph_6_11",
    "phil_4_6", "phil_4_7", "phil_4_8", "phil_4_13", "phil_4_19",
    "col_3_23",
    "1thess_5_16", "1thess_5_17", "1thess_5_18",
    "2tim_1_7", "2tim_3_16",
    "heb_4_12", "heb_11_1", "heb_11_6", "heb_12_1", "heb_12_2", "heb_13_5", "heb_13_8",
    "jas_1_2", "jas_1_5", "jas_4_7",
    "1pet_5_7",
    "1john_1_9", "1john_4_8", "1john_4_19",
    "rev_3_20", "rev_21_4",
]


def parse_osis_verse(ref: str) -> Optional[VerseRef]:
    """Parse a single "Book.Chapter.Verse" reference; None if unrecognized."""
    parts = ref.strip().split(".")
    if len(parts) < 3:
        return None
    try:
        book = resolve(parts[0])
        chapter, verse = int(parts[1]), int(parts[2])
    except (BookNotFoundError, ValueError):
        return None
    return VerseRef(book.number, chapter, verse, verse)


def format_target(ref: str) -> Optional[str]:
    """
    Display form of a target reference.

    "Gen.1.1-Gen.1.3" -> "Genesis 1:1-3"; ranges crossing a chapter keep
    both ends: "Genesis 1:31-Genesis 2:1".
    """
    if "-" not in ref:
        verse = parse_osis_verse(ref)
        return display_form(verse) if verse else None

    start_text, end_text = ref.split("-", 1)
    start, end = parse_osis_verse(start_text), parse_osis_verse(end_text)
    if not start or not end:
        return None

    same_chapter = (start.book_number, start.chapter) == (end.book_number, end.chapter)
    if same_chapter and end.verse_start >= start.verse_start:
        return display_form(VerseRef(start.book_number, start.chapter, start.verse_start, end.verse_start))
    return f"{display_form(start)}-{display_form(end)}"


def convert(lines, top: int = DEFAULT_TOP) -> tuple[dict, dict]:
    """
    Group cross-references by source verse.

    Returns:
        (data, stats): data maps lookup key -> top-voted display references
    """
    grouped = defaultdict(list)
    stats = {"total": 0, "skipped_votes": 0, "skipped_unparsed": 0}

    for line in lines:
        if line.startswith("#") or not line.strip():
            continue

        parts = line.rstrip("\n").split("\t")
        if len(parts) < 3:
            continue

        from_ref, to_ref, votes_text = parts[0], parts[1], parts[2]
        try:
            votes = int(votes_text)
        except ValueError:
            continue

        if votes <= 0:
            stats["skipped_votes"] += 1
            continue

        source = parse_osis_verse(from_ref)
        target = format_target(to_ref)
        if not source or not target:
            stats["skipped_unparsed"] += 1
            continue

        grouped[build_lookup_key(source)].append((votes, target))
        stats["total"] += 1

    data = {}
    for key, refs in grouped.items():
        # Stable sort keeps file order among equal votes
        refs.sort(key=lambda r: r[0], reverse=True)
        data[key] = [target for _, target in refs[:top]]

    return data, stats


def popular_subset(data: dict) -> dict:
    return {key: data[key] for key in POPULAR_VERSE_KEYS if key in data}


def main():
    parser = argparse.ArgumentParser(
        description="Convert OpenBible.info cross-references to GospelPath JSON datasets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m scripts.convert_cross_references cross-references.txt
  python -m scripts.convert_cross_references cross-references.txt --out /srv/gospelpath/data
        """,
    )
    parser.add_argument("input", help="Path to cross-references.txt (TSV)")
    parser.add_argument(
        "--out",
        default=config.DATA_PATH,
        help=f"Output directory (default: {config.DATA_PATH})",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=DEFAULT_TOP,
        help=f"References kept per verse (default: {DEFAULT_TOP})",
    )

    args = parser.parse_args()

    print("=" * 50)
    print("  Converting Cross-References to JSON")
    print("=" * 50)

    if not os.path.exists(args.input):
        print(f"\nError: {args.input} not found.")
        print("Download https://a.openbible.info/data/cross-references.zip and extract it.")
        sys.exit(1)

    with open(args.input, encoding="utf-8") as f:
        data, stats = convert(f, top=args.top)

    os.makedirs(args.out, exist_ok=True)

    full_path = os.path.join(args.out, config.FULL_CROSS_REFS_FILE)
    with open(full_path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, separators=(",", ":"))

    popular = popular_subset(data)
    popular_path = os.path.join(args.out, config.POPULAR_CROSS_REFS_FILE)
    with open(popular_path, "w", encoding="utf-8") as f:
        json.dump(popular, f, ensure_ascii=False, indent=2)

    print(f"\nProcessed {stats['total']:,} cross-references")
    print(f"Skipped {stats['skipped_votes']:,} low-vote references")
    if stats["skipped_unparsed"]:
        print(f"Skipped {stats['skipped_unparsed']:,} unrecognized references")
    print(f"Created entries for {len(data):,} verses")
    print(f"\nSaved: {full_path} ({os.path.getsize(full_path) / 1024 / 1024:.2f} MB)")
    print(f"Saved: {popular_path} ({os.path.getsize(popular_path) / 1024:.2f} KB)")
    print(f"Popular verses found: {len(popular)}/{len(POPULAR_VERSE_KEYS)}")


if __name__ == "__main__":
    main()
