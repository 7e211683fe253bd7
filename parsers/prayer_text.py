"""Prayer topic document parser.

The prayer topic document is a plain-text export of a hand-edited word
processor file. After a ``참고`` header line it holds one block per
missionary::

    1
    김민수
    (태국)
    1. 건강을 위해 기도해 주세요.
    2025.
    12.13

i.e. an order number alone on a line, one or more name lines, an optional
parenthesized country line, free-form prayer content and an optional trailing
date stamp. The export has no tags, so the parser walks the lines once and
moves between phases when a line matches one of a few narrow patterns.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable

from parsers.line_scanner import LineScanner
from parsers.prayer_models import ParseFailure, ParseResult, ParseSuccess, PrayerTopicRecord

logger = logging.getLogger(__name__)

SECTION_HEADER = "참고"

# ASCII digits only; \s stays Unicode-aware (U+00A0 after a marker)
BLOCK_START = re.compile(r"^[0-9]+$")
NUMBERED_MARKER = re.compile(r"^[0-9]+\.\s")
SENTENCE_END = re.compile(r"[.!?。…]$")
PARENTHESIZED = re.compile(r"^\([^)]+\)$")
YEAR_STAMP = re.compile(r"^[0-9]{4}\.$")
MONTH_DAY_FRAGMENT = re.compile(r"^[0-9]{1,2}\.\s*[0-9]{1,2}")
COMPACT_MONTH_DAY = re.compile(r"^[0-9]{1,2}\.[0-9]{1,2}")


@dataclass
class _Block:
    """Fields collected for the block currently being scanned"""

    order: int
    name_parts: list[str] = field(default_factory=list)
    country: str = ""
    content_lines: list[str] = field(default_factory=list)
    reference: str = ""

    def to_record(self) -> PrayerTopicRecord:
        return PrayerTopicRecord(
            order=self.order,
            name=" ".join(self.name_parts).strip(),
            country=self.country,
            prayer_content="\n".join(self.content_lines).strip(),
            reference=self.reference,
        )


@dataclass(frozen=True)
class _Rule:
    """Terminating pattern for a scan phase.

    ``action`` runs with the scanner still on the matching line and decides
    whether to consume it. ``guard`` restricts when the rule applies.
    """

    name: str
    pattern: re.Pattern
    action: Callable[[LineScanner, _Block, str], None]
    guard: Callable[[_Block], bool] | None = None

    def applies(self, stripped: str, block: _Block) -> bool:
        if not self.pattern.match(stripped):
            return False
        return self.guard is None or self.guard(block)


def _leave_for_content(scanner: LineScanner, block: _Block, stripped: str) -> None:
    # The current line becomes the first line of the prayer content
    pass


def _take_country(scanner: LineScanner, block: _Block, stripped: str) -> None:
    block.country = stripped[1:-1]
    scanner.advance()


def _take_dated_reference(scanner: LineScanner, block: _Block, stripped: str) -> None:
    block.reference = stripped
    scanner.advance()

    following = scanner.peek()
    if following is not None and MONTH_DAY_FRAGMENT.match(following.strip()):
        block.reference = f"{block.reference} {following.strip()}"
        scanner.advance()


def _take_compact_reference(scanner: LineScanner, block: _Block, stripped: str) -> None:
    block.reference = stripped
    scanner.advance()


def _leave_for_next_block(scanner: LineScanner, block: _Block, stripped: str) -> None:
    pass


def _has_name(block: _Block) -> bool:
    return len(block.name_parts) > 0


def _has_content_without_reference(block: _Block) -> bool:
    # Blank lines count as collected content
    return not block.reference and len(block.content_lines) > 0


# Names never end in sentence punctuation, so once a name is known such a
# line is unmarked prayer content following a block with no country line.
NAME_PHASE_RULES: tuple[_Rule, ...] = (
    _Rule("numbered_marker", NUMBERED_MARKER, _leave_for_content),
    _Rule("country", PARENTHESIZED, _take_country),
    _Rule("prose_line", SENTENCE_END, _leave_for_content, guard=_has_name),
)

# Order matters: a year stamp must win over the bare month.day form
CONTENT_PHASE_RULES: tuple[_Rule, ...] = (
    _Rule("year_reference", YEAR_STAMP, _take_dated_reference),
    _Rule(
        "compact_reference",
        COMPACT_MONTH_DAY,
        _take_compact_reference,
        guard=_has_content_without_reference,
    ),
    _Rule("next_block", BLOCK_START, _leave_for_next_block),
)


def _first_matching_rule(rules: tuple[_Rule, ...], stripped: str, block: _Block) -> _Rule | None:
    for rule in rules:
        if rule.applies(stripped, block):
            return rule
    return None


def _skip_preamble(scanner: LineScanner) -> bool:
    """Advance past the section header. Returns False if it never appears."""
    while not scanner.at_end():
        if scanner.advance().strip() == SECTION_HEADER:
            return True
    return False


def _scan_name_and_country(scanner: LineScanner, block: _Block) -> None:
    while not scanner.at_end():
        stripped = scanner.peek().strip()
        rule = _first_matching_rule(NAME_PHASE_RULES, stripped, block)
        if rule is not None:
            rule.action(scanner, block, stripped)
            return
        if stripped:
            block.name_parts.append(stripped)
        scanner.advance()


def _scan_prayer_content(scanner: LineScanner, block: _Block) -> None:
    while not scanner.at_end():
        line = scanner.peek()
        stripped = line.strip()
        rule = _first_matching_rule(CONTENT_PHASE_RULES, stripped, block)
        if rule is not None:
            rule.action(scanner, block, stripped)
            return
        block.content_lines.append(line)
        scanner.advance()


def parse_prayer_text(text: str) -> list[PrayerTopicRecord]:
    """
    Extract prayer topic records from the raw document text.

    Lines before the ``참고`` header are ignored, as are lines between blocks
    that are not a bare order number. Blocks missing a name, country or
    reference still produce a record with those fields blank.

    Args:
        text: Full document body, LF or CRLF line endings

    Returns:
        Records in document order
    """
    scanner = LineScanner.from_text(text)
    if not _skip_preamble(scanner):
        logger.debug(f"Section header {SECTION_HEADER!r} not found")
        return []

    items: list[PrayerTopicRecord] = []
    while not scanner.at_end():
        stripped = scanner.advance().strip()
        if not BLOCK_START.match(stripped):
            continue

        block = _Block(order=int(stripped))
        _scan_name_and_country(scanner, block)
        _scan_prayer_content(scanner, block)
        items.append(block.to_record())

    return items


def parse_prayer_document(text: str, source_name: str = "") -> ParseResult:
    """Parse a document into a tagged result. Never raises."""
    try:
        items = parse_prayer_text(text)
    except Exception as e:
        logger.error(f"Failed to parse prayer document {source_name!r}: {e}", exc_info=True)
        return ParseFailure(reason=str(e) or e.__class__.__name__)

    return ParseSuccess(items=items, source_name=source_name)
