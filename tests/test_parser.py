from bible_ref.core.parser import ParsedReference, parse_reference


def test_parse_chapter_and_verse() -> None:
    assert parse_reference("John 3:16") == ParsedReference(book="John", chapter="3", verse_range="16")


def test_parse_verse_range() -> None:
    assert parse_reference("Romans 8:28-30") == ParsedReference(book="Romans", chapter="8", verse_range="28-30")


def test_parse_book_only() -> None:
    assert parse_reference("Genesis") == ParsedReference(book="Genesis", chapter="", verse_range="")


def test_parse_multi_word_book() -> None:
    r = parse_reference("Song of Solomon 2:1")
    assert r.book == "Song of Solomon"
    assert r.chapter == "2"
    assert r.verse_range == "1"


def test_parse_chapter_without_verse() -> None:
    assert parse_reference("John 3") == ParsedReference(book="John", chapter="3", verse_range="")


def test_parse_numbered_books() -> None:
    assert parse_reference("1 Corinthians 13:4-7") == ParsedReference("1 Corinthians", "13", "4-7")
    assert parse_reference("1 John 3") == ParsedReference("1 John", "3", "")
    # The leading "1" is never taken as a chapter.
    assert parse_reference("2 Kings").book == "2 Kings"


def test_parse_empty_and_blank() -> None:
    assert parse_reference("") == ParsedReference("", "", "")
    assert parse_reference("   ") == ParsedReference("", "", "")


def test_parse_collapses_whitespace() -> None:
    assert parse_reference("  Song  of Solomon   2:1 ") == ParsedReference("Song of Solomon", "2", "1")


def test_parse_extra_colon_parts_discarded() -> None:
    assert parse_reference("John 3:16:18") == ParsedReference("John", "3", "16")


def test_parse_empty_colon_pieces_skipped() -> None:
    assert parse_reference("John 3:") == ParsedReference("John", "3", "")
    assert parse_reference("John :16") == ParsedReference("John", "16", "")
    assert parse_reference("John :") == ParsedReference("John", "", "")


def test_parse_trailing_word_taken_as_chapter() -> None:
    # Without a colon the last token is the chapter, numeric or not.
    assert parse_reference("1 John") == ParsedReference("1 John", "John", "")


def test_parse_disambiguation_overrides_colon_chapter() -> None:
    # Book stops at the first colon token; a number left at its end wins.
    assert parse_reference("John 3 4:5") == ParsedReference("John", "3", "5")


def test_parse_is_pure() -> None:
    assert parse_reference("Romans 8:28-30") == parse_reference("Romans 8:28-30")


def test_parse_signed_trailing_number_is_chapter() -> None:
    # Signed integers count as numbers; the fetch step rejects "+3" as a chapter.
    assert parse_reference("John +3") == ParsedReference("John", "+3", "")
