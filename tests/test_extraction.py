import pytest

from docscan.services.extraction import extract_json_candidate, parse_reply


def test_fenced_json_block():
    text = 'Sure:\n```json\n{"a":1}\n```\nDone.'
    assert extract_json_candidate(text) == '{"a":1}'


def test_fenced_block_without_tag_and_uppercase_tag():
    assert extract_json_candidate('```\n{"a":1}\n```') == '{"a":1}'
    assert extract_json_candidate('```JSON\n{"b":2}\n```') == '{"b":2}'


def test_fence_wins_over_outer_braces():
    text = '{"outer": true}\n```json\n{"inner": true}\n```'
    assert extract_json_candidate(text) == '{"inner": true}'


def test_empty_fence_falls_back_to_braces():
    text = '```json\n```\n{"a":1}'
    assert extract_json_candidate(text) == '{"a":1}'


def test_braces_inside_prose():
    assert extract_json_candidate('Here is data: {"a":1} thanks') == '{"a":1}'


def test_first_to_last_brace_span_is_kept():
    # Unrelated braces widen the slice; the result does not parse
    text = 'Note {x} then {"a":1}'
    assert extract_json_candidate(text) == '{x} then {"a":1}'


@pytest.mark.parametrize("text", ["", None])
def test_empty_input_has_no_candidate(text):
    assert extract_json_candidate(text) is None


@pytest.mark.parametrize("text", ["no braces at all", "} backwards {", "only { open"])
def test_no_candidate_without_brace_pair(text):
    assert extract_json_candidate(text) is None


def test_parse_reply_bare_json():
    raw = '{"document_type":"other","title":"T","summary":"S","notes":"N"}'
    assert parse_reply(raw) == {"document_type": "other", "title": "T", "summary": "S", "notes": "N"}


def test_parse_reply_fenced_receipt():
    raw = '```json\n{"document_type": "receipt", "total": "12.50", "items": []}\n```'
    data = parse_reply(raw)
    assert data["document_type"] == "receipt"
    assert data["total"] == "12.50"


def test_parse_reply_prose_falls_back():
    raw = "I could not read this document, it is too blurry."
    assert parse_reply(raw) == {
        "document_type": "other",
        "title": "Analysis",
        "summary": "",
        "notes": raw,
    }


def test_parse_reply_mis_sliced_braces_fall_back_with_full_text():
    raw = 'Totals {approx} follow {"total": "3.00"}'
    data = parse_reply(raw)
    assert data["document_type"] == "other"
    assert data["notes"] == raw


def test_parse_reply_without_candidate_parses_raw_text():
    # No braces, but the raw reply itself is valid JSON
    assert parse_reply("[1, 2, 3]") == [1, 2, 3]


def test_parse_reply_empty_text_falls_back():
    assert parse_reply("") == {"document_type": "other", "title": "Analysis", "summary": "", "notes": ""}


@pytest.mark.parametrize("raw", [
    '{"document_type": "receipt", "total": NaN}',
    '{"total": Infinity}',
    '{"total": -Infinity}',
    "NaN",
])
def test_parse_reply_non_json_constants_fall_back(raw):
    assert parse_reply(raw) == {"document_type": "other", "title": "Analysis", "summary": "", "notes": raw}
