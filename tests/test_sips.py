"""Tests for the SIP index, content assembler and search."""

import pytest

from knowledge.layout import CorpusLayout
from knowledge.models import Found, NoContent, NotFound
from knowledge.sips import (
    get_clarity_book,
    get_sip_content,
    get_token_standards,
    list_sip_ids,
    list_sip_ids_with_code,
    lookup_sip,
    search_sips,
)
from tests.conftest import FT_DOC, NFT_DOC, NFT_TRAIT


# -----------------------------------------------------------------------------
# Index
# -----------------------------------------------------------------------------
def test_list_sip_ids_ignores_files_and_other_directories(layout, corpus):
    (corpus / "standards" / "sip-abc").mkdir()
    (corpus / "standards" / "drafts").mkdir()
    (corpus / "standards" / "sip-011").write_text("a file, not a directory")
    assert list_sip_ids(layout) == ["009", "010", "012"]


def test_list_sip_ids_sorts_numerically(tmp_path):
    for name in ("sip-10", "sip-9", "sip-100", "sip-2"):
        (tmp_path / name).mkdir()
    layout = CorpusLayout(resources_dir=str(tmp_path), standards_dir=str(tmp_path))
    assert list_sip_ids(layout) == ["2", "9", "10", "100"]


def test_list_sip_ids_honours_custom_prefix(tmp_path):
    for name in ("standard-10", "standard-9"):
        (tmp_path / name).mkdir()
    layout = CorpusLayout(
        resources_dir=str(tmp_path), standards_dir=str(tmp_path), sip_prefix="standard-"
    )
    assert list_sip_ids(layout) == ["9", "10"]


def test_list_sip_ids_missing_root_is_empty(tmp_path):
    layout = CorpusLayout(resources_dir=str(tmp_path), standards_dir=str(tmp_path / "nope"))
    assert list_sip_ids(layout) == []
    assert list_sip_ids_with_code(layout) == []


def test_list_sip_ids_root_is_a_file(tmp_path):
    root = tmp_path / "standards"
    root.write_text("oops")
    layout = CorpusLayout(resources_dir=str(tmp_path), standards_dir=str(root))
    assert list_sip_ids(layout) == []


def test_list_sip_ids_with_code(layout):
    assert list_sip_ids_with_code(layout) == ["009"]
    assert set(list_sip_ids_with_code(layout)) <= set(list_sip_ids(layout))


def test_index_rescans_on_every_call(layout, corpus):
    assert "013" not in list_sip_ids(layout)
    (corpus / "standards" / "sip-013").mkdir()
    (corpus / "standards" / "sip-013" / "trait.clar").write_text("(define-trait t ())")
    assert "013" in list_sip_ids(layout)
    assert "013" in list_sip_ids_with_code(layout)


# -----------------------------------------------------------------------------
# Content assembly
# -----------------------------------------------------------------------------
@pytest.mark.parametrize("sip_number", ["9", "009", "SIP-009"])
def test_get_sip_content_heading_uses_padded_id(layout, sip_number):
    assert get_sip_content(layout, sip_number).startswith("# SIP-009\n\n")


def test_prose_comes_before_clarity_code(layout):
    content = get_sip_content(layout, "009")
    assert content == (
        "# SIP-009\n\n"
        f"## sip-009.md\n\n{NFT_DOC}\n\n---\n\n"
        f"## Clarity Contract: nft-trait.clar\n\n```clarity\n{NFT_TRAIT}\n```\n\n---\n\n"
    )


def test_files_are_emitted_in_filename_order(layout, corpus):
    sip_dir = corpus / "standards" / "sip-010"
    (sip_dir / "z-appendix.md").write_text("appendix")
    (sip_dir / "a-intro.md").write_text("intro")
    content = get_sip_content(layout, "10")
    assert content.index("## a-intro.md") < content.index("## sip-010.md") < content.index("## z-appendix.md")


def test_single_prose_file_round_trips_byte_for_byte(layout):
    content = get_sip_content(layout, "010")
    wrapper_head = "# SIP-010\n\n## sip-010.md\n\n"
    wrapper_tail = "\n\n---\n\n"
    assert content.startswith(wrapper_head)
    assert content.endswith(wrapper_tail)
    assert content[len(wrapper_head):-len(wrapper_tail)] == FT_DOC


def test_unknown_sip_is_not_found(layout):
    outcome = lookup_sip(layout, "404")
    assert outcome == NotFound(subject="SIP-404")
    assert get_sip_content(layout, "404") == "SIP-404 directory not found"


def test_malformed_sip_number_is_not_found(layout):
    assert isinstance(lookup_sip(layout, "../sip-009"), NotFound)
    assert "not found" in get_sip_content(layout, "nft")


def test_empty_sip_directory_has_no_content(layout, corpus):
    (corpus / "standards" / "sip-020").mkdir()
    (corpus / "standards" / "sip-020" / "notes.txt").write_text("not prose")
    assert lookup_sip(layout, "20") == NoContent(subject="SIP-020")
    assert get_sip_content(layout, "20") == "No documentation or Clarity files found for SIP-020"


def test_unpadded_directory_is_still_reachable(layout, corpus):
    (corpus / "standards" / "sip-7").mkdir()
    (corpus / "standards" / "sip-7" / "doc.md").write_text("seven")
    assert "7" in list_sip_ids(layout)
    outcome = lookup_sip(layout, "7")
    assert isinstance(outcome, Found)
    assert outcome.text.startswith("# SIP-007\n\n")


def test_unreadable_file_becomes_inline_marker(layout, corpus):
    (corpus / "standards" / "sip-010" / "broken.md").write_bytes(b"\xff\xfe\xfa")
    content = get_sip_content(layout, "010")
    assert "Error reading file: broken.md" in content
    assert FT_DOC in content


def test_token_standards_combines_nft_and_ft(layout):
    content = get_token_standards(layout)
    assert content.startswith("# TOKEN STANDARDS\n\n# SIP-009")
    assert content.index("# SIP-009") < content.index("# SIP-010")


def test_token_standards_embeds_not_found_for_missing_standard(layout, corpus):
    for path in (corpus / "standards" / "sip-010").iterdir():
        path.unlink()
    (corpus / "standards" / "sip-010").rmdir()
    content = get_token_standards(layout)
    assert "# SIP-009" in content
    assert "SIP-010 directory not found" in content


def test_clarity_book(layout, corpus):
    assert get_clarity_book(layout) == "THE CLARITY BOOK\n"
    (corpus / "standards" / "clarity_book.txt").unlink()
    assert get_clarity_book(layout) == "Clarity Book not found at clarity_book.txt"


# -----------------------------------------------------------------------------
# Search
# -----------------------------------------------------------------------------
def test_search_is_case_insensitive(layout):
    assert search_sips(layout, "FUNGIBLE") == ["009", "010"]
    assert search_sips(layout, "burn height") == ["012"]


def test_search_matches_clarity_code(layout):
    assert search_sips(layout, "define-trait") == ["009"]


def test_search_results_are_contained_in_content(layout):
    for sip_id in search_sips(layout, "transfer?"):
        assert "transfer?" in get_sip_content(layout, sip_id).lower()


def test_search_absent_query_is_empty(layout):
    assert search_sips(layout, "zz-not-in-any-standard-zz") == []


@pytest.mark.parametrize("query", ["", "   "])
def test_blank_query_matches_every_sip_with_content(layout, corpus, query):
    (corpus / "standards" / "sip-030").mkdir()
    assert search_sips(layout, query) == ["009", "010", "012"]


def test_search_never_matches_not_found_messages(layout, corpus):
    (corpus / "standards" / "sip-030").mkdir()
    assert search_sips(layout, "No documentation") == []


def test_padded_and_unpadded_directories_are_both_reachable(tmp_path):
    (tmp_path / "sip-009").mkdir()
    (tmp_path / "sip-009" / "a.md").write_text("padded doc")
    (tmp_path / "sip-9").mkdir()
    (tmp_path / "sip-9" / "b.md").write_text("only-here")
    layout = CorpusLayout(resources_dir=str(tmp_path), standards_dir=str(tmp_path))

    assert list_sip_ids(layout) == ["009", "9"]
    assert "only-here" in get_sip_content(layout, "9")
    assert "padded doc" not in get_sip_content(layout, "9")
    assert "padded doc" in get_sip_content(layout, "009")
    assert search_sips(layout, "only-here") == ["9"]
    assert search_sips(layout, "padded doc") == ["009"]


def test_search_skips_unreadable_files(layout, corpus):
    (corpus / "standards" / "sip-010" / "broken.md").write_bytes(b"\xff\xfe\xfa")
    assert "Error reading file: broken.md" in get_sip_content(layout, "010")
    assert search_sips(layout, "error reading") == []
    assert search_sips(layout, "broken.md") == []
    assert "010" in search_sips(layout, FT_DOC.strip().splitlines()[-1])
