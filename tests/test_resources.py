"""Tests for topic group aggregation and single-resource reads."""

import pytest

from knowledge.resources import (
    NO_CONTENT_FOUND,
    TOPIC_GROUPS,
    aggregate_resources,
    list_resources,
    read_resource,
)


def test_aggregate_empty_group_list_returns_sentinel(layout):
    assert aggregate_resources(layout, []) == NO_CONTENT_FOUND


def test_aggregate_single_group(layout):
    content = aggregate_resources(layout, ["clarity"])
    assert content == (
        "# CLARITY RESOURCES\n\n"
        "Clarity is decidable.\n\n---\n\n"
        "Check tx-sender.\n\n---\n\n"
    )


def test_aggregate_ignores_non_markdown_files(layout):
    assert "ignored" not in aggregate_resources(layout, ["clarity"])


def test_aggregate_keeps_requested_group_order(layout):
    content = aggregate_resources(layout, ["tokens", "clarity"])
    assert content.index("# TOKENS RESOURCES") < content.index("# CLARITY RESOURCES")


@pytest.mark.parametrize("groups", [["management"], ["frontend"], ["../standards"], ["frontend", "integration"]])
def test_missing_empty_or_invalid_groups_contribute_nothing(layout, groups):
    assert aggregate_resources(layout, groups) == NO_CONTENT_FOUND


def test_missing_group_is_skipped_not_fatal(layout):
    content = aggregate_resources(layout, ["management", "tokens"])
    assert content == "# TOKENS RESOURCES\n\nUse define-fungible-token.\n\n---\n\n"
    assert "MANAGEMENT" not in content


def test_unreadable_file_becomes_inline_marker(layout, corpus):
    (corpus / "resources" / "tokens" / "nft.md").write_bytes(b"\xc3\x28")
    content = aggregate_resources(layout, ["tokens"])
    assert "Use define-fungible-token." in content
    assert "Error reading file: nft.md\n\n---\n\n" in content


def test_missing_resources_root(layout, tmp_path):
    from dataclasses import replace

    empty = replace(layout, resources_dir=str(tmp_path / "missing"))
    assert aggregate_resources(empty, list(TOPIC_GROUPS)) == NO_CONTENT_FOUND
    assert list_resources(empty) == []


def test_list_resources(layout):
    assert list_resources(layout) == ["clarity/a-basics", "clarity/b-security", "tokens/ft"]


@pytest.mark.parametrize("name", ["ft", "ft.md"])
def test_read_resource(layout, name):
    assert read_resource(layout, "tokens", name) == "Use define-fungible-token."


def test_read_resource_soft_failures(layout):
    assert read_resource(layout, "management", "x") == "Directory not found: management"
    assert read_resource(layout, "tokens", "nft") == "File not found: nft.md in tokens"
    assert read_resource(layout, "tokens", "../clarity/a-basics") == "Invalid resource name: ../clarity/a-basics"
    assert "Invalid topic group name" in read_resource(layout, "..", "ft")
