"""Tests for payload and contents models."""

import base64

from merge_resolver.models import FileContent, PullRequest


def test_file_content_decoded_ignores_line_breaks() -> None:
    """Contents API wraps base64 at 60 chars; decoding ignores the breaks."""
    text = "<project>\n  <version>1.2.3</version>\n</project>\n" * 5
    encoded = base64.encodebytes(text.encode()).decode()
    assert "\n" in encoded
    assert FileContent(type="file", content=encoded).decoded() == text


def test_file_content_ignores_unknown_fields() -> None:
    entry = FileContent.model_validate({"type": "dir", "path": "src", "size": 0, "_links": {}})
    assert entry.type == "dir"
    assert entry.content is None


def test_pull_request_closed_and_merged() -> None:
    base = {"ref": "main"}
    assert PullRequest(state="closed", merged=True, base=base).is_closed_and_merged
    assert not PullRequest(state="closed", merged=False, base=base).is_closed_and_merged
    assert not PullRequest(state="closed", merged=None, base=base).is_closed_and_merged
    assert not PullRequest(state="open", merged=True, base=base).is_closed_and_merged


def test_pull_request_base_optional() -> None:
    """Gating only needs state and merged."""
    pr = PullRequest.model_validate({"state": "closed", "merged": True, "labels": [{"name": "merge:v1"}]})
    assert pr.base is None
    assert pr.is_closed_and_merged


def test_file_content_invalid_utf8_replaced() -> None:
    raw = "<version>2.0</version> café".encode("latin-1")
    text = FileContent(type="file", content=base64.b64encode(raw).decode()).decoded()
    assert text.startswith("<version>2.0</version> caf")
    assert text.endswith("\ufffd")
