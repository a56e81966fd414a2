"""
tests/test_receipts.py - Receipt Tests
"""

import io
import json

from montyhall.receipts import dual_hash, emit_receipt, write_receipt_jsonl


class TestDualHash:
    """Test dual_hash."""

    def test_format(self):
        """SHA256:BLAKE3, two 64-char hex parts."""
        parts = dual_hash("montyhall").split(":")
        assert len(parts) == 2
        for part in parts:
            assert len(part) == 64
            assert all(c in "0123456789abcdef" for c in part)

    def test_str_and_bytes_agree(self):
        """str input is hashed as its UTF-8 bytes."""
        assert dual_hash("abc") == dual_hash(b"abc")

    def test_parts_differ(self):
        """The two digests come from different algorithms."""
        sha, b3 = dual_hash(b"abc").split(":")
        assert sha != b3


class TestEmitReceipt:
    """Test emit_receipt / write_receipt_jsonl."""

    def test_fields(self):
        """Receipt carries type, ts, tenant, hash and payload."""
        receipt = emit_receipt("batch_receipt", {"tenant_id": "t", "n_games": 3})
        assert receipt["receipt_type"] == "batch_receipt"
        assert receipt["tenant_id"] == "t"
        assert receipt["n_games"] == 3
        assert "ts" in receipt
        assert receipt["payload_hash"] == dual_hash(json.dumps({"tenant_id": "t", "n_games": 3}, sort_keys=True))

    def test_default_tenant(self):
        """Tenant defaults to montyhall."""
        assert emit_receipt("x", {})["tenant_id"] == "montyhall"

    def test_jsonl(self):
        """One compact JSON line per receipt."""
        buffer = io.StringIO()
        receipt = emit_receipt("batch_receipt", {"n_games": 1})
        write_receipt_jsonl(receipt, buffer)
        line = buffer.getvalue()
        assert line.endswith("\n")
        assert json.loads(line) == receipt
