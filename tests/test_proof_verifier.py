"""
Tests for Merkle membership proof verification.
"""

import pytest
from merkle_commit.merkle import digest, root_from_items, to_hex, verify

from sample_items import SAMPLE_EMAILS, SAMPLE_ROOT, SAMPLE_SIBLING, build_proof


class TestReferenceProof:
    """Test the published sample proof."""

    def test_member_verifies(self):
        merkle_node = digest("airdrophunter1@gmail.com")

        assert verify(
            "airdrophunter2@gmail.com",
            [merkle_node, SAMPLE_SIBLING],
            SAMPLE_ROOT,
        )

    def test_non_member_rejected(self):
        merkle_node = digest("airdrophunter1@gmail.com")

        assert not verify(
            "airdrophunter4@gmail.com",
            [merkle_node, SAMPLE_SIBLING],
            SAMPLE_ROOT,
        )

    def test_proof_matches_indexer(self):
        proof = build_proof(SAMPLE_EMAILS, 1)

        assert [to_hex(node) for node in proof] == [
            to_hex(digest("airdrophunter1@gmail.com")),
            SAMPLE_SIBLING,
        ]

    def test_root_as_bytes(self):
        proof = build_proof(SAMPLE_EMAILS, 1)

        assert verify(SAMPLE_EMAILS[1], proof, bytes.fromhex(SAMPLE_ROOT[2:]))


class TestMembership:
    """Test proofs for every leaf."""

    @pytest.mark.parametrize("leaf_count", [1, 2, 3, 4, 5, 7, 8, 9, 16, 17])
    def test_every_leaf_verifies(self, leaf_count):
        items = [f"user{i}@example.com" for i in range(leaf_count)]
        root = root_from_items(items)

        for i, item in enumerate(items):
            proof = build_proof(items, i)
            assert verify(item, proof, root), f"leaf {i} of {leaf_count}"

    def test_single_leaf_empty_proof(self):
        root = root_from_items(["only"])

        assert verify("only", [], root)

    def test_proof_for_other_leaf_rejected(self):
        items = [f"item{i}" for i in range(8)]
        root = root_from_items(items)

        assert not verify(items[0], build_proof(items, 5), root)

    def test_item_outside_set_rejected(self):
        items = [f"item{i}" for i in range(8)]
        root = root_from_items(items)

        assert not verify("intruder", build_proof(items, 0), root)

    def test_wrong_root_rejected(self):
        items = [f"item{i}" for i in range(4)]
        other_root = root_from_items(["x", "y"])

        assert not verify(items[2], build_proof(items, 2), other_root)


class TestMalformedProofs:
    """Malformed input yields False, never an exception."""

    def setup_method(self):
        self.items = [f"item{i}" for i in range(8)]
        self.root = root_from_items(self.items)
        self.proof = build_proof(self.items, 3)

    def test_short_proof_rejected(self):
        assert not verify(self.items[3], self.proof[:-1], self.root)

    def test_long_proof_rejected(self):
        assert not verify(self.items[3], self.proof + [self.proof[-1]], self.root)

    def test_reordered_proof_rejected(self):
        assert not verify(self.items[3], list(reversed(self.proof)), self.root)

    def test_malformed_sibling(self):
        assert not verify(self.items[3], ["0x1234"] + self.proof[1:], self.root)

    def test_malformed_root(self):
        assert not verify(self.items[3], self.proof, "not-a-root")

    def test_oversized_item(self):
        assert not verify("x" * 64, self.proof, self.root)


class TestDemo:
    """Test the sample-data demo."""

    def test_demo_output(self, capsys):
        from merkle_commit.merkle.proof_verifier import main

        main()

        out = capsys.readouterr().out
        assert f"Merkle Root: {SAMPLE_ROOT}" in out
        assert "airdrophunter2@gmail.com: ✓ Member" in out
        assert "airdrophunter4@gmail.com: ✗ Not a member" in out


class TestNonIterableProof:
    """A proof that is not a sequence is rejected, not raised."""

    def test_none_proof(self):
        root = root_from_items(SAMPLE_EMAILS)

        assert not verify(SAMPLE_EMAILS[0], None, root)

    def test_integer_sibling(self):
        root = root_from_items(SAMPLE_EMAILS)

        assert not verify(SAMPLE_EMAILS[0], [42], root)
