"""
Unit tests for the ranked copy plan and its materialization.
"""

from pathlib import Path

import pytest

from histomatch.cli.actions import plan_copies, materialize
from histomatch.exceptions import CopyError
from histomatch.models import RankedPair, CopyOperation


class TestPlanCopies:
    """Test plan_copies function."""

    def test_disjoint_pairs(self):
        pairs = [
            RankedPair('/p/a.jpg', '/p/b.jpeg', 0.9),
            RankedPair('/p/c.JPG', '/p/d.jpg', 0.8),
            RankedPair('/p/e.jpg', '/p/f.jpg', 0.7),
            RankedPair('/p/g.jpg', '/p/h.jpg', 0.6),
        ]
        plan = plan_copies(pairs, '/out')

        assert [op.destination_name for op in plan] == [
            '0.jpg', '1.jpeg', '2.JPG', '3.jpg', '4.jpg', '5.jpg', '6.jpg', '7.jpg',
        ]

    def test_repeated_image_keeps_first_name(self):
        pairs = [
            RankedPair('/p/a.jpg', '/p/b.jpg', 0.9),
            RankedPair('/p/b.jpg', '/p/c.jpg', 0.8),
            RankedPair('/p/d.jpg', '/p/a.jpg', 0.7),
            RankedPair('/p/c.jpg', '/p/b.jpg', 0.6),
        ]
        plan = plan_copies(pairs, '/out')

        assert [(op.source, op.destination_name) for op in plan] == [
            ('/p/a.jpg', '0.jpg'),
            ('/p/b.jpg', '1.jpg'),
            ('/p/c.jpg', '3.jpg'),
            ('/p/d.jpg', '4.jpg'),
        ]

    def test_each_source_copied_once(self):
        pairs = [
            RankedPair('/p/a.jpg', '/p/b.jpg', 0.9),
            RankedPair('/p/a.jpg', '/p/c.jpg', 0.5),
            RankedPair('/p/b.jpg', '/p/c.jpg', 0.4),
        ]
        sources = [op.source for op in plan_copies(pairs, '/out')]
        assert len(sources) == len(set(sources))

    def test_destination_in_output_dir(self):
        plan = plan_copies([RankedPair('/p/a.jpg', '/p/b.jpg', 0.1)], '/out/sorted')
        assert Path(plan[0].destination) == Path('/out/sorted/0.jpg')

    def test_empty(self):
        assert plan_copies([], '/out') == []


class TestMaterialize:
    """Test materialize function."""

    def test_copies_files(self, temp_dir):
        src = temp_dir / "src"
        src.mkdir()
        (src / "a.jpg").write_bytes(b"aaa")
        (src / "b.jpg").write_bytes(b"bbb")
        dest = temp_dir / "out" / "nested"

        plan = plan_copies([RankedPair(str(src / "a.jpg"), str(src / "b.jpg"), 0.5)], dest)
        copied = materialize(plan, dest)

        assert copied == 2
        assert (dest / "0.jpg").read_bytes() == b"aaa"
        assert (dest / "1.jpg").read_bytes() == b"bbb"
        # Sources are left in place
        assert (src / "a.jpg").exists()

    def test_calls_copy_in_order(self, temp_dir):
        calls = []
        plan = [
            CopyOperation('/p/x.jpg', str(temp_dir / '0.jpg')),
            CopyOperation('/p/y.jpg', str(temp_dir / '1.jpg')),
        ]

        materialize(plan, temp_dir, copy_func=lambda s, d: calls.append((s, d)))

        assert calls == [(op.source, op.destination) for op in plan]

    def test_failure_stops_remaining_copies(self, temp_dir):
        calls = []

        def failing_copy(source, destination):
            calls.append(source)
            if source == '/p/b.jpg':
                raise OSError("disk full")

        plan = [
            CopyOperation('/p/a.jpg', str(temp_dir / '0.jpg')),
            CopyOperation('/p/b.jpg', str(temp_dir / '1.jpg')),
            CopyOperation('/p/c.jpg', str(temp_dir / '2.jpg')),
        ]

        with pytest.raises(CopyError) as exc_info:
            materialize(plan, temp_dir, copy_func=failing_copy)

        assert calls == ['/p/a.jpg', '/p/b.jpg']
        assert exc_info.value.source == '/p/b.jpg'

    def test_missing_source_is_fatal(self, temp_dir):
        plan = [CopyOperation(str(temp_dir / "missing.jpg"), str(temp_dir / "out" / "0.jpg"))]

        with pytest.raises(CopyError):
            materialize(plan, temp_dir / "out")

    def test_dry_run_touches_nothing(self, temp_dir):
        dest = temp_dir / "out"
        plan = [CopyOperation('/p/a.jpg', str(dest / '0.jpg'))]

        assert materialize(plan, dest, dry_run=True) == 1
        assert not dest.exists()
