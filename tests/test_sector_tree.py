"""
单元测试：行业树构建与展平
"""
import logging
import sys
from pathlib import Path

import pytest

# 添加项目根目录到路径
sys.path.insert(0, str(Path(__file__).parent.parent))

from sectorform.domain import (
    SectorRecord,
    build_display_sectors,
    build_sector_tree,
    flatten_sector_tree,
)
from sectorform.infra.exceptions import ValidationError


def _records(*rows):
    return [SectorRecord(id=i, parent_id=p, name=n) for i, p, n in rows]


@pytest.fixture
def nested_records():
    """三层嵌套 + 多个根，子节点在输入中先于父节点出现"""
    return _records(
        (1, None, "Manufacturing"),
        (5, 2, "Bakery & confectionery products"),
        (2, 1, "Food and Beverage"),
        (3, 1, "Furniture"),
        (4, None, "Service"),
        (6, 4, "Tourism"),
        (7, 5, "Cakes"),
    )


class TestBuildSectorTree:
    """森林构建测试"""

    def test_roots_keep_input_order(self, nested_records):
        forest = build_sector_tree(nested_records)
        assert [n.name for n in forest] == ["Manufacturing", "Service"]

    def test_children_keep_input_order(self, nested_records):
        forest = build_sector_tree(nested_records)
        manufacturing = forest[0]
        assert [c.id for c in manufacturing.children] == [2, 3]
        assert [c.id for c in manufacturing.children[0].children] == [5]
        assert [c.id for c in manufacturing.children[0].children[0].children] == [7]

    def test_accepts_raw_api_dicts(self):
        forest = build_sector_tree([
            {"id": 1, "parent_id": None, "name": "A"},
            {"id": 2, "parent_id": 1, "name": "B"},
        ])
        assert forest[0].name == "A"
        assert forest[0].children[0].name == "B"

    def test_empty_input(self):
        assert build_sector_tree([]) == []

    def test_input_records_not_mutated(self, nested_records):
        before = [r.to_dict() for r in nested_records]
        flatten_sector_tree(build_sector_tree(nested_records))
        assert [r.to_dict() for r in nested_records] == before

    def test_dangling_parent_dropped_with_warning(self, caplog):
        records = _records((1, None, "A"), (2, 99, "Orphan"), (3, 1, "B"))
        with caplog.at_level(logging.WARNING):
            forest = build_sector_tree(records)
        display = flatten_sector_tree(forest)
        assert [d.id for d in display] == [1, 3]
        assert any("Orphan" in r.getMessage() for r in caplog.records)

    def test_dangling_parent_strict_raises(self):
        records = _records((1, None, "A"), (2, 99, "Orphan"))
        with pytest.raises(ValidationError) as exc_info:
            build_sector_tree(records, strict=True)
        assert exc_info.value.details["value"] == 99


class TestFlattenSectorTree:
    """展平测试"""

    def test_basic_scenario(self):
        records = _records((1, None, "A"), (2, 1, "B"), (3, None, "C"))
        names = [d.name for d in build_display_sectors(records)]
        assert names == ["A", "----B", "C"]

    def test_length_matches_input(self, nested_records):
        assert len(build_display_sectors(nested_records)) == len(nested_records)

    def test_prefix_repeats_per_depth(self, nested_records):
        display = build_display_sectors(nested_records)
        by_id = {d.id: d for d in display}
        assert by_id[1].name == "Manufacturing"
        assert by_id[2].name == "----Food and Beverage"
        assert by_id[5].name == "--------Bakery & confectionery products"
        assert by_id[7].name == "------------Cakes"
        for d in display:
            assert d.name.startswith("----" * d.depth)
            assert not d.name[len("----" * d.depth):].startswith("----")

    def test_parent_precedes_descendants(self, nested_records):
        display = build_display_sectors(nested_records)
        position = {d.id: i for i, d in enumerate(display)}
        for d in display:
            if d.parent_id is not None:
                assert position[d.parent_id] < position[d.id]

    def test_preorder_sequence(self, nested_records):
        display = build_display_sectors(nested_records)
        assert [d.id for d in display] == [1, 2, 5, 7, 3, 4, 6]

    def test_custom_marker(self):
        records = _records((1, None, "A"), (2, 1, "B"), (3, 2, "C"))
        names = [d.name for d in build_display_sectors(records, marker="  ")]
        assert names == ["A", "  B", "    C"]

    def test_repeated_calls_do_not_accumulate(self, nested_records):
        forest = build_sector_tree(nested_records)
        first = flatten_sector_tree(forest)
        second = flatten_sector_tree(forest)
        assert first == second
        assert len(second) == len(nested_records)

    def test_deep_chain(self):
        depth = 3000
        records = _records(*[(i, i - 1 if i > 0 else None, f"S{i}") for i in range(depth)])
        display = build_display_sectors(records, marker="-")
        assert len(display) == depth
        assert display[-1].depth == depth - 1
