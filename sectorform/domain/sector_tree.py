"""
行业树规则：扁平 parent/child 列表 <-> 森林 <-> 带缩进的显示列表。

纯函数，不做 IO。
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Tuple

from ..infra.exceptions import ValidationError
from ..infra.logging import get_logger
from .models import DisplaySector, SectorNode, to_sector_records

logger = get_logger(__name__)

DEFAULT_DEPTH_MARKER = "----"


def build_sector_tree(records: Iterable[Any], *, strict: bool = False) -> List[SectorNode]:
    """
    将扁平行业列表构建为森林。

    - 根节点与子节点均保持输入顺序
    - parent_id 指向不存在的 id 时：默认丢弃该记录并记录 warning；strict=True 时抛出 ValidationError

    Args:
        records: SectorRecord 或 API 原始 dict
        strict: 是否对悬空 parent_id 抛错

    Returns:
        根节点列表
    """
    nodes = [SectorNode(record=r) for r in to_sector_records(records)]
    index: Dict[int, SectorNode] = {n.id: n for n in nodes}

    forest: List[SectorNode] = []
    for node in nodes:
        if node.parent_id is None:
            forest.append(node)
            continue

        parent = index.get(node.parent_id)
        if parent is None:
            if strict:
                raise ValidationError(
                    f"行业 {node.id} 的父节点 {node.parent_id} 不存在",
                    field="parent_id",
                    value=node.parent_id,
                )
            logger.warning(f"[行业树] 丢弃悬空记录 id={node.id} name={node.name!r}: parent_id={node.parent_id} 不存在")
            continue
        parent.children.append(node)

    return forest


def flatten_sector_tree(forest: List[SectorNode], marker: str = DEFAULT_DEPTH_MARKER) -> List[DisplaySector]:
    """
    前序深度优先遍历森林，生成显示列表。

    根节点 depth=0 不加前缀，每深一层多一个 marker。每次调用返回新列表。
    """
    out: List[DisplaySector] = []
    stack: List[Tuple[SectorNode, int]] = [(node, 0) for node in reversed(forest)]
    while stack:
        node, depth = stack.pop()
        out.append(
            DisplaySector(
                id=node.id,
                parent_id=node.parent_id,
                name=marker * depth + node.name,
                depth=depth,
            )
        )
        stack.extend((child, depth + 1) for child in reversed(node.children))
    return out


def build_display_sectors(records: Iterable[Any], *, marker: str = DEFAULT_DEPTH_MARKER, strict: bool = False) -> List[DisplaySector]:
    """build + flatten 的快捷方法"""
    return flatten_sector_tree(build_sector_tree(records, strict=strict), marker=marker)
