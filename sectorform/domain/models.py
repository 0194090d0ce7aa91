"""
领域模型（Domain Models）：纯业务数据结构，不做 IO。
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Set


# =============================================================================
# Sector（行业分类）
# =============================================================================


@dataclass(frozen=True)
class SectorRecord:
    """API 返回的扁平行业记录（不可变值对象）"""
    id: int
    parent_id: Optional[int]
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "parent_id": self.parent_id, "name": self.name}

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SectorRecord":
        parent_id = d.get("parent_id")
        return cls(
            id=int(d["id"]),
            parent_id=int(parent_id) if parent_id is not None else None,
            name=str(d.get("name") or ""),
        )


@dataclass
class SectorNode:
    """
    行业树节点：
    - record: 原始记录
    - children: 子节点（按输入顺序）
    """
    record: SectorRecord
    children: List["SectorNode"] = field(default_factory=list)

    @property
    def id(self) -> int:
        return self.record.id

    @property
    def parent_id(self) -> Optional[int]:
        return self.record.parent_id

    @property
    def name(self) -> str:
        return self.record.name


@dataclass(frozen=True)
class DisplaySector:
    """下拉列表中显示的行业（name 已带层级前缀）"""
    id: int
    parent_id: Optional[int]
    name: str
    depth: int = 0


# =============================================================================
# Submission（提交内容，对应 API 请求/响应体）
# =============================================================================


@dataclass
class Submission:
    username: str
    sectors: List[int]
    is_agree_of_terms: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "username": self.username,
            "is_agree_of_terms": self.is_agree_of_terms,
            "sectors": list(self.sectors),
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Submission":
        return cls(
            username=str(d.get("username") or ""),
            sectors=[int(s) for s in (d.get("sectors") or [])],
            is_agree_of_terms=bool(d.get("is_agree_of_terms")),
        )


# =============================================================================
# FormState（表单状态，仅由 FormController 修改）
# =============================================================================


@dataclass
class FormState:
    username: str = ""
    agree_of_terms: bool = False
    selected_sector_ids: Set[int] = field(default_factory=set)
    submitted_at: Optional[datetime] = None
    errors: List[str] = field(default_factory=list)

    def to_submission(self) -> Submission:
        return Submission(
            username=self.username,
            sectors=sorted(self.selected_sector_ids),
            is_agree_of_terms=self.agree_of_terms,
        )

    def apply_submission(self, submission: Submission) -> None:
        """用服务端保存的值覆盖用户名/行业/条款"""
        self.username = submission.username
        self.selected_sector_ids = set(submission.sectors)
        self.agree_of_terms = submission.is_agree_of_terms


def to_sector_records(items: Iterable[Any]) -> List[SectorRecord]:
    """接受 SectorRecord 或原始 dict，统一转换为 SectorRecord"""
    return [it if isinstance(it, SectorRecord) else SectorRecord.from_dict(it) for it in items]
