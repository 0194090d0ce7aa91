"""
表单校验规则：只做存在性检查。
"""
from __future__ import annotations

from typing import List

from .models import FormState

USERNAME_REQUIRED = "Name is required."
SECTORS_REQUIRED = "At least one sector is required."
TERMS_REQUIRED = "Agree of terms is required."


def validate_form(state: FormState) -> List[str]:
    """返回错误信息列表，顺序固定：用户名、行业、条款。空列表表示通过。"""
    errors: List[str] = []
    if not state.username.strip():
        errors.append(USERNAME_REQUIRED)
    if not state.selected_sector_ids:
        errors.append(SECTORS_REQUIRED)
    if not state.agree_of_terms:
        errors.append(TERMS_REQUIRED)
    return errors
