"""
节点数据验证器
"""
import re
from typing import Dict, Any, List, Optional

from ..exceptions import ValidationError


class NodeDataValidator:
    """节点数据验证器，校验 to_dict 形式的节点数据"""

    def __init__(self):
        self._lang_pattern = re.compile(r'^[a-zA-Z]{2,3}([_-][a-zA-Z0-9]{2,8})?$')

    def validate_node_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        验证并清理节点数据

        Args:
            data: 节点数据字典

        Returns:
            只包含已知字段的字典

        Raises:
            ValidationError: 数据无效
        """
        if not isinstance(data, dict):
            raise ValidationError(
                message="节点数据必须是字典",
                field="data",
                value=data,
                reason="invalid_type"
            )

        validated: Dict[str, Any] = {}

        # 节点编码
        if 'code' not in data:
            raise ValidationError(
                message="节点数据缺少编码",
                field="code",
                reason="required_field_missing"
            )
        code = data['code']
        if not self._validate_string(code):
            raise ValidationError(
                message="节点编码必须是非空字符串",
                field="code",
                value=code,
                reason="invalid_code"
            )
        validated['code'] = code

        # 父节点编码与分组（可选）
        for key in ('parent_code', 'group'):
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise ValidationError(
                    message=f"{key} 必须是字符串或None",
                    field=key,
                    value=value,
                    reason="invalid_type"
                )
            validated[key] = value

        # 排序位置（可选）
        position = data.get('position', -1)
        if not isinstance(position, int) or isinstance(position, bool):
            raise ValidationError(
                message="position 必须是整数",
                field="position",
                value=position,
                reason="invalid_type"
            )
        validated['position'] = position

        validated['children_codes'] = self.validate_children_codes(data.get('children_codes') or [])
        validated['titles'] = self.validate_titles(data.get('titles') or {})

        return validated

    def validate_children_codes(self, codes: List[str]) -> List[str]:
        """验证子节点编码列表"""
        if not isinstance(codes, (list, tuple)):
            raise ValidationError(
                message="children_codes 必须是列表",
                field="children_codes",
                value=codes,
                reason="invalid_type"
            )

        for code in codes:
            if not self._validate_string(code):
                raise ValidationError(
                    message=f"无效的子节点编码: {code!r}",
                    field="children_codes",
                    value=code,
                    reason="invalid_code"
                )
        return list(codes)

    def validate_extra_groups(self, groups: List[str]) -> List[str]:
        """验证附加授权分组列表"""
        if not isinstance(groups, (list, tuple, set, frozenset)):
            raise ValidationError(
                message="extra_groups 必须是列表",
                field="extra_groups",
                value=groups,
                reason="invalid_type"
            )

        for group in groups:
            if not self._validate_string(group):
                raise ValidationError(
                    message=f"无效的分组编码: {group!r}",
                    field="extra_groups",
                    value=group,
                    reason="invalid_code"
                )
        return list(groups)

    def validate_titles(self, titles: Dict[str, str]) -> Dict[str, str]:
        """验证标题映射"""
        if not isinstance(titles, dict):
            raise ValidationError(
                message="titles 必须是字典",
                field="titles",
                value=titles,
                reason="invalid_type"
            )

        for lang_code, title in titles.items():
            self.validate_lang_code(lang_code)
            if not isinstance(title, str):
                raise ValidationError(
                    message=f"标题必须是字符串: {lang_code}",
                    field="titles",
                    value=title,
                    reason="invalid_type"
                )
        return dict(titles)

    def validate_lang_code(self, lang_code: str) -> bool:
        """验证语言编码格式，如 en、it、zh-CN"""
        if not isinstance(lang_code, str) or not self._lang_pattern.match(lang_code):
            raise ValidationError(
                message=f"无效的语言编码: {lang_code!r}",
                field="lang_code",
                value=lang_code,
                reason="invalid_format"
            )
        return True

    def _validate_string(self, value: Optional[str], min_len: int = 1) -> bool:
        """验证字符串，编码不限制最大长度"""
        return isinstance(value, str) and len(value) >= min_len
