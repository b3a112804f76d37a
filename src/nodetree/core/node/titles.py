"""
多语言标题映射
"""
from typing import Dict, Iterator, Mapping, Optional


class TitleMap:
    """
    语言编码 -> 标题 的映射，由单个节点独占

    不校验语言编码格式；set 直接覆盖已有标题。
    """

    def __init__(self, titles: Optional[Mapping[str, str]] = None):
        self._titles: Dict[str, str] = dict(titles) if titles else {}

    def get(self, lang_code: str, default: Optional[str] = None) -> Optional[str]:
        """获取标题，不存在时返回default"""
        return self._titles.get(lang_code, default)

    def set(self, lang_code: str, title: str) -> None:
        """设置标题（覆盖）"""
        self._titles[lang_code] = title

    def copy(self) -> 'TitleMap':
        """生成独立副本，不共享底层存储"""
        return TitleMap(self._titles)

    def to_dict(self) -> Dict[str, str]:
        return dict(self._titles)

    def __contains__(self, lang_code: object) -> bool:
        return lang_code in self._titles

    def __len__(self) -> int:
        return len(self._titles)

    def __iter__(self) -> Iterator[str]:
        return iter(self._titles)

    def __eq__(self, other) -> bool:
        if isinstance(other, TitleMap):
            return self._titles == other._titles
        if isinstance(other, dict):
            return self._titles == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"TitleMap({self._titles!r})"
