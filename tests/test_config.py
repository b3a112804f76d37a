"""
测试配置和节点数据验证
"""
import pytest

from nodetree.config import TreeSettings, NodeDataValidator
from nodetree.exceptions import ConfigError, ValidationError


class TestTreeSettings:
    """测试 TreeSettings"""

    def test_defaults(self):
        settings = TreeSettings()
        assert settings.log_level == "INFO"
        assert settings.title_separator == " / "
        assert settings.path_separator == "/"
        assert settings.add_root_to_path is True
        assert settings.languages == ["en"]

    def test_log_level_normalized(self):
        assert TreeSettings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ConfigError) as exc_info:
            TreeSettings(log_level="LOUD")
        assert exc_info.value.details["config_key"] == "log_level"

    def test_empty_separator(self):
        with pytest.raises(ConfigError):
            TreeSettings(path_separator="")

    def test_default_lang_must_be_listed(self):
        with pytest.raises(ConfigError):
            TreeSettings(default_lang="it", languages=["en"])
        assert TreeSettings(default_lang="it", languages=["en", "it"]).default_lang == "it"

    def test_from_dict_filters_unknown_keys(self):
        settings = TreeSettings.from_dict({"root_code": "homepage", "unknown": 1})
        assert settings.root_code == "homepage"
        assert settings.to_dict()["root_code"] == "homepage"
        assert "unknown" not in settings.to_dict()


class TestNodeDataValidator:
    """测试 NodeDataValidator"""

    @pytest.fixture
    def validator(self):
        return NodeDataValidator()

    def test_valid_data(self, validator):
        validated = validator.validate_node_data({
            "code": "news",
            "parent_code": "homepage",
            "position": 1,
            "children_codes": ["n1"],
            "titles": {"en": "News", "zh-CN": "新闻"},
            "extra": "ignored",
        })
        assert validated == {
            "code": "news",
            "parent_code": "homepage",
            "group": None,
            "position": 1,
            "children_codes": ["n1"],
            "titles": {"en": "News", "zh-CN": "新闻"},
        }

    @pytest.mark.parametrize("data, field", [
        ({}, "code"),
        ({"code": ""}, "code"),
        ({"code": "a", "parent_code": 3}, "parent_code"),
        ({"code": "a", "position": "1"}, "position"),
        ({"code": "a", "position": True}, "position"),
        ({"code": "a", "children_codes": "b"}, "children_codes"),
        ({"code": "a", "children_codes": ["b", None]}, "children_codes"),
        ({"code": "a", "titles": ["en"]}, "titles"),
        ({"code": "a", "titles": {"en": 1}}, "titles"),
        ({"code": "a", "titles": {"english!": "x"}}, "lang_code"),
    ])
    def test_invalid_data(self, validator, data, field):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate_node_data(data)
        assert exc_info.value.details["field"] == field

    def test_not_a_dict(self, validator):
        with pytest.raises(ValidationError):
            validator.validate_node_data(["code"])
