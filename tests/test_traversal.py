"""
测试需要解析器的跨层级操作：完整标题、路径、祖先判断
"""
import logging

import pytest

from nodetree.core.node import TreeNode, NodeRepository
from nodetree.interfaces import INodeResolver
from nodetree.exceptions import CyclicGraphDetected


class CountingResolver(INodeResolver):
    """记录解析次数的解析器"""

    def __init__(self, nodes):
        self._nodes = {node.code: node for node in nodes}
        self.calls = []

    def resolve(self, code):
        self.calls.append(code)
        return self._nodes.get(code)


class TestFullTitle:
    """测试完整标题（面包屑）"""

    def test_full_title(self, three_level_repository):
        intro = three_level_repository.get_node("C")
        assert intro.get_full_title("en", three_level_repository) == "Home / Docs / Intro"

    def test_short_full_title(self, three_level_repository):
        intro = three_level_repository.get_node("C")
        assert intro.get_short_full_title("en", three_level_repository) == ".. / .. / Intro"
        assert intro.get_full_title("en", three_level_repository, " / ", True) == ".. / .. / Intro"

    def test_custom_separator(self, three_level_repository):
        intro = three_level_repository.get_node("C")
        assert intro.get_full_title("en", three_level_repository, separator=" > ") == "Home > Docs > Intro"
        assert intro.get_short_full_title("en", three_level_repository, "|") == "..|..|Intro"

    def test_root_returns_own_title(self, three_level_repository):
        root = three_level_repository.get_node("A")
        assert root.get_full_title("en", three_level_repository) == "Home"
        assert root.get_short_full_title("en", three_level_repository) == "Home"

    def test_missing_title_falls_back_to_code(self, three_level_repository):
        intro = three_level_repository.get_node("C")
        assert intro.get_full_title("it", three_level_repository) == "Casa / B / C"

    def test_self_referencing_root_segment_included(self):
        repo = NodeRepository([
            TreeNode(code="homepage", parent_code="homepage", titles={"en": "Home"}),
            TreeNode(code="news", parent_code="homepage", titles={"en": "News"}),
        ])
        news = repo.get_node("news")
        assert news.get_full_title("en", repo) == "Home / News"
        assert news.get_short_full_title("en", repo) == ".. / News"

    def test_resolution_gap_returns_partial_title(self):
        intro = TreeNode(code="C", parent_code="B", titles={"en": "Intro"})
        repo = NodeRepository([TreeNode(code="A", titles={"en": "Home"}), intro])
        assert intro.get_full_title("en", repo) == "Intro"

    def test_resolution_gap_higher_up(self):
        repo = NodeRepository([
            TreeNode(code="B", parent_code="A", titles={"en": "Docs"}),
            TreeNode(code="C", parent_code="B", titles={"en": "Intro"}),
        ])
        assert repo.get_node("C").get_full_title("en", repo) == "Docs / Intro"

    def test_resolution_gap_logged_at_debug(self, caplog):
        intro = TreeNode(code="C", parent_code="B", titles={"en": "Intro"})
        with caplog.at_level(logging.DEBUG, logger="nodetree"):
            intro.get_full_title("en", NodeRepository())
        assert any("B" in record.getMessage() for record in caplog.records)

    def test_walk_stops_at_root(self):
        resolver = CountingResolver([
            TreeNode(code="A"),
            TreeNode(code="B", parent_code="A"),
            TreeNode(code="C", parent_code="B"),
        ])
        resolver.resolve("C").get_full_title("en", resolver)
        # 初始的 resolve("C") 加上 B、A 各一次
        assert resolver.calls == ["C", "B", "A"]


class TestPath:
    """测试路径"""

    def test_path_array(self, three_level_repository):
        intro = three_level_repository.get_node("C")
        assert intro.get_path_array(three_level_repository) == ["A", "B", "C"]
        assert intro.get_path_array(three_level_repository, add_root=False) == ["B", "C"]

    def test_path(self, three_level_repository):
        intro = three_level_repository.get_node("C")
        assert intro.get_path(three_level_repository) == "A/B/C"
        assert intro.get_path(three_level_repository, ".", False) == "B.C"

    def test_root_path(self, three_level_repository):
        root = three_level_repository.get_node("A")
        assert root.get_path_array(three_level_repository) == ["A"]
        assert root.get_path_array(three_level_repository, add_root=False) == []
        assert root.get_path(three_level_repository, add_root=False) == ""

    def test_child_of_self_referencing_root(self):
        repo = NodeRepository([
            TreeNode(code="homepage", parent_code="homepage"),
            TreeNode(code="news", parent_code="homepage"),
        ])
        news = repo.get_node("news")
        assert news.get_path_array(repo) == ["homepage", "news"]
        assert news.get_path_array(repo, add_root=False) == ["news"]

    def test_resolution_gap_truncates_path(self):
        repo = NodeRepository([
            TreeNode(code="B", parent_code="A"),
            TreeNode(code="C", parent_code="B"),
        ])
        assert repo.get_node("C").get_path_array(repo) == ["B", "C"]
        assert repo.get_node("C").get_path_array(repo, add_root=False) == ["B", "C"]


class TestIsChildOf:
    """测试祖先判断"""

    def test_descendant(self, three_level_repository):
        intro = three_level_repository.get_node("C")
        assert intro.is_child_of("A", three_level_repository)
        assert intro.is_child_of("B", three_level_repository)

    def test_self(self, three_level_repository):
        docs = three_level_repository.get_node("B")
        assert docs.is_child_of("B", three_level_repository)

    def test_not_descendant(self, three_level_repository):
        docs = three_level_repository.get_node("B")
        assert not docs.is_child_of("C", three_level_repository)
        assert not docs.is_child_of("missing", three_level_repository)

    def test_self_referencing_root_terminates(self):
        repo = NodeRepository([
            TreeNode(code="homepage", parent_code="homepage"),
            TreeNode(code="news", parent_code="homepage"),
        ])
        news = repo.get_node("news")
        assert news.is_child_of("homepage", repo)
        assert not news.is_child_of("other", repo)

    def test_unresolvable_parent(self):
        orphan = TreeNode(code="C", parent_code="B")
        assert not orphan.is_child_of("A", NodeRepository())


class TestCycleSafety:
    """测试环形父节点链"""

    @pytest.mark.parametrize("code", ["X", "Y"])
    def test_is_child_of_raises(self, cyclic_repository, code):
        node = cyclic_repository.get_node(code)
        with pytest.raises(CyclicGraphDetected) as exc_info:
            node.is_child_of("Z", cyclic_repository)
        assert exc_info.value.details["operation"] == "is_child_of"
        assert exc_info.value.details["node_code"] == code

    def test_is_child_of_finds_member_before_cycle(self, cyclic_repository):
        assert cyclic_repository.get_node("X").is_child_of("Y", cyclic_repository)

    @pytest.mark.parametrize("code", ["X", "Y"])
    def test_path_raises(self, cyclic_repository, code):
        node = cyclic_repository.get_node(code)
        with pytest.raises(CyclicGraphDetected):
            node.get_path_array(cyclic_repository)
        with pytest.raises(CyclicGraphDetected):
            node.get_path(cyclic_repository, add_root=False)

    @pytest.mark.parametrize("code", ["X", "Y"])
    def test_full_title_raises(self, cyclic_repository, code):
        node = cyclic_repository.get_node(code)
        with pytest.raises(CyclicGraphDetected):
            node.get_full_title("en", cyclic_repository)
        with pytest.raises(CyclicGraphDetected):
            node.get_short_full_title("en", cyclic_repository)

    def test_longer_cycle_below_node(self):
        repo = NodeRepository([
            TreeNode(code="leaf", parent_code="P"),
            TreeNode(code="P", parent_code="Q"),
            TreeNode(code="Q", parent_code="R"),
            TreeNode(code="R", parent_code="P"),
        ])
        with pytest.raises(CyclicGraphDetected) as exc_info:
            repo.get_node("leaf").get_path_array(repo)
        assert exc_info.value.details["repeated_code"] == "P"

    def test_cycle_logged_at_error(self, cyclic_repository, caplog):
        with caplog.at_level(logging.ERROR, logger="nodetree"):
            with pytest.raises(CyclicGraphDetected):
                cyclic_repository.get_node("X").get_full_title("en", cyclic_repository)
        assert any(record.levelno == logging.ERROR for record in caplog.records)
