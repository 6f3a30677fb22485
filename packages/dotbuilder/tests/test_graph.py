import logging

import pytest

from dotbuilder.enums import RankType, Shape
from dotbuilder.errors import InvalidPropertyValueError
from dotbuilder.graph import ClusterSubgraph, Graph, Subgraph
from dotbuilder.properties import GlobalNodeProperties


def test_new_node_twice_creates_distinct_nodes_and_lookup_returns_first():
    graph = Graph()
    first = graph.new_node("task")
    second = graph.new_node(" task ")

    assert first is not second
    assert first.id == second.id == '"task"'
    assert graph.get_node_or_none("task") is first
    assert graph.nodes == (first, second)


def test_lookup_miss_returns_none():
    graph = Graph()
    graph.new_node("present")

    assert graph.get_node_or_none("absent") is None


def test_lookup_on_empty_container_logs_debug_diagnostic(caplog):
    caplog.set_level(logging.DEBUG, logger="dotbuilder.graph")
    graph = Graph("Empty")

    assert graph.get_node_or_none("anything") is None
    assert "contains no nodes" in caplog.text


def test_lookup_in_all_graphs_searches_depth_first_in_insertion_order():
    graph = Graph()
    level1 = graph.new_subgraph("level1")
    level2 = level1.new_subgraph("level2")
    level3 = level2.new_subgraph("level3")
    deep = level3.new_node("deep")
    later = graph.new_subgraph("later")
    later.new_node("deep")

    assert graph.get_node_or_none("deep") is None
    assert graph.get_node_or_none_in_all_graphs("deep") is deep
    assert graph.get_node_or_none_in_all_graphs("missing") is None


def test_lookup_in_all_graphs_prefers_local_node():
    graph = Graph()
    graph.new_subgraph("inner").new_node("n")
    local = graph.new_node("n")

    assert graph.get_node_or_none_in_all_graphs("n") is local


def test_edge_by_labels_creates_both_unseen_nodes_in_calling_container():
    graph = Graph()
    edge = graph.new_edge("a", "b")

    assert [node.id for node in graph.nodes] == ['"a"', '"b"']
    assert graph.edges == (edge,)
    assert edge.source is graph.nodes[0]
    assert edge.target is graph.nodes[1]


def test_edge_by_labels_reuses_existing_local_nodes():
    graph = Graph()
    a = graph.new_node("a")
    graph.new_edge("a", "b")
    edge = graph.new_edge("b", "a")

    assert len(graph.nodes) == 2
    assert edge.target is a


def test_edge_by_label_does_not_reuse_nodes_from_nested_subgraphs():
    graph = Graph()
    inner = graph.new_subgraph("inner")
    nested = inner.new_node("shared")

    edge = graph.new_edge("shared", "other")

    assert edge.source is not nested
    assert edge.source.id == nested.id
    assert len(graph.nodes) == 2

    explicit = graph.new_edge(graph.get_node_or_none_in_all_graphs("shared"), "other")
    assert explicit.source is nested


def test_edge_by_nodes_uses_given_nodes():
    graph = Graph()
    sub = graph.new_subgraph("s")
    a = sub.new_node("a")
    b = graph.new_node("b")

    edge = graph.new_edge(a, b)

    assert edge.source is a and edge.target is b
    assert graph.nodes == (b,)


def test_new_subgraph_defaults_to_same_rank():
    graph = Graph()
    sub = graph.new_subgraph("row")

    assert isinstance(sub, Subgraph)
    assert sub.id == '"row"'
    assert sub.rank_type is RankType.SAME
    assert graph.subgraphs == (sub,)


def test_new_subgraph_validates_rank_type():
    graph = Graph()

    assert graph.new_subgraph("top", "min").rank_type is RankType.MIN
    with pytest.raises(InvalidPropertyValueError):
        graph.new_subgraph("bad", "middle")


def test_cluster_id_is_stripped_of_non_word_characters_with_warning(caplog):
    graph = Graph()

    with caplog.at_level(logging.WARNING, logger="dotbuilder.graph"):
        cluster = graph.new_cluster_subgraph("my id!")

    assert isinstance(cluster, ClusterSubgraph)
    assert cluster.id == '"myid"'
    assert cluster.name == "myid"
    assert "non word characters" in caplog.text


def test_clean_cluster_id_logs_nothing(caplog):
    graph = Graph()

    with caplog.at_level(logging.WARNING, logger="dotbuilder.graph"):
        graph.new_cluster_subgraph("backend")

    assert caplog.records == []


def test_global_node_properties_are_replaced_not_merged():
    graph = Graph()
    assert graph.global_node_properties.get_value("shape") is Shape.BOX

    graph.global_node_properties = GlobalNodeProperties(color="blue")

    assert "shape" not in graph.global_node_properties
    assert graph.global_node_properties.render() == 'node [color="blue"];'


def test_fontsize_is_backed_by_graph_properties():
    graph = Graph()
    assert graph.fontsize is None

    graph.fontsize = 14

    assert graph.fontsize == "14"
    assert graph.properties.get_value("fontsize") == "14"


def test_clear_empties_all_collections():
    graph = Graph()
    graph.new_edge("a", "b")
    graph.new_subgraph("s")

    graph.clear()

    assert graph.nodes == ()
    assert graph.edges == ()
    assert graph.subgraphs == ()


def test_self_loop_by_label_creates_single_node():
    graph = Graph()
    edge = graph.new_edge("loop", "loop")

    assert len(graph.nodes) == 1
    assert edge.source is edge.target
