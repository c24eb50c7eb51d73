import taylor_ad as ta
from taylor_ad.core.graph_utils import get_graph_stats, print_graph_summary, topological_order
from taylor_ad.taylor import variable


def test_operands_come_before_their_users_and_shared_nodes_once():
    x = variable(0.5)
    e = ta.exp(x)
    y = e * e + e
    order = topological_order(y.node)
    pos = {id(nd): i for i, nd in enumerate(order)}
    assert len(order) == len(pos)
    for nd in order:
        for op in nd.operands:
            assert pos[id(op)] < pos[id(nd)]
    assert order[-1] is y.node
    assert sum(1 for nd in order if nd is e.node) == 1


def test_prune_skips_subtrees():
    x = variable(0.5)
    e = ta.exp(x)
    y = e + 1.0
    order = topological_order(y.node, prune=lambda nd: nd is e.node)
    assert e.node not in order
    assert x.node not in order


def test_inner_graph_is_only_followed_on_request():
    x = variable(2.0)
    y = x ** 0.5
    plain = topological_order(y.node)
    full = topological_order(y.node, include_inner=True)
    assert len(full) > len(plain)
    assert y.node.inner in full


def test_graph_stats_for_diamond():
    x = variable(0.5)
    e = ta.exp(x)
    y = e * e + e
    stats = get_graph_stats(y.node)
    assert stats['nodes'] == 4
    assert stats['edges'] == 5
    assert stats['depth'] == 4
    assert stats['max_fan_out'] == 3
    assert stats['operations'] == {'var': 1, 'exp': 1, 'mul': 1, 'add': 1}


def test_print_graph_summary(capsys):
    x = variable(0.5)
    y = ta.sin(x) + 2.0
    stats = print_graph_summary(y.node, detailed=True)
    out = capsys.readouterr().out
    assert "TAYLOR EXPRESSION GRAPH SUMMARY" in out
    assert "sin" in out
    assert stats['nodes'] == 4
