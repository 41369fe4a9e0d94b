from fetchtree.expression import RelationExpression, parse_relation_expression


def test_all_recursive():
    assert parse_relation_expression("*").is_all_recursive()
    assert not parse_relation_expression("a").is_all_recursive()
    assert not parse_relation_expression("[*, a]").is_all_recursive()
    assert not RelationExpression().is_all_recursive()


def test_all_recursive_relation_returns_itself():
    expr = parse_relation_expression("*")
    assert expr.relation("anything") is expr
    assert expr.relation("children").relation("pets") is expr


def test_is_recursive():
    assert parse_relation_expression("a.^").is_recursive("a")
    assert not parse_relation_expression("a.b").is_recursive("a")
    assert not parse_relation_expression("a.[^, b]").is_recursive("a")
    assert not parse_relation_expression("a.^").is_recursive("b")
    assert not parse_relation_expression("*").is_recursive("a")


def test_recursive_relation_keeps_marker_one_level_down():
    expr = parse_relation_expression("[parent.^, pets]")
    sub = expr.relation("parent")
    assert sub is not None
    assert sub.root_names() == ["parent"]
    assert sub.is_recursive("parent")
    assert sub.nodes[0] is expr.nodes[0]
    assert sub.relation("parent") == sub


def test_relation_descends_one_level():
    expr = parse_relation_expression("children.[movies.actors, pets]")
    sub = expr.relation("children")
    assert sub is not None
    assert sub.root_names() == ["movies", "pets"]
    assert sub.nodes == expr.nodes[0].children


def test_missing_relation_and_leaf_relation_are_distinct():
    expr = parse_relation_expression("children.pets")
    assert expr.relation("parents") is None

    leaf = expr.relation("children").relation("pets")
    assert leaf is not None
    assert leaf.nodes == ()
    assert not leaf


def test_relation_uses_first_matching_root():
    expr = parse_relation_expression("[a.b, a.c]")
    assert expr.relation("a").root_names() == ["b"]


def test_to_string_is_canonical():
    source = "children.[movies.actors.[pets, children], pets]"
    assert parse_relation_expression(source).to_string() == source
    assert str(parse_relation_expression("[ a,b . c ]")) == "[a, b.c]"
    assert str(RelationExpression()) == ""


def test_to_string_parses_back_to_equal_expression():
    for source in ["a", "a.^", "*", "a.[b, c].d", "[x.[y, z], w]"]:
        expr = parse_relation_expression(source)
        assert parse_relation_expression(expr.to_string()) == expr


def test_expressions_are_hashable_values():
    assert len({parse_relation_expression("a.b"), parse_relation_expression("a . b")}) == 1
