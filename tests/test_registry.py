from tools import get_operation, list_operations

EXPECTED = [
    "add",
    "subtract",
    "multiply",
    "divide",
    "power",
    "sqrt",
    "factorial",
    "get_operator_info",
]


def test_lists_the_eight_operations_in_order():
    assert [op.name for op in list_operations()] == EXPECTED


def test_listing_is_stable():
    assert list_operations() == list_operations()
    assert [op.name for op in list_operations()] == [op.name for op in list_operations()]


def test_names_are_unique():
    names = [op.name for op in list_operations()]
    assert len(names) == len(set(names))


def test_binary_input_schema():
    schema = get_operation("divide").input_schema()
    assert schema["type"] == "object"
    assert set(schema["properties"]) == {"a", "b"}
    assert schema["properties"]["b"]["type"] == "number"
    assert "0" in schema["properties"]["b"]["description"]
    assert schema["required"] == ["a", "b"]


def test_operator_info_takes_no_arguments():
    schema = get_operation("get_operator_info").input_schema()
    assert schema == {"type": "object", "properties": {}}


def test_unknown_operation_lookup():
    assert get_operation("modulo") is None
