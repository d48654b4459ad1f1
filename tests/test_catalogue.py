import pytest

from tools.catalogue import CATALOGUE, get_tool, list_tools
from tools.engine import check_lockstep
from tools.rules import RULES
from tools.schema import Param, ToolDefinition


def test_every_tool_has_a_rule_and_every_rule_a_tool():
    assert {t.name for t in list_tools()} == set(RULES)
    check_lockstep()


def test_tool_names_are_unique():
    names = [t.name for t in CATALOGUE]
    assert len(names) == len(set(names)) == 32


def test_listing_is_deterministic():
    assert [t.name for t in list_tools()] == [t.name for t in list_tools()]
    assert list_tools()[0].name == "get_user"
    assert list_tools()[-1].name == "send_sms"


def test_required_params_have_no_default():
    for tool in list_tools():
        for p in tool.params:
            if p.required:
                assert p.default is None, f"{tool.name}.{p.name}"


def test_required_param_with_default_is_rejected():
    with pytest.raises(ValueError):
        Param("x", "string", required=True, default="y")


def test_path_params_are_required_arguments():
    for name, rule in RULES.items():
        required = set(get_tool(name).required)
        assert set(rule.path_params) <= required, name


def test_input_schema_shape():
    schema = get_tool("get_available_numbers").input_schema()
    assert schema["type"] == "object"
    assert schema["required"] == []
    assert schema["properties"]["number_type"] == {
        "type": "string",
        "enum": ["local", "tollfree", "mobile"],
        "description": "Number type",
        "default": "local",
    }

    create = get_tool("create_assistant").input_schema()
    assert create["required"] == ["name", "apiKey"]
    assert create["properties"]["openai_websites"]["items"] == {"type": "string"}
    assert create["properties"]["openai_temperature"]["default"] == 0.8


def test_unknown_tool_lookup_returns_none():
    assert get_tool("nonexistent_tool") is None


def test_to_mcp_uses_camel_case_schema_key():
    out = ToolDefinition("ping", "Ping", ()).to_mcp()
    assert out == {
        "name": "ping",
        "description": "Ping",
        "inputSchema": {"type": "object", "properties": {}, "required": []},
    }
