"""Dispatch engine: (tool name, args) -> RequestSpec -> backend -> result."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import ValidationError as PydanticValidationError

from core.config import ApiContext
from core.errors import ConfigurationError, UnknownToolError, ValidationError
from core.request_spec import RequestSpec
from core.vavicky_api import VavickyAPI
from tools.catalogue import get_tool, list_tools
from tools.rules import RULES, Rule
from tools.schema import ToolDefinition


def check_lockstep() -> None:
    """Fail loudly if the catalogue and the rule table drift apart."""
    listed = {t.name for t in list_tools()}
    ruled = set(RULES)
    if listed != ruled:
        raise RuntimeError(
            f"Catalogue/rule mismatch: missing rules={sorted(listed - ruled)} "
            f"missing tools={sorted(ruled - listed)}"
        )
    for name, rule in RULES.items():
        required = set(get_tool(name).required)
        loose = [p for p in rule.path_params if p not in required]
        if loose:
            raise RuntimeError(f"Tool {name}: path params {loose} are not required arguments")


check_lockstep()


def validate_args(tool: ToolDefinition, args: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Validate args against the tool schema; return only the keys the caller supplied."""
    if args is None:
        args = {}
    if not isinstance(args, Mapping):
        raise ValidationError(f"Arguments for {tool.name} must be an object")
    try:
        parsed = tool.args_model.model_validate(dict(args))
    except PydanticValidationError as e:
        # raw inputs stay out of the details; they may carry credentials
        errors = [
            {k: v for k, v in err.items() if k != "input"}
            for err in e.errors(include_url=False, include_context=False)
        ]
        fields = ", ".join(".".join(str(p) for p in err["loc"]) or "args" for err in errors)
        raise ValidationError(
            f"Invalid arguments for {tool.name}: {fields}",
            details={"tool": tool.name, "errors": errors},
        ) from e
    return parsed.model_dump(exclude_unset=True)


class DispatchEngine:
    def __init__(self, context: ApiContext, api: Optional[VavickyAPI] = None, session: Optional[Any] = None) -> None:
        self.context = context
        self._api = api
        self._session = session

    def list_tools(self) -> Tuple[ToolDefinition, ...]:
        return list_tools()

    def _rule(self, tool_name: str) -> Tuple[ToolDefinition, Rule]:
        tool = get_tool(tool_name)
        rule = RULES.get(tool_name)
        if tool is None or rule is None:
            raise UnknownToolError(tool_name)
        return tool, rule

    def translate(self, tool_name: str, args: Optional[Mapping[str, Any]] = None) -> RequestSpec:
        tool, rule = self._rule(tool_name)
        return rule.translate(validate_args(tool, args))

    def _client(self) -> VavickyAPI:
        if self._api is None:
            self._api = VavickyAPI(self.context, session=self._session)
        return self._api

    def execute(self, tool_name: str, args: Optional[Mapping[str, Any]] = None) -> Any:
        if not self.context.has_credentials:
            raise ConfigurationError("VAVICKY_API_KEY environment variable is required")
        spec = self.translate(tool_name, args)
        return self._client().send(spec)
