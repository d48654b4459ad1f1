"""
Per-tool request rules.

Each tool maps to a declarative Rule (method, path template, body policy,
query params). Translating a call is a pure function of the rule and the
validated arguments; adding a tool means adding a table entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from string import Formatter
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from core.errors import ValidationError
from core.request_spec import RequestSpec


# characters that would change which backend resource a path points at
UNSAFE_PATH_CHARS = ("{", "}", "/", "?", "#")


def is_blank(value: Any) -> bool:
    return value is None or value == ""


def format_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# -----------------------------
# Body policies
# -----------------------------

@dataclass(frozen=True)
class CopyFields:
    """Copy the named args into the body as supplied, blanks included."""

    fields: Tuple[Tuple[str, str], ...] = ()

    def build(self, args: Mapping[str, Any]) -> Dict[str, Any]:
        return {key: args[arg] for key, arg in self.fields if arg in args}


@dataclass(frozen=True)
class PresentFields:
    """Copy only the named args that carry a non-blank value."""

    fields: Tuple[Tuple[str, str], ...]

    def build(self, args: Mapping[str, Any]) -> Dict[str, Any]:
        return {key: args[arg] for key, arg in self.fields if not is_blank(args.get(arg))}


@dataclass(frozen=True)
class SanitizedArgs:
    """Send every supplied arg except ``exclude``, dropping null and empty values."""

    exclude: Tuple[str, ...] = ()

    def build(self, args: Mapping[str, Any]) -> Dict[str, Any]:
        return {k: v for k, v in args.items() if k not in self.exclude and not is_blank(v)}


@dataclass(frozen=True)
class ContactAugmented:
    """Base fields, plus contact_id and a customData echo when a contact is given."""

    fields: Tuple[Tuple[str, str], ...]
    contact_arg: str = "contact_id"

    def build(self, args: Mapping[str, Any]) -> Dict[str, Any]:
        base = CopyFields(self.fields).build(args)
        body = dict(base)
        contact = args.get(self.contact_arg)
        if not is_blank(contact):
            body["contact_id"] = contact
            body["customData"] = dict(base)
        return body


BodyPolicy = Union[CopyFields, PresentFields, SanitizedArgs, ContactAugmented]


@dataclass(frozen=True)
class QueryParam:
    key: str
    arg: str
    # when set, the key is always sent and blank/falsy values fall back to it
    fallback: Any = None

    def value(self, args: Mapping[str, Any]) -> Optional[str]:
        raw = args.get(self.arg)
        if self.fallback is not None:
            return format_query_value(raw or self.fallback)
        if is_blank(raw):
            return None
        return format_query_value(raw)


# -----------------------------
# Rule
# -----------------------------

@dataclass(frozen=True)
class Rule:
    method: str
    path: str
    body: Optional[BodyPolicy] = None
    query: Tuple[QueryParam, ...] = ()

    @property
    def path_params(self) -> Tuple[str, ...]:
        return tuple(field for _, field, _, _ in Formatter().parse(self.path) if field)

    def render_path(self, args: Mapping[str, Any]) -> str:
        values = {}
        for name in self.path_params:
            value = args.get(name)
            if is_blank(value) or (isinstance(value, str) and not value.strip()):
                raise ValidationError(
                    f"Missing required path argument: {name}",
                    details={"argument": name},
                )
            value = str(value)
            if any(c in value for c in UNSAFE_PATH_CHARS):
                raise ValidationError(
                    f"Invalid value for path argument: {name}",
                    details={"argument": name, "value": value},
                )
            values[name] = value
        return self.path.format(**values)

    def translate(self, args: Mapping[str, Any]) -> RequestSpec:
        query = []
        for param in self.query:
            v = param.value(args)
            if v is not None:
                query.append((param.key, v))
        return RequestSpec(
            method=self.method,
            path=self.render_path(args),
            query=tuple(query),
            body=self.body.build(args) if self.body is not None else None,
        )


def _get(path: str, **kw) -> Rule:
    return Rule("GET", path, **kw)


def _same(*names: str) -> Tuple[Tuple[str, str], ...]:
    return tuple((n, n) for n in names)


RULES: Dict[str, Rule] = {
    # User management
    "get_user": _get("/user"),
    "update_white_label": Rule(
        "PATCH",
        "/user",
        CopyFields(_same("whitelabel_name", "whitelabel_description", "whitelabel_domain", "whitelabel_color")),
    ),
    "update_smtp": Rule("PATCH", "/user/smtp", CopyFields(_same("smtp_email", "smtp_password", "smtp_host", "smtp_port"))),
    # Provider tokens
    "update_openai_token": Rule("POST", "/openai/oauth", CopyFields(_same("openai_token"))),
    "update_elevenlabs_token": Rule("POST", "/elevenlabs/oauth", CopyFields(_same("elevenlabs_token"))),
    "update_deepseek_token": Rule("POST", "/deepseek/oauth", CopyFields(_same("deepseek_token"))),
    "update_gemini_token": Rule("POST", "/gemini/oauth", CopyFields(_same("gemini_token"))),
    "update_openrouter_token": Rule("POST", "/openrouter/oauth", CopyFields(_same("openrouter_token"))),
    # Assistants
    "get_assistants": _get("/assistants"),
    "get_assistant": _get("/assistants/{assistant_id}"),
    "get_one_assistant": _get("/assistants/one/{assistant_id}"),
    "create_assistant": Rule("POST", "/assistants", SanitizedArgs()),
    "update_assistant": Rule("PATCH", "/assistants/{assistant_id}", SanitizedArgs(exclude=("assistant_id",))),
    "delete_assistant": Rule("DELETE", "/assistants/{assistant_id}"),
    "get_assistant_files": _get("/assistants/{assistant_id}/files"),
    "delete_assistant_file": Rule("DELETE", "/assistants/{assistant_id}/files/{file_id}"),
    "get_assistant_usage": _get("/assistants/{assistant_id}/usage"),
    "get_assistants_token_usage": _get("/assistants/all/token/usage"),
    "get_dashboard_assistant": _get("/assistants/gohighlevel/dashboard"),
    "chat_with_assistant": Rule(
        "POST",
        "/assistants/{assistant_id}/chat",
        CopyFields(_same("message", "thread_id")),
        query=(QueryParam("audio", "audio", fallback=False),),
    ),
    # Twilio
    "connect_twilio": Rule("POST", "/twilio/oauth", CopyFields((("sid", "twilio_sid"), ("token", "twilio_token")))),
    "disconnect_twilio": Rule("DELETE", "/twilio/"),
    "get_twilio_numbers": _get("/twilio/numbers"),
    "get_available_numbers": _get(
        "/twilio/numbers/available",
        query=(
            QueryParam("code", "country_code"),
            QueryParam("type", "number_type"),
            QueryParam("search", "search_pattern"),
            QueryParam("locality", "locality"),
        ),
    ),
    "buy_twilio_number": Rule("POST", "/twilio/number/buy", CopyFields((("phoneNumber", "phone_number"),))),
    "update_twilio_number": Rule(
        "PATCH",
        "/twilio/numbers/{number_sid}",
        PresentFields((("name", "friendly_name"), ("webhook", "voice_webhook"), ("smsWebhook", "sms_webhook"))),
    ),
    "get_twilio_usage": _get(
        "/twilio/usage",
        query=(QueryParam("start", "start_date"), QueryParam("end", "end_date"), QueryParam("limit", "limit")),
    ),
    # Calls & SMS
    "make_call": Rule("POST", "/twilio/{assistant_id}/call", ContactAugmented((("phonenumber", "phone_number"),))),
    "make_bulk_call": Rule("POST", "/twilio/{assistant_id}/callbulk/{contact_bulk_id}", CopyFields()),
    "get_calls_in_progress": _get("/twilio/calls"),
    "cancel_call": Rule("DELETE", "/twilio/calls/{call_id}"),
    "send_sms": Rule(
        "POST",
        "/twilio/{assistant_id}/sms",
        ContactAugmented((("phonenumber", "phone_number"), ("message", "message"))),
    ),
}
