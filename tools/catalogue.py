from __future__ import annotations

from typing import Dict, Optional, Tuple

from tools.schema import Param, ToolDefinition

ASSISTANT_TYPES = ("Text Only", "Voice Only", "Text & Voice", "Voice & Text")
AI_PLATFORMS = ("openai", "gemini", "openrouter", "deepseek")
REALTIME_VOICES = ("alloy", "echo", "fable", "nova", "onyx", "shimmer")
NUMBER_TYPES = ("local", "tollfree", "mobile")


def _s(name: str, description: str, **kw) -> Param:
    return Param(name, "string", description, **kw)


def _n(name: str, description: str, **kw) -> Param:
    return Param(name, "number", description, **kw)


def _b(name: str, description: str, **kw) -> Param:
    return Param(name, "boolean", description, **kw)


ASSISTANT_ID = _s("assistant_id", "Assistant ID", required=True)


def _token_tool(provider: str, label: str) -> ToolDefinition:
    return ToolDefinition(
        f"update_{provider}_token",
        f"Update {label} API Key",
        (_s(f"{provider}_token", f"{label} API Key", required=True),),
    )


# -----------------------------
# User management
# -----------------------------
USER_TOOLS = (
    ToolDefinition("get_user", "Get user data including tokens and settings"),
    ToolDefinition(
        "update_white_label",
        "Update White Label details: name, description, domain and color",
        (
            _s("whitelabel_name", "White label name"),
            _s("whitelabel_description", "White label description"),
            _s("whitelabel_domain", "White label domain"),
            _s("whitelabel_color", "White label color (hex code)"),
        ),
    ),
    ToolDefinition(
        "update_smtp",
        "Update SMTP settings for custom email notifications",
        (
            _s("smtp_email", "SMTP email address", required=True),
            _s("smtp_password", "SMTP password", required=True),
            _s("smtp_host", "SMTP host", required=True),
            _s("smtp_port", "SMTP port"),
        ),
    ),
)

TOKEN_TOOLS = (
    _token_tool("openai", "OpenAI"),
    _token_tool("elevenlabs", "Elevenlabs"),
    _token_tool("deepseek", "Deepseek"),
    _token_tool("gemini", "Google Gemini"),
    _token_tool("openrouter", "Open Router"),
)

# -----------------------------
# Assistants
# -----------------------------
_ASSISTANT_COMMON = (
    _s("location", "GoHighLevel Location"),
    _s("calendar", "Calendar ID"),
    _s("timezone", "Timezone"),
    _s("custom_field", "Custom field"),
)

ASSISTANT_TOOLS = (
    ToolDefinition("get_assistants", "Get all assistants for the authenticated user"),
    ToolDefinition("get_assistant", "Get basic information about a specific assistant", (ASSISTANT_ID,)),
    ToolDefinition("get_one_assistant", "Get complete information about a specific assistant", (ASSISTANT_ID,)),
    ToolDefinition(
        "create_assistant",
        "Create a new assistant with comprehensive configuration",
        (
            _s("name", "Assistant name", required=True),
            _s("apiKey", "OpenAI API Key", required=True),
            _s("welcome_message", "Welcome message", default="Hello how can I help you today?"),
            _s("prompt", "Instructions/Prompt for the assistant"),
            _b("active", "Whether assistant is active", default=True),
            _s("assistant_type", "AI Type", enum=ASSISTANT_TYPES),
            _s("ai_platform", "AI Provider", enum=AI_PLATFORMS),
            _s("openai_model", "AI Model", default="gpt-3.5-turbo"),
            _n("openai_temperature", "AI Temperature (0-2)", default=0.8),
            _b("booking_bot", "Is booking bot", default=False),
            *_ASSISTANT_COMMON,
            _n("limit_call_time", "Limit call time in seconds", default=240),
            _n("limit_call_tokens", "Limit call tokens", default=2000),
            _n("max_call_tokens", "Max call tokens", default=18000),
            _s("elevenlabs_voice_id", "ElevenLabs Voice ID"),
            _s("twilio_sid", "Twilio SID"),
            _s("twilio_token", "Twilio Token"),
            _s("twilio_phone", "Twilio Phone Number"),
            _s("twilio_welcome", "Twilio Welcome Message"),
            _n("twilio_speech_timeout", "Twilio Speech Timeout", default=3),
            _n("twilio_initial_delay", "Twilio Initial Delay", default=1),
            _b("google_calendar", "Google Calendar Integration", default=False),
            _s("webhook_to_send", "Webhook URL"),
            _b("openai_realtime", "OpenAI Realtime", default=False),
            _s("openai_realtime_voice", "OpenAI Realtime Voice", enum=REALTIME_VOICES),
            Param("openai_websites", "array", "OpenAI Websites"),
        ),
    ),
    ToolDefinition(
        "update_assistant",
        "Update an existing assistant",
        (
            ASSISTANT_ID,
            _s("name", "Assistant name"),
            _s("apiKey", "OpenAI API Key"),
            _s("welcome_message", "Welcome message"),
            _s("prompt", "Instructions/Prompt"),
            _b("active", "Whether assistant is active"),
            _s("assistant_type", "AI Type", enum=ASSISTANT_TYPES),
            _s("ai_platform", "AI Provider", enum=AI_PLATFORMS),
            _s("openai_model", "AI Model"),
            _n("openai_temperature", "AI Temperature (0-2)"),
            _b("booking_bot", "Is booking bot"),
            *_ASSISTANT_COMMON,
        ),
    ),
    ToolDefinition("delete_assistant", "Delete an assistant", (ASSISTANT_ID,)),
    ToolDefinition("get_assistant_files", "Get files associated with an assistant", (ASSISTANT_ID,)),
    ToolDefinition(
        "delete_assistant_file",
        "Delete a specific file from an assistant",
        (ASSISTANT_ID, _s("file_id", "File ID", required=True)),
    ),
    ToolDefinition("get_assistant_usage", "Get usage statistics for an assistant", (ASSISTANT_ID,)),
    ToolDefinition("get_assistants_token_usage", "Get token usage across all assistants"),
    ToolDefinition("get_dashboard_assistant", "Get the dashboard assistant for the authenticated user"),
    ToolDefinition(
        "chat_with_assistant",
        "Chat with a specific assistant",
        (
            ASSISTANT_ID,
            _s("message", "Message to send", required=True),
            _s("thread_id", "Chat/Thread ID", required=True),
            _b("audio", "Enable audio response", default=False),
        ),
    ),
)

# -----------------------------
# Twilio
# -----------------------------
TWILIO_TOOLS = (
    ToolDefinition(
        "connect_twilio",
        "Connect Twilio account credentials",
        (
            _s("twilio_sid", "Twilio Account SID", required=True),
            _s("twilio_token", "Twilio Auth Token", required=True),
        ),
    ),
    ToolDefinition("disconnect_twilio", "Disconnect Twilio account"),
    ToolDefinition("get_twilio_numbers", "Get all Twilio phone numbers"),
    ToolDefinition(
        "get_available_numbers",
        "Get available phone numbers for purchase",
        (
            _s("country_code", "Country code", default="US"),
            _s("number_type", "Number type", enum=NUMBER_TYPES, default="local"),
            _s("search_pattern", "Search for numbers containing this pattern"),
            _s("locality", "Locality/city for local numbers"),
        ),
    ),
    ToolDefinition(
        "buy_twilio_number",
        "Purchase a new Twilio phone number",
        (_s("phone_number", "Phone number to purchase", required=True),),
    ),
    ToolDefinition(
        "update_twilio_number",
        "Update Twilio number configuration",
        (
            _s("number_sid", "Number SID", required=True),
            _s("friendly_name", "Friendly name"),
            _s("voice_webhook", "Voice webhook URL"),
            _s("sms_webhook", "SMS webhook URL"),
        ),
    ),
    ToolDefinition(
        "get_twilio_usage",
        "Get Twilio usage statistics",
        (
            _s("start_date", "Start date (ISO format)"),
            _s("end_date", "End date (ISO format)"),
            _n("limit", "Max number of results", default=50),
        ),
    ),
)

# -----------------------------
# Calls & SMS
# -----------------------------
CALL_TOOLS = (
    ToolDefinition(
        "make_call",
        "Make a phone call through assistant",
        (
            ASSISTANT_ID,
            _s("phone_number", "Phone number to call", required=True),
            _s("contact_id", "Contact ID (optional)"),
        ),
    ),
    ToolDefinition(
        "make_bulk_call",
        "Make bulk phone calls",
        (ASSISTANT_ID, _s("contact_bulk_id", "Contact bulk ID", required=True)),
    ),
    ToolDefinition("get_calls_in_progress", "Get all calls currently in progress"),
    ToolDefinition("cancel_call", "Cancel an active phone call", (_s("call_id", "Call ID", required=True),)),
    ToolDefinition(
        "send_sms",
        "Send SMS message through assistant",
        (
            ASSISTANT_ID,
            _s("phone_number", "Phone number to send SMS", required=True),
            _s("message", "SMS message content", required=True),
            _s("contact_id", "Contact ID (optional)"),
        ),
    ),
)

CATALOGUE: Tuple[ToolDefinition, ...] = USER_TOOLS + TOKEN_TOOLS + ASSISTANT_TOOLS + TWILIO_TOOLS + CALL_TOOLS

_BY_NAME: Dict[str, ToolDefinition] = {t.name: t for t in CATALOGUE}
if len(_BY_NAME) != len(CATALOGUE):
    raise RuntimeError("Duplicate tool names in catalogue")


def list_tools() -> Tuple[ToolDefinition, ...]:
    return CATALOGUE


def get_tool(name: str) -> Optional[ToolDefinition]:
    return _BY_NAME.get(name)
