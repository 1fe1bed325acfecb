"""Configuration management for the business planner.

This module provides configuration loading with sensible defaults. Values can
be overridden through environment variables so the hosted client is built from
environment-supplied credentials.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional


@dataclass
class LocalizedMessages:
    """User-facing fallback texts shown in place of model output."""
    start_error: str = "စနစ်ချို့ယွင်းမှုရှိနေပါသည်။ ကျေးဇူးပြု၍ ပြန်လည်ကြိုးစားပါ။ (System Error)"
    send_error: str = "အမှားအယွင်းရှိပါသည်။ (Error occurred)"
    empty_reply: str = "..."
    finish_too_early: str = (
        "ကျေးဇူးပြု၍ အချက်အလက်ပြည့်စုံအောင် မေးခွန်းများကို အရင်ဖြေကြားပေးပါ။ "
        "(Please answer more questions first)"
    )
    generation_failed: str = "စာရွက်စာတမ်းများ ပြင်ဆင်နေစဉ် အမှားရှိပါသည်။ (Generation Failed)"
    summary_fallback: str = "အချက်အလက်များကို အကျဉ်းချုပ်၍ မရနိုင်ပါ။ (Could not generate summary)"
    no_canvas: str = "No data available"


@dataclass
class PlannerConfig:
    """Main configuration object.

    Attributes:
        model: Model identifier passed to every service call
        api_key: Credential for the hosted service
        language: Output language requested from every prompt
        timeout: Seconds allowed per service call
        max_concurrent_requests: Upper bound on parallel document calls
        min_turns: Transcript length required before generation may run
        opening_message: Utterance sent on behalf of the user to open the interview
        messages: Localized fallback texts
    """
    model: str = "gemini-2.5-flash"
    api_key: Optional[str] = None
    language: str = "Burmese"
    timeout: float = 120.0
    max_concurrent_requests: int = 9
    min_turns: int = 3
    opening_message: str = "မင်္ဂလာပါ (Start interview)"
    messages: LocalizedMessages = field(default_factory=LocalizedMessages)


def load_config(environ: Optional[Mapping[str, str]] = None) -> PlannerConfig:
    """Load configuration with defaults, applying environment overrides.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        PlannerConfig populated from the environment.
    """
    env = os.environ if environ is None else environ
    config = PlannerConfig()

    config.api_key = env.get("GEMINI_API_KEY") or env.get("API_KEY") or None
    if env.get("PLANNER_MODEL"):
        config.model = env["PLANNER_MODEL"]
    if env.get("PLANNER_LANGUAGE"):
        config.language = env["PLANNER_LANGUAGE"]
    if env.get("PLANNER_TIMEOUT"):
        config.timeout = float(env["PLANNER_TIMEOUT"])
    if env.get("PLANNER_MAX_CONCURRENT"):
        config.max_concurrent_requests = max(1, int(env["PLANNER_MAX_CONCURRENT"]))

    return config
