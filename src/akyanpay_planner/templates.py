"""Prompt templates shipped with the package, rendered with Jinja2.

Every document template opens with a ``# Task: <Title>`` line and expects
``language`` and ``transcript`` in its context.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    """Shared environment; missing variables raise instead of rendering empty."""
    environment = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    return environment


def load_template(name: str) -> Template:
    return get_environment().get_template(name)


def render_template(name: str, context: Mapping[str, Any]) -> str:
    logger.debug("Rendering %s (%s)", name, ", ".join(sorted(context)))
    return load_template(name).render(**context)
