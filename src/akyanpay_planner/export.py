"""Markdown rendering and on-disk export of generated documents."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Sequence

from .models import CANVAS_TITLES, BusinessModelCanvas, DocumentBundle

if TYPE_CHECKING:
    from .interview.conversation_history import Turn


def canvas_to_markdown(canvas: Optional[BusinessModelCanvas], placeholder: str = "No data available") -> str:
    """Render the canvas as one Markdown section per slot."""
    if canvas is None:
        return placeholder

    sections = []
    for field_name, title in CANVAS_TITLES.items():
        items = getattr(canvas, field_name)
        body = "\n".join(f"- {item}" for item in items) if items else "-"
        sections.append(f"### {title}\n{body}")
    return "\n\n".join(sections)


def bundle_to_markdown(bundle: DocumentBundle, placeholder: str = "No data available") -> str:
    """Concatenate every document of the bundle under its title."""
    parts = []
    for name, title, content in bundle.documents():
        if name == "bmc":
            content = canvas_to_markdown(content, placeholder)
        parts.append(f"# {title}\n\n{content}")
    return "\n\n---\n\n".join(parts)


def save_bundle(
    bundle: DocumentBundle,
    turns: Sequence["Turn"],
    save_dir: Path,
    placeholder: str = "No data available",
) -> Path:
    """Write the bundle and its transcript to a timestamped folder.

    Generated files:
    - <document>.md for every Markdown document
    - bmc.json and bmc.md (bmc.md holds the placeholder when no canvas exists)
    - business_plan.md with every document
    - transcript.json

    Returns:
        The folder the files were written to
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    output_dir = Path(save_dir) / f"business_plan_{timestamp}"
    output_dir.mkdir(parents=True, exist_ok=True)

    for name, _title, content in bundle.documents():
        if name == "bmc":
            if content is not None:
                (output_dir / "bmc.json").write_text(content.to_json(), encoding="utf-8")
            (output_dir / "bmc.md").write_text(canvas_to_markdown(content, placeholder), encoding="utf-8")
        else:
            (output_dir / f"{name}.md").write_text(content, encoding="utf-8")

    (output_dir / "business_plan.md").write_text(bundle_to_markdown(bundle, placeholder), encoding="utf-8")

    with open(output_dir / "transcript.json", "w", encoding="utf-8") as f:
        json.dump([t.to_dict() for t in turns], f, indent=2, ensure_ascii=False)

    return output_dir
