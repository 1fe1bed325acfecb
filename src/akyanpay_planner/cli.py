"""CLI entry point for the conversational business planner.

Usage:
    # Interactive interview against Gemini (needs GEMINI_API_KEY)
    akyanpay-planner

    # Another model or output language
    akyanpay-planner --model gemini-2.5-pro --language English

    # Offline demo with canned replies
    akyanpay-planner --mock
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.rule import Rule

from .config import PlannerConfig, load_config
from .exceptions import BatchGenerationError, GenerationPreconditionError, PlannerError
from .export import canvas_to_markdown
from .interview import InterviewManager, Phase, Speaker, Turn
from .llm_client import LLMClient
from .mock_client import MockLLMClient
from .models import DocumentBundle

COMMANDS = {
    "/done": "Finish the interview and generate the documents",
    "/reset": "Discard everything and start over",
    "/save": "Save the generated documents",
    "/status": "Show current progress",
    "/help": "Show available commands",
    "/quit": "Exit",
}

console = Console()


def render_turn(turn: Turn) -> None:
    if turn.speaker is Speaker.USER:
        console.print(Panel(turn.text, title="You", title_align="right", border_style="cyan"))
    else:
        console.print(Panel(Markdown(turn.text), title="Consultant", title_align="left", border_style="magenta"))


def render_bundle(bundle: DocumentBundle, placeholder: str) -> None:
    for name, title, content in bundle.documents():
        console.print(Rule(title, style="red"))
        if name == "bmc":
            content = canvas_to_markdown(content, placeholder)
        console.print(Markdown(content or "-"))
    console.print()


def build_mock_client(config: PlannerConfig) -> MockLLMClient:
    """Client with canned replies so the whole flow runs offline."""
    client = MockLLMClient(config, default_reply="Thanks! Anything else you would like to add?")
    client.set_chat_replies([
        "What business do you want to start?\n\n- Online Clothing Shop\n- Coffee Shop\n- Car Rental Service\n- Grocery Store",
        "Who is your main customer?\n\n- University Students\n- Office Workers\n- Housewives",
        "Why should customers buy from you?\n\n- Lowest Price\n- Premium Quality\n- Fast Delivery",
    ])

    canvas = {
        "keyPartners": ["Coffee bean suppliers"],
        "keyActivities": ["Brewing", "Customer service"],
        "keyResources": ["Barista team", "Espresso machines"],
        "valuePropositions": ["Premium coffee near campus"],
        "customerRelationships": ["Loyalty cards"],
        "channels": ["Storefront", "Facebook Page"],
        "customerSegments": ["University Students"],
        "costStructure": ["Rent", "Staff salaries", "Inventory"],
        "revenueStreams": ["Beverage sales", "Pastries"],
    }

    def complete(prompt: str, schema: Optional[dict]) -> str:
        if schema is not None:
            return json.dumps(canvas)
        title = prompt.strip().splitlines()[0].removeprefix("# Task: ")
        return f"## {title}\n\n_Offline demo content._"

    client.set_completion_function(complete)
    return client


async def run_tty_mode(manager: InterviewManager, save_dir: Path) -> None:
    """Traditional blocking loop for terminal users."""
    messages = manager.config.messages

    with console.status("Connecting..."):
        first = await manager.start()
    render_turn(first)
    console.print("[dim](Type your answer, /done to generate documents, /help for commands)[/dim]")

    while True:
        try:
            user_input = console.input("[bold cyan]> [/bold cyan]").strip()
        except (KeyboardInterrupt, EOFError):
            console.print("\nExiting.")
            break

        if not user_input:
            continue

        cmd = user_input.lower()
        if cmd in ("/quit", "/exit"):
            break

        if cmd == "/help":
            for c, desc in COMMANDS.items():
                console.print(f"  [bold]{c}[/bold] - {desc}")
            continue

        if cmd == "/status":
            progress = manager.get_progress()
            console.print(
                f"Phase: {progress['phase_name']} | Turns: {progress['turns']} | "
                f"Documents: {'ready' if progress['has_bundle'] else 'not generated'}"
            )
            continue

        if cmd == "/reset":
            manager.reset()
            with console.status("Connecting..."):
                first = await manager.start()
            render_turn(first)
            continue

        if cmd == "/save":
            if manager.phase != Phase.RESULTS:
                console.print("[yellow]Nothing to save yet. Use /done first.[/yellow]")
                continue
            output_dir = manager.save_results(save_dir)
            console.print(f"[green]Saved to {output_dir}[/green]")
            continue

        if cmd == "/done":
            if manager.phase == Phase.RESULTS:
                render_bundle(manager.bundle, messages.no_canvas)
                continue
            try:
                with console.status("Writing your business plan..."):
                    bundle = await manager.finish()
            except GenerationPreconditionError as e:
                console.print(f"[yellow]{e}[/yellow]")
                continue
            except BatchGenerationError as e:
                console.print(f"[red]{e}[/red]")
                continue
            render_bundle(bundle, messages.no_canvas)
            console.print("[dim](/save to write the documents to disk, /reset to start over)[/dim]")
            continue

        if not manager.phase.accepts_input:
            console.print("[yellow]The interview is finished. Use /save, /reset or /quit.[/yellow]")
            continue

        with console.status("..."):
            reply = await manager.send(user_input)
        render_turn(reply)


def build_client(args: argparse.Namespace, config: PlannerConfig) -> LLMClient:
    if args.mock:
        return build_mock_client(config)

    from .llm_client_gemini import create_gemini_client

    return create_gemini_client(config)


async def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Interview-driven business plan generation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--model", "-m", default=None, help="Model identifier (default: gemini-2.5-flash)")
    parser.add_argument("--language", "-l", default=None, help="Language for the interview and documents")
    parser.add_argument("--save-dir", default=None, help="Directory for /save (default: ./business_plans)")
    parser.add_argument("--mock", action="store_true", help="Use canned offline replies instead of the API")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...)")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    config = load_config()
    if args.model:
        config.model = args.model
    if args.language:
        config.language = args.language

    try:
        client = build_client(args, config)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1

    manager = InterviewManager(client, config)
    save_dir = Path(args.save_dir) if args.save_dir else Path.cwd() / "business_plans"

    try:
        await run_tty_mode(manager, save_dir)
    except PlannerError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1
    return 0


def run() -> None:
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        console.print("\nExiting.")
        sys.exit(0)


if __name__ == "__main__":
    run()
