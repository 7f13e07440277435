from __future__ import annotations

from typing import Iterable

from shorts_architect.blueprint_engine.model import Blueprint, ScriptBeat, Shot

SEPARATOR = " — "


def format_hashtag(tag: str) -> str:
    return "#" + tag.strip().lstrip("#")


def format_hashtags(tags: Iterable[str]) -> str:
    return " ".join(format_hashtag(tag) for tag in tags)


def format_beat(beat: ScriptBeat) -> str:
    return f"{beat.timestamp}{SEPARATOR}{beat.narration} [On-screen: {beat.on_screen}]"


def format_shot(shot: Shot) -> str:
    line = f"{shot.label} ({shot.duration}): {shot.description}"
    if shot.notes:
        line += f"{SEPARATOR}{shot.notes}"
    return line


def render_package_text(blueprint: Blueprint) -> str:
    """Flatten a blueprint into the plain-text package handed to editors."""
    return "\n".join(
        [
            f"Title: {blueprint.title}",
            f"Hook: {blueprint.hook}",
            "",
            "Script Beats:",
            "\n".join(format_beat(beat) for beat in blueprint.script),
            "",
            "Shot Plan:",
            "\n".join(format_shot(shot) for shot in blueprint.shot_plan),
            "",
            f"CTA: {blueprint.call_to_action}",
            "",
            f"Caption: {blueprint.caption}",
            f"Hashtags: {format_hashtags(blueprint.hashtags)}",
        ]
    )
