"""Generate JSON Schema and docs for the expectkit YAML config."""

from __future__ import annotations

import json
from pathlib import Path

from expectkit.config import ExpectationsConfig


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def _type_name(prop: dict) -> str:
    if "type" in prop:
        return prop["type"]
    options = [p.get("type", "object") for p in prop.get("anyOf", [])]
    return " | ".join(options) if options else "any"


def generate_json_schema() -> dict:
    schema = ExpectationsConfig.model_json_schema()
    schema["title"] = "expectkit configuration"
    return schema


def write_json_schema(path: Path) -> None:
    _ensure_parent(path)
    schema = generate_json_schema()
    path.write_text(json.dumps(schema, indent=2) + "\n")


def generate_schema_doc() -> str:
    schema = generate_json_schema()
    props = schema.get("properties", {})

    lines: list[str] = []
    lines.append("# expectkit YAML Schema")
    lines.append("")
    lines.append("This doc is generated from the Pydantic models.")
    lines.append("")
    lines.append("## Settings")
    for name, prop in props.items():
        default = json.dumps(prop.get("default"))
        description = prop.get("description", "")
        lines.append(
            f"- `{name}`: {_type_name(prop)} (default `{default}`) - {description}"
        )

    lines.append("")
    return "\n".join(lines)


def write_schema_doc(path: Path) -> None:
    _ensure_parent(path)
    path.write_text(generate_schema_doc())
