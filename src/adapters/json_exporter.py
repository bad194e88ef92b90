"""JSON export of a `Greeting`.

Why JSON:
- Lets scripts and pipelines consume the result without scraping terminal output.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import Greeting


def greeting_to_json(greeting: Greeting) -> str:
    """Serialize `Greeting` as stable, UTF-8 friendly JSON (with trailing newline)."""

    payload = greeting.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_greeting_json(*, greeting: Greeting, output_path: Path) -> Path:
    """Write `Greeting` to `output_path`, creating parent directories."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(greeting_to_json(greeting), encoding="utf-8")
    return output_path
