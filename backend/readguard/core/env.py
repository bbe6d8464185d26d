from __future__ import annotations

import os
from pathlib import Path


def _parse_env_line(line: str) -> tuple[str, str] | None:
    line = line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return None
    key, value = line.split("=", 1)
    key = key.strip()
    value = value.strip()
    if not key:
        return None
    if key.startswith("export "):
        key = key[len("export "):].strip()
    # KEY="value" or KEY='value'
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        value = value[1:-1]
    return key, value


def env_candidates() -> list[Path]:
    # backend/readguard/core/env.py -> backend/readguard/core -> backend/readguard -> backend -> repo root
    repo_root = Path(__file__).resolve().parents[3]
    return [repo_root / ".env", repo_root / "backend" / ".env"]


def load_env_if_present(*, override: bool = False, paths: list[Path] | None = None) -> None:
    """Load READGUARD_* settings from .env files, if any exist.

    Existing environment variables win unless override=True.
    """
    for p in paths if paths is not None else env_candidates():
        if not p.is_file():
            continue
        try:
            content = p.read_text(encoding="utf-8")
        except OSError:
            continue
        for raw in content.splitlines():
            parsed = _parse_env_line(raw)
            if parsed is None:
                continue
            k, v = parsed
            if not override and k in os.environ:
                continue
            os.environ[k] = v
