import json
import logging
import os
import secrets
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from drop_runner.collaborators import Store
from drop_runner.profiles import PROFILES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserState:
    high_score: int = 0
    difficulty: Optional[str] = None


def state_dir() -> Path:
    """
    Directory for small persistent user state.

    Override for tests/dev via `DROP_RUNNER_STATE_DIR`.
    """
    override = os.environ.get("DROP_RUNNER_STATE_DIR")
    if override:
        return Path(override)
    return Path.home() / ".drop_runner"


def state_path() -> Path:
    return state_dir() / "state.json"


def load_state() -> UserState:
    p = state_path()
    if not p.exists():
        return UserState()
    try:
        payload = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable state file %s: %s", p, exc)
        return UserState()

    if not isinstance(payload, dict):
        return UserState()
    hs = payload.get("high_score")
    diff = payload.get("difficulty")
    high_score = 0
    if isinstance(hs, (int, float)) and not isinstance(hs, bool) and hs > 0:
        high_score = int(hs)
    return UserState(
        high_score=high_score,
        difficulty=diff.strip().lower() if isinstance(diff, str) and diff.strip().lower() in PROFILES else None,
    )


def save_state(state: UserState) -> None:
    d = state_dir()
    d.mkdir(parents=True, exist_ok=True)
    p = state_path()
    # unique tmp name so parallel runs never clobber each other mid-write
    tmp = p.with_name(f"{p.name}.{os.getpid()}.{secrets.token_hex(6)}.tmp")
    tmp.write_text(
        json.dumps(
            {"high_score": state.high_score, "difficulty": state.difficulty},
            indent=2,
            sort_keys=True,
        )
        + "\n",
        encoding="utf-8",
    )
    tmp.replace(p)


def update_state(*, high_score: Optional[int] = None, difficulty: Optional[str] = None) -> None:
    s = load_state()
    save_state(
        UserState(
            high_score=high_score if high_score is not None else s.high_score,
            difficulty=difficulty if difficulty is not None else s.difficulty,
        )
    )


class JsonStore(Store):
    """Store backed by state.json. A failed write is logged, never raised."""

    def load_high_score(self) -> int:
        return load_state().high_score

    def save_high_score(self, value: int):
        try:
            update_state(high_score=int(value))
        except OSError as exc:
            logger.warning("Could not save high score: %s", exc)

    def load_difficulty(self):
        return load_state().difficulty

    def save_difficulty(self, label: str):
        try:
            update_state(difficulty=str(label))
        except OSError as exc:
            logger.warning("Could not save difficulty: %s", exc)
