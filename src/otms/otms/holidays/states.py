"""Malaysian states used to scope public-holiday calendars."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MalaysianState:
    value: str
    label: str


NATIONAL = "ALL"

MALAYSIA_STATES: tuple[MalaysianState, ...] = (
    MalaysianState(NATIONAL, "ALL (National)"),
    MalaysianState("JHR", "Johor"),
    MalaysianState("KDH", "Kedah"),
    MalaysianState("KTN", "Kelantan"),
    MalaysianState("MLK", "Melaka"),
    MalaysianState("NSN", "Negeri Sembilan"),
    MalaysianState("PHG", "Pahang"),
    MalaysianState("PNG", "Penang (Pulau Pinang)"),
    MalaysianState("PRK", "Perak"),
    MalaysianState("PLS", "Perlis"),
    MalaysianState("SBH", "Sabah"),
    MalaysianState("SWK", "Sarawak"),
    MalaysianState("SGR", "Selangor"),
    MalaysianState("TRG", "Terengganu"),
    MalaysianState("WPKL", "WP Kuala Lumpur"),
    MalaysianState("WPPJ", "WP Putrajaya"),
    MalaysianState("WPLB", "WP Labuan"),
)

_BY_CODE = {s.value: s for s in MALAYSIA_STATES}


def all_states() -> list[MalaysianState]:
    """States a company can pick for its holiday calendar (no national option)."""
    return [s for s in MALAYSIA_STATES if s.value != NATIONAL]


def all_states_with_national() -> list[MalaysianState]:
    return list(MALAYSIA_STATES)


def is_valid_state_key(code: str) -> bool:
    return code in _BY_CODE


def state_label(code: str) -> Optional[str]:
    state = _BY_CODE.get(code)
    return state.label if state else None
