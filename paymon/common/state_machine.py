"""Processing stage transitions enforced for one payment attempt."""

VALIDATING = "VALIDATING"
FEE_CALCULATING = "FEE_CALCULATING"
SETTLING = "SETTLING"
DONE = "DONE"
FAILED = "FAILED"

ALLOWED_TRANSITIONS: dict[str, set[str]] = {
    VALIDATING: {FEE_CALCULATING, FAILED},
    FEE_CALCULATING: {SETTLING, FAILED},
    SETTLING: {DONE, FAILED},
    DONE: set(),
    FAILED: set(),
}


def validate_transition(current: str, new: str) -> None:
    """Raise when a transition is not allowed by the state machine."""

    if new not in ALLOWED_TRANSITIONS.get(current, set()):
        raise ValueError(f"Invalid transition: {current} -> {new}")


def is_terminal(stage: str) -> bool:
    return not ALLOWED_TRANSITIONS.get(stage, set())
