from .estimator import DEFAULT_ESTIMATE, estimate_ratings
from .tees import (
    TEE_OPTIONS,
    HoleInputError,
    TeeOption,
    apply_tee_option,
    create_default_tee,
    normalize_tee,
    update_hole,
)

__all__ = [
    "DEFAULT_ESTIMATE",
    "estimate_ratings",
    "TEE_OPTIONS",
    "HoleInputError",
    "TeeOption",
    "apply_tee_option",
    "create_default_tee",
    "normalize_tee",
    "update_hole",
]
