"""Simulation headless: boucle reset()/step() et encodage numpy."""

from .features import ObservationTensor, build_observation
from .runner import ActionSpace, HeadlessEnv, StepResult, build_default_move_catalog

__all__ = [
    "ActionSpace",
    "HeadlessEnv",
    "StepResult",
    "build_default_move_catalog",
    "ObservationTensor",
    "build_observation",
]
