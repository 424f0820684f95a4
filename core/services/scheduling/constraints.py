from __future__ import annotations

from typing import assert_never

from core.models import DependencyType


def early_start_constraint(
    dependency_type: DependencyType,
    lag: float,
    pred_early_start: float,
    pred_early_finish: float,
    succ_duration: float,
) -> float:
    """Earliest start the successor may take because of one incoming dependency."""
    match dependency_type:
        case DependencyType.FINISH_TO_START:
            return pred_early_finish + lag
        case DependencyType.START_TO_START:
            return pred_early_start + lag
        case DependencyType.FINISH_TO_FINISH:
            # EF_s >= EF_p + lag
            return pred_early_finish + lag - succ_duration
        case DependencyType.START_TO_FINISH:
            # EF_s >= ES_p + lag
            return pred_early_start + lag - succ_duration
        case _:
            assert_never(dependency_type)


def late_finish_constraint(
    dependency_type: DependencyType,
    lag: float,
    succ_late_start: float,
    succ_late_finish: float,
    pred_duration: float,
) -> float:
    """Latest finish the predecessor may take because of one outgoing dependency."""
    match dependency_type:
        case DependencyType.FINISH_TO_START:
            return succ_late_start - lag
        case DependencyType.START_TO_START:
            # LS_p <= LS_s - lag
            return succ_late_start - lag + pred_duration
        case DependencyType.FINISH_TO_FINISH:
            return succ_late_finish - lag
        case DependencyType.START_TO_FINISH:
            # LS_p <= LF_s - lag
            return succ_late_finish - lag + pred_duration
        case _:
            assert_never(dependency_type)


__all__ = ["early_start_constraint", "late_finish_constraint"]
