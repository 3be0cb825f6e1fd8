"""duckdash/scenarios — YAML-defined headless runs with pass/fail verdicts."""

from duckdash.scenarios.compare import compare_results
from duckdash.scenarios.conditions import (
    VALID_FAILURE_TYPES,
    VALID_SUCCESS_TYPES,
    FailureCondition,
    StartOverride,
    SuccessCondition,
    check_conditions,
)
from duckdash.scenarios.loader import ScenarioDef, load_scenario, load_scenarios
from duckdash.scenarios.output import print_outcome, print_summary, save_results
from duckdash.scenarios.runner import (
    FrameRecord,
    ScenarioOutcome,
    compute_metrics,
    run_scenario,
)
