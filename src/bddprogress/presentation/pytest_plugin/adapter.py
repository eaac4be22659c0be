"""Translate pytest-bdd objects into bddprogress domain objects.

Accesses pytest-bdd Feature/Scenario/Step by attribute only, so any
object with the same attributes works (tests use SimpleNamespace).
"""

from __future__ import annotations

from typing import Any

from bddprogress.domain.model.feature import FeatureInfo
from bddprogress.domain.model.parameter import StepParameter, TabularParameterDetails
from bddprogress.domain.model.scenario import ScenarioInfo
from bddprogress.domain.model.step import StepInfo

DATATABLE_PARAMETER = "table"


def feature_key(feature: Any) -> str:
    """Identity of a feature across scenarios: file path, else name."""
    return str(getattr(feature, "filename", None) or feature.name)


def feature_info(feature: Any) -> FeatureInfo:
    """FeatureInfo from pytest-bdd Feature. Tags become sorted labels."""
    name = feature.name or str(getattr(feature, "rel_filename", "")) or "<unnamed feature>"
    return FeatureInfo(
        name=name,
        labels=tuple(sorted(getattr(feature, "tags", ()))),
        description=getattr(feature, "description", None) or None,
    )


def scenario_info(scenario: Any) -> ScenarioInfo:
    """ScenarioInfo from pytest-bdd Scenario. Tags become sorted labels."""
    return ScenarioInfo(
        name=scenario.name or "<unnamed scenario>",
        labels=tuple(sorted(getattr(scenario, "tags", ()))),
    )


def step_name(step: Any) -> str:
    """'GIVEN text': keyword upper-cased so indentation sees it."""
    keyword = step.keyword.strip().upper()
    return f"{keyword} {step.name}" if keyword else step.name


def step_info(step: Any, number: int, total: int) -> StepInfo:
    """StepInfo for a scenario-level pytest-bdd step."""
    return StepInfo(name=step_name(step), number=number, total=max(total, number))


def step_parameters(step: Any) -> tuple[StepParameter, ...]:
    """Step data table as a tabular parameter; () if none.

    First table row is the header.
    """
    datatable = getattr(step, "datatable", None)
    if datatable is None:
        return ()

    rows = [tuple(str(cell) for cell in row) for row in datatable.raw()]
    if not rows:
        return ()

    header, *body = rows
    header = tuple(name or f"column {index}" for index, name in enumerate(header, start=1))
    return (StepParameter(DATATABLE_PARAMETER, TabularParameterDetails.from_rows(header, *body)),)


def describe_exception(exception: BaseException) -> str:
    """'TypeName: message', or 'TypeName' for empty messages."""
    message = str(exception)
    name = type(exception).__name__
    return f"{name}: {message}" if message else name
