"""Domain model: immutable value objects describing a BDD test run."""

from bddprogress.domain.model.enums import ExecutionStatus, ParameterStatus, TableRowType
from bddprogress.domain.model.execution_time import ExecutionTime, format_pretty
from bddprogress.domain.model.feature import FeatureInfo, FeatureResult
from bddprogress.domain.model.parameter import (
    InlineParameterDetails,
    ParameterDetails,
    StepParameter,
    TabularColumn,
    TabularParameterDetails,
    TabularRow,
    TreeNode,
    TreeParameterDetails,
)
from bddprogress.domain.model.scenario import ScenarioInfo, ScenarioResult
from bddprogress.domain.model.step import FileAttachment, StepInfo, StepResult

__all__ = [
    "ExecutionStatus",
    "ExecutionTime",
    "FeatureInfo",
    "FeatureResult",
    "FileAttachment",
    "InlineParameterDetails",
    "ParameterDetails",
    "ParameterStatus",
    "ScenarioInfo",
    "ScenarioResult",
    "StepInfo",
    "StepParameter",
    "StepResult",
    "TableRowType",
    "TabularColumn",
    "TabularParameterDetails",
    "TabularRow",
    "TreeNode",
    "TreeParameterDetails",
    "format_pretty",
]
