"""Tools module for the MCP calculator server."""

from .calculator import CalculatorTools
from .executor import OperationExecutor
from .models import InvocationRequest, InvocationResult, OperatorInfo
from .registry import OperationSpec, ParameterSpec, get_operation, list_operations
from .time_utils import TimeTools

__all__ = [
    "CalculatorTools",
    "OperationExecutor",
    "InvocationRequest",
    "InvocationResult",
    "OperatorInfo",
    "OperationSpec",
    "ParameterSpec",
    "get_operation",
    "list_operations",
    "TimeTools",
]
