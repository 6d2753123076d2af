"""Validate invocation arguments and run the matching calculator operation."""

import json
import logging
from typing import Any, Callable, Dict, Mapping, Optional

from .calculator import CalculatorTools, format_number
from .errors import CalculatorError, UnknownOperationError, ValidationError
from .models import InvocationRequest, InvocationResult, OperatorInfo
from .registry import OperationSpec, get_operation
from .time_utils import TimeTools

logger = logging.getLogger(__name__)

Handler = Callable[[Dict[str, Any]], str]


def _is_number(value: Any) -> bool:
    # bool is an int subclass but JSON true/false is not a number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_arguments(operation: OperationSpec, arguments: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Check arguments against the operation's parameters.

    Returns only the declared parameters that were supplied. Extra keys
    are ignored.
    """
    arguments = arguments or {}
    validated: Dict[str, Any] = {}
    for param in operation.parameters:
        if param.name not in arguments or arguments[param.name] is None:
            if param.required:
                raise ValidationError(f"Missing required argument '{param.name}' for {operation.name}")
            continue
        value = arguments[param.name]
        if param.kind == "number" and not _is_number(value):
            raise ValidationError(
                f"Argument '{param.name}' for {operation.name} must be a number, got {type(value).__name__}"
            )
        validated[param.name] = value
    return validated


class OperationExecutor:
    """Runs one operation per call and always returns an InvocationResult."""

    def __init__(
        self,
        config,
        calculator: Optional[CalculatorTools] = None,
        time_tools: Optional[TimeTools] = None,
    ):
        self.config = config
        self.calculator = calculator or CalculatorTools(factorial_limit=config.FACTORIAL_LIMIT)
        self.time_tools = time_tools or TimeTools()
        self._handlers: Dict[str, Handler] = {
            "add": self._add,
            "subtract": self._subtract,
            "multiply": self._multiply,
            "divide": self._divide,
            "power": self._power,
            "sqrt": self._sqrt,
            "factorial": self._factorial,
            "get_operator_info": self._operator_info,
        }

    def execute(self, operation_name: str, arguments: Optional[Mapping[str, Any]] = None) -> InvocationResult:
        return self.run(InvocationRequest(operation_name, arguments or {}))

    def run(self, request: InvocationRequest) -> InvocationResult:
        name = request.operation_name
        try:
            operation = get_operation(name)
            handler = self._handlers.get(name)
            if operation is None or handler is None:
                raise UnknownOperationError(name)
            args = validate_arguments(operation, request.arguments)
            text = handler(args)
        except CalculatorError as e:
            logger.info(f"Operation {name} failed: {e}")
            return InvocationResult.failure(str(e))
        except Exception as e:
            logger.exception(f"Unexpected error while executing {name}")
            return InvocationResult.failure(str(e) or type(e).__name__)
        logger.debug(f"Operation {name} -> {text}")
        return InvocationResult.success(text)

    def operator_info(self) -> OperatorInfo:
        return OperatorInfo(
            operator_name=self.config.OPERATOR_NAME,
            server_name=self.config.SERVER_NAME,
            version=self.config.VERSION,
            port=self.config.PORT,
            start_time=self.time_tools.get_current_time(),
        )

    def _add(self, args):
        a, b = args["a"], args["b"]
        return f"{format_number(a)} + {format_number(b)} = {format_number(self.calculator.add(a, b))}"

    def _subtract(self, args):
        a, b = args["a"], args["b"]
        return f"{format_number(a)} - {format_number(b)} = {format_number(self.calculator.subtract(a, b))}"

    def _multiply(self, args):
        a, b = args["a"], args["b"]
        return f"{format_number(a)} × {format_number(b)} = {format_number(self.calculator.multiply(a, b))}"

    def _divide(self, args):
        a, b = args["a"], args["b"]
        return f"{format_number(a)} ÷ {format_number(b)} = {format_number(self.calculator.divide(a, b))}"

    def _power(self, args):
        a, b = args["a"], args["b"]
        return f"{format_number(a)}^{format_number(b)} = {format_number(self.calculator.power(a, b))}"

    def _sqrt(self, args):
        a = args["a"]
        return f"√{format_number(a)} = {format_number(self.calculator.sqrt(a))}"

    def _factorial(self, args):
        n = args["n"]
        return f"{format_number(n)}! = {format_number(self.calculator.factorial(n))}"

    def _operator_info(self, args):
        info = self.operator_info().to_dict()
        return "Server info:\n" + json.dumps(info, indent=2, ensure_ascii=False)
