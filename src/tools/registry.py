"""Static catalog of the operations exposed by the server."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class ParameterSpec:
    name: str
    description: str
    kind: str = "number"
    required: bool = True


@dataclass(frozen=True)
class OperationSpec:
    name: str
    description: str
    parameters: Tuple[ParameterSpec, ...] = ()

    def input_schema(self) -> Dict[str, Any]:
        """Render the parameters as a JSON Schema object."""
        schema: Dict[str, Any] = {
            "type": "object",
            "properties": {
                p.name: {"type": p.kind, "description": p.description}
                for p in self.parameters
            },
        }
        required = [p.name for p in self.parameters if p.required]
        if required:
            schema["required"] = required
        return schema


def _binary(name: str, description: str, a: str, b: str) -> OperationSpec:
    return OperationSpec(
        name=name,
        description=description,
        parameters=(ParameterSpec("a", a), ParameterSpec("b", b)),
    )


OPERATIONS: Tuple[OperationSpec, ...] = (
    _binary("add", "Addition: compute the sum of two numbers", "First number", "Second number"),
    _binary("subtract", "Subtraction: compute the difference of two numbers", "Minuend", "Subtrahend"),
    _binary("multiply", "Multiplication: compute the product of two numbers", "First number", "Second number"),
    _binary("divide", "Division: compute the quotient of two numbers", "Dividend", "Divisor (must not be 0)"),
    _binary("power", "Exponentiation: compute a raised to the power b", "Base", "Exponent"),
    OperationSpec(
        name="sqrt",
        description="Square root: compute the square root of a number",
        parameters=(ParameterSpec("a", "Number to take the square root of (non-negative)"),),
    ),
    OperationSpec(
        name="factorial",
        description="Factorial: compute the factorial of a non-negative integer",
        parameters=(ParameterSpec("n", "Non-negative integer"),),
    ),
    OperationSpec(
        name="get_operator_info",
        description="Get information about who started this server",
    ),
)

_BY_NAME: Dict[str, OperationSpec] = {op.name: op for op in OPERATIONS}

if len(_BY_NAME) != len(OPERATIONS):
    raise RuntimeError("Duplicate operation names in registry")


def list_operations() -> Tuple[OperationSpec, ...]:
    """Return every registered operation, in catalog order."""
    return OPERATIONS


def get_operation(name: str) -> Optional[OperationSpec]:
    return _BY_NAME.get(name)
