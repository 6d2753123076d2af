"""Request, result and metadata types passed between the executor and dispatcher."""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class InvocationRequest:
    operation_name: str
    arguments: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class InvocationResult:
    """Outcome of one invocation: result text, or error text with ``is_error`` set."""

    text: str
    is_error: bool = False

    @classmethod
    def success(cls, text: str) -> "InvocationResult":
        return cls(text=text)

    @classmethod
    def failure(cls, message: str) -> "InvocationResult":
        return cls(text=f"Error: {message}", is_error=True)


@dataclass(frozen=True)
class OperatorInfo:
    operator_name: str
    server_name: str
    version: str
    port: int
    start_time: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "operatorName": self.operator_name,
            "serverName": self.server_name,
            "version": self.version,
            "port": self.port,
            "startTime": self.start_time,
        }
