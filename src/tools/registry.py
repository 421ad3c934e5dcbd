"""
Tool Registry — maps tool names to their description, input schema and handler.

Tools are registered once at startup; after `freeze()` the registry is
read-only. `invoke()` validates arguments against the tool's pydantic
input model before the handler ever sees them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Mapping

from pydantic import BaseModel, ConfigDict, ValidationError

from src.tools.errors import InvalidArguments, UnknownTool
from src.tools.result import ToolResult

logger = logging.getLogger(__name__)


class NoArguments(BaseModel):
    """Input model for tools that take no arguments."""

    model_config = ConfigDict(extra="forbid")


@dataclass(frozen=True)
class ToolDescriptor:
    name: str
    description: str
    input_model: type[BaseModel]
    handler: Callable[[BaseModel], Awaitable[str | ToolResult]]

    @property
    def input_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema()


class ToolRegistry:
    """Name → ToolDescriptor lookup with schema-validated invocation."""

    def __init__(self) -> None:
        self._tools: dict[str, ToolDescriptor] = {}
        self._frozen = False

    def register(self, descriptor: ToolDescriptor) -> None:
        if self._frozen:
            raise RuntimeError(f"Registry is frozen; cannot register {descriptor.name}")
        if descriptor.name in self._tools:
            raise ValueError(f"Tool already registered: {descriptor.name}")
        self._tools[descriptor.name] = descriptor
        logger.debug("Registered tool %s", descriptor.name)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def resolve(self, name: str) -> ToolDescriptor:
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownTool(name) from None

    def list_tools(self) -> list[ToolDescriptor]:
        """Descriptors in registration order."""
        return list(self._tools.values())

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    async def invoke(self, name: str, arguments: Mapping[str, Any] | None = None) -> ToolResult:
        """
        Resolve, validate and run a tool.

        Raises:
            UnknownTool: no tool is registered under `name`
            InvalidArguments: `arguments` do not match the input schema
        """
        descriptor = self.resolve(name)
        args = self._validate(descriptor, arguments)
        output = await descriptor.handler(args)
        if isinstance(output, ToolResult):
            return output
        return ToolResult.text(output)

    @staticmethod
    def _validate(descriptor: ToolDescriptor, arguments: Mapping[str, Any] | None) -> BaseModel:
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            raise InvalidArguments(descriptor.name, "arguments", "must be an object")
        try:
            return descriptor.input_model.model_validate(dict(arguments))
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"]) or "arguments"
            raise InvalidArguments(descriptor.name, field, first["msg"]) from e
