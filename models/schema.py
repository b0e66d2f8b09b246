# models/schema.py
"""Immutable request values sent to the generation endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SchemaKind(str, Enum):
    OBJECT = "OBJECT"
    ARRAY = "ARRAY"
    STRING = "STRING"


@dataclass(frozen=True)
class SchemaNode:
    """One node of a response schema.

    OBJECT nodes carry ``properties`` and ``required``; ARRAY nodes carry
    ``items``. Every name in ``required`` must appear in ``properties``.
    """

    kind: SchemaKind
    properties: dict[str, SchemaNode] = field(default_factory=dict)
    required: tuple[str, ...] = ()
    items: SchemaNode | None = None

    def __post_init__(self) -> None:
        if self.kind is SchemaKind.OBJECT:
            missing = [name for name in self.required if name not in self.properties]
            if missing:
                raise ValueError(
                    f"Required fields {missing} are not declared in properties."
                )
            if self.items is not None:
                raise ValueError("OBJECT schema nodes cannot declare items.")
        elif self.kind is SchemaKind.ARRAY:
            if self.items is None:
                raise ValueError("ARRAY schema nodes must declare items.")
            if self.properties or self.required:
                raise ValueError("ARRAY schema nodes cannot declare properties.")
        elif self.properties or self.required or self.items is not None:
            raise ValueError(f"{self.kind.value} schema nodes cannot have children.")

    @classmethod
    def string(cls) -> SchemaNode:
        return cls(SchemaKind.STRING)

    @classmethod
    def array(cls, items: SchemaNode) -> SchemaNode:
        return cls(SchemaKind.ARRAY, items=items)

    @classmethod
    def object(
        cls, properties: dict[str, SchemaNode], required: tuple[str, ...] | list[str]
    ) -> SchemaNode:
        return cls(SchemaKind.OBJECT, properties=dict(properties), required=tuple(required))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the endpoint's ``responseSchema`` shape."""
        data: dict[str, Any] = {"type": self.kind.value}
        if self.kind is SchemaKind.OBJECT:
            data["properties"] = {
                name: node.to_dict() for name, node in self.properties.items()
            }
            data["required"] = list(self.required)
        elif self.kind is SchemaKind.ARRAY and self.items is not None:
            data["items"] = self.items.to_dict()
        return data


@dataclass(frozen=True)
class GenerationRequest:
    """Instruction text plus the schema the model must answer with."""

    instruction_text: str
    output_schema: SchemaNode

    def to_payload(self) -> dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": self.instruction_text}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": self.output_schema.to_dict(),
            },
        }
