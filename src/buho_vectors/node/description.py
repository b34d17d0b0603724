from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .schemas import SearchParameters


@dataclass(frozen=True)
class NodeProperty:
    """One field of the host-rendered node form."""

    display_name: str
    name: str
    type: str
    default: Any
    required: bool = False
    description: str = ""
    placeholder: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "displayName": self.display_name,
            "name": self.name,
            "type": self.type,
            "default": self.default,
        }
        if self.required:
            data["required"] = True
        if self.placeholder is not None:
            data["placeholder"] = self.placeholder
        data["description"] = self.description
        return data


PROPERTIES: Tuple[NodeProperty, ...] = (
    NodeProperty(
        display_name="Account ID",
        name="account_id",
        type="string",
        default="",
        required=True,
        description="Identificador de la cuenta asociada al RAG",
    ),
    NodeProperty(
        display_name="Knowledge Base ID (KB ID)",
        name="kb_id",
        type="string",
        default="",
        required=True,
        description="Identificador de la base de conocimiento",
    ),
    NodeProperty(
        display_name="Query Text",
        name="query_text",
        type="string",
        default="",
        placeholder="Texto a buscar en el RAG",
        description="Texto o pregunta que se desea buscar dentro de la base de conocimiento",
    ),
    NodeProperty(
        display_name="Top K",
        name="top_k",
        type="number",
        default=5,
        description="Número de chunks o fragmentos más relevantes que se deben recuperar",
    ),
)


@dataclass(frozen=True)
class NodeDescription:
    display_name: str = "Buho Suite Vectors"
    name: str = "Buho Suite Vectors"
    icon: str = "file:../../icons/logobuhov3.svg"
    group: Tuple[str, ...] = ("transform",)
    version: int = 1
    description: str = ""
    defaults: Dict[str, Any] = field(
        default_factory=lambda: {"name": "Buho Suite Vectors"}
    )
    inputs: Tuple[str, ...] = ("main",)
    outputs: Tuple[str, ...] = ("main",)
    usable_as_tool: bool = True
    properties: Tuple[NodeProperty, ...] = PROPERTIES

    def property(self, name: str) -> NodeProperty:
        for prop in self.properties:
            if prop.name == name:
                return prop
        raise KeyError(f"Unknown node parameter: {name!r}")

    def defaults_by_name(self) -> Dict[str, Any]:
        return {prop.name: prop.default for prop in self.properties}

    def tool_schema(self) -> Dict[str, Any]:
        """JSON schema of the node parameters, for hosts that call the node as a tool."""
        schema = SearchParameters.model_json_schema()
        schema["required"] = [p.name for p in self.properties if p.required]
        return schema

    def to_dict(self) -> Dict[str, Any]:
        """Render the description the way the workflow host expects it (camelCase)."""
        return {
            "displayName": self.display_name,
            "name": self.name,
            "icon": {"light": self.icon, "dark": self.icon},
            "group": list(self.group),
            "version": self.version,
            "description": self.description,
            "defaults": dict(self.defaults),
            "inputs": list(self.inputs),
            "outputs": list(self.outputs),
            "usableAsTool": self.usable_as_tool,
            "properties": [prop.to_dict() for prop in self.properties],
        }
