"""Graph data types shared by decoder, sanitizer and layout."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Node(BaseModel):
    """A graph node. x/y/level are layout outputs; security is opaque to layout."""
    model_config = ConfigDict(strict=True, extra="ignore")
    id: str = ""
    label: str = ""
    x: int = 0
    y: int = 0
    desc: str = ""
    security: int = 0
    level: int = 0


class Edge(BaseModel):
    model_config = ConfigDict(strict=True, populate_by_name=True, extra="ignore")
    source: str = Field(default="", alias="from")
    target: str = Field(default="", alias="to")


class Graph(BaseModel):
    """Ordered nodes and edges. Built fresh per request and mutated in place."""
    model_config = ConfigDict(extra="ignore")
    nodes: List[Node] = Field(default_factory=list)
    edges: List[Edge] = Field(default_factory=list)

    @field_validator("nodes", "edges", mode="before")
    @classmethod
    def _null_as_empty(cls, v):
        return [] if v is None else v

    def node_ids(self) -> List[str]:
        return [n.id for n in self.nodes]

    def to_payload(self) -> dict:
        """Wire form: {nodes: [{id,label,x,y,desc,security,level}], edges: [{from,to}]}."""
        return self.model_dump(by_alias=True)
