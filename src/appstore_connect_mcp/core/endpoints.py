"""
Declarative bindings for App Store Connect endpoints.

An `Endpoint` describes one REST call: method, path template, and how each
tool argument maps onto the request (path placeholder, query key, body
attribute, relationship or resource id). `Endpoint.as_tool()` turns the
description into a coroutine with a real signature, so the registry can wrap
it exactly like a hand-written tool and FastMCP can derive its input schema.
"""

from __future__ import annotations

import inspect
import string
from dataclasses import dataclass, field
from typing import (
    Annotated,
    Any,
    Awaitable,
    Callable,
    Dict,
    List,
    Mapping,
    Optional,
    Tuple,
)
from urllib.parse import quote

from pydantic import Field

from . import jsonapi
from .client import AppStoreConnectClient

BODY_METHODS = frozenset({"POST", "PATCH"})

# Target kinds for a Param
PATH = "path"
QUERY = "query"
ATTRIBUTE = "attribute"
RELATIONSHIP = "relationship"
RESOURCE_ID = "id"


@dataclass(frozen=True)
class Param:
    """One tool argument and where its value lands in the request."""

    name: str
    description: str = ""
    annotation: Any = str
    required: bool = False
    default: Any = None
    target: str = QUERY
    key: Optional[str] = None  # query key / attribute name / relationship name
    related_type: Optional[str] = None
    to_many: bool = False
    nullable: bool = False  # "" clears a to-one relationship
    constraints: Mapping[str, Any] = field(default_factory=dict)

    @property
    def wire_key(self) -> str:
        return self.key or self.name

    def annotated(self) -> Any:
        nullable = not self.required and self.default is None
        base = Optional[self.annotation] if nullable else self.annotation
        return Annotated[base, Field(description=self.description, **self.constraints)]

    def parameter(self) -> inspect.Parameter:
        default = inspect.Parameter.empty if self.required else self.default
        return inspect.Parameter(
            self.name,
            inspect.Parameter.KEYWORD_ONLY,
            default=default,
            annotation=self.annotated(),
        )


# --- Param shorthands ------------------------------------------------------ #


def path_id(name: str, description: str) -> Param:
    return Param(name, description, required=True, target=PATH)


def resource_id(description: str, name: str = "id") -> Param:
    """Path placeholder that is also echoed as data.id in PATCH bodies."""
    return Param(name, description, required=True, target=RESOURCE_ID)


def query(
    name: str,
    key: str,
    description: str,
    *,
    annotation: Any = str,
    default: Any = None,
) -> Param:
    return Param(name, description, annotation=annotation, default=default, key=key)


def filter_param(field_name: str, description: str, *, annotation: Any = str) -> Param:
    """`filter_<field>` argument sent as `filter[<field>]`."""
    return query(
        f"filter_{field_name}", f"filter[{field_name}]", description, annotation=annotation
    )


def include(description: str, *, default: Optional[str] = None) -> Param:
    return query("include", "include", description, default=default)


def limit(description: str = "Maximum number of resources per page (1-200)") -> Param:
    return Param(
        "limit",
        description,
        annotation=int,
        key="limit",
        constraints={"ge": 1, "le": 200},
    )


def attr(
    name: str,
    description: str,
    *,
    annotation: Any = str,
    required: bool = False,
    default: Any = None,
) -> Param:
    return Param(
        name,
        description,
        annotation=annotation,
        required=required,
        default=default,
        target=ATTRIBUTE,
    )


def rel(
    name: str,
    relationship: str,
    related_type: str,
    description: str,
    *,
    required: bool = True,
    to_many: bool = False,
    nullable: bool = False,
) -> Param:
    annotation: Any = List[str] if to_many else str
    return Param(
        name,
        description,
        annotation=annotation,
        required=required,
        target=RELATIONSHIP,
        key=relationship,
        related_type=related_type,
        to_many=to_many,
        nullable=nullable,
    )


ALL_PAGES = Param(
    "all_pages",
    "Follow links.next and return every page combined into one result",
    annotation=bool,
    default=False,
    target="control",
)


# --- Request descriptor ---------------------------------------------------- #


@dataclass(frozen=True)
class ApiRequest:
    method: str
    path: str
    body: Optional[Dict[str, Any]] = None
    params: Optional[Dict[str, str]] = None


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


@dataclass(frozen=True)
class Endpoint:
    name: str
    description: str
    method: str
    path: str
    params: Tuple[Param, ...] = ()
    resource_type: Optional[str] = None
    fixed_query: Mapping[str, str] = field(default_factory=dict)
    ack: Optional[str] = None  # message template, formatted with the arguments
    paginated: bool = False

    def __post_init__(self) -> None:
        placeholders = {
            f for _, f, _, _ in string.Formatter().parse(self.path) if f is not None
        }
        declared = {p.name for p in self.params if p.target in (PATH, RESOURCE_ID)}
        if placeholders != declared:
            raise ValueError(
                f"{self.name}: path placeholders {sorted(placeholders)} "
                f"do not match path params {sorted(declared)}"
            )
        if self.method in BODY_METHODS and self.resource_type is None:
            raise ValueError(f"{self.name}: {self.method} endpoints need a resource_type")

    @property
    def all_params(self) -> Tuple[Param, ...]:
        return self.params + ((ALL_PAGES,) if self.paginated else ())

    def _value(self, arguments: Mapping[str, Any], param: Param) -> Any:
        return arguments.get(param.name, param.default)

    def build_request(self, arguments: Mapping[str, Any]) -> ApiRequest:
        path = self.path.format(
            **{
                p.name: quote(str(arguments[p.name]), safe="")
                for p in self.params
                if p.target in (PATH, RESOURCE_ID)
            }
        )

        params: Dict[str, str] = dict(self.fixed_query)
        for p in self.params:
            if p.target != QUERY:
                continue
            value = self._value(arguments, p)
            if value is None or value == "":
                continue
            params[p.wire_key] = _query_value(value)

        body = self._build_body(arguments) if self.method in BODY_METHODS else None
        return ApiRequest(
            method=self.method,
            path=path,
            body=body,
            params=params if self.method == "GET" else (params or None),
        )

    def _build_body(self, arguments: Mapping[str, Any]) -> Dict[str, Any]:
        attribute_params = [p for p in self.params if p.target == ATTRIBUTE]
        relationship_params = [p for p in self.params if p.target == RELATIONSHIP]

        attributes: Dict[str, Any] = {}
        for p in attribute_params:
            value = self._value(arguments, p)
            if value is not None:
                attributes[p.wire_key] = value

        relationships: Dict[str, Any] = {}
        for p in relationship_params:
            value = self._value(arguments, p)
            if p.to_many:
                if value is None or (not value and not p.required):
                    continue
                relationships[p.wire_key] = jsonapi.to_many(p.related_type, value)
            elif value is not None:
                if p.nullable and value == "":
                    value = None
                relationships[p.wire_key] = jsonapi.to_one(p.related_type, value)

        id_param = next((p for p in self.params if p.target == RESOURCE_ID), None)
        include_relationships = bool(relationships) or (
            bool(relationship_params) and not attribute_params
        )
        return jsonapi.resource_document(
            self.resource_type,  # type: ignore[arg-type]
            resource_id=arguments[id_param.name] if id_param and self.method == "PATCH" else None,
            attributes=attributes if attribute_params else None,
            relationships=relationships if include_relationships else None,
        )

    async def invoke(self, client: AppStoreConnectClient, arguments: Dict[str, Any]) -> str:
        all_pages = bool(arguments.pop(ALL_PAGES.name, False))
        req = self.build_request(arguments)

        if all_pages and self.paginated:
            response = await client.request_all_pages(
                req.method, req.path, json=req.body, params=req.params, tool=self.name
            )
        else:
            response = await client.request(
                req.method, req.path, json=req.body, params=req.params, tool=self.name
            )

        if self.ack:
            return jsonapi.acknowledgement(self.ack.format(**arguments))
        return jsonapi.render_json(response)

    def as_tool(self, module: Optional[str] = None) -> Callable[..., Awaitable[str]]:
        endpoint = self

        async def tool(client: AppStoreConnectClient, **arguments: Any) -> str:
            return await endpoint.invoke(client, dict(arguments))

        parameters = [
            inspect.Parameter("client", inspect.Parameter.POSITIONAL_OR_KEYWORD)
        ] + [p.parameter() for p in self.all_params]

        tool.__name__ = self.name
        tool.__qualname__ = self.name
        tool.__doc__ = self.description
        tool.__module__ = module or __name__
        tool.__annotations__ = {}
        tool.__signature__ = inspect.Signature(  # type: ignore[attr-defined]
            parameters=parameters, return_annotation=str
        )
        tool.endpoint = self  # type: ignore[attr-defined]
        return tool


__all__ = [
    "Param",
    "Endpoint",
    "ApiRequest",
    "path_id",
    "resource_id",
    "query",
    "filter_param",
    "include",
    "limit",
    "attr",
    "rel",
    "ALL_PAGES",
]
