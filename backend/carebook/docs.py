"""
CareBook Backend — OpenAPI 3.0 Document
=========================================

What:  Serves the generated API description as OpenAPI 3.0.3.
Why:   Pydantic v2 writes JSON Schema 2020-12, which FastAPI publishes as
       OpenAPI 3.1. Swagger tooling and many client generators still
       expect 3.0, where optional values are `nullable` instead of a
       union with `{"type": "null"}`.
How:   Wraps app.openapi() and rewrites the cached document in place.

Rewrites:
    anyOf: [X, {"type": "null"}]   → X + nullable: true
    anyOf: [{$ref}, {"type": "null"}] → allOf: [{$ref}] + nullable: true
    examples: [a, ...] (schemas)   → example: a
    const: v                       → enum: [v]
"""

from typing import Any, Callable, Dict

from fastapi import FastAPI

OPENAPI_VERSION = "3.0.3"

_NULL = {"type": "null"}


def _collapse_nullable(node: Dict[str, Any]) -> None:
    variants = node.get("anyOf")
    if not isinstance(variants, list) or _NULL not in variants:
        return

    others = [variant for variant in variants if variant != _NULL]
    del node["anyOf"]
    node["nullable"] = True
    if len(others) != 1:
        node["anyOf"] = others
    elif "$ref" in others[0]:
        # 3.0 ignores siblings of $ref
        node["allOf"] = others
    else:
        for key, value in others[0].items():
            node.setdefault(key, value)


def downgrade_schema(node: Any) -> Any:
    """Rewrite a JSON Schema 2020-12 fragment (and its children) for 3.0."""
    if isinstance(node, list):
        for item in node:
            downgrade_schema(item)
        return node
    if not isinstance(node, dict):
        return node

    _collapse_nullable(node)
    if "const" in node:
        node["enum"] = [node.pop("const")]
    # Only schema-level examples are lists; media type examples are maps
    examples = node.get("examples")
    if isinstance(examples, list):
        del node["examples"]
        if examples:
            node.setdefault("example", examples[0])

    for value in node.values():
        downgrade_schema(value)
    return node


def to_openapi_30(document: Dict[str, Any]) -> Dict[str, Any]:
    document["openapi"] = OPENAPI_VERSION
    downgrade_schema(document.get("paths", {}))
    downgrade_schema(document.get("components", {}))
    return document


def install_openapi_30(app: FastAPI) -> None:
    """Replace app.openapi so /openapi.json, /docs and exports share the 3.0 document."""
    generate: Callable[[], Dict[str, Any]] = app.openapi

    def openapi() -> Dict[str, Any]:
        if app.openapi_schema is None:
            app.openapi_schema = to_openapi_30(generate())
        return app.openapi_schema

    app.openapi = openapi  # type: ignore[method-assign]
