from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel, Field

from noteboard.web.deps import ACTOR_HEADER


def set_custom_openapi(app: FastAPI) -> None:
    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title="Noteboard API",
            version="0.1.0",
            summary="Notes with threaded comments and tiered comment privacy",
            routes=app.routes,
        )

        openapi_schema.setdefault("components", {})["securitySchemes"] = {
            "ActorId": {
                "type": "apiKey",
                "in": "header",
                "name": ACTOR_HEADER,
                "description": "Numeric id of the acting user",
            },
        }

        # Apply security globally (will be overridden for public endpoints)
        openapi_schema["security"] = [{"ActorId": []}]

        public_endpoints = {
            ("GET", "/health"),
            ("GET", "/api/v1/notes"),
            ("GET", "/api/v1/notes/{note_id}/comments"),
            ("PATCH", "/api/v1/notes/{note_id}/privacy"),
        }

        for path, path_item in openapi_schema["paths"].items():
            for method, operation in path_item.items():
                if (method.upper(), path) in public_endpoints:
                    operation["security"] = []

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi  # type: ignore[method-assign]


class ErrorResponse(BaseModel):
    """Standard error response format."""

    message: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Machine-readable error type")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"message": "Actor identity required", "type": "authentication_error"},
                {"message": "Note not found: 7", "type": "not_found"},
                {"message": "Comment already deleted: 3", "type": "access_denied"},
                {"message": "Message must be at least 2 characters long", "type": "validation_error"},
            ]
        }
    }


class CreatedResponse(BaseModel):
    """Id of a newly created note or comment."""

    id: int = Field(..., description="Allocated id, never reused")
