"""Request body validation decorator.

@validate_request looks at the view's parameters, finds the one annotated
with a pydantic model, validates the JSON body against that model and
passes the parsed instance in. Path parameters pass through unchanged.

    @bp.post("/lists")
    @validate_request
    def create_list(data: ListCreate):
        ...

@path_id converts a numeric path segment to int. Stacked above
@validate_request it runs first, so a malformed id is reported before
anything in the body:

    @bp.put("/lists/<list_id>")
    @path_id("list_id", "list")
    @validate_request
    def update_list(list_id: int, data: ListUpdate):
        ...

Validation failures become ValidationError (400) with one entry per field:

    {"model": "ListCreate", "errors": [{"path": "title", "message": "..."}]}
"""

import inspect
from functools import wraps

import pydantic
from flask import request

from ..exceptions import ValidationError
from ..utils import ids


def _format_errors(exc: pydantic.ValidationError) -> list[dict]:
    return [
        {
            "path": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]


def _find_body_param(params: list[inspect.Parameter]) -> tuple[str, type] | None:
    for param in params:
        annotation = param.annotation
        if inspect.isclass(annotation) and issubclass(annotation, pydantic.BaseModel):
            return param.name, annotation
    return None


def validate_request(f):
    """Validate the JSON request body against the view's pydantic parameter.

    Raises:
        TypeError: At decoration time, if the view has no parameters or its
                   first parameter is not annotated
    """
    params = list(inspect.signature(f).parameters.values())
    if not params:
        raise TypeError(f"{f.__name__} has no parameters to validate")
    if params[0].annotation is inspect.Parameter.empty:
        raise TypeError(f"First parameter of {f.__name__} lacks a type annotation")

    body_param = _find_body_param(params)

    @wraps(f)
    def wrapper(*args, **kwargs):
        if body_param is not None:
            name, model = body_param
            payload = request.get_json(silent=True)
            if payload is None:
                payload = {}
            if not isinstance(payload, dict):
                raise ValidationError(
                    "Request body must be a JSON object",
                    {"model": model.__name__, "errors": [{"path": "", "message": "Expected an object"}]}
                )
            try:
                kwargs[name] = model.model_validate(payload)
            except pydantic.ValidationError as e:
                raise ValidationError(
                    "Validation error",
                    {"model": model.__name__, "errors": _format_errors(e)}
                )
        return f(*args, **kwargs)

    return wrapper


def path_id(param: str, label: str):
    """Parse the path parameter `param` as a numeric id.

    Args:
        param: Name of the URL variable (e.g. "list_id")
        label: Resource name used in the error message (e.g. "list")

    Raises:
        ValidationError: "Invalid <label> ID" when the segment is not a valid id
    """
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            kwargs[param] = ids.parse_numeric_id(kwargs[param], label)
            return f(*args, **kwargs)

        return wrapper

    return decorator
