"""
City Info Backend — Patch Document Engine
===========================================

What:  Decodes and applies JSON Patch (RFC 6902) documents to flat DTOs.
Why:   PATCH /api/cities/{cityId}/pointsofinterest/{id} edits a transient
       PointOfInterestForUpdateDto, never the entity. The result must pass the
       same validation as a PUT body before anything is merged.
How:   1. The DTO is dumped to a plain dict (one member per field)
       2. Each operation is applied in order to a copy of that dict
       3. The dict is validated back into the DTO class
       Any failure raises ValidationError (HTTP 400); the caller's entity is
       never touched.

Supported operations on a fixed-shape document:
    add / replace:  set the member to `value`
    remove:         reset the member to null
    move:           copy `from` into `path`, then reset `from` to null
    copy:           copy `from` into `path`
    test:           fail unless the member equals `value`

Paths address a single top-level member ("/name"); matching ignores case.
"""

import logging
from typing import Any, Dict, List, Literal, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from app.exceptions import ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_OPS_REQUIRING_VALUE = {"add", "replace", "test"}
_OPS_REQUIRING_FROM = {"move", "copy"}


class PatchOperation(BaseModel):
    """One entry of a patch document: {"op", "path", "value"?, "from"?}."""

    model_config = ConfigDict(populate_by_name=True)

    op: Literal["add", "remove", "replace", "move", "copy", "test"]
    path: str = Field(description="JSON Pointer to the target member, e.g. /name")
    value: Any = Field(default=None)
    from_: Optional[str] = Field(default=None, alias="from")

    @property
    def has_value(self) -> bool:
        # null is a legitimate value; absence is not
        return "value" in self.model_fields_set


def _unescape(token: str) -> str:
    return token.replace("~1", "/").replace("~0", "~")


def _resolve_member(document: Dict[str, Any], pointer: str, index: int) -> str:
    """Map a JSON Pointer onto an existing top-level key of the document."""
    if not pointer.startswith("/"):
        raise ValidationError(
            message=f"Invalid path '{pointer}': a JSON Pointer must start with '/'",
            field="path",
            context={"operation_index": index},
        )
    tokens = [_unescape(t) for t in pointer[1:].split("/")]
    if len(tokens) != 1 or not tokens[0]:
        raise ValidationError(
            message=f"The target location specified by path '{pointer}' was not found",
            field="path",
            context={"operation_index": index},
        )
    wanted = tokens[0].lower()
    for key in document:
        if key.lower() == wanted:
            return key
    raise ValidationError(
        message=f"The target location specified by path '{pointer}' was not found",
        field="path",
        context={"operation_index": index},
    )


def apply_patch(
    document: Dict[str, Any], operations: List[PatchOperation]
) -> Dict[str, Any]:
    """
    Apply operations in order to a copy of `document`.

    The input dict is left untouched, so a failure halfway through leaves no
    partial writes anywhere.
    """
    result = dict(document)

    for index, operation in enumerate(operations):
        if operation.op in _OPS_REQUIRING_VALUE and not operation.has_value:
            raise ValidationError(
                message=f"The '{operation.op}' operation requires a 'value'",
                field="value",
                context={"operation_index": index},
            )
        if operation.op in _OPS_REQUIRING_FROM and not operation.from_:
            raise ValidationError(
                message=f"The '{operation.op}' operation requires a 'from' path",
                field="from",
                context={"operation_index": index},
            )

        target = _resolve_member(result, operation.path, index)

        if operation.op in ("add", "replace"):
            result[target] = operation.value

        elif operation.op == "remove":
            result[target] = None

        elif operation.op == "copy":
            source = _resolve_member(result, operation.from_, index)
            result[target] = result[source]

        elif operation.op == "move":
            source = _resolve_member(result, operation.from_, index)
            if source != target:
                result[target] = result[source]
                result[source] = None

        elif operation.op == "test":
            if result[target] != operation.value:
                raise ValidationError(
                    message=(
                        f"The current value '{result[target]}' at path '{operation.path}' "
                        f"is not equal to the test value '{operation.value}'"
                    ),
                    field="value",
                    context={"operation_index": index},
                )

    return result


def patch_model(
    instance: BaseModel,
    operations: List[PatchOperation],
    model_class: Optional[Type[ModelT]] = None,
) -> ModelT:
    """
    Apply a patch document to a DTO and return a freshly validated DTO.

    Args:
        instance:     The transient DTO (e.g. mapped from the stored entity)
        operations:   Decoded patch document
        model_class:  Class to validate the result against (defaults to the
                      instance's class)

    Raises:
        ValidationError: structural patch error, failed `test`, or a result
                         violating the model's validation rules
    """
    model_class = model_class or type(instance)
    patched = apply_patch(instance.model_dump(), operations)

    try:
        return model_class.model_validate(patched)
    except PydanticValidationError as e:
        errors = e.errors(include_url=False, include_context=False)
        logger.info("Patch produced an invalid %s: %s", model_class.__name__, errors)
        raise ValidationError(
            message=f"The patch document produced an invalid {model_class.__name__}",
            context={"errors": errors},
        )
