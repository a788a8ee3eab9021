# =============================================================================
# tools/schemas.py  —  Tool Input Validation
# =============================================================================
#
# One pydantic model per tool.  Handlers call validate_arguments() as their
# very first step, so a bad argument never reaches the Webflow API.
#
# Field names mirror the wire format (siteId, not site_id) because that is
# what the MCP client sends.
# =============================================================================

from typing import Any, Mapping, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from tools.errors import ToolInputError

ModelT = TypeVar("ModelT", bound=BaseModel)


class GetSiteInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    siteId: StrictStr = Field(
        min_length=1,
        description="The unique identifier of the Webflow site",
    )


class GetSitesInput(BaseModel):
    # Takes nothing; stray keys are dropped rather than rejected.
    model_config = ConfigDict(frozen=True, extra="ignore")


def validate_arguments(
    tool_name: str,
    model: type[ModelT],
    arguments: Optional[Mapping[str, Any]],
) -> ModelT:
    """Validate raw tool arguments against ``model``.

    ``None`` is treated as an empty argument object.

    Raises:
        ToolInputError: naming the tool and every failing field.
    """
    try:
        return model.model_validate({} if arguments is None else arguments)
    except ValidationError as exc:
        raise ToolInputError(
            f"Invalid arguments for {tool_name}: {_describe(exc)}"
        ) from exc


def _describe(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "arguments"
        problems.append(f"{location}: {error['msg']}")
    return "; ".join(problems)
