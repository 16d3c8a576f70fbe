"""Base model classes for the 16PF scoring engine.

Input models mirror the records owned by the external store and accept its
camelCase field names. Output models are frozen value objects.
"""

from types import MappingProxyType
from typing import Annotated, Any, Dict, Mapping

from pydantic import AfterValidator, BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


def _freeze_mapping(value: Dict[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(value))


def _thaw_mapping(value: Mapping[str, Any]) -> Dict[str, Any]:
    return dict(value)


# Dict fields on frozen models are exposed as read-only mapping proxies and
# serialized back to plain dicts.
ReadOnlyScores = Annotated[
    Dict[str, float],
    AfterValidator(_freeze_mapping),
    PlainSerializer(_thaw_mapping, return_type=Dict[str, float]),
]

ReadOnlyLabels = Annotated[
    Dict[str, str],
    AfterValidator(_freeze_mapping),
    PlainSerializer(_thaw_mapping, return_type=Dict[str, str]),
]


class InputModel(BaseModel):
    """Base model for records read from external collaborators."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class ValueObject(BaseModel):
    """Base model for immutable pipeline outputs."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    def to_dict(self, **kwargs: Any) -> Dict[str, Any]:
        """Convert model to a JSON-compatible dictionary.

        Args:
            **kwargs: Additional arguments for model_dump

        Returns:
            Dict[str, Any]: Dictionary representation with camelCase keys
        """
        kwargs.setdefault("by_alias", True)
        return self.model_dump(mode="json", **kwargs)

    def to_json(self, **kwargs: Any) -> str:
        """Serialize model to a JSON string with camelCase keys."""
        kwargs.setdefault("by_alias", True)
        return self.model_dump_json(**kwargs)
