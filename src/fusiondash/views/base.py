"""Base class for view models handed to the presentation layer."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer
from pydantic.alias_generators import to_camel


class ViewModel(BaseModel):
    """A read-only, denormalized shape assembled for one page.

    Fields are snake_case in Python and camelCase on the wire. Fields listed
    in ``omit_when_empty`` are left out of serialized output entirely when
    they hold no value, rather than emitted as null placeholders.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    omit_when_empty: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode="wrap")
    def _drop_empty_optionals(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        for name in self.omit_when_empty:
            for key in (name, to_camel(name)):
                if key in data and data[key] in (None, ""):
                    del data[key]
        return data

    def to_response(self) -> dict[str, Any]:
        return {"_v": "1.0", **self.model_dump(mode="json", by_alias=True)}
