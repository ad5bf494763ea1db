"""
Base model for API resource representations.

The remote schema expects many fields to be left out entirely rather than
sent as "", 0, false or []. Each model lists those fields explicitly in
OMIT_EMPTY; everything else is always emitted (None values are dropped).
Server-assigned fields are listed in READ_ONLY and never sent on writes.
"""

import json
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError, model_serializer
from pydantic import SerializerFunctionWrapHandler
from pydantic_core import PydanticSerializationError

from ..errors import DeserializationError, SerializationError

M = TypeVar("M", bound="APIModel")

# Values treated as "empty" for OMIT_EMPTY fields (0 also matches 0.0 and False)
_EMPTY_VALUES = (None, "", False, 0, [], {})


class APIModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Attribute names, not wire keys
    OMIT_EMPTY: ClassVar[FrozenSet[str]] = frozenset()
    READ_ONLY: ClassVar[FrozenSet[str]] = frozenset()

    @model_serializer(mode="wrap")
    def _drop_empty(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        fields = type(self).model_fields
        for name, field in fields.items():
            keys = {name, field.alias} if field.alias else {name}
            for key in keys:
                if key not in data:
                    continue
                value = data[key]
                if value is None or (name in self.OMIT_EMPTY and value in _EMPTY_VALUES):
                    del data[key]
        return data

    def to_json(self) -> str:
        """Full wire representation, read-only fields included."""
        return self.model_dump_json(by_alias=True)

    def to_payload(self, exclude_cid: bool = False) -> bytes:
        """
        Encode the value for a create/update request body.

        Args:
            exclude_cid: Leave out the CID (create requests; the server assigns it)

        Raises:
            SerializationError: If the value cannot be encoded
        """
        exclude = set(self.READ_ONLY)
        if exclude_cid and "cid" in type(self).model_fields:
            exclude.add("cid")
        try:
            # JSON mode would turn NaN and Inf into null
            data = self.model_dump(by_alias=True, exclude=exclude)
            return json.dumps(data, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError, PydanticSerializationError) as e:
            raise SerializationError(f"Unable to encode {type(self).__name__}: {e}") from e

    @classmethod
    def from_json(cls: Type[M], body: bytes) -> M:
        """
        Decode a single resource from a response body.

        Raises:
            DeserializationError: If the body is not a valid representation
        """
        try:
            return cls.model_validate_json(body)
        except ValidationError as e:
            raise DeserializationError(f"Unable to decode {cls.__name__}: {e}") from e

    @classmethod
    def list_from_json(cls: Type[M], body: bytes) -> List[M]:
        """
        Decode a JSON array of resources from a response body. A null body
        decodes to an empty list.

        Raises:
            DeserializationError: If the body is not an array of valid representations
        """
        try:
            return TypeAdapter(Optional[List[cls]]).validate_json(body) or []
        except ValidationError as e:
            raise DeserializationError(f"Unable to decode list of {cls.__name__}: {e}") from e
