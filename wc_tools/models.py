"""Pydantic building blocks shared across WooCommerce tool inputs."""

import re
from typing import Annotated, Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt

from wc_shared.constants import DEFAULT_CONTEXT, DEFAULT_PAGE, DEFAULT_PER_PAGE

from .errors import MissingIdentifier, MissingRequiredField

PositiveId = Annotated[StrictInt, Field(ge=1)]
Context = Literal["view", "edit"]
SortOrder = Literal["asc", "desc"]


class ToolArgs(BaseModel):
    """Base for every tool input: closed, camelCase ids accepted by alias."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def api_fields(self, *exclude: str) -> dict[str, Any]:
        """Fields the caller set, plus non-null defaults, minus ``exclude``.

        Absent fields are omitted; an explicit ``None`` is kept and sent as ``null``.
        """
        skip = set(exclude)
        data = self.model_dump(exclude_unset=True, exclude=skip)
        defaulted = {
            name
            for name, field in type(self).model_fields.items()
            if name not in data and name not in skip and not field.is_required() and field.default is not None
        }
        if defaulted:
            data.update(self.model_dump(include=defaulted))
        return data


class OpenToolArgs(ToolArgs):
    """Input that forwards unknown keys to the API untouched."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class MetaData(BaseModel):
    key: str
    value: Any = None


class Pagination(ToolArgs):
    """``page`` / ``per_page`` with the usual 1 / 10 defaults."""

    page: int = Field(default=DEFAULT_PAGE, ge=1)
    per_page: int = Field(default=DEFAULT_PER_PAGE, ge=1)


class ViewPagination(Pagination):
    context: Context = DEFAULT_CONTEXT


def id_field(alias: str, description: str | None = None) -> Any:
    """Required positive id, exposed on the wire under its camelCase alias."""
    return Field(alias=alias, ge=1, strict=True, description=description)


def item_id_field(alias: str) -> Any:
    """Id of an item inside a batch update, accepted as ``id`` or ``alias``."""
    return Field(validation_alias=AliasChoices("id", alias), ge=1, strict=True)


def require_id(name: str, value: int | None) -> int:
    if not value:
        raise MissingIdentifier(name)
    return value


def require_field(name: str, value: Any) -> Any:
    if value is None or value == "":
        raise MissingRequiredField(name)
    return value


def batch_body(
    create: list[dict[str, Any]] | None = None,
    update: list[dict[str, Any]] | None = None,
    delete: list[int] | None = None,
) -> dict[str, Any]:
    """Batch body holding only the lists that were provided."""
    body: dict[str, Any] = {}
    if create is not None:
        body["create"] = create
    if update is not None:
        body["update"] = update
    if delete is not None:
        body["delete"] = delete
    return body


def dump_items(items: list[BaseModel] | None) -> list[dict[str, Any]] | None:
    if items is None:
        return None
    return [
        item.api_fields() if isinstance(item, ToolArgs) else item.model_dump(exclude_unset=True) for item in items
    ]


def scoped_item(item: dict[str, Any], parent_key: str, id_key: str | None = None) -> dict[str, Any]:
    """Copy a batch item without its parent-scoping key.

    The parent id belongs in the batch URL, never inside the item; it is
    dropped under its camelCase and snake_case names alike. When the item
    names its own id with the family key (``variationId`` or ``variation_id``),
    it is forwarded as ``id``.
    """
    parent_keys = {parent_key, snake_case(parent_key)}
    clean = {k: v for k, v in item.items() if k not in parent_keys}
    if id_key:
        for key in (id_key, snake_case(id_key)):
            if key in clean:
                own_id = clean.pop(key)
                clean.setdefault("id", own_id)
    return clean


def snake_case(name: str) -> str:
    """``productId`` -> ``product_id``."""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()
