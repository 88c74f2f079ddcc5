"""
Schema composition helpers.

Every schema in the planner is a pydantic model. Derived shapes (insert rows,
sparse updates, forms with cross-field checks) are built from a base model by
the pure functions below, each of which returns a new model class and leaves
its input untouched.
"""
from typing import Annotated, Any, Callable, Dict, Mapping, Optional, Sequence, Tuple, Type, TypeVar

from pydantic import BaseModel, Field, ValidationInfo, create_model, field_validator
from pydantic.fields import FieldInfo
from pydantic_core import PydanticCustomError

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseSchema(BaseModel):
    model_config = {
        "from_attributes": True,
        "populate_by_name": True,
    }

    def to_json(self) -> Dict[str, Any]:
        """Wire form: aliases, JSON-compatible values, absent optionals dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_payload(self) -> Dict[str, Any]:
        """Only the fields the caller actually supplied (or that carry defaults on insert)."""
        return self.model_dump(mode="json", exclude_unset=True)


def _field_definition(field: FieldInfo, optional: bool = False) -> Tuple[Any, FieldInfo]:
    # Constraints live in field.metadata once pydantic has unpacked Annotated;
    # fold them back into the annotation so they survive the rebuild.
    annotation = field.annotation
    if field.metadata:
        annotation = Annotated[(annotation, *field.metadata)]

    options = {"alias": field.alias, "description": field.description}
    if optional:
        return Optional[annotation], Field(None, **options)
    if field.is_required():
        return annotation, Field(..., **options)
    if field.default_factory is not None:
        return annotation, Field(default_factory=field.default_factory, **options)
    return annotation, Field(field.default, **options)


def omit(model: Type[BaseModel], *fields: str, name: Optional[str] = None) -> Type[BaseSchema]:
    """Copy of ``model`` without ``fields``."""
    definitions = {
        key: _field_definition(info)
        for key, info in model.model_fields.items()
        if key not in fields
    }
    return create_model(
        name or model.__name__,
        __base__=BaseSchema,
        __module__=model.__module__,
        **definitions,
    )


def make_partial(model: Type[BaseModel], name: Optional[str] = None) -> Type[BaseSchema]:
    """Copy of ``model`` where every field is optional and defaults to None.

    Field-level constraints still apply to values that are present.
    """
    definitions = {
        key: _field_definition(info, optional=True)
        for key, info in model.model_fields.items()
    }
    return create_model(
        name or model.__name__,
        __base__=BaseSchema,
        __module__=model.__module__,
        **definitions,
    )


def extend(model: Type[ModelT], name: Optional[str] = None, **fields: Any) -> Type[ModelT]:
    """Subclass of ``model`` with extra (or redeclared) fields.

    Fields use ``create_model`` syntax: ``name=(annotation, default)``.
    """
    return create_model(
        name or model.__name__,
        __base__=model,
        __module__=model.__module__,
        **fields,
    )


def refine(
    model: Type[ModelT],
    check: Callable[[Mapping[str, Any]], bool],
    message: str,
    path: str,
    reads: Sequence[str] = (),
    name: Optional[str] = None,
) -> Type[ModelT]:
    """Attach a cross-field predicate whose failure is reported against ``path``.

    ``check`` receives the validated values of ``path`` and of the fields in
    ``reads``, which must be declared before ``path``. The predicate is
    skipped only when one of the fields it reads already failed; failures
    elsewhere in the model are reported alongside it.
    """
    field_names = list(model.model_fields)
    preceding = field_names[: field_names.index(path)]
    unknown = [key for key in reads if key not in preceding]
    if unknown:
        raise ValueError(f"refine on {path!r} can only read fields declared before it, got {unknown}")

    def _check(cls, value: Any, info: ValidationInfo) -> Any:
        if any(key not in info.data for key in reads):
            return value
        if not check({**{key: info.data[key] for key in reads}, path: value}):
            raise PydanticCustomError("refinement", message)
        return value

    return create_model(
        name or model.__name__,
        __base__=model,
        __module__=model.__module__,
        __validators__={f"_refine_{path}": field_validator(path)(_check)},
    )
