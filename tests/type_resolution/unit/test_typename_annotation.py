"""Typename annotation tests."""

from __future__ import annotations

import copy
from datetime import date, datetime
from pathlib import Path

import pytest
from graphql import GraphQLSchema
from typename_tagger.schema_management import bind_type_resolvers, load_schema
from typename_tagger.type_resolution import (
    AmbiguousTypeError,
    AsyncResolverUnsupportedError,
    InvalidArgumentError,
    MissingContextError,
    MissingResolverError,
    NoViableTypeError,
    TypeMismatchError,
    UnexpectedTypeError,
    UnknownFieldError,
    UnknownResolvedTypeError,
    UnknownTypeError,
    UnresolvedAbstractTypeError,
    annotate,
)

_CHICKEN = {"id": 1, "name": "Henrieta", "cost": 45, "feedRequirements": 45, "eggOutput": 30}
_COW = {"id": 2, "name": "Moophy", "cost": 1200, "hayRequirements": 200, "milkOutput": 500}
_TRACTOR = {"id": 1, "brand": "John Deer", "type": "Tractor", "purchasedOn": date(2020, 5, 1)}
_HOUSE = {"id": 1, "description": "The house", "cost": 400000}
_BARN = {"id": 2, "description": "Barn", "cost": 100000}


def _resolve_animal(animal: dict) -> str | None:
    if animal.get("hayRequirements") or animal.get("milkOutput"):
        return "Cow"
    if animal.get("eggOutput") or animal.get("feedRequirements"):
        return "Chicken"
    return None


def _resolve_asset(asset: dict) -> str | None:
    if asset.get("brand"):
        return "Equipment"
    if asset.get("description"):
        return "Building"
    return None


def _unbound_schema() -> GraphQLSchema:
    sample_path = Path(__file__).resolve().parents[3] / "samples" / "farm.graphql"
    return load_schema(sample_path.read_text(encoding="utf-8"))


def _farm_schema() -> GraphQLSchema:
    schema = _unbound_schema()
    bind_type_resolvers(schema, {"Animal": _resolve_animal, "Asset": _resolve_asset})
    return schema


@pytest.mark.parametrize(
    "value",
    ["hello world", 1234, 1234.567, None, True, date(2020, 5, 1), datetime(2020, 5, 1, 8)],
)
def test_returns_scalars_unmodified(value: object) -> None:
    assert annotate(value, _farm_schema()) is value


def test_returns_scalars_unmodified_even_with_context() -> None:
    assert annotate("Henrieta", _farm_schema(), "Chicken", "name") == "Henrieta"


def test_rejects_sequences() -> None:
    with pytest.raises(InvalidArgumentError, match="not sequences"):
        annotate([_CHICKEN], _farm_schema())


def test_rejects_nested_sequences_inside_sequences() -> None:
    with pytest.raises(InvalidArgumentError):
        annotate({"__typename": "Farm", "animals": [[_CHICKEN]]}, _farm_schema())


def test_keeps_explicit_typename() -> None:
    result = annotate({"__typename": "Building", **_HOUSE}, _farm_schema())

    assert result == {**_HOUSE, "__typename": "Building"}


def test_explicit_abstract_typename_is_resolved_to_concrete_type() -> None:
    result = annotate({"__typename": "Animal", **_COW}, _farm_schema())

    assert result == {**_COW, "__typename": "Cow"}


def test_finds_the_typenames_of_the_children() -> None:
    value = {"__typename": "Farm", "buildings": [_HOUSE, _BARN], "equipment": [_TRACTOR]}

    result = annotate(value, _farm_schema())

    assert result == {
        "__typename": "Farm",
        "buildings": [
            {**_HOUSE, "__typename": "Building"},
            {**_BARN, "__typename": "Building"},
        ],
        "equipment": [{**_TRACTOR, "__typename": "Equipment"}],
    }


def test_custom_scalar_objects_pass_through_untouched() -> None:
    info = {"notes": "Some notes", "vin": "123abc456"}
    value = {"__typename": "Farm", "equipment": [{**_TRACTOR, "info": info}]}

    result = annotate(value, _farm_schema())

    equipment = result["equipment"][0]  # type: ignore[index]
    assert equipment["__typename"] == "Equipment"
    assert equipment["info"] is info
    assert equipment["purchasedOn"] == date(2020, 5, 1)


def test_resolves_interfaces() -> None:
    value = {"__typename": "Farm", "animals": [_CHICKEN, _COW]}

    result = annotate(value, _farm_schema())

    assert result == {
        "__typename": "Farm",
        "animals": [
            {**_CHICKEN, "__typename": "Chicken"},
            {**_COW, "__typename": "Cow"},
        ],
    }


def test_resolves_unions() -> None:
    value = {"__typename": "Farm", "assets": [_HOUSE, _TRACTOR, _BARN]}

    result = annotate(value, _farm_schema())

    assert [asset["__typename"] for asset in result["assets"]] == [  # type: ignore[index]
        "Building",
        "Equipment",
        "Building",
    ]


def test_accepts_tuples_as_sequences() -> None:
    result = annotate({"__typename": "Farm", "buildings": (_HOUSE,)}, _farm_schema())

    assert result["buildings"] == [{**_HOUSE, "__typename": "Building"}]  # type: ignore[index]


def test_does_not_mutate_the_input() -> None:
    value = {"__typename": "Farm", "animals": [dict(_CHICKEN)], "buildings": [dict(_HOUSE)]}
    snapshot = copy.deepcopy(value)

    annotate(value, _farm_schema())

    assert value == snapshot


def test_annotating_twice_reproduces_the_same_tags() -> None:
    schema = _farm_schema()
    value = {"__typename": "Farm", "animals": [_CHICKEN, _COW], "assets": [_HOUSE, _TRACTOR]}

    once = annotate(value, schema)

    assert annotate(once, schema) == once


def test_uses_parent_context_to_resolve_ambiguous_input() -> None:
    result = annotate({"id": 2}, _farm_schema(), "Farm", "equipment")

    assert result == {"id": 2, "__typename": "Equipment"}


def test_parent_context_on_abstract_field_uses_the_type_resolver() -> None:
    schema = load_schema(
        """
        type Equipment { id: ID! brand: String }
        type Building { id: ID! description: String }
        union Asset = Equipment | Building
        type Farm { equipment: [Asset!]! }
        type Query { farm: Farm }
        """
    )
    bind_type_resolvers(
        schema, {"Asset": lambda asset: "Equipment" if asset.get("brand") else "Building"}
    )

    result = annotate({"id": 2}, schema, parent_type_name="Farm", property_of_parent="equipment")

    assert result == {"id": 2, "__typename": "Building"}


def test_complains_about_missing_property_of_parent() -> None:
    with pytest.raises(MissingContextError, match="property_of_parent"):
        annotate({"id": 2}, _farm_schema(), parent_type_name="Farm")


def test_complains_about_missing_parent_type_name() -> None:
    with pytest.raises(MissingContextError, match="parent_type_name"):
        annotate({"id": 2}, _farm_schema(), property_of_parent="equipment")


def test_complains_about_unknown_parent_type() -> None:
    with pytest.raises(UnknownTypeError, match="Barnyard"):
        annotate({"id": 2}, _farm_schema(), "Barnyard", "equipment")


def test_complains_about_parent_type_that_is_not_an_object_type() -> None:
    with pytest.raises(TypeMismatchError, match="Animal"):
        annotate({"id": 2}, _farm_schema(), "Animal", "name")


def test_complains_about_unknown_field_on_parent() -> None:
    with pytest.raises(UnknownFieldError, match="tractors"):
        annotate({"id": 2}, _farm_schema(), "Farm", "tractors")


def test_complains_about_unknown_explicit_typename() -> None:
    with pytest.raises(UnknownTypeError, match="Spaceship"):
        annotate({"__typename": "Spaceship", "id": 1}, _farm_schema())


def test_finds_typename_for_plain_object_without_ambiguity() -> None:
    result = annotate({"id": 5, "brand": "International", "type": "Tractor"}, _farm_schema())

    assert result["__typename"] == "Equipment"  # type: ignore[index]


def test_complains_about_too_many_possible_typename_matches() -> None:
    with pytest.raises(AmbiguousTypeError) as exc_info:
        annotate({"id": 1, "name": "Henrieta"}, _farm_schema())

    assert set(exc_info.value.candidate_names) == {"Animal", "Chicken", "Cow", "Farm"}
    for name in ("Animal", "Chicken", "Cow", "Farm"):
        assert name in str(exc_info.value)


def test_complains_about_there_being_no_typename_matches() -> None:
    value = {**_CHICKEN, "notAField": "this field does not exist in the model"}

    with pytest.raises(NoViableTypeError) as exc_info:
        annotate(value, _farm_schema())

    message = str(exc_info.value)
    assert "No viable typenames found!" in message
    assert '"notAField": "this field does not exist in the model"' in message
    assert "Hint:" in message
    assert exc_info.value.value is value


def test_complains_about_async_resolvers() -> None:
    schema = _farm_schema()

    async def _resolve(animal, _info, _abstract_type):
        return _resolve_animal(animal)

    schema.get_type("Animal").resolve_type = _resolve  # type: ignore[union-attr]

    with pytest.raises(AsyncResolverUnsupportedError, match="Animal"):
        annotate({"__typename": "Farm", "animals": [_CHICKEN]}, schema)


def test_complains_about_async_resolvers_bound_by_name() -> None:
    schema = _unbound_schema()

    async def _resolve(animal):
        return _resolve_animal(animal)

    bind_type_resolvers(schema, {"Animal": _resolve, "Asset": _resolve_asset})

    with pytest.raises(AsyncResolverUnsupportedError):
        annotate({"__typename": "Farm", "animals": [_COW]}, schema)


def test_complains_about_missing_resolver() -> None:
    with pytest.raises(MissingResolverError, match="Animal"):
        annotate({"__typename": "Farm", "animals": [_CHICKEN]}, _unbound_schema())


def test_complains_when_resolver_returns_nothing() -> None:
    with pytest.raises(UnresolvedAbstractTypeError, match="Animal"):
        annotate({"__typename": "Farm", "animals": [{"id": 3, "name": "Ghost"}]}, _farm_schema())


@pytest.mark.parametrize("resolved_name", ["Tractor", "Animal", "String"])
def test_complains_when_resolver_returns_unknown_or_non_object_type(resolved_name: str) -> None:
    schema = _unbound_schema()
    bind_type_resolvers(schema, {"Animal": lambda _animal: resolved_name})

    with pytest.raises(UnknownResolvedTypeError, match=resolved_name):
        annotate({"__typename": "Farm", "animals": [_CHICKEN]}, schema)


def test_accepts_resolver_returning_object_type() -> None:
    schema = _unbound_schema()
    bind_type_resolvers(schema, {"Animal": lambda _animal: schema.get_type("Cow")})

    result = annotate({"__typename": "Farm", "animals": [_COW]}, schema)

    assert result["animals"] == [{**_COW, "__typename": "Cow"}]  # type: ignore[index]


def test_complains_about_unexpected_type_kind_with_context() -> None:
    with pytest.raises(UnexpectedTypeError) as exc_info:
        annotate({"__typename": "Farm", "season": {"name": "SPRING"}}, _farm_schema())

    message = str(exc_info.value)
    assert "Season" in message
    assert "parent_type_name: Farm" in message
    assert "property_of_parent: season" in message


def test_no_typename_matches_reports_objects_with_non_string_keys() -> None:
    value = {date(2020, 5, 1): 3}

    with pytest.raises(NoViableTypeError) as exc_info:
        annotate(value, _farm_schema())

    message = str(exc_info.value)
    assert "datetime.date(2020, 5, 1): 3" in message
    assert "Hint:" in message
