"""Feature queries: a geometry type restriction plus a property predicate."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from geoflux.exceptions import QueryTypeMismatchError
from geoflux.models import FeatureType


class SearchType(Enum):
    """How a property value is compared with the query value."""

    EXACT = "exact"
    STARTS_WITH = "starts_with"
    CONTAINS = "contains"


@dataclass(frozen=True)
class GeoJsonQuery:
    """Select the features to keep while decoding.

    Attributes:
        geometry_type: Keep only features of this type. ``None`` keeps all.
        property: Property key to test. ``None`` disables the property test.
        value: Value compared with the property.
        search_type: Comparison mode, exact equality by default.
    """

    geometry_type: FeatureType | None = None
    property: str | None = None
    value: Any = None
    search_type: SearchType = SearchType.EXACT


def _strict_equals(left: Any, right: Any) -> bool:
    # bool is an int subclass, keep True and 1 apart
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    return left == right


def feature_type_matches(feature_type: FeatureType, query: GeoJsonQuery | None) -> bool:
    """Check the geometry type restriction of a query."""
    if query is None or query.geometry_type is None:
        return True
    return query.geometry_type == feature_type


def check_property(properties: dict[str, Any], query: GeoJsonQuery | None) -> bool:
    """Check the property predicate of a query.

    A feature that does not carry the queried property passes the test.

    Args:
        properties: The feature properties.
        query: The query to apply.

    Returns:
        True if the feature should be kept.

    Raises:
        QueryTypeMismatchError: If a prefix or substring search meets a
            non-string property or query value.
    """
    if query is None or query.property is None:
        return True
    if query.property not in properties:
        return True

    prop = properties[query.property]
    match query.search_type:
        case SearchType.EXACT:
            return _strict_equals(prop, query.value)
        case SearchType.STARTS_WITH | SearchType.CONTAINS:
            if not isinstance(prop, str) or not isinstance(query.value, str):
                raise QueryTypeMismatchError(
                    f"Property '{query.property}' ({prop!r}) and query value "
                    f"({query.value!r}) must both be strings for a "
                    f"{query.search_type.value} search"
                )
            if query.search_type is SearchType.STARTS_WITH:
                return prop.startswith(query.value)
            return query.value in prop
        case _:
            raise ValueError(f"Unsupported search type: {query.search_type}")
