"""A custom ``Map`` scalar holding an arbitrary JSON object."""

from __future__ import annotations

from typing import Any

from gqlcore.ids import Unmarshaler

SCHEMA = """
		scalar Map
	
		type Query {}
		
		type Mutation {
			hello(
				name: String!
				data: Map!
			): String!
		}
"""


class Map(dict, Unmarshaler):
    """GraphQL ``Map`` scalar: a string-keyed mapping."""

    def implements_graphql_type(self, name: str) -> bool:
        return name == "Map"


def parse_map(value: Any) -> Map:
    """Build a Map from an input object; raise TypeError for anything else."""
    if not isinstance(value, dict):
        raise TypeError("wrong type")
    return Map(value)