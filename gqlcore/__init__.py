"""GraphQL query errors, ID and Map scalars, cache hints and sample resolvers."""

__version__ = "0.1.0"