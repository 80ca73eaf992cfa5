"""Network access control provider: GraphQL client and resource lifecycle."""

__version__ = "0.1.0"
