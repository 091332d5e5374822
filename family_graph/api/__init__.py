"""HTTP API for building family trees from entity drafts."""

from family_graph.api.app import create_app

__all__ = ["create_app"]
