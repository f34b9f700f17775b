"""In-memory stores, grid layout, skills and a JSON-RPC tool server for coordinating coding agents."""

__version__ = "0.1.9"

__all__ = [
    "agents",
    "file_activity",
    "file_tree",
    "grid",
    "jsonrpc",
    "mcp_handler",
    "mcp_server",
    "models",
    "scrollable",
    "skills",
    "traces",
    "turns",
]